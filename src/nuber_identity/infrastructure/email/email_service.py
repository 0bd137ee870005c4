import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from nuber_config.settings import Settings

logger = logging.getLogger(__name__)

VERIFY_EMAIL_SUBJECT = "Verify Your Email"

VERIFY_EMAIL_TEXT = """Hello {username},

Please confirm your Nuber Eats account by entering this verification code:

{code}

If you didn't create an account, you can safely ignore this email.

-- Nuber Eats
"""

VERIFY_EMAIL_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Verify your email</h2>
        <p style="color: #374151; line-height: 1.6;">Hello {username},</p>
        <p style="color: #374151; line-height: 1.6;">Please confirm your Nuber Eats account by entering this verification code:</p>
        <p style="margin: 30px 0; text-align: center; font-family: monospace; font-size: 18px; color: #111827;">{code}</p>
        <p style="color: #9ca3af; font-size: 13px;">If you didn't create an account, you can safely ignore this email.</p>
    </div>
</body>
</html>
"""


class EmailService:
    """Delivers verification codes over SMTP.

    Connects with implicit TLS when ``smtp_use_tls`` is set without
    ``smtp_starttls``; otherwise opens a plain connection and upgrades it
    when ``smtp_starttls`` is set.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def enabled(self) -> bool:
        return self._settings.smtp_enabled

    def send_verification_email(self, to_email: str, code: str) -> None:
        if not self.enabled:
            logger.warning(
                "SMTP disabled, skipping verification email to %s (code: %s)",
                to_email,
                code,
            )
            return

        if not self._settings.smtp_host:
            logger.error("SMTP host not configured")
            return

        message = self._verification_message(to_email, code)
        try:
            self._deliver(message)
        except Exception as e:
            logger.error("Failed to send verification email to %s: %s", to_email, e)
            raise

        logger.info("Verification email sent to %s", to_email)

    def _verification_message(self, to_email: str, code: str) -> MIMEMultipart:
        sender = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"

        message = MIMEMultipart("alternative")
        message["Subject"] = VERIFY_EMAIL_SUBJECT
        message["From"] = sender
        message["To"] = to_email
        for template, subtype in ((VERIFY_EMAIL_TEXT, "plain"), (VERIFY_EMAIL_HTML, "html")):
            body = template.format(username=to_email, code=code)
            message.attach(MIMEText(body, subtype))
        return message

    def _connect(self) -> smtplib.SMTP:
        host, port = self._settings.smtp_host, self._settings.smtp_port
        if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
            return smtplib.SMTP_SSL(host, port, context=ssl.create_default_context())
        return smtplib.SMTP(host, port)

    def _deliver(self, message: MIMEMultipart) -> None:
        with self._connect() as server:
            if self._settings.smtp_starttls:
                server.starttls(context=ssl.create_default_context())
            if self._settings.smtp_user:
                password = self._settings.smtp_password
                server.login(
                    self._settings.smtp_user,
                    password.get_secret_value() if password else "",
                )
            server.send_message(message)
