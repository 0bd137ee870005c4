from nuber_identity.infrastructure.email.email_service import EmailService
from nuber_identity.infrastructure.email.verification_notifier import (
    EmailVerificationNotifier,
    drain_pending_notifications,
)

__all__ = [
    "EmailService",
    "EmailVerificationNotifier",
    "drain_pending_notifications",
]
