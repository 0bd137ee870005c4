"""Fire-and-forget verification email dispatch."""

from __future__ import annotations

import asyncio
import logging

from nuber_identity.domain.account import VerificationNotifier
from nuber_identity.infrastructure.email.email_service import EmailService

logger = logging.getLogger(__name__)

# Strong references so pending sends are not garbage collected
_background_tasks: set[asyncio.Task[None]] = set()


class EmailVerificationNotifier(VerificationNotifier):
    """Sends verification codes through EmailService on a background task.

    SMTP is blocking, so each send runs in a worker thread. The caller's
    coroutine never waits for delivery; failures are logged here.
    """

    def __init__(self, email_service: EmailService):
        self._email_service = email_service

    def send_verification_email(self, recipient: str, code: str) -> None:
        logger.debug("Sending verification email to %s (fire-and-forget)", recipient)

        async def _send() -> None:
            try:
                await asyncio.to_thread(
                    self._email_service.send_verification_email,
                    recipient,
                    code,
                )
            except Exception as e:
                logger.warning(
                    "Fire-and-forget verification email to %s failed: %s",
                    recipient,
                    e,
                )

        task = asyncio.create_task(_send())
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)


async def drain_pending_notifications() -> None:
    """Wait for every scheduled send to finish (shutdown and tests)."""
    if _background_tasks:
        await asyncio.gather(*list(_background_tasks), return_exceptions=True)
