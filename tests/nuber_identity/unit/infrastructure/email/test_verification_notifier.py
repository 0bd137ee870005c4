"""Tests for the fire-and-forget verification notifier."""

import asyncio
import logging
import threading
from unittest.mock import Mock

import pytest

from nuber_identity.infrastructure.email import (
    EmailService,
    EmailVerificationNotifier,
    drain_pending_notifications,
)


class TestEmailVerificationNotifier:
    @pytest.mark.asyncio
    async def test_send_is_delivered_in_background(self):
        email_service = Mock(spec=EmailService)
        notifier = EmailVerificationNotifier(email_service)

        notifier.send_verification_email("a@x.com", "code-123")
        await drain_pending_notifications()

        email_service.send_verification_email.assert_called_once_with(
            "a@x.com",
            "code-123",
        )

    @pytest.mark.asyncio
    async def test_send_returns_before_delivery(self):
        release = threading.Event()
        email_service = Mock(spec=EmailService)
        email_service.send_verification_email.side_effect = (
            lambda *args: release.wait(timeout=5)
        )
        notifier = EmailVerificationNotifier(email_service)

        notifier.send_verification_email("a@x.com", "code-123")
        await asyncio.sleep(0)

        release.set()
        await drain_pending_notifications()
        email_service.send_verification_email.assert_called_once()

    @pytest.mark.asyncio
    async def test_delivery_failure_is_logged_not_raised(self, caplog):
        email_service = Mock(spec=EmailService)
        email_service.send_verification_email.side_effect = OSError("smtp down")
        notifier = EmailVerificationNotifier(email_service)

        with caplog.at_level(logging.WARNING):
            notifier.send_verification_email("a@x.com", "code-123")
            await drain_pending_notifications()

        assert "smtp down" in caplog.text

    @pytest.mark.asyncio
    async def test_drain_without_pending_sends(self):
        await drain_pending_notifications()
