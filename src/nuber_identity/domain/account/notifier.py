"""Notification port for verification emails."""

from abc import ABC, abstractmethod


class VerificationNotifier(ABC):
    """Dispatches verification codes to account owners.

    Implementations must return without waiting for delivery and must
    log, not raise, delivery failures.
    """

    @abstractmethod
    def send_verification_email(self, recipient: str, code: str) -> None:
        """Schedule delivery of ``code`` to ``recipient``."""
