"""Application services for account management."""

from nuber_identity.application.services.account_service import AccountService

__all__ = ["AccountService"]
