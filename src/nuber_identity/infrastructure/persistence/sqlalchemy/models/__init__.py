# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity management."""

from nuber_identity.infrastructure.persistence.sqlalchemy.models.account_model import (
    AccountModel,
)
from nuber_identity.infrastructure.persistence.sqlalchemy.models.verification_model import (
    VerificationModel,
)

__all__ = [
    "AccountModel",
    "VerificationModel",
]
