# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from nuber_identity.infrastructure.persistence.sqlalchemy.repositories.account_repository import (
    AccountRepositorySQLAlchemy,
)
from nuber_identity.infrastructure.persistence.sqlalchemy.repositories.verification_repository import (
    VerificationRepositorySQLAlchemy,
)

__all__ = [
    "AccountRepositorySQLAlchemy",
    "VerificationRepositorySQLAlchemy",
]
