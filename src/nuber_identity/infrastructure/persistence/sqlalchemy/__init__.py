"""SQLAlchemy implementation for nuber_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- AccountModel / VerificationModel: table mappings
- AccountRepositorySQLAlchemy / VerificationRepositorySQLAlchemy
"""

from nuber_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from nuber_identity.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    VerificationModel,
)
from nuber_identity.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
    VerificationRepositorySQLAlchemy,
)

__all__ = [
    "AccountModel",
    "AccountRepositorySQLAlchemy",
    "IdentityBase",
    "VerificationModel",
    "VerificationRepositorySQLAlchemy",
]
