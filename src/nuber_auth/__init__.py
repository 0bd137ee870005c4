"""Nuber Auth - Generic credential and token infrastructure.

This package is independent of the account domain. It handles:
- Password hashing (bcrypt)
- JWT token issuance and verification
- One-time verification code generation

Architecture:
    nuber_auth/
    ├── services/           # Pure logic (hashing, JWT, codes)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from nuber_auth import JWTService, PasswordHashingService
"""

from nuber_auth.exceptions import (
    AuthError,
    HashingError,
    InvalidTokenError,
    WeakPasswordError,
)
from nuber_auth.schemas import TokenPayload
from nuber_auth.services import (
    JWTService,
    PasswordHashingService,
    VerificationCodeGenerator,
)

__all__ = [
    # Services
    "JWTService",
    "PasswordHashingService",
    "VerificationCodeGenerator",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "HashingError",
    "InvalidTokenError",
    "WeakPasswordError",
]
