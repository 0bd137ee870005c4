"""Nuber Identity - Accounts, authentication and email verification.

This package handles all identity-related concerns:
- Account lifecycle (registration, profile edits)
- Authentication (login, bearer token resolution)
- Email verification (one-time codes, notification)

The credential primitives (bcrypt, JWT, code generation) live in
nuber_auth; this package composes them with the Account domain.
"""

from nuber_identity.application.context import AccountAuthenticator, AccountContext
from nuber_identity.application.results import (
    AuthResult,
    EditResult,
    Err,
    Ok,
    ProfileResult,
    RedeemResult,
    RegisterResult,
    Result,
)
from nuber_identity.application.services import AccountService
from nuber_identity.domain.account import (
    Account,
    AccountFieldNotLoadedError,
    AccountNotFoundError,
    AccountRepository,
    AccountRole,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    Verification,
    VerificationNotifier,
    VerificationRepository,
)

__all__ = [
    # Domain
    "Account",
    "AccountFieldNotLoadedError",
    "AccountNotFoundError",
    "AccountRepository",
    "AccountRole",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "Verification",
    "VerificationNotifier",
    "VerificationRepository",
    # Results
    "AuthResult",
    "EditResult",
    "Err",
    "Ok",
    "ProfileResult",
    "RedeemResult",
    "RegisterResult",
    "Result",
    # Application
    "AccountAuthenticator",
    "AccountContext",
    "AccountService",
]
