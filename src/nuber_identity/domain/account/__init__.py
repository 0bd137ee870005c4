"""Account domain manages identity and email verification.

This domain handles:
- Account aggregate (id, email, password hash, role, verified flag)
- Verification records (one-time codes bound to an account)
- Repository and notifier interfaces implemented by infrastructure
"""

from nuber_identity.domain.account.aggregates import (
    ACCOUNT_FIELDS,
    CREDENTIAL_FIELDS,
    Account,
    Verification,
)
from nuber_identity.domain.account.exceptions import (
    AccountFieldNotLoadedError,
    AccountNotFoundError,
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from nuber_identity.domain.account.notifier import VerificationNotifier
from nuber_identity.domain.account.repositories import (
    AccountRepository,
    VerificationRepository,
)
from nuber_identity.domain.account.value_objects import AccountRole, Email

__all__ = [
    "ACCOUNT_FIELDS",
    "CREDENTIAL_FIELDS",
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
]
