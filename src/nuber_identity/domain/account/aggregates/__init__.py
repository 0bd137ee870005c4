from nuber_identity.domain.account.aggregates.account import (
    ACCOUNT_FIELDS,
    CREDENTIAL_FIELDS,
    Account,
)
from nuber_identity.domain.account.aggregates.verification import Verification

__all__ = [
    "ACCOUNT_FIELDS",
    "CREDENTIAL_FIELDS",
    "Account",
    "Verification",
]
