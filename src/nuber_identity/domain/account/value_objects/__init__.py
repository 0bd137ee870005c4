"""Value objects for the account domain."""

from nuber_identity.domain.account.value_objects.account_role import AccountRole
from nuber_identity.domain.account.value_objects.email import Email

__all__ = [
    "AccountRole",
    "Email",
]
