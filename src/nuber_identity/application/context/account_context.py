"""Account context for request-scoped identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from nuber_identity.domain.account import AccountRole

if TYPE_CHECKING:
    from nuber_identity.domain.account import Account


@dataclass(frozen=True)
class AccountContext:
    """Immutable context for the current authenticated account."""

    account_id: UUID
    email: str
    role: AccountRole
    verified: bool = False

    @classmethod
    def create(cls, account: Account) -> AccountContext:
        return cls(
            account_id=account.id,
            email=account.email,
            role=account.role,
            verified=account.verified,
        )

    def __str__(self) -> str:
        return f"AccountContext({self.email})"
