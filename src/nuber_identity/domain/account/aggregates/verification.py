"""Verification record: a one-time code proving control of an email address."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from nuber_identity.domain.shared.time import utc_now

if TYPE_CHECKING:
    from nuber_auth import VerificationCodeGenerator
    from nuber_identity.domain.account.aggregates.account import Account


@dataclass(frozen=True)
class Verification:
    """Pending verification owned by exactly one account.

    The record is deleted when its code is redeemed or when a later
    email change supersedes it.
    """

    code: str
    owner_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    owner: Account | None = field(default=None, compare=False, repr=False)

    @classmethod
    def issue(
        cls,
        owner_id: UUID,
        code_generator: VerificationCodeGenerator,
    ) -> Verification:
        """Create a new verification with a freshly generated code."""
        return cls(code=code_generator.generate(), owner_id=owner_id)

    def with_owner(self, owner: Account) -> Verification:
        if owner.id != self.owner_id:
            msg = f"Account {owner.id} does not own verification {self.id}"
            raise ValueError(msg)
        return replace(self, owner=owner)
