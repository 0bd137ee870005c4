"""Account repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional, Union
from uuid import UUID

from nuber_identity.domain.account.aggregates.account import Account
from nuber_identity.domain.account.value_objects.email import Email


class AccountRepository(ABC):
    """Repository interface for Account aggregates."""

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        """Find an account by its ID."""

    @abstractmethod
    async def find_by_email(
        self,
        email: Union[str, Email],
        fields: Optional[Sequence[str]] = None,
    ) -> Optional[Account]:
        """Find an account by email address.

        When ``fields`` is given only those columns (plus ``id``) are
        loaded and the returned Account is partial.
        """

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Insert a new account.

        Raises EmailAlreadyExistsError if the email is already registered.
        """

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Insert or update an account by ID."""
