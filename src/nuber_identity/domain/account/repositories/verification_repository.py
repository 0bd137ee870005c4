"""Verification repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from nuber_identity.domain.account.aggregates.verification import Verification


class VerificationRepository(ABC):
    """Repository interface for pending Verification records."""

    @abstractmethod
    async def find_by_code(
        self,
        code: str,
        with_owner: bool = False,
    ) -> Optional[Verification]:
        """Find a verification by code, optionally loading its owner."""

    @abstractmethod
    async def create(self, verification: Verification) -> Verification:
        """Insert a new verification."""

    @abstractmethod
    async def save(self, verification: Verification) -> Verification:
        """Insert or update a verification by ID."""

    @abstractmethod
    async def delete_by_owner_id(self, owner_id: UUID) -> None:
        """Delete every verification owned by an account."""

    @abstractmethod
    async def delete_by_id(self, verification_id: UUID) -> None:
        """Delete a verification by ID."""
