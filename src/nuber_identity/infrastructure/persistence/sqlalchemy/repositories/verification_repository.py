"""SQLAlchemy implementation of VerificationRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from nuber_identity.domain.account import Verification, VerificationRepository
from nuber_identity.domain.shared.time import ensure_tz_aware
from nuber_identity.infrastructure.persistence.sqlalchemy.models import (
    VerificationModel,
)
from nuber_identity.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # noqa: E501
    account_to_domain,
)

logger = logging.getLogger(__name__)


class VerificationRepositorySQLAlchemy(VerificationRepository):
    """SQLAlchemy implementation of VerificationRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_domain(self, model: VerificationModel, with_owner: bool) -> Verification:
        return Verification(
            id=model.id,
            code=model.code,
            owner_id=model.owner_id,
            created_at=ensure_tz_aware(model.created_at),
            owner=account_to_domain(model.owner) if with_owner else None,
        )

    async def find_by_code(
        self,
        code: str,
        with_owner: bool = False,
    ) -> Optional[Verification]:
        stmt = select(VerificationModel).where(VerificationModel.code == code)
        if with_owner:
            stmt = stmt.options(joinedload(VerificationModel.owner))

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model, with_owner)

    async def create(self, verification: Verification) -> Verification:
        model = VerificationModel(
            id=verification.id,
            code=verification.code,
            owner_id=verification.owner_id,
            created_at=verification.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        logger.debug("Created verification for account: %s", verification.owner_id)
        return verification

    async def save(self, verification: Verification) -> Verification:
        existing = await self._session.get(VerificationModel, verification.id)

        if existing is None:
            return await self.create(verification)

        existing.code = verification.code
        existing.owner_id = verification.owner_id
        await self._session.flush()
        return verification

    async def delete_by_owner_id(self, owner_id: UUID) -> None:
        stmt = delete(VerificationModel).where(VerificationModel.owner_id == owner_id)
        await self._session.execute(stmt)
        await self._session.flush()
        logger.debug("Deleted verifications for account: %s", owner_id)

    async def delete_by_id(self, verification_id: UUID) -> None:
        stmt = delete(VerificationModel).where(VerificationModel.id == verification_id)
        await self._session.execute(stmt)
        await self._session.flush()
