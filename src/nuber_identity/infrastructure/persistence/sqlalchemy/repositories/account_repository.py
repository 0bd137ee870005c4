"""SQLAlchemy implementation of AccountRepository."""

import logging
from collections.abc import Sequence
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from nuber_identity.domain.account import (
    ACCOUNT_FIELDS,
    Account,
    AccountRepository,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from nuber_identity.domain.shared.time import ensure_tz_aware
from nuber_identity.infrastructure.persistence.sqlalchemy.models import AccountModel

logger = logging.getLogger(__name__)


def account_to_domain(model: AccountModel) -> Account:
    return Account.reconstitute(
        id=model.id,
        email=model.email,
        password_hash=model.password_hash,
        role=model.role,
        verified=model.verified,
        created_at=ensure_tz_aware(model.created_at),
        updated_at=ensure_tz_aware(model.updated_at),
    )


class AccountRepositorySQLAlchemy(AccountRepository):
    """SQLAlchemy implementation of the AccountRepository interface.

    Writes are flushed, never committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        model = await self._find_model_by_id(account_id)

        if model is None:
            return None

        return account_to_domain(model)

    async def find_by_email(
        self,
        email: Union[str, Email],
        fields: Optional[Sequence[str]] = None,
    ) -> Optional[Account]:
        if isinstance(email, Email):
            email_value = email.value
        else:
            try:
                email_value = Email(email).value
            except InvalidEmailError:
                # No stored account can carry an address that fails validation
                return None

        if fields is None:
            stmt = select(AccountModel).where(AccountModel.email == email_value)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            return account_to_domain(model) if model else None

        names = self._projection(fields)
        stmt = select(*(getattr(AccountModel, name) for name in names)).where(
            AccountModel.email == email_value,
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        values = dict(row._mapping)
        for stamp in ("created_at", "updated_at"):
            if values.get(stamp) is not None:
                values[stamp] = ensure_tz_aware(values[stamp])
        return Account.reconstitute_partial(names, **values)

    async def create(self, account: Account) -> Account:
        model = self._map_to_model(account)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            raise EmailAlreadyExistsError(account.email) from e

        logger.info("Created account: %s (email: %s)", account.id, account.email)
        return account

    async def save(self, account: Account) -> Account:
        existing = await self._find_model_by_id(account.id)

        try:
            if existing:
                self._update_model(existing, account)
                logger.debug("Updated account: %s", account.id)
            else:
                self._session.add(self._map_to_model(account))
                logger.info("Created account: %s (email: %s)", account.id, account.email)

            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower():
                raise EmailAlreadyExistsError(account.email) from e
            raise

        return account

    async def _find_model_by_id(self, account_id: UUID) -> Optional[AccountModel]:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _projection(fields: Sequence[str]) -> list[str]:
        unknown = set(fields) - ACCOUNT_FIELDS
        if unknown:
            msg = f"Unknown account fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        return ["id", *(name for name in dict.fromkeys(fields) if name != "id")]

    def _map_to_model(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            email=account.email,
            password_hash=account.password_hash,
            role=account.role.value,
            verified=account.verified,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    def _update_model(self, model: AccountModel, account: Account) -> None:
        model.email = account.email
        model.password_hash = account.password_hash
        model.role = account.role.value
        model.verified = account.verified
        model.updated_at = account.updated_at
