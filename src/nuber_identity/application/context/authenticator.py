"""Bearer token to account resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from nuber_auth import InvalidTokenError
from nuber_identity.application.context.account_context import AccountContext

if TYPE_CHECKING:
    from nuber_auth import JWTService
    from nuber_identity.domain.account import Account, AccountRepository

logger = logging.getLogger(__name__)


class AccountAuthenticator:
    """Resolves the account behind a bearer token.

    ``resolve`` treats every token problem as "no authenticated account"
    so a transport layer can run it on each request; ``require`` raises
    InvalidTokenError for endpoints that need an account.
    """

    def __init__(self, jwt_service: JWTService, account_repository: AccountRepository):
        self._jwt_service = jwt_service
        self._account_repo = account_repository

    async def resolve(self, token: Optional[str]) -> Optional[Account]:
        if not token:
            return None

        try:
            subject = self._jwt_service.verify(token)
            account_id = UUID(subject)
        except InvalidTokenError as e:
            logger.warning("Invalid token: %s", e)
            return None
        except ValueError:
            logger.warning("Token subject is not an account id")
            return None

        try:
            account = await self._account_repo.find_by_id(account_id)
        except Exception as e:
            logger.warning("Could not load account %s for token: %s", account_id, e)
            return None

        if account is None:
            logger.warning("Account not found for token: %s", account_id)
        return account

    async def require(self, token: Optional[str]) -> AccountContext:
        account = await self.resolve(token)
        if account is None:
            msg = "Authentication required"
            raise InvalidTokenError(msg)
        return AccountContext.create(account)
