"""Unit tests for AccountAuthenticator."""

from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from nuber_auth import InvalidTokenError, JWTService, PasswordHashingService
from nuber_identity.application.context import AccountAuthenticator, AccountContext
from nuber_identity.domain.account import Account, AccountRole

SECRET = "test-secret-key-12345"


class TestAccountAuthenticator:
    def setup_method(self):
        self.jwt_service = JWTService(secret_key=SECRET)
        self.account_repo = AsyncMock()
        self.authenticator = AccountAuthenticator(
            jwt_service=self.jwt_service,
            account_repository=self.account_repo,
        )
        self.account = Account.create(
            "owner@x.com",
            "pw",
            AccountRole.OWNER,
            PasswordHashingService(rounds=4),
        )

    @pytest.mark.asyncio
    async def test_resolve_valid_token(self):
        self.account_repo.find_by_id.return_value = self.account
        token = self.jwt_service.issue(self.account.id)

        account = await self.authenticator.resolve(token)

        assert account is self.account
        self.account_repo.find_by_id.assert_called_once_with(self.account.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_resolve_without_token(self, token):
        assert await self.authenticator.resolve(token) is None
        self.account_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolve_garbage_token(self):
        assert await self.authenticator.resolve("not-a-jwt") is None
        self.account_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolve_token_signed_with_other_secret(self):
        other = JWTService(secret_key="another-secret-key-67890")
        token = other.issue(self.account.id)

        assert await self.authenticator.resolve(token) is None

    @pytest.mark.asyncio
    async def test_resolve_expired_token(self):
        token = self.jwt_service.issue(
            self.account.id,
            expires_delta=timedelta(seconds=-1),
        )

        assert await self.authenticator.resolve(token) is None

    @pytest.mark.asyncio
    async def test_resolve_subject_not_uuid(self):
        token = self.jwt_service.issue("42")

        assert await self.authenticator.resolve(token) is None
        self.account_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolve_deleted_account(self):
        self.account_repo.find_by_id.return_value = None
        token = self.jwt_service.issue(uuid4())

        assert await self.authenticator.resolve(token) is None

    @pytest.mark.asyncio
    async def test_resolve_repository_failure(self):
        self.account_repo.find_by_id.side_effect = RuntimeError("db down")
        token = self.jwt_service.issue(self.account.id)

        assert await self.authenticator.resolve(token) is None

    @pytest.mark.asyncio
    async def test_require_returns_context(self):
        self.account_repo.find_by_id.return_value = self.account
        token = self.jwt_service.issue(self.account.id)

        context = await self.authenticator.require(token)

        assert context == AccountContext(
            account_id=self.account.id,
            email="owner@x.com",
            role=AccountRole.OWNER,
            verified=False,
        )
        assert str(context) == "AccountContext(owner@x.com)"

    @pytest.mark.asyncio
    async def test_require_without_account_raises(self):
        with pytest.raises(InvalidTokenError, match="Authentication required"):
            await self.authenticator.require(None)
