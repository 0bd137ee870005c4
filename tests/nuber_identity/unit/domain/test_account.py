"""Unit tests for the Account aggregate."""

from uuid import uuid4

import pytest

from nuber_auth import PasswordHashingService
from nuber_identity.domain.account import (
    CREDENTIAL_FIELDS,
    Account,
    AccountFieldNotLoadedError,
    AccountRole,
    InvalidEmailError,
)

TEST_EMAIL = "owner@example.com"
TEST_PASSWORD = "pw-owner"


@pytest.fixture
def password_service():
    return PasswordHashingService(rounds=4)


@pytest.fixture
def account(password_service):
    return Account.create(TEST_EMAIL, TEST_PASSWORD, AccountRole.OWNER, password_service)


class TestAccountCreate:
    def test_create_hashes_password(self, account, password_service):
        assert account.password_hash != TEST_PASSWORD
        assert account.check_password(TEST_PASSWORD, password_service)
        assert not account.check_password("other", password_service)

    def test_create_starts_unverified(self, account):
        assert account.verified is False

    def test_create_normalizes_email(self, password_service):
        account = Account.create(
            "  Mixed.Case@Example.COM ",
            TEST_PASSWORD,
            AccountRole.CLIENT,
            password_service,
        )

        assert account.email == "mixed.case@example.com"

    def test_create_accepts_role_value(self, password_service):
        account = Account.create(TEST_EMAIL, TEST_PASSWORD, "Delivery", password_service)

        assert account.role is AccountRole.DELIVERY

    def test_create_rejects_unknown_role(self, password_service):
        with pytest.raises(ValueError):
            Account.create(TEST_EMAIL, TEST_PASSWORD, "Admin", password_service)

    def test_create_rejects_invalid_email(self, password_service):
        with pytest.raises(InvalidEmailError):
            Account.create("not-an-email", TEST_PASSWORD, AccountRole.CLIENT, password_service)


class TestAccountUpdates:
    def test_with_email_resets_verification(self, account):
        verified = account.mark_verified()

        changed = verified.with_email("new@example.com")

        assert changed.email == "new@example.com"
        assert changed.verified is False
        assert changed.id == account.id

    def test_updates_do_not_mutate_original(self, account):
        account.with_email("new@example.com")
        account.mark_verified()

        assert account.email == TEST_EMAIL
        assert account.verified is False

    def test_with_password_replaces_hash(self, account, password_service):
        changed = account.with_password("new-password", password_service)

        assert changed.password_hash != account.password_hash
        assert changed.check_password("new-password", password_service)
        assert not changed.check_password(TEST_PASSWORD, password_service)

    def test_with_password_keeps_verified_flag(self, account, password_service):
        verified = account.mark_verified()

        changed = verified.with_password("new-password", password_service)

        assert changed.verified is True

    def test_role_is_preserved(self, account):
        assert account.with_email("new@example.com").role is AccountRole.OWNER

    def test_has_email_compares_normalized(self, account):
        assert account.has_email("OWNER@example.com ")
        assert not account.has_email("other@example.com")

    def test_equality_by_id(self, account):
        assert account == account.mark_verified()
        assert hash(account) == hash(account.mark_verified())


class TestPartialAccount:
    def test_partial_exposes_only_loaded_fields(self):
        account_id = uuid4()
        partial = Account.reconstitute_partial(
            CREDENTIAL_FIELDS,
            id=account_id,
            password_hash="$2b$04$abc",
        )

        assert partial.id == account_id
        assert partial.password_hash == "$2b$04$abc"
        assert partial.is_partial

        with pytest.raises(AccountFieldNotLoadedError):
            _ = partial.email
        with pytest.raises(AccountFieldNotLoadedError):
            _ = partial.role

    def test_partial_cannot_be_updated(self):
        partial = Account.reconstitute_partial(
            CREDENTIAL_FIELDS,
            id=uuid4(),
            password_hash="$2b$04$abc",
        )

        with pytest.raises(ValueError, match="partial"):
            partial.mark_verified()

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="Unknown account fields"):
            Account.reconstitute_partial(["nickname"], id=uuid4())
