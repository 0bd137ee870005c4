"""Account service for registration, login, profile and email verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from nuber_identity.application.results import (
    AuthResult,
    EditResult,
    Err,
    Ok,
    ProfileResult,
    RedeemResult,
    RegisterResult,
)
from nuber_identity.domain.account import (
    CREDENTIAL_FIELDS,
    Account,
    AccountNotFoundError,
    AccountRole,
    EmailAlreadyExistsError,
    InvalidEmailError,
    Verification,
)

if TYPE_CHECKING:
    from nuber_auth import JWTService, PasswordHashingService, VerificationCodeGenerator
    from nuber_identity.domain.account import (
        AccountRepository,
        VerificationNotifier,
        VerificationRepository,
    )

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "The email has taken already"
ACCOUNT_NOT_CREATED = "Couldn't create account"
USER_NOT_FOUND = "User not found"
WRONG_PASSWORD = "Wrong password"
VERIFICATION_NOT_FOUND = "Verification doesn't exist"


def _error_message(error: Exception) -> str:
    return str(error) or type(error).__name__


class AccountService:
    """
    Application service for the account lifecycle.

    Orchestrates nuber_auth infrastructure (password hashing, JWT tokens,
    verification codes) with the Account domain to provide:
    - Registration with email verification
    - Login with password
    - Profile lookup and editing
    - Verification code redemption

    Public operations never raise: every failure is logged and returned
    as an ``Err`` result.
    """

    def __init__(  # noqa: PLR0913
        self,
        account_repository: AccountRepository,
        verification_repository: VerificationRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        code_generator: VerificationCodeGenerator,
        notifier: VerificationNotifier,
    ):
        self._account_repo = account_repository
        self._verification_repo = verification_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._code_generator = code_generator
        self._notifier = notifier

    async def register(
        self,
        email: str,
        password: str,
        role: Union[str, AccountRole],
    ) -> RegisterResult:
        try:
            existing = await self._account_repo.find_by_email(email)
            if existing is not None:
                return Err(EMAIL_TAKEN)

            account = await self._account_repo.create(
                Account.create(email, password, role, self._password_service),
            )
            verification = await self._issue_verification(account)
        except EmailAlreadyExistsError:
            logger.info("Registration raced on existing email: %s", email)
            return Err(EMAIL_TAKEN)
        except Exception:
            logger.exception("Could not create account for %s", email)
            return Err(ACCOUNT_NOT_CREATED)

        self._notify(account.email, verification.code)
        logger.info("Account registered: %s (role: %s)", account.email, account.role.value)
        return Ok(None)

    async def authenticate(self, email: str, password: str) -> AuthResult:
        try:
            account = await self._account_repo.find_by_email(
                email,
                fields=CREDENTIAL_FIELDS,
            )
            if account is None:
                return Err(USER_NOT_FOUND)

            if not account.check_password(password, self._password_service):
                logger.info("Wrong password for account: %s", account.id)
                return Err(WRONG_PASSWORD)

            token = self._jwt_service.issue(account.id)
        except InvalidEmailError:
            logger.debug("Login attempted with malformed email: %s", email)
            return Err(USER_NOT_FOUND)
        except Exception as e:
            logger.exception("Authentication failed for %s", email)
            return Err(_error_message(e))

        logger.info("Account logged in: %s", account.id)
        return Ok(token)

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        return await self._account_repo.find_by_id(account_id)

    async def get_profile(self, account_id: UUID) -> ProfileResult:
        try:
            account = await self._get_account(account_id)
        except AccountNotFoundError:
            logger.debug("Profile requested for unknown account: %s", account_id)
            return Err(USER_NOT_FOUND)
        except Exception:
            logger.exception("Could not load profile: %s", account_id)
            return Err(USER_NOT_FOUND)
        return Ok(account)

    async def edit_profile(
        self,
        account_id: UUID,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> EditResult:
        pending_notification: tuple[str, str] | None = None
        try:
            account = await self._get_account(account_id)

            if email and not account.has_email(email):
                account = account.with_email(email)
                # Old code must be gone and the new one stored before the
                # account is saved as unverified.
                await self._verification_repo.delete_by_owner_id(account.id)
                verification = await self._issue_verification(account)
                pending_notification = (account.email, verification.code)

            if password:
                account = account.with_password(password, self._password_service)

            await self._account_repo.save(account)
        except Exception as e:
            logger.exception("Could not edit profile: %s", account_id)
            return Err(_error_message(e))

        if pending_notification is not None:
            self._notify(*pending_notification)
            logger.info("Email changed for account %s, verification reset", account_id)
        return Ok(None)

    async def redeem_verification_code(self, code: str) -> RedeemResult:
        try:
            verification = await self._verification_repo.find_by_code(
                code,
                with_owner=True,
            )
            if verification is None:
                return Err(VERIFICATION_NOT_FOUND)

            owner = verification.owner or await self._get_account(
                verification.owner_id,
            )
            await self._account_repo.save(owner.mark_verified())
            await self._verification_repo.delete_by_id(verification.id)
        except Exception as e:
            logger.exception("Could not redeem verification code")
            return Err(_error_message(e))

        logger.info("Email verified for account: %s", verification.owner_id)
        return Ok(None)

    async def _get_account(self, account_id: UUID) -> Account:
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    async def _issue_verification(self, account: Account) -> Verification:
        return await self._verification_repo.create(
            Verification.issue(account.id, self._code_generator),
        )

    def _notify(self, recipient: str, code: str) -> None:
        try:
            self._notifier.send_verification_email(recipient, code)
        except Exception as e:
            logger.warning("Could not dispatch verification email to %s: %s", recipient, e)
