"""Wiring helpers for hosting the account core.

A transport layer (GraphQL resolvers, HTTP routes, a worker) uses these to
configure logging, open database sessions and build an AccountService per
request. Repositories only flush; ``run_account_operation`` commits when
the operation reports success and rolls back otherwise.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Awaitable, Callable
from functools import lru_cache
from typing import TypeVar

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from nuber_auth import JWTService, PasswordHashingService, VerificationCodeGenerator
from nuber_config.settings import Settings, get_settings
from nuber_identity.application.context import AccountAuthenticator
from nuber_identity.application.services import AccountService
from nuber_identity.infrastructure.email import EmailService, EmailVerificationNotifier
from nuber_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
    IdentityBase,
    VerificationRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for nuber modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("nuber_auth").setLevel(log_level)
    logging.getLogger("nuber_identity").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create all identity tables (idempotent)."""
    logger.info("Ensuring identity tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)


def build_jwt_service(settings: Settings) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expire_hours=settings.jwt_access_token_expire_hours,
    )


def build_account_service(session: AsyncSession, settings: Settings) -> AccountService:
    """Build an AccountService bound to one database session."""
    return AccountService(
        account_repository=AccountRepositorySQLAlchemy(session),
        verification_repository=VerificationRepositorySQLAlchemy(session),
        password_service=PasswordHashingService(rounds=settings.password_hash_rounds),
        jwt_service=build_jwt_service(settings),
        code_generator=VerificationCodeGenerator(),
        notifier=EmailVerificationNotifier(EmailService(settings)),
    )


def build_authenticator(session: AsyncSession, settings: Settings) -> AccountAuthenticator:
    return AccountAuthenticator(
        jwt_service=build_jwt_service(settings),
        account_repository=AccountRepositorySQLAlchemy(session),
    )


async def run_account_operation(
    session_maker: async_sessionmaker[AsyncSession],
    settings: Settings,
    operation: Callable[[AccountService], Awaitable[R]],
) -> R:
    """Run one account operation in its own session and transaction.

    Example
    -------
    >>> await run_account_operation(
    ...     session_maker, settings,
    ...     lambda service: service.register("a@x.com", "pw", "Client"),
    ... )
    """
    async with session_maker() as session:
        result = await operation(build_account_service(session, settings))
        if getattr(result, "ok", False):
            await session.commit()
        else:
            await session.rollback()
        return result
