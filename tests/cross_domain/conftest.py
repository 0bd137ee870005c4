"""Pytest configuration for cross-domain journeys."""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    session_maker,
)

__all__ = [
    "async_engine",
    "db_session",
    "session_maker",
]
