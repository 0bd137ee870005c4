"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    session_maker,
)
from tests.shared.fixtures.fakes import RecordingNotifier

__all__ = [
    "RecordingNotifier",
    "async_engine",
    "db_session",
    "session_maker",
]
