"""Root pytest configuration for test discovery and shared environment.

Test Structure:
    tests/
    ├── unit/                  # nuber_auth and nuber_config tests
    ├── nuber_identity/        # Account domain tests
    │   ├── unit/              # Fast, isolated tests (mocked collaborators)
    │   └── integration/       # SQLAlchemy repositories on in-memory SQLite
    ├── cross_domain/          # Journeys through the whole core
    │   └── e2e/
    └── shared/                # Shared fixtures and utilities

Select or deselect persistence-backed tests with ``-m integration`` or
``-m "not integration"``.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from nuber_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")

# Settings require a signing secret; tests never talk to a real SMTP server
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-12345")
os.environ.setdefault("SMTP_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from the current environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
