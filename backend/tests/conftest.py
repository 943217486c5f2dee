"""
Shared Test Fixtures and Configuration

This module provides pytest fixtures used across unit tests.
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv

# Add the backend directory to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load .env file from project root before settings are first imported
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

# Forcefully set test environment variables (override .env values).
# Settings are instantiated on first import, so this must happen at module
# load rather than in a fixture. Every test assumes UTC day boundaries.
os.environ.update(
    {
        "ANALYTICS_TIMEZONE": "UTC",
        "ANALYTICS_TOP_TAGS_LIMIT": "5",
        "ANALYTICS_RECENT_WINDOW_DAYS": "30",
        "POSTGRES_USER": os.environ.get("POSTGRES_TEST_USER", "testuser"),
        "POSTGRES_PASSWORD": os.environ.get("POSTGRES_TEST_PASSWORD", "testpass"),
        "POSTGRES_DB": os.environ.get("POSTGRES_TEST_DB", "testdb"),
        "DEBUG": "true",
    }
)


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_db_session() -> MagicMock:
    """
    Create a mock database session for unit testing.
    """
    mock = MagicMock()
    mock.execute = AsyncMock()
    mock.commit = AsyncMock()
    mock.rollback = AsyncMock()
    mock.close = AsyncMock()
    return mock
