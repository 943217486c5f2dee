"""
Fixtures for analytics unit tests.
"""

from datetime import date, timedelta

import pytest

from tests.unit.fakes import InMemorySessionStore


@pytest.fixture
def store() -> InMemorySessionStore:
    """Empty store that knows OWNER_ID and OTHER_OWNER_ID."""
    return InMemorySessionStore()


@pytest.fixture
def jan_2024() -> list[date]:
    """Every day of January 2024."""
    return [date(2024, 1, 1) + timedelta(days=i) for i in range(31)]
