"""
Unit tests for PeriodComparisonService.
"""

from datetime import date

import pytest

from studyrecord.middleware.error_handling import ValidationError
from studyrecord.services.analytics import DateRange, PeriodComparisonService
from tests.unit.fakes import OWNER_ID, InMemorySessionStore, at, make_session

PREVIOUS = DateRange(date(2024, 1, 1), date(2024, 1, 8))
CURRENT = DateRange(date(2024, 1, 8), date(2024, 1, 15))


def store_with(previous_minutes: list[int], current_minutes: list[int]) -> InMemorySessionStore:
    sessions = [make_session(at(date(2024, 1, 2)), m) for m in previous_minutes]
    sessions += [make_session(at(date(2024, 1, 9)), m) for m in current_minutes]
    return InMemorySessionStore(sessions)


class TestCompare:
    """Tests for comparing two periods."""

    @pytest.mark.asyncio
    async def test_both_periods_empty(self, store):
        stats = await PeriodComparisonService(store).compare(OWNER_ID, PREVIOUS, CURRENT)

        assert stats.previous_period_study_time == 0
        assert stats.current_period_study_time == 0
        assert stats.percentage_change == 0.0
        assert stats.is_improved is False

    @pytest.mark.asyncio
    async def test_growth_from_nothing_is_one_hundred_percent(self):
        stats = await PeriodComparisonService(store_with([], [20, 30])).compare(
            OWNER_ID, PREVIOUS, CURRENT
        )

        assert stats.current_period_study_time == 50
        assert stats.percentage_change == 100.0
        assert stats.is_improved is True

    @pytest.mark.asyncio
    async def test_decline(self):
        stats = await PeriodComparisonService(store_with([100], [50])).compare(
            OWNER_ID, PREVIOUS, CURRENT
        )

        assert stats.percentage_change == -50.0
        assert stats.is_improved is False

    @pytest.mark.asyncio
    async def test_unchanged_is_not_an_improvement(self):
        stats = await PeriodComparisonService(store_with([45], [45])).compare(
            OWNER_ID, PREVIOUS, CURRENT
        )

        assert stats.percentage_change == 0.0
        assert stats.is_improved is False

    @pytest.mark.asyncio
    async def test_end_dates_are_exclusive(self):
        # Jan 8 belongs to the current period only
        store = InMemorySessionStore([make_session(at(date(2024, 1, 8), 0), 30)])

        stats = await PeriodComparisonService(store).compare(OWNER_ID, PREVIOUS, CURRENT)

        assert stats.previous_period_study_time == 0
        assert stats.current_period_study_time == 30

    @pytest.mark.asyncio
    async def test_overlapping_periods_are_summed_independently(self):
        store = InMemorySessionStore([make_session(at(date(2024, 1, 5)), 30)])
        whole = DateRange(date(2024, 1, 1), date(2024, 1, 31))

        stats = await PeriodComparisonService(store).compare(OWNER_ID, PREVIOUS, whole)

        assert stats.previous_period_study_time == 30
        assert stats.current_period_study_time == 30


class TestPercentageChange:
    """Tests for calculate_percentage_change."""

    @pytest.mark.parametrize(
        "previous, current, expected",
        [
            (0, 0, 0.0),
            (0, 50, 100.0),
            (100, 50, -50.0),
            (40, 50, 25.0),
            (30, 10, -200.0 / 3),
        ],
    )
    def test_percentage_change(self, previous, current, expected):
        result = PeriodComparisonService.calculate_percentage_change(previous, current)

        assert result == pytest.approx(expected)


def test_range_with_start_after_end_is_rejected():
    with pytest.raises(ValidationError):
        DateRange(date(2024, 1, 8), date(2024, 1, 1))
