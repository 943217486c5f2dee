"""
Unit tests for tag ranking helpers and TagStatisticsService.
"""

from datetime import date

import pytest

from studyrecord.middleware.error_handling import NotFoundError
from studyrecord.models.analytics import TagStats
from studyrecord.services.analytics import TagStatisticsService, rank_tags
from studyrecord.services.analytics.tag_ranking import collect_tags, count_tags
from tests.unit.fakes import (
    OWNER_ID,
    UNKNOWN_OWNER_ID,
    InMemorySessionStore,
    at,
    make_session,
)


def tagged(*tag_lists: list[str]):
    return [
        make_session(at(date(2024, 1, 1), hour), tags=tags)
        for hour, tags in enumerate(tag_lists)
    ]


class TestRankTags:
    """Tests for rank_tags and its helpers."""

    def test_ties_keep_first_seen_order(self):
        sessions = tagged(["b"], ["a"], ["a", "b"], ["c"])

        assert rank_tags(sessions) == ["b", "a", "c"]

    def test_repeated_tag_in_one_session_counts_once(self):
        sessions = tagged(["x", "x", "y"], ["y"])

        assert count_tags(sessions) == {"x": 1, "y": 2}
        assert rank_tags(sessions) == ["y", "x"]

    def test_limit(self):
        sessions = tagged(["a", "b", "c", "d", "e", "f", "g"], ["g"])

        assert rank_tags(sessions, limit=5) == ["g", "a", "b", "c", "d"]

    def test_no_sessions(self):
        assert rank_tags([]) == []

    def test_collect_tags_is_ordered_union(self):
        sessions = tagged(["sql", "python"], [], ["python", "math"])

        assert collect_tags(sessions) == ["sql", "python", "math"]


class TestTagStatisticsService:
    """Tests for get_tag_stats."""

    @pytest.mark.asyncio
    async def test_unused_tag_returns_empty_stats(self, store):
        stats = await TagStatisticsService(store).get_tag_stats(OWNER_ID, "rust")

        assert stats == TagStats(tag="rust")
        assert stats.first_used_date is None
        assert stats.last_used_date is None

    @pytest.mark.asyncio
    async def test_tag_totals_and_usage_dates(self):
        store = InMemorySessionStore(
            [
                make_session(at(date(2024, 1, 1)), 60),
                make_session(at(date(2024, 1, 3)), 30, ["python"]),
                make_session(at(date(2024, 1, 9)), 45, ["sql", "python"]),
                make_session(at(date(2024, 1, 12)), 15, ["sql"]),
            ]
        )

        stats = await TagStatisticsService(store).get_tag_stats(OWNER_ID, "python")

        assert stats.tag == "python"
        assert stats.total_study_time == 75
        assert stats.record_count == 2
        assert stats.first_used_date == date(2024, 1, 3)
        assert stats.last_used_date == date(2024, 1, 9)

    @pytest.mark.asyncio
    async def test_tag_match_is_exact(self):
        store = InMemorySessionStore([make_session(at(date(2024, 1, 3)), tags=["python3"])])

        stats = await TagStatisticsService(store).get_tag_stats(OWNER_ID, "python")

        assert stats.record_count == 0

    @pytest.mark.asyncio
    async def test_unknown_owner(self, store):
        with pytest.raises(NotFoundError):
            await TagStatisticsService(store).get_tag_stats(UNKNOWN_OWNER_ID, "python")
