"""
Unit tests for study pattern analysis and recommendations.
"""

from datetime import date

import pytest

from studyrecord.config import settings
from studyrecord.enums.analytics import RecommendationType, Weekday
from studyrecord.models.analytics import HourlyStudyTime, WeekdayStudyAverage
from studyrecord.services.analytics import StudyPatternService
from studyrecord.services.analytics.patterns import (
    CONSISTENCY_DESCRIPTION,
    build_recommendations,
    consistency_recommendation,
)
from tests.unit.fakes import OWNER_ID, InMemorySessionStore, at, make_session

# 2024-01-01 is a Monday
MONDAY = date(2024, 1, 1)
TUESDAY = date(2024, 1, 2)
WEDNESDAY = date(2024, 1, 3)


# =============================================================================
# Best hours
# =============================================================================


class TestBestHours:
    """Tests for analyze_best_hours."""

    @pytest.mark.asyncio
    async def test_hours_ranked_by_total_minutes(self):
        store = InMemorySessionStore(
            [
                make_session(at(MONDAY, 9), 30),
                make_session(at(MONDAY, 21), 60),
                make_session(at(TUESDAY, 9, 30), 40),
            ]
        )

        hours = await StudyPatternService(store).analyze_best_hours(OWNER_ID)

        assert [(h.hour, h.total_study_time) for h in hours] == [(9, 70), (21, 60)]

    @pytest.mark.asyncio
    async def test_ties_keep_first_seen_order(self):
        store = InMemorySessionStore(
            [
                make_session(at(TUESDAY, 8), 30),
                make_session(at(MONDAY, 14), 30),
            ]
        )

        hours = await StudyPatternService(store).analyze_best_hours(OWNER_ID)

        # Monday 14:00 comes first in (created_at, id) order
        assert [h.hour for h in hours] == [14, 8]

    @pytest.mark.asyncio
    async def test_no_sessions(self, store):
        assert await StudyPatternService(store).analyze_best_hours(OWNER_ID) == []


# =============================================================================
# Best days
# =============================================================================


class TestBestDays:
    """Tests for analyze_best_days."""

    @pytest.mark.asyncio
    async def test_weekdays_ranked_by_average_not_total(self):
        store = InMemorySessionStore(
            [
                make_session(at(MONDAY, 8), 30),
                make_session(at(MONDAY, 18), 90),
                make_session(at(TUESDAY), 45),
                make_session(at(WEDNESDAY, 7), 40),
                make_session(at(WEDNESDAY, 12), 40),
                make_session(at(WEDNESDAY, 20), 40),
            ]
        )

        days = await StudyPatternService(store).analyze_best_days(OWNER_ID)

        assert [d.weekday for d in days] == [
            Weekday.MONDAY,
            Weekday.TUESDAY,
            Weekday.WEDNESDAY,
        ]
        assert days[0].average_session_time == 60.0
        assert days[0].record_count == 2
        assert days[2].record_count == 3

    @pytest.mark.asyncio
    async def test_only_weekdays_with_sessions_are_listed(self):
        store = InMemorySessionStore([make_session(at(date(2024, 1, 6)), 25)])

        days = await StudyPatternService(store).analyze_best_days(OWNER_ID)

        assert len(days) == 1
        assert days[0].weekday == Weekday.SATURDAY


# =============================================================================
# Recommendations
# =============================================================================


class TestBuildRecommendations:
    """Tests for the pure recommendation builder."""

    def test_sparse_input_yields_only_consistency(self):
        assert build_recommendations([], [], []) == [consistency_recommendation()]

    def test_full_input_order(self):
        recommendations = build_recommendations(
            [HourlyStudyTime(hour=7, total_study_time=120)],
            [
                WeekdayStudyAverage(
                    weekday=Weekday.FRIDAY, average_session_time=50.0, record_count=4
                )
            ],
            ["python", "sql", "math"],
        )

        assert [r.type for r in recommendations] == [
            RecommendationType.TIME,
            RecommendationType.DAY,
            RecommendationType.TOPIC,
            RecommendationType.CONSISTENCY,
        ]
        assert "07:00" in recommendations[0].description
        assert "Friday" in recommendations[1].description
        assert "'python'" in recommendations[2].description
        assert "'sql'" in recommendations[2].description

    def test_single_tag_skips_topic_pairing(self):
        recommendations = build_recommendations(
            [HourlyStudyTime(hour=7, total_study_time=120)], [], ["python"]
        )

        assert [r.type for r in recommendations] == [
            RecommendationType.TIME,
            RecommendationType.CONSISTENCY,
        ]


class TestGenerateRecommendations:
    """Tests for StudyPatternService.generate_recommendations."""

    @pytest.mark.asyncio
    async def test_no_sessions_still_recommends_consistency(self, store):
        recommendations = await StudyPatternService(store).generate_recommendations(
            OWNER_ID
        )

        assert recommendations == [consistency_recommendation()]

    @pytest.mark.asyncio
    async def test_recommendations_from_sessions(self):
        store = InMemorySessionStore(
            [
                make_session(at(MONDAY, 21), 90, ["sql", "python"]),
                make_session(at(TUESDAY, 21), 30, ["python"]),
                make_session(at(WEDNESDAY, 6), 20, ["sql"]),
                make_session(at(WEDNESDAY, 7), 20, ["python"]),
            ]
        )

        recommendations = await StudyPatternService(store).generate_recommendations(
            OWNER_ID
        )

        assert len(recommendations) == 4
        assert "21:00" in recommendations[0].description
        assert "Monday" in recommendations[1].description
        # python is used three times, sql twice
        assert "'python' and 'sql'" in recommendations[2].description
        assert recommendations[-1].type == RecommendationType.CONSISTENCY

    @pytest.mark.asyncio
    async def test_changing_a_result_does_not_leak_into_later_calls(self, store):
        service = StudyPatternService(store)

        first = await service.generate_recommendations(OWNER_ID)
        first[-1].description = "changed by caller"
        second = await service.generate_recommendations(OWNER_ID)

        assert second[-1] is not first[-1]
        assert second[-1].description == CONSISTENCY_DESCRIPTION


# =============================================================================
# Reference zone
# =============================================================================


@pytest.mark.asyncio
async def test_best_hours_use_reference_zone(monkeypatch):
    monkeypatch.setattr(settings, "ANALYTICS_TIMEZONE", "Asia/Seoul")
    # 20:00 UTC is 05:00 the next morning in Seoul
    store = InMemorySessionStore([make_session(at(MONDAY, 20), 30)])

    hours = await StudyPatternService(store).analyze_best_hours(OWNER_ID)
    days = await StudyPatternService(store).analyze_best_days(OWNER_ID)

    assert [h.hour for h in hours] == [5]
    assert [d.weekday for d in days] == [Weekday.TUESDAY]
