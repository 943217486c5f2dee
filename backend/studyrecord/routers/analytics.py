"""
Study Analytics API Router

Read-only endpoints over a user's study sessions. The owner id in the path
is trusted: authentication and authorization happen before this router.

Endpoints:
- GET /api/users/{owner_id}/statistics/daily - Totals for one date
- GET /api/users/{owner_id}/statistics/weekly - Totals for 7 days
- GET /api/users/{owner_id}/statistics/monthly - Totals for a month
- GET /api/users/{owner_id}/statistics/yearly - Totals for a year
- GET /api/users/{owner_id}/statistics/overall - Lifetime totals
- GET /api/users/{owner_id}/statistics/streak - Current/longest streak
- GET /api/users/{owner_id}/statistics/tags/{tag} - Per-tag totals
- GET /api/users/{owner_id}/statistics/comparison - Two-period change
- GET /api/users/{owner_id}/calendar/monthly - Sparse month calendar
- GET /api/users/{owner_id}/calendar/yearly - Dense year calendar
- GET /api/users/{owner_id}/analysis/best-hours - Hours by study time
- GET /api/users/{owner_id}/analysis/best-days - Weekdays by average session
- GET /api/users/{owner_id}/analysis/recommendations - Study suggestions
- GET /api/users/{owner_id}/analysis/recent-activity - Study/missed days
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from studyrecord.config import settings
from studyrecord.db.base import get_db
from studyrecord.middleware.error_handling import handle_endpoint_errors
from studyrecord.models.analytics import (
    ComparisonStats,
    DailyStats,
    HourlyStudyTime,
    MonthlyCalendar,
    MonthlyStats,
    OverallStats,
    RecentStudyActivity,
    StreakInfo,
    StudyRecommendation,
    TagStats,
    WeekdayStudyAverage,
    WeeklyStats,
    YearlyCalendar,
    YearlyStats,
)
from studyrecord.models.base import ErrorDetail
from studyrecord.services.analytics import (
    DateRange,
    PeriodComparisonService,
    StreakTrackingService,
    StudyCalendarService,
    StudyPatternService,
    StudyStatisticsService,
    TagStatisticsService,
)
from studyrecord.services.analytics import periods
from studyrecord.services.store import SessionStore, SqlSessionStore

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/users/{owner_id}",
    tags=["analytics"],
    responses={
        404: {"model": ErrorDetail, "description": "Unknown user"},
        422: {"model": ErrorDetail, "description": "Invalid range"},
    },
)


# ===========================================
# Dependency Injection
# ===========================================


async def get_session_store(db: AsyncSession = Depends(get_db)) -> SessionStore:
    """Get the SQL-backed session store."""
    return SqlSessionStore(db)


def get_statistics_service(
    store: SessionStore = Depends(get_session_store),
) -> StudyStatisticsService:
    return StudyStatisticsService(store)


def get_streak_service(
    store: SessionStore = Depends(get_session_store),
) -> StreakTrackingService:
    return StreakTrackingService(store)


def get_tag_service(
    store: SessionStore = Depends(get_session_store),
) -> TagStatisticsService:
    return TagStatisticsService(store)


def get_comparison_service(
    store: SessionStore = Depends(get_session_store),
) -> PeriodComparisonService:
    return PeriodComparisonService(store)


def get_calendar_service(
    store: SessionStore = Depends(get_session_store),
) -> StudyCalendarService:
    return StudyCalendarService(store)


def get_pattern_service(
    store: SessionStore = Depends(get_session_store),
) -> StudyPatternService:
    return StudyPatternService(store)


# ===========================================
# Statistics Endpoints
# ===========================================


@router.get("/statistics/daily", response_model=DailyStats)
@handle_endpoint_errors("Get daily stats")
async def get_daily_stats(
    owner_id: int,
    day: date = Query(..., alias="date", description="Calendar date (YYYY-MM-DD)"),
    service: StudyStatisticsService = Depends(get_statistics_service),
) -> DailyStats:
    """Get study totals for one calendar date."""
    return await service.get_daily_stats(owner_id, day)


@router.get("/statistics/weekly", response_model=WeeklyStats)
@handle_endpoint_errors("Get weekly stats")
async def get_weekly_stats(
    owner_id: int,
    start_date: date = Query(..., description="First day of the 7-day window"),
    service: StudyStatisticsService = Depends(get_statistics_service),
) -> WeeklyStats:
    """
    Get study totals for the 7 days starting at start_date.

    Includes a per-day breakdown and the five most used tags.
    """
    return await service.get_weekly_stats(owner_id, start_date)


@router.get("/statistics/monthly", response_model=MonthlyStats)
@handle_endpoint_errors("Get monthly stats")
async def get_monthly_stats(
    owner_id: int,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    service: StudyStatisticsService = Depends(get_statistics_service),
) -> MonthlyStats:
    """
    Get study totals for a calendar month.

    The last weekly breakdown entry may cover days of the following month.
    """
    return await service.get_monthly_stats(owner_id, year, month)


@router.get("/statistics/yearly", response_model=YearlyStats)
@handle_endpoint_errors("Get yearly stats")
async def get_yearly_stats(
    owner_id: int,
    year: int = Query(..., ge=1, le=9998),
    service: StudyStatisticsService = Depends(get_statistics_service),
) -> YearlyStats:
    """Get study totals for a calendar year with all twelve months."""
    return await service.get_yearly_stats(owner_id, year)


@router.get("/statistics/overall", response_model=OverallStats)
@handle_endpoint_errors("Get overall stats")
async def get_overall_stats(
    owner_id: int,
    service: StudyStatisticsService = Depends(get_statistics_service),
) -> OverallStats:
    """Get lifetime study totals and study consistency."""
    return await service.get_overall_stats(owner_id)


@router.get("/statistics/streak", response_model=StreakInfo)
@handle_endpoint_errors("Get study streak")
async def get_study_streak(
    owner_id: int,
    service: StreakTrackingService = Depends(get_streak_service),
) -> StreakInfo:
    """Get current and longest consecutive study day streaks."""
    return await service.get_streak(owner_id)


@router.get("/statistics/tags/{tag}", response_model=TagStats)
@handle_endpoint_errors("Get tag stats")
async def get_tag_stats(
    tag: str,
    owner_id: int,
    service: TagStatisticsService = Depends(get_tag_service),
) -> TagStats:
    """Get lifetime totals of the sessions carrying one tag."""
    return await service.get_tag_stats(owner_id, tag)


@router.get("/statistics/comparison", response_model=ComparisonStats)
@handle_endpoint_errors("Get comparison stats")
async def get_comparison_stats(
    owner_id: int,
    previous_start: date = Query(..., description="Previous period start (inclusive)"),
    previous_end: date = Query(..., description="Previous period end (exclusive)"),
    current_start: date = Query(..., description="Current period start (inclusive)"),
    current_end: date = Query(..., description="Current period end (exclusive)"),
    service: PeriodComparisonService = Depends(get_comparison_service),
) -> ComparisonStats:
    """
    Compare study time between two periods.

    Both periods are half-open: the end date itself is not included.
    """
    previous = DateRange(previous_start, previous_end)
    current = DateRange(current_start, current_end)
    return await service.compare(owner_id, previous, current)


# ===========================================
# Calendar Endpoints
# ===========================================


@router.get("/calendar/monthly", response_model=MonthlyCalendar)
@handle_endpoint_errors("Get monthly calendar")
async def get_monthly_calendar(
    owner_id: int,
    year: Optional[int] = Query(None, ge=1, le=9999, description="Defaults to this year"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Defaults to this month"),
    service: StudyCalendarService = Depends(get_calendar_service),
) -> MonthlyCalendar:
    """Get the sparse study calendar of one month."""
    today = periods.today()
    return await service.get_monthly_calendar(
        owner_id,
        year if year is not None else today.year,
        month if month is not None else today.month,
    )


@router.get("/calendar/yearly", response_model=YearlyCalendar)
@handle_endpoint_errors("Get yearly calendar")
async def get_yearly_calendar(
    owner_id: int,
    year: Optional[int] = Query(None, ge=1, le=9998, description="Defaults to this year"),
    service: StudyCalendarService = Depends(get_calendar_service),
) -> YearlyCalendar:
    """Get the dense study calendar of one year."""
    target_year = year if year is not None else periods.today().year
    return await service.get_yearly_calendar(owner_id, target_year)


# ===========================================
# Pattern Analysis Endpoints
# ===========================================


@router.get("/analysis/best-hours", response_model=list[HourlyStudyTime])
@handle_endpoint_errors("Analyze best study hours")
async def get_best_study_hours(
    owner_id: int,
    service: StudyPatternService = Depends(get_pattern_service),
) -> list[HourlyStudyTime]:
    """Get hours of the day ranked by total study minutes."""
    return await service.analyze_best_hours(owner_id)


@router.get("/analysis/best-days", response_model=list[WeekdayStudyAverage])
@handle_endpoint_errors("Analyze best study days")
async def get_best_study_days(
    owner_id: int,
    service: StudyPatternService = Depends(get_pattern_service),
) -> list[WeekdayStudyAverage]:
    """Get weekdays ranked by average session length."""
    return await service.analyze_best_days(owner_id)


@router.get("/analysis/recommendations", response_model=list[StudyRecommendation])
@handle_endpoint_errors("Generate study recommendations")
async def get_study_recommendations(
    owner_id: int,
    service: StudyPatternService = Depends(get_pattern_service),
) -> list[StudyRecommendation]:
    """Get study suggestions derived from the user's patterns."""
    return await service.generate_recommendations(owner_id)


@router.get("/analysis/recent-activity", response_model=RecentStudyActivity)
@handle_endpoint_errors("Get recent study activity")
async def get_recent_activity(
    owner_id: int,
    days: int = Query(
        settings.ANALYTICS_RECENT_WINDOW_DAYS,
        ge=1,
        le=366,
        description="Number of days ending today",
    ),
    service: StreakTrackingService = Depends(get_streak_service),
) -> RecentStudyActivity:
    """Get study and missed day counts for the last `days` days."""
    return await service.get_recent_activity(owner_id, days=days)
