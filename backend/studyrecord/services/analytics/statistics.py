"""
Granular Study Statistics Service

Rolls study sessions up into day, week, month, year and lifetime totals.

Composition:
    WeeklyStats embeds seven DailyStats, MonthlyStats embeds the WeeklyStats
    of every 7-day step starting in the month, YearlyStats embeds twelve
    MonthlyStats. Every level queries the session store for its own window
    instead of slicing a parent's rows, so each nested result is identical
    to what a direct call for that window returns.

Averages:
    - Daily: minutes per session
    - Weekly: minutes per day over a fixed 7 days
    - Monthly: minutes per day over the length of the month
    - Yearly: minutes per month over a fixed 12 months
    - Overall: minutes per day from the first session through today
    Every average is 0.0 when its denominator is zero.

Usage:
    from studyrecord.services.analytics import StudyStatisticsService

    service = StudyStatisticsService(store)
    weekly = await service.get_weekly_stats(owner_id, date(2024, 1, 1))
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING, Optional, Sequence

from studyrecord.config import settings
from studyrecord.models.analytics import (
    DailyStats,
    MonthlyStats,
    OverallStats,
    StudySessionRecord,
    WeeklyStats,
    YearlyStats,
)
from studyrecord.services.analytics import periods
from studyrecord.services.analytics.periods import (
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    DateRange,
    study_dates,
)
from studyrecord.services.analytics.tag_ranking import collect_tags, rank_tags

if TYPE_CHECKING:
    from studyrecord.services.store import SessionStore

logger = logging.getLogger(__name__)


def _ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0.0 when the denominator is zero."""
    if not denominator:
        return 0.0
    return numerator / denominator


class StudyStatisticsService:
    """
    Service for multi-granularity study statistics.

    Stateless: every method recomputes from the session store.
    """

    def __init__(self, store: SessionStore):
        """
        Initialize the statistics service.

        Args:
            store: Session store to read study sessions from.
        """
        self.store = store

    async def get_daily_stats(self, owner_id: int, day: date) -> DailyStats:
        """
        Get study totals for a single calendar date.

        Args:
            owner_id: Owner of the sessions.
            day: Calendar date in the reference zone.

        Returns:
            DailyStats; zero totals and no tags for a day without sessions.
        """
        sessions = await self._fetch(owner_id, DateRange.of_days(day, 1))
        total = self._total_minutes(sessions)

        return DailyStats(
            date=day,
            total_study_time=total,
            record_count=len(sessions),
            average_session_time=_ratio(total, len(sessions)),
            tags=collect_tags(sessions),
        )

    async def get_weekly_stats(self, owner_id: int, start_date: date) -> WeeklyStats:
        """
        Get study totals for the 7 days starting at start_date.

        The week is not aligned to any weekday; it starts wherever the
        caller says.

        Args:
            owner_id: Owner of the sessions.
            start_date: First day of the week.

        Returns:
            WeeklyStats with a seven-entry daily breakdown.
        """
        window = DateRange.of_days(start_date, DAYS_PER_WEEK)
        sessions = await self._fetch(owner_id, window)
        total = self._total_minutes(sessions)

        daily_breakdown = [
            await self.get_daily_stats(owner_id, day) for day in window.days()
        ]

        return WeeklyStats(
            start_date=start_date,
            end_date=start_date + timedelta(days=DAYS_PER_WEEK - 1),
            total_study_time=total,
            record_count=len(sessions),
            average_study_time_per_day=_ratio(total, DAYS_PER_WEEK),
            study_days_count=len(study_dates(sessions)),
            daily_breakdown=daily_breakdown,
            most_used_tags=rank_tags(sessions, limit=settings.ANALYTICS_TOP_TAGS_LIMIT),
        )

    async def get_monthly_stats(
        self, owner_id: int, year: int, month: int
    ) -> MonthlyStats:
        """
        Get study totals for a calendar month.

        The weekly breakdown steps 7 days at a time from the 1st while the
        step date is still inside the month. The last week usually extends
        past the month's end, and its totals include those extra days.

        Args:
            owner_id: Owner of the sessions.
            year: Calendar year.
            month: Calendar month (1-12).

        Returns:
            MonthlyStats with its weekly breakdown.

        Raises:
            ValidationError: If month is outside 1-12.
        """
        window = DateRange.for_month(year, month)
        sessions = await self._fetch(owner_id, window)
        total = self._total_minutes(sessions)

        weekly_breakdown: list[WeeklyStats] = []
        week_start = window.start
        while week_start in window:
            weekly_breakdown.append(await self.get_weekly_stats(owner_id, week_start))
            week_start += timedelta(days=DAYS_PER_WEEK)

        return MonthlyStats(
            year=year,
            month=month,
            total_study_time=total,
            record_count=len(sessions),
            average_study_time_per_day=_ratio(total, window.length),
            study_days_count=len(study_dates(sessions)),
            weekly_breakdown=weekly_breakdown,
            most_used_tags=rank_tags(sessions, limit=settings.ANALYTICS_TOP_TAGS_LIMIT),
        )

    async def get_yearly_stats(self, owner_id: int, year: int) -> YearlyStats:
        """
        Get study totals for a calendar year.

        All twelve months are present in the breakdown, including months
        without sessions.

        Args:
            owner_id: Owner of the sessions.
            year: Calendar year.

        Returns:
            YearlyStats with a twelve-entry monthly breakdown.
        """
        sessions = await self._fetch(owner_id, DateRange.for_year(year))
        total = self._total_minutes(sessions)

        monthly_breakdown = [
            await self.get_monthly_stats(owner_id, year, month)
            for month in range(1, MONTHS_PER_YEAR + 1)
        ]

        return YearlyStats(
            year=year,
            total_study_time=total,
            record_count=len(sessions),
            average_study_time_per_month=_ratio(total, MONTHS_PER_YEAR),
            study_days_count=len(study_dates(sessions)),
            monthly_breakdown=monthly_breakdown,
            most_used_tags=rank_tags(sessions, limit=settings.ANALYTICS_TOP_TAGS_LIMIT),
        )

    async def get_overall_stats(
        self, owner_id: int, today: Optional[date] = None
    ) -> OverallStats:
        """
        Get lifetime study totals.

        Args:
            owner_id: Owner of the sessions.
            today: Reference date (defaults to today in the reference zone).

        Returns:
            OverallStats; all zero with a null first_record_date when the
            user has no sessions.
        """
        sessions = await self.store.all_sessions(owner_id)
        logger.debug(f"Overall stats for user {owner_id}: {len(sessions)} sessions")

        if not sessions:
            return OverallStats()

        today = today or periods.today()
        dates = study_dates(sessions)
        first_record_date = min(dates)
        total = self._total_minutes(sessions)

        # Sessions dated after `today` would make the span non-positive
        total_days = max((today - first_record_date).days + 1, 0)

        return OverallStats(
            first_record_date=first_record_date,
            total_study_time=total,
            record_count=len(sessions),
            average_study_time_per_day=_ratio(total, total_days),
            study_days_count=len(dates),
            total_days_count=total_days,
            study_consistency=_ratio(len(dates), total_days) * 100,
            most_used_tags=rank_tags(sessions, limit=settings.ANALYTICS_TOP_TAGS_LIMIT),
        )

    async def _fetch(
        self, owner_id: int, window: DateRange
    ) -> list[StudySessionRecord]:
        """Fetch the user's sessions inside a date window."""
        start, end = window.bounds
        sessions = await self.store.sessions_in_range(owner_id, start, end)
        logger.debug(
            f"User {owner_id} [{window.start}, {window.end}): {len(sessions)} sessions"
        )
        return sessions

    @staticmethod
    def _total_minutes(sessions: Sequence[StudySessionRecord]) -> int:
        return sum(s.duration_minutes for s in sessions)
