"""
Study Calendar Service

Builds month and year calendar views of study activity.

- Monthly view is sparse: only days with sessions get an entry.
- Yearly view is dense: every month 1-12 gets an entry, zero if inactive.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from studyrecord.models.analytics import (
    DailyStudy,
    MonthlyCalendar,
    StudySessionRecord,
    YearlyCalendar,
)
from studyrecord.services.analytics.periods import (
    MONTHS_PER_YEAR,
    DateRange,
    study_dates,
    to_local_date,
)
from studyrecord.services.analytics.tag_ranking import collect_tags

if TYPE_CHECKING:
    from studyrecord.services.store import SessionStore

logger = logging.getLogger(__name__)


class StudyCalendarService:
    """
    Service for calendar views of study sessions.
    """

    def __init__(self, store: SessionStore):
        """
        Initialize the calendar service.

        Args:
            store: Session store to read study sessions from.
        """
        self.store = store

    async def get_monthly_calendar(
        self, owner_id: int, year: int, month: int
    ) -> MonthlyCalendar:
        """
        Get the study calendar for one month.

        Args:
            owner_id: Owner of the sessions.
            year: Calendar year.
            month: Calendar month (1-12).

        Returns:
            MonthlyCalendar keyed by day of month, days with sessions only.

        Raises:
            ValidationError: If month is outside 1-12.
        """
        window = DateRange.for_month(year, month)
        start, end = window.bounds
        sessions = await self.store.sessions_in_range(owner_id, start, end)

        sessions_by_date: dict[date, list[StudySessionRecord]] = {}
        for session in sessions:
            sessions_by_date.setdefault(to_local_date(session.created_at), []).append(
                session
            )

        daily_studies: dict[int, DailyStudy] = {}
        for day in window.days():
            day_sessions = sessions_by_date.get(day, [])
            if not day_sessions:
                continue
            daily_studies[day.day] = DailyStudy(
                date=day,
                total_study_time=sum(s.duration_minutes for s in day_sessions),
                record_count=len(day_sessions),
                tags=collect_tags(day_sessions),
            )

        logger.debug(
            f"Calendar {year}-{month:02d} for user {owner_id}: {len(daily_studies)} study days"
        )

        return MonthlyCalendar(
            year=year,
            month=month,
            total_days=window.length,
            total_study_days=len(daily_studies),
            total_study_time=sum(d.total_study_time for d in daily_studies.values()),
            daily_studies=daily_studies,
        )

    async def get_yearly_calendar(self, owner_id: int, year: int) -> YearlyCalendar:
        """
        Get the study calendar for one year.

        total_study_days counts distinct dates across the whole year rather
        than adding up the per-month day counts.

        Args:
            owner_id: Owner of the sessions.
            year: Calendar year.

        Returns:
            YearlyCalendar with per-month minutes and study days for months 1-12.
        """
        start, end = DateRange.for_year(year).bounds
        sessions = await self.store.sessions_in_range(owner_id, start, end)

        sessions_by_month: dict[int, list[StudySessionRecord]] = {}
        for session in sessions:
            sessions_by_month.setdefault(
                to_local_date(session.created_at).month, []
            ).append(session)

        monthly_study_times: dict[int, int] = {}
        monthly_study_days: dict[int, int] = {}
        for month in range(1, MONTHS_PER_YEAR + 1):
            month_sessions = sessions_by_month.get(month, [])
            monthly_study_times[month] = sum(s.duration_minutes for s in month_sessions)
            monthly_study_days[month] = len(study_dates(month_sessions))

        return YearlyCalendar(
            year=year,
            total_study_days=len(study_dates(sessions)),
            total_study_time=sum(monthly_study_times.values()),
            monthly_study_times=monthly_study_times,
            monthly_study_days=monthly_study_days,
        )
