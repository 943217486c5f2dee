"""
Study Streak Tracking Service

Detects runs of consecutive study days.

Responsibilities:
- Calculate current and longest study streaks
- Report the most recent study date
- Summarize study and missed days over a recent window

Usage:
    from studyrecord.services.analytics import StreakTrackingService

    service = StreakTrackingService(store)
    streak = await service.get_streak(owner_id)
    activity = await service.get_recent_activity(owner_id, days=30)
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING, Iterable, Optional

from studyrecord.config import settings
from studyrecord.middleware.error_handling import ValidationError
from studyrecord.models.analytics import RecentStudyActivity, StreakInfo
from studyrecord.services.analytics import periods
from studyrecord.services.analytics.periods import DateRange, study_dates

if TYPE_CHECKING:
    from studyrecord.services.store import SessionStore

logger = logging.getLogger(__name__)


class StreakTrackingService:
    """
    Service for study streak calculations.

    Streaks are derived from the set of distinct study dates only; several
    sessions on one day count once.
    """

    def __init__(self, store: SessionStore):
        """
        Initialize the streak tracking service.

        Args:
            store: Session store to read study sessions from.
        """
        self.store = store

    async def get_streak(
        self, owner_id: int, today: Optional[date] = None
    ) -> StreakInfo:
        """
        Get current and longest study streaks.

        Args:
            owner_id: Owner of the sessions.
            today: Reference date (defaults to today in the reference zone).

        Returns:
            StreakInfo; all zero with null dates when there are no sessions.
        """
        sessions = await self.store.all_sessions(owner_id)
        dates = study_dates(sessions)

        if not dates:
            return StreakInfo()

        today = today or periods.today()
        current_streak, streak_start = self._calculate_current_streak(dates, today)
        longest_streak = self._calculate_longest_streak(dates)

        logger.debug(
            f"Streak for user {owner_id}: current={current_streak} longest={longest_streak}"
        )

        return StreakInfo(
            current_streak=current_streak,
            longest_streak=longest_streak,
            last_study_date=max(dates),
            streak_start_date=streak_start,
            is_active_today=today in dates,
        )

    async def get_recent_activity(
        self,
        owner_id: int,
        days: Optional[int] = None,
        today: Optional[date] = None,
    ) -> RecentStudyActivity:
        """
        Count study days among the last `days` days, today included.

        Args:
            owner_id: Owner of the sessions.
            days: Window length (defaults to ANALYTICS_RECENT_WINDOW_DAYS).
            today: Reference date (defaults to today in the reference zone).

        Returns:
            RecentStudyActivity with study and missed day counts.

        Raises:
            ValidationError: If days is not positive.
        """
        days = days if days is not None else settings.ANALYTICS_RECENT_WINDOW_DAYS
        if days < 1:
            raise ValidationError(f"Window must cover at least one day, got {days}")

        today = today or periods.today()
        window = DateRange.of_days(today - timedelta(days=days - 1), days)
        start, end = window.bounds
        sessions = await self.store.sessions_in_range(owner_id, start, end)
        study_days = len(study_dates(sessions))

        return RecentStudyActivity(
            window_days=days,
            start_date=window.start,
            end_date=today,
            study_days=study_days,
            missed_days=days - study_days,
        )

    @staticmethod
    def _calculate_current_streak(
        dates: Iterable[date], today: date
    ) -> tuple[int, Optional[date]]:
        """
        Calculate the current consecutive study streak.

        Counts backward one day at a time from today. If today has no
        session the count starts from yesterday instead: an unfinished
        today does not break a streak, it just isn't counted yet.

        Args:
            dates: Distinct study dates (any order).
            today: Reference date.

        Returns:
            tuple[int, Optional[date]]: Tuple containing:
                - streak_count: Number of consecutive study days.
                - streak_start_date: First day of the streak, or None.
        """
        dates = set(dates)
        check_date = today if today in dates else today - timedelta(days=1)

        streak = 0
        streak_start = None
        while check_date in dates:
            streak += 1
            streak_start = check_date
            check_date -= timedelta(days=1)

        return streak, streak_start

    @staticmethod
    def _calculate_longest_streak(dates: Iterable[date]) -> int:
        """
        Calculate the longest streak ever achieved.

        Scans the sorted distinct dates; a run extends while each date is
        exactly one day after the previous one and resets to 1 on any gap.

        Args:
            dates: Study dates (any order, duplicates allowed).

        Returns:
            int: Length of the longest consecutive run, 0 for no dates.
        """
        sorted_dates = sorted(set(dates))
        if not sorted_dates:
            return 0

        longest = 1
        current = 1

        for i in range(1, len(sorted_dates)):
            if sorted_dates[i] == sorted_dates[i - 1] + timedelta(days=1):
                current += 1
                longest = max(longest, current)
            else:
                current = 1

        return longest
