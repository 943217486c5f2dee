"""
Period Comparison Service

Compares total study time between a previous and a current date range.

Percentage change:
    previous > 0                  → (current - previous) / previous * 100
    previous == 0, current > 0    → 100.0
    previous == 0, current == 0   → 0.0

The ranges may overlap or be disjoint; each is summed independently.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from studyrecord.models.analytics import ComparisonStats
from studyrecord.services.analytics.periods import DateRange

if TYPE_CHECKING:
    from studyrecord.services.store import SessionStore

logger = logging.getLogger(__name__)


class PeriodComparisonService:
    """
    Service for period-over-period study time comparison.
    """

    def __init__(self, store: SessionStore):
        """
        Initialize the comparison service.

        Args:
            store: Session store to read study sessions from.
        """
        self.store = store

    async def compare(
        self, owner_id: int, previous: DateRange, current: DateRange
    ) -> ComparisonStats:
        """
        Compare study time of two date ranges.

        Args:
            owner_id: Owner of the sessions.
            previous: Baseline range.
            current: Range compared against the baseline.

        Returns:
            ComparisonStats with both totals, the change and whether the
            current range has strictly more study time.
        """
        previous_time = await self._total_study_time(owner_id, previous)
        current_time = await self._total_study_time(owner_id, current)

        logger.debug(
            f"Comparison for user {owner_id}: previous={previous_time} current={current_time}"
        )

        return ComparisonStats(
            previous_period_study_time=previous_time,
            current_period_study_time=current_time,
            percentage_change=self.calculate_percentage_change(previous_time, current_time),
            is_improved=current_time > previous_time,
        )

    async def _total_study_time(self, owner_id: int, window: DateRange) -> int:
        start, end = window.bounds
        sessions = await self.store.sessions_in_range(owner_id, start, end)
        return sum(s.duration_minutes for s in sessions)

    @staticmethod
    def calculate_percentage_change(previous: int, current: int) -> float:
        """
        Relative change from previous to current, in percent.

        Args:
            previous: Baseline study minutes.
            current: Compared study minutes.

        Returns:
            float: Percentage change; see module docstring for zero baselines.
        """
        if previous > 0:
            return (current - previous) / previous * 100
        if current > 0:
            return 100.0
        return 0.0
