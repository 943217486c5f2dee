"""
Study Analytics Services

Turns a user's study sessions into statistics, streaks, tag rankings,
period comparisons, calendar views and study recommendations.

Modules:
- periods: Reference time zone and half-open date ranges
- tag_ranking: Tag frequency ranking and per-tag statistics
- statistics: Daily/weekly/monthly/yearly/overall roll-ups
- streak_tracking: Current/longest streaks and recent activity
- comparison: Period-over-period study time change
- study_calendar: Sparse month and dense year calendar views
- patterns: Best hours/weekdays and recommendations

Every service is stateless and reads through a SessionStore; results are
recomputed on every call.

Usage:
    from studyrecord.services.analytics import StudyStatisticsService

    service = StudyStatisticsService(store)
    overall = await service.get_overall_stats(owner_id)
"""

from studyrecord.services.analytics.comparison import PeriodComparisonService
from studyrecord.services.analytics.patterns import StudyPatternService
from studyrecord.services.analytics.periods import DateRange
from studyrecord.services.analytics.statistics import StudyStatisticsService
from studyrecord.services.analytics.streak_tracking import StreakTrackingService
from studyrecord.services.analytics.study_calendar import StudyCalendarService
from studyrecord.services.analytics.tag_ranking import TagStatisticsService, rank_tags

__all__ = [
    "DateRange",
    "PeriodComparisonService",
    "StreakTrackingService",
    "StudyCalendarService",
    "StudyPatternService",
    "StudyStatisticsService",
    "TagStatisticsService",
    "rank_tags",
]
