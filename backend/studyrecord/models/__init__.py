"""Pydantic models for the application."""

from studyrecord.models.analytics import (
    ComparisonStats,
    DailyStats,
    DailyStudy,
    HourlyStudyTime,
    MonthlyCalendar,
    MonthlyStats,
    OverallStats,
    RecentStudyActivity,
    StreakInfo,
    StudyRecommendation,
    StudySessionRecord,
    TagStats,
    WeekdayStudyAverage,
    WeeklyStats,
    YearlyCalendar,
    YearlyStats,
)
from studyrecord.models.base import ErrorDetail, StrictResponse

__all__ = [
    "ComparisonStats",
    "DailyStats",
    "DailyStudy",
    "ErrorDetail",
    "HourlyStudyTime",
    "MonthlyCalendar",
    "MonthlyStats",
    "OverallStats",
    "RecentStudyActivity",
    "StreakInfo",
    "StrictResponse",
    "StudyRecommendation",
    "StudySessionRecord",
    "TagStats",
    "WeekdayStudyAverage",
    "WeeklyStats",
    "YearlyCalendar",
    "YearlyStats",
]
