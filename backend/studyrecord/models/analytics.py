"""
Study Analytics Models (Pydantic)

Input record and output value objects of the study analytics services.

ARCHITECTURE NOTE:
    StudySessionRecord is the read-only view of a row in the
    study_sessions table (studyrecord/db/models.py). Every other model here
    is constructed per call by a service and never persisted.

    Data flows: Database → SessionStore → StudySessionRecord → Service → Response

All durations are whole minutes. All averages are 0.0 when their
denominator would be zero.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from studyrecord.enums.analytics import RecommendationType, Weekday
from studyrecord.models.base import StrictResponse


# ===========================================
# Input Record
# ===========================================


class StudySessionRecord(StrictResponse):
    """
    One recorded study session as seen by the analytics services.

    Tags behave as a set; duplicates are ignored wherever tags are counted.
    """

    id: int
    owner_id: int
    created_at: datetime
    duration_minutes: int = Field(..., ge=1)
    tags: list[str] = Field(default_factory=list)


# ===========================================
# Granular Statistics
# ===========================================


class DailyStats(StrictResponse):
    """Study totals for one calendar date."""

    date: date
    total_study_time: int = 0
    record_count: int = 0
    average_session_time: float = 0.0
    tags: list[str] = Field(default_factory=list)


class WeeklyStats(StrictResponse):
    """
    Study totals for seven consecutive days starting at start_date.

    average_study_time_per_day always divides by 7, so inactive days pull
    the average down.
    """

    start_date: date
    end_date: date  # start_date + 6 days (inclusive)
    total_study_time: int = 0
    record_count: int = 0
    average_study_time_per_day: float = 0.0
    study_days_count: int = 0
    daily_breakdown: list[DailyStats] = Field(default_factory=list)
    most_used_tags: list[str] = Field(default_factory=list)


class MonthlyStats(StrictResponse):
    """
    Study totals for one calendar month.

    The last entry of weekly_breakdown may cover days of the following month.
    """

    year: int
    month: int
    total_study_time: int = 0
    record_count: int = 0
    average_study_time_per_day: float = 0.0
    study_days_count: int = 0
    weekly_breakdown: list[WeeklyStats] = Field(default_factory=list)
    most_used_tags: list[str] = Field(default_factory=list)


class YearlyStats(StrictResponse):
    """Study totals for one calendar year, with all twelve months."""

    year: int
    total_study_time: int = 0
    record_count: int = 0
    average_study_time_per_month: float = 0.0
    study_days_count: int = 0
    monthly_breakdown: list[MonthlyStats] = Field(default_factory=list)
    most_used_tags: list[str] = Field(default_factory=list)


class OverallStats(StrictResponse):
    """
    Lifetime study totals.

    total_days_count counts every day from first_record_date through today,
    both inclusive. study_consistency is the share of those days with at
    least one session, as a percentage.
    """

    first_record_date: Optional[date] = None
    total_study_time: int = 0
    record_count: int = 0
    average_study_time_per_day: float = 0.0
    study_days_count: int = 0
    total_days_count: int = 0
    study_consistency: float = 0.0
    most_used_tags: list[str] = Field(default_factory=list)


# ===========================================
# Streaks, Tags, Comparison
# ===========================================


class StreakInfo(StrictResponse):
    """
    Consecutive study day information.

    A day without sessions today does not break the current streak; it
    simply isn't counted yet.
    """

    current_streak: int = 0
    longest_streak: int = 0
    last_study_date: Optional[date] = None
    streak_start_date: Optional[date] = None
    is_active_today: bool = False


class TagStats(StrictResponse):
    """Lifetime totals for all sessions carrying one tag."""

    tag: str
    total_study_time: int = 0
    record_count: int = 0
    first_used_date: Optional[date] = None
    last_used_date: Optional[date] = None


class ComparisonStats(StrictResponse):
    """Study time of two periods and the relative change between them."""

    previous_period_study_time: int = 0
    current_period_study_time: int = 0
    percentage_change: float = 0.0
    is_improved: bool = False


# ===========================================
# Calendar Views
# ===========================================


class DailyStudy(StrictResponse):
    """Calendar cell for a day with at least one session."""

    date: date
    total_study_time: int
    record_count: int
    tags: list[str] = Field(default_factory=list)


class MonthlyCalendar(StrictResponse):
    """
    Sparse month view: daily_studies only has keys for days with sessions.
    """

    year: int
    month: int
    total_days: int
    total_study_days: int = 0
    total_study_time: int = 0
    daily_studies: dict[int, DailyStudy] = Field(default_factory=dict)


class YearlyCalendar(StrictResponse):
    """
    Dense year view: both maps always have keys 1 through 12.
    """

    year: int
    total_study_days: int = 0
    total_study_time: int = 0
    monthly_study_times: dict[int, int] = Field(default_factory=dict)
    monthly_study_days: dict[int, int] = Field(default_factory=dict)


# ===========================================
# Study Patterns
# ===========================================


class HourlyStudyTime(StrictResponse):
    """Total study minutes recorded at one hour of the day (0-23)."""

    hour: int = Field(..., ge=0, le=23)
    total_study_time: int


class WeekdayStudyAverage(StrictResponse):
    """Average session length recorded on one weekday."""

    weekday: Weekday
    average_session_time: float
    record_count: int


class StudyRecommendation(StrictResponse):
    """Human-readable study suggestion."""

    title: str
    description: str
    type: RecommendationType


class RecentStudyActivity(StrictResponse):
    """
    How many of the last window_days days (ending today) had sessions.
    """

    window_days: int
    start_date: date
    end_date: date
    study_days: int = 0
    missed_days: int = 0
