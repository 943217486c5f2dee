"""
Date windows for study analytics.

Every analytics window is a half-open range of calendar dates
[start, end). Timestamps are mapped to dates in the single reference zone
configured by ANALYTICS_TIMEZONE, and date boundaries are converted back
to midnight in that same zone before the session store is queried.

Naive timestamps are treated as already being in the reference zone.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Iterable, Iterator
from zoneinfo import ZoneInfo

from studyrecord.config import settings
from studyrecord.middleware.error_handling import ValidationError
from studyrecord.models.analytics import StudySessionRecord

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


def reference_zone() -> tzinfo:
    """Return the configured reference time zone."""
    name = settings.ANALYTICS_TIMEZONE
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def to_local(ts: datetime) -> datetime:
    """Express a timestamp in the reference zone."""
    if ts.tzinfo is None:
        return ts
    return ts.astimezone(reference_zone())


def to_local_date(ts: datetime) -> date:
    """Truncate a timestamp to its calendar date in the reference zone."""
    return to_local(ts).date()


def today() -> date:
    """Current calendar date in the reference zone."""
    return datetime.now(reference_zone()).date()


def start_of_day(day: date) -> datetime:
    """Midnight at the start of the given date, in the reference zone."""
    return datetime.combine(day, time.min, tzinfo=reference_zone())


def validate_month(month: int) -> None:
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValidationError(
            f"Month must be between 1 and 12, got {month}",
            details={"month": month},
        )


def days_in_month(year: int, month: int) -> int:
    validate_month(month)
    return calendar.monthrange(year, month)[1]


def study_dates(sessions: Iterable[StudySessionRecord]) -> set[date]:
    """Distinct calendar dates with at least one session."""
    return {to_local_date(s.created_at) for s in sessions}


@dataclass(frozen=True)
class DateRange:
    """
    Half-open range of calendar dates [start, end).

    start == end is a valid empty range. start after end is rejected.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValidationError(
                f"Range start {self.start} is after range end {self.end}",
                details={"start": self.start.isoformat(), "end": self.end.isoformat()},
            )

    @classmethod
    def of_days(cls, start: date, days: int) -> "DateRange":
        """Range of `days` consecutive dates beginning at `start`."""
        if days < 0:
            raise ValidationError(f"Day count must not be negative, got {days}")
        try:
            end = start + timedelta(days=days)
        except OverflowError:
            raise ValidationError(
                f"Range of {days} days from {start} ends after {date.max}",
                details={"start": start.isoformat(), "days": days},
            ) from None
        return cls(start, end)

    @classmethod
    def for_month(cls, year: int, month: int) -> "DateRange":
        validate_month(month)
        return cls.of_days(date(year, month, 1), days_in_month(year, month))

    @classmethod
    def for_year(cls, year: int) -> "DateRange":
        if year >= date.max.year:
            raise ValidationError(
                f"Year {year} has no following year to end the range",
                details={"year": year},
            )
        return cls(date(year, 1, 1), date(year + 1, 1, 1))

    @property
    def bounds(self) -> tuple[datetime, datetime]:
        """Timestamps [start, end) to hand to the session store."""
        return start_of_day(self.start), start_of_day(self.end)

    @property
    def length(self) -> int:
        return (self.end - self.start).days

    def days(self) -> Iterator[date]:
        for offset in range(self.length):
            yield self.start + timedelta(days=offset)

    def __contains__(self, day: date) -> bool:
        return self.start <= day < self.end
