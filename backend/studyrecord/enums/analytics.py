"""
Study Analytics Enums

Defines enums for weekday grouping and study recommendation categories.
"""

from enum import Enum


class Weekday(str, Enum):
    """
    Day of the week.

    Declared in ISO order so that list(Weekday)[date.weekday()] maps a
    calendar date to its member.
    """

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """Return the member for a date.weekday() index (Monday == 0)."""
        return list(cls)[index]

    @property
    def label(self) -> str:
        """Capitalized display name (e.g. "Monday")."""
        return self.value.capitalize()


class RecommendationType(str, Enum):
    """
    Category of a generated study recommendation.

    Recommendations are always emitted in this order; CONSISTENCY is the only
    one that does not depend on the user's data.
    """

    TIME = "time"  # Best hour of day
    DAY = "day"  # Best weekday
    TOPIC = "topic"  # Pair of most-used tags
    CONSISTENCY = "consistency"  # Static encouragement
