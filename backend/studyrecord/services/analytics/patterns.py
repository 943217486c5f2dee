"""
Study Pattern Analysis Service

Finds when a user studies most and turns that into study suggestions.

Responsibilities:
- Rank hours of the day by total study minutes
- Rank weekdays by average session length
- Generate ordered, human-readable recommendations

Tie order:
    Hours and weekdays with equal values keep the order in which they were
    first met while visiting sessions in store order (created_at, id
    ascending), so results are deterministic for a given session set.

Usage:
    from studyrecord.services.analytics import StudyPatternService

    service = StudyPatternService(store)
    recommendations = await service.generate_recommendations(owner_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from studyrecord.enums.analytics import RecommendationType, Weekday
from studyrecord.models.analytics import (
    HourlyStudyTime,
    StudyRecommendation,
    StudySessionRecord,
    WeekdayStudyAverage,
)
from studyrecord.services.analytics.periods import to_local

if TYPE_CHECKING:
    from studyrecord.services.store import SessionStore

logger = logging.getLogger(__name__)

CONSISTENCY_TITLE = "Study consistently"
CONSISTENCY_DESCRIPTION = (
    "Studying at the same time every day is the most effective way to build "
    "long-term memory. Even 30 minutes a day makes a difference."
)


def consistency_recommendation() -> StudyRecommendation:
    """Fresh copy of the data-independent consistency suggestion."""
    return StudyRecommendation(
        title=CONSISTENCY_TITLE,
        description=CONSISTENCY_DESCRIPTION,
        type=RecommendationType.CONSISTENCY,
    )


def group_by_hour(sessions: Sequence[StudySessionRecord]) -> list[HourlyStudyTime]:
    """
    Sum study minutes per hour of day, largest total first.

    Args:
        sessions: Sessions in store order.

    Returns:
        list[HourlyStudyTime]: Only hours that have sessions.
    """
    minutes_by_hour: dict[int, int] = {}
    for session in sessions:
        hour = to_local(session.created_at).hour
        minutes_by_hour[hour] = minutes_by_hour.get(hour, 0) + session.duration_minutes

    ranked = sorted(minutes_by_hour.items(), key=lambda item: item[1], reverse=True)
    return [HourlyStudyTime(hour=hour, total_study_time=total) for hour, total in ranked]


def average_by_weekday(
    sessions: Sequence[StudySessionRecord],
) -> list[WeekdayStudyAverage]:
    """
    Average session length per weekday, largest average first.

    Args:
        sessions: Sessions in store order.

    Returns:
        list[WeekdayStudyAverage]: Only weekdays that have sessions.
    """
    durations_by_day: dict[Weekday, list[int]] = {}
    for session in sessions:
        weekday = Weekday.from_index(to_local(session.created_at).weekday())
        durations_by_day.setdefault(weekday, []).append(session.duration_minutes)

    averages = [
        WeekdayStudyAverage(
            weekday=weekday,
            average_session_time=sum(durations) / len(durations),
            record_count=len(durations),
        )
        for weekday, durations in durations_by_day.items()
    ]
    return sorted(averages, key=lambda a: a.average_session_time, reverse=True)


def build_recommendations(
    best_hours: Sequence[HourlyStudyTime],
    best_days: Sequence[WeekdayStudyAverage],
    popular_tags: Sequence[str],
) -> list[StudyRecommendation]:
    """
    Turn pattern analysis results into ordered study suggestions.

    Order: best hour, best weekday, topic pairing, consistency. The first
    three are skipped when their input is too sparse; the consistency
    suggestion is always last.

    Args:
        best_hours: Output of group_by_hour.
        best_days: Output of average_by_weekday.
        popular_tags: Tags ranked by frequency, most used first.

    Returns:
        list[StudyRecommendation]: Between 1 and 4 suggestions.
    """
    recommendations: list[StudyRecommendation] = []

    if best_hours:
        hour = best_hours[0].hour
        recommendations.append(
            StudyRecommendation(
                title="Best study time",
                description=(
                    f"Your records show the most study time at {hour:02d}:00. "
                    "Try scheduling important study sessions around this hour."
                ),
                type=RecommendationType.TIME,
            )
        )

    if best_days:
        day = best_days[0].weekday.label
        recommendations.append(
            StudyRecommendation(
                title="Best study day",
                description=(
                    f"You tend to study longest on {day}. "
                    f"Plan your most demanding work for {day}."
                ),
                type=RecommendationType.DAY,
            )
        )

    if len(popular_tags) >= 2:
        first, second = popular_tags[0], popular_tags[1]
        recommendations.append(
            StudyRecommendation(
                title="Related topics",
                description=(
                    f"You have been studying '{first}' and '{second}' the most. "
                    "Studying these topics together may be more effective."
                ),
                type=RecommendationType.TOPIC,
            )
        )

    recommendations.append(consistency_recommendation())
    return recommendations


class StudyPatternService:
    """
    Service for study pattern analysis and recommendations.
    """

    def __init__(self, store: SessionStore):
        """
        Initialize the pattern service.

        Args:
            store: Session store to read study sessions from.
        """
        self.store = store

    async def analyze_best_hours(self, owner_id: int) -> list[HourlyStudyTime]:
        """Rank the user's hours of day by total study minutes."""
        sessions = await self.store.all_sessions(owner_id)
        return group_by_hour(sessions)

    async def analyze_best_days(self, owner_id: int) -> list[WeekdayStudyAverage]:
        """Rank the user's weekdays by average session length."""
        sessions = await self.store.all_sessions(owner_id)
        return average_by_weekday(sessions)

    async def generate_recommendations(
        self, owner_id: int
    ) -> list[StudyRecommendation]:
        """
        Generate study recommendations from the user's patterns.

        Args:
            owner_id: Owner of the sessions.

        Returns:
            list[StudyRecommendation]: Ordered suggestions, never empty.
        """
        best_hours = await self.analyze_best_hours(owner_id)
        best_days = await self.analyze_best_days(owner_id)
        popular_tags = await self.store.distinct_tag_frequencies(owner_id)

        recommendations = build_recommendations(best_hours, best_days, popular_tags)
        logger.info(
            f"Generated {len(recommendations)} recommendations for user {owner_id}"
        )
        return recommendations
