"""
Tag Popularity and Per-Tag Statistics

Ranks tags by how many sessions carry them and summarizes the sessions
behind a single tag.

Ranking order:
    Tags are counted while visiting sessions in the order the session store
    returns them (created_at, id ascending). The result is sorted by count
    descending; equal counts keep the order in which each tag was first
    seen. Ranking never depends on hash order or on tag spelling.

Usage:
    from studyrecord.services.analytics.tag_ranking import TagStatisticsService, rank_tags

    top_five = rank_tags(sessions, limit=5)
    stats = await TagStatisticsService(store).get_tag_stats(owner_id, "python")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from studyrecord.models.analytics import StudySessionRecord, TagStats
from studyrecord.services.analytics.periods import to_local_date

if TYPE_CHECKING:
    from studyrecord.services.store import SessionStore

logger = logging.getLogger(__name__)


def session_tags(session: StudySessionRecord) -> list[str]:
    """Tags of one session with duplicates removed, order kept."""
    return list(dict.fromkeys(session.tags))


def collect_tags(sessions: Iterable[StudySessionRecord]) -> list[str]:
    """Union of all session tags in first-seen order."""
    seen: dict[str, None] = {}
    for session in sessions:
        for tag in session.tags:
            seen.setdefault(tag, None)
    return list(seen)


def count_tags(sessions: Iterable[StudySessionRecord]) -> dict[str, int]:
    """
    Count how many sessions carry each tag.

    The returned dict iterates in first-seen order.
    """
    counts: dict[str, int] = {}
    for session in sessions:
        for tag in session_tags(session):
            counts[tag] = counts.get(tag, 0) + 1
    return counts


def rank_tags(
    sessions: Iterable[StudySessionRecord], limit: Optional[int] = None
) -> list[str]:
    """
    Rank tags by occurrence count, most frequent first.

    Args:
        sessions: Sessions in store order.
        limit: Maximum number of tags to return (None for all).

    Returns:
        list[str]: Tags sorted by (count desc, first-seen asc).
    """
    counts = count_tags(sessions)
    # sorted() is stable, so ties keep first-seen order
    ranked = sorted(counts, key=lambda tag: counts[tag], reverse=True)
    return ranked if limit is None else ranked[:limit]


class TagStatisticsService:
    """
    Service for lifetime statistics of a single tag.
    """

    def __init__(self, store: SessionStore):
        """
        Initialize the tag statistics service.

        Args:
            store: Session store to read study sessions from.
        """
        self.store = store

    async def get_tag_stats(self, owner_id: int, tag: str) -> TagStats:
        """
        Summarize every session of a user that carries `tag`.

        An unused tag yields zero totals and null dates, not an error.

        Args:
            owner_id: Owner of the sessions.
            tag: Exact tag to look up.

        Returns:
            TagStats with totals and first/last usage dates.
        """
        sessions = await self.store.sessions_with_tag(owner_id, tag)
        logger.debug(f"Tag '{tag}' for user {owner_id}: {len(sessions)} sessions")

        if not sessions:
            return TagStats(tag=tag)

        dates = [to_local_date(s.created_at) for s in sessions]
        return TagStats(
            tag=tag,
            total_study_time=sum(s.duration_minutes for s in sessions),
            record_count=len(sessions),
            first_used_date=min(dates),
            last_used_date=max(dates),
        )
