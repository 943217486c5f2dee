"""
Study Session Store

The only boundary the analytics services read data through.

SessionStore describes the four read operations the services need.
SqlSessionStore implements them on the study_sessions table.

Ordering:
    Every operation returns sessions ordered by (created_at, id) ascending.
    Tag ranking and pattern tie-breaks rely on this order.

Consistency:
    Each operation is a single SELECT. Composed statistics (a month with its
    weeks, a year with its months) issue several operations, so a caller
    that needs one point-in-time view must run them inside one
    REPEATABLE READ transaction; the store does not enforce it.

Usage:
    from studyrecord.services.store import SqlSessionStore

    store = SqlSessionStore(db)
    sessions = await store.sessions_in_range(owner_id, start, end)
"""

import logging
from datetime import datetime
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studyrecord.db.models import StudySession, User
from studyrecord.middleware.error_handling import NotFoundError
from studyrecord.models.analytics import StudySessionRecord
from studyrecord.services.analytics.tag_ranking import rank_tags

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Read-only access to a user's study sessions."""

    async def sessions_in_range(
        self, owner_id: int, start: datetime, end: datetime
    ) -> list[StudySessionRecord]:
        """Sessions with start <= created_at < end."""
        ...

    async def all_sessions(self, owner_id: int) -> list[StudySessionRecord]:
        """Every session of the user."""
        ...

    async def sessions_with_tag(
        self, owner_id: int, tag: str
    ) -> list[StudySessionRecord]:
        """Every session of the user whose tags contain `tag`."""
        ...

    async def distinct_tag_frequencies(self, owner_id: int) -> list[str]:
        """Every tag the user has used, most frequent first."""
        ...


class SqlSessionStore:
    """
    SessionStore backed by the SQLAlchemy study_sessions table.

    Raises NotFoundError from every operation when the owner does not exist.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the store.

        Args:
            db: SQLAlchemy async database session.
        """
        self.db = db

    async def sessions_in_range(
        self, owner_id: int, start: datetime, end: datetime
    ) -> list[StudySessionRecord]:
        await self._ensure_owner(owner_id)
        query = (
            select(StudySession)
            .where(
                StudySession.owner_id == owner_id,
                StudySession.created_at >= start,
                StudySession.created_at < end,
            )
            .order_by(StudySession.created_at, StudySession.id)
        )
        return await self._fetch(query)

    async def all_sessions(self, owner_id: int) -> list[StudySessionRecord]:
        await self._ensure_owner(owner_id)
        query = (
            select(StudySession)
            .where(StudySession.owner_id == owner_id)
            .order_by(StudySession.created_at, StudySession.id)
        )
        return await self._fetch(query)

    async def sessions_with_tag(
        self, owner_id: int, tag: str
    ) -> list[StudySessionRecord]:
        # Tags are a JSON column, so membership is checked in Python
        sessions = await self.all_sessions(owner_id)
        return [s for s in sessions if tag in s.tags]

    async def distinct_tag_frequencies(self, owner_id: int) -> list[str]:
        sessions = await self.all_sessions(owner_id)
        return rank_tags(sessions)

    async def _ensure_owner(self, owner_id: int) -> None:
        """
        Check that the owner exists.

        Raises:
            NotFoundError: If no user has this id.
        """
        result = await self.db.execute(select(User.id).where(User.id == owner_id))
        if result.scalar_one_or_none() is None:
            logger.warning(f"Session lookup for unknown user {owner_id}")
            raise NotFoundError(
                f"User {owner_id} not found", details={"owner_id": owner_id}
            )

    async def _fetch(self, query) -> list[StudySessionRecord]:
        result = await self.db.execute(query)
        return [
            StudySessionRecord.model_validate(row) for row in result.scalars().all()
        ]
