"""
SQLAlchemy Database Models

Tables:
- users: Account owners of study sessions (only the id is used here)
- study_sessions: Timestamped, duration-bearing study records with tags

ARCHITECTURE NOTE:
    These rows are written by the account, CRUD and timer features. The
    analytics services only read them, through
    studyrecord.services.store.SqlSessionStore, which converts each row to
    the pydantic StudySessionRecord in studyrecord/models/analytics.py.
"""

from datetime import datetime, timezone
from typing import List

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studyrecord.db.base import Base


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


class User(Base):
    """
    Owner of study sessions.

    Attributes:
        id: Primary key, auto-incrementing integer identifier.
        username: Unique login name.
        created_at: Account creation time.
        study_sessions: All sessions recorded by this user.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(100), unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now
    )

    study_sessions: Mapped[List["StudySession"]] = relationship(
        back_populates="owner", cascade="all, delete-orphan"
    )


class StudySession(Base):
    """
    One recorded unit of study activity.

    Attributes:
        id: Primary key, auto-incrementing integer identifier.
        owner_id: FK to the user who recorded the session.
        created_at: When the session was recorded. Immutable; this is the
            timestamp every analytics window is matched against.
        duration_minutes: Study time in whole minutes (>= 1).
        tags: List of tag strings. Order is kept but carries no meaning.
    """

    __tablename__ = "study_sessions"
    __table_args__ = (
        Index("ix_study_sessions_owner_created", "owner_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now
    )
    duration_minutes: Mapped[int] = mapped_column(Integer)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list)

    owner: Mapped["User"] = relationship(back_populates="study_sessions")
