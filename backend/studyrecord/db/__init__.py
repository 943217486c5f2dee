"""Database package."""

from studyrecord.db.base import Base, async_session_maker, engine, get_db

__all__ = ["Base", "async_session_maker", "engine", "get_db"]
