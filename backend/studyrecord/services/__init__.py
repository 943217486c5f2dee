"""Services package: session store access and study analytics."""

from studyrecord.services.store import SessionStore, SqlSessionStore

__all__ = [
    "SessionStore",
    "SqlSessionStore",
]
