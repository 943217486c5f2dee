"""
Database engine and sessions for the study record store.

The analytics API only reads, so sessions handed out by get_db are never
committed. Pool sizing comes from the `database` section of
config/default.yaml; missing keys fall back to POOL_DEFAULTS.

Usage:
    from studyrecord.db.base import get_db

    @router.get("/...")
    async def handler(db: AsyncSession = Depends(get_db)):
        ...
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from studyrecord.config import settings, yaml_config

POOL_DEFAULTS: dict[str, int] = {"pool_size": 5, "max_overflow": 10, "pool_timeout": 30}


def pool_options(config: dict[str, Any]) -> dict[str, int]:
    """Engine pool arguments from a loaded YAML config, defaults filled in."""
    section = config.get("database") or {}
    return {key: int(section.get(key, default)) for key, default in POOL_DEFAULTS.items()}


engine = create_async_engine(
    settings.POSTGRES_URL,
    echo=settings.DEBUG,
    **pool_options(yaml_config),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base of the users and study_sessions tables."""


# Registers the tables on Base.metadata, so it must follow Base
from studyrecord.db import models  # noqa: F401, E402


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a read-only database session for one request.

    Nothing is committed. The session is rolled back if the request fails
    and is always closed.
    """
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
