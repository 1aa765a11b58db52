"""
HackJudge – Async SQLAlchemy engine, session factory and declarative base.

SQLite (through aiosqlite) is the default store. Foreign keys are switched on
for every SQLite connection so scores and feedback cannot point at a team
that does not exist.
"""

from __future__ import annotations

from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from hackjudge.config import settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Emit ``PRAGMA foreign_keys=ON`` on each new SQLite connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def describe_database(url: str) -> str:
    """Database URL safe for log output (password masked)."""
    return make_url(url).render_as_string(hide_password=True)


# ── Engine ──
engine = create_async_engine(settings.DATABASE_URL, echo=settings.DEBUG)
enable_sqlite_foreign_keys(engine)

# ── Session factory ──
async_session = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Declarative base ──
class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


# ── Dependency for FastAPI routes ──
async def get_db() -> AsyncIterator[AsyncSession]:
    """Yield a session per request; commit on success, roll back on any error."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
