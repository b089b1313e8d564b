"""
BirdRef Backend — Database Engine & Session Management
========================================================

What:  Async SQLAlchemy engine, session factory, and declarative base.
How:   Creates one pooled async engine per process. The bird store checks a
       session out of `async_session_factory` for every statement it runs.
Who:   Used by the SQL store (services/sql_store.py) and the app lifespan.
When:  Engine is created at module import; sessions are created per-statement.

Connection Pooling Strategy:
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes (total max = 30)
    pool_pre_ping:     Validates connections before use
    pool_recycle=3600: Recycles connections every hour

    The pool is the only object shared between concurrent requests. It does
    its own checkout/return; request handlers never lock around it.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from birdref.config import settings


def _engine_options() -> Dict[str, Any]:
    """Engine keyword arguments derived from settings."""
    options: Dict[str, Any] = {
        # Echo SQL statements only when debugging
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=settings.db_pool_recycle,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: rows fetched before commit stay readable afterwards
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models registered here share one metadata object, which tests use to
    create the schema in a throwaway SQLite database.
    """
    pass


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
