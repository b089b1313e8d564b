"""
BirdRef Backend — SQLAlchemy Bird Store
=========================================

What:  BirdStore implementation on top of the pooled async SQLAlchemy engine.
How:   Each execute() checks a session out of the session factory, runs a
       single `text()` statement with named bind parameters inside its own
       transaction, materializes any returned rows, and commits.
Who:   Injected into the bird routes through the `get_bird_store` dependency.

Error translation:
    SQLAlchemy wraps driver exceptions (asyncpg, aiosqlite) in DBAPIError
    subclasses. The human-readable detail is looked up on the wrapped driver
    error (asyncpg attaches `.detail`, e.g. "Key (formatted_com_name)=(X)
    already exists.") and falls back to the driver message. The result is
    raised as StoreRejectionError.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from birdref.database import async_session_factory
from birdref.exceptions import StoreRejectionError
from birdref.services.store_base import BirdStore, QueryResult

logger = logging.getLogger(__name__)


def driver_detail(exc: BaseException) -> str:
    """
    Extract the most specific human-readable description of a store failure.

    Lookup order: `.detail` on the DBAPI error, `.detail` on the driver
    exception it was raised from, then the first line of the DBAPI message.
    """
    orig = getattr(exc, "orig", None) or exc
    for candidate in (orig, orig.__cause__):
        detail = getattr(candidate, "detail", None)
        if detail:
            return str(detail)
    message = str(orig).strip()
    return message.splitlines()[0] if message else type(orig).__name__


def classify_failure(exc: BaseException) -> str:
    """Coarse failure kind used for log severity: connectivity, constraint, or data."""
    if isinstance(exc, (OperationalError, InterfaceError, OSError)):
        return "connectivity"
    if isinstance(exc, IntegrityError):
        return "constraint"
    return "data"


class SqlAlchemyBirdStore(BirdStore):
    """
    Executes bird statements through an async session factory.

    The factory owns the connection pool; this class holds no other state and
    is safe to share across concurrent requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def execute(
        self, sql: str, params: Optional[Dict[str, Any]] = None
    ) -> QueryResult:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(text(sql), params or {})
                    # Rows are read before the transaction commits
                    if result.returns_rows:
                        rows = [dict(row) for row in result.mappings().all()]
                        return QueryResult(rowcount=len(rows), rows=rows)
                    return QueryResult(rowcount=max(result.rowcount, 0))
        except (SQLAlchemyError, OSError) as exc:
            raise self._reject(exc) from exc

    async def health_check(self) -> bool:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Health check: database unreachable: %s", str(e))
            return False

    @staticmethod
    def _reject(exc: BaseException) -> StoreRejectionError:
        """Translate a driver failure into the application exception and log it."""
        kind = classify_failure(exc)
        detail = driver_detail(exc)
        level = logging.ERROR if kind == "connectivity" else logging.WARNING
        logger.log(level, "Store rejected statement (%s): %s", kind, detail)
        return StoreRejectionError(
            detail=detail,
            kind=kind,
            context={"error_type": type(exc).__name__},
        )


# ── Singleton Instance ────────────────────────────────────────────────────
bird_store = SqlAlchemyBirdStore(async_session_factory)


def get_bird_store() -> BirdStore:
    """FastAPI dependency returning the process-wide bird store."""
    return bird_store
