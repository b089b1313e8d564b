"""
BirdRef Backend — Abstract Bird Store Interface
=================================================

What:  Abstract base class for the database collaborator of the bird service.
How:   Concrete stores inherit from BirdStore and implement execute() and
       health_check(). Routes receive a store through the `get_bird_store`
       dependency, so tests can substitute a store backed by SQLite or a fake.
Who:   Called by BirdService (one execute() per request) and the health route.

Contract:
    execute(sql, params) runs one parameterized statement in its own
    transaction and returns QueryResult(rowcount, rows). Any driver failure
    is raised as StoreRejectionError carrying the driver's detail string.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of one statement.

    rowcount: rows matched/affected; equals len(rows) for row-returning statements
    rows:     column name → value mappings, in the order the database returned them
    """
    rowcount: int
    rows: List[Dict[str, Any]] = field(default_factory=list)


class BirdStore(ABC):
    """
    Abstract interface for executing parameterized SQL against the bird table.

    Implementations:
        - SqlAlchemyBirdStore: pooled async SQLAlchemy engine (PostgreSQL/asyncpg
          in production, SQLite/aiosqlite in tests)
    """

    @abstractmethod
    async def execute(
        self, sql: str, params: Optional[Dict[str, Any]] = None
    ) -> QueryResult:
        """
        Run one statement with named bind parameters.

        Args:
            sql:    Statement text using `:name` placeholders.
            params: Values for the placeholders. Never interpolated into `sql`.

        Returns:
            QueryResult with the affected row count and any returned rows.

        Raises:
            StoreRejectionError: The database refused or failed the statement.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the database is reachable.

        Returns: True if a trivial query succeeds, False otherwise.
        """
        ...
