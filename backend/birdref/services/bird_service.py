"""
BirdRef Backend — Bird Service
================================

What:  Builds the parameterized SQL for each bird operation, runs it against
       a BirdStore, and maps the outcome to response models or exceptions.
Who:   Called by the route handlers in routes/birds.py.
When:  Once per request; every operation issues at most one statement.

Statement Inventory:
    list_birds          SELECT * FROM birds
    get_birds_by_names  SELECT * FROM birds WHERE formatted_com_name IN (...)
    update_bird         UPDATE birds SET ... WHERE formatted_com_name = ... RETURNING *
    create_bird         INSERT INTO birds (...) VALUES (...) RETURNING *
    delete_birds        DELETE FROM birds WHERE formatted_com_name IN (...)

Outcome Mapping:
    StoreRejectionError propagates unchanged (→ 400 "Error: <detail>"), except
    on list_birds where it becomes DatabaseError (→ 500, generic message).
    Zero rows on list/update/delete raises NotFoundError (→ 404).

BirdService is stateless: the store is passed into every call.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from birdref.exceptions import DatabaseError, NotFoundError, StoreRejectionError
from birdref.models.bird import BIRD_COLUMNS, KEY_COLUMN, MUTABLE_COLUMNS
from birdref.schemas.bird import Bird, BirdUpdate, DeleteResponse
from birdref.services.store_base import BirdStore, QueryResult

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# SQL Construction
# ══════════════════════════════════════════════════════════════════════════

def build_placeholders(values: Sequence[Any], prefix: str = "name") -> Tuple[str, Dict[str, Any]]:
    """
    Build a placeholder list for an `IN (...)` clause.

    One named bind marker per value, in input order:
        ["A", "B"] → (":name_0, :name_1", {"name_0": "A", "name_1": "B"})

    An empty sequence yields an empty placeholder string; callers must not
    embed that in SQL (`IN ()` is invalid in most dialects).
    """
    params = {f"{prefix}_{index}": value for index, value in enumerate(values)}
    placeholders = ", ".join(f":{key}" for key in params)
    return placeholders, params


SELECT_ALL_SQL = "SELECT * FROM birds"

INSERT_SQL = (
    f"INSERT INTO birds ({', '.join(BIRD_COLUMNS)}) "
    f"VALUES ({', '.join(':' + column for column in BIRD_COLUMNS)}) "
    "RETURNING *"
)

UPDATE_SQL = (
    "UPDATE birds SET "
    + ", ".join(f"{column} = :{column}" for column in MUTABLE_COLUMNS)
    + f" WHERE {KEY_COLUMN} = :{KEY_COLUMN} RETURNING *"
)


def select_by_names_sql(placeholders: str) -> str:
    return f"SELECT * FROM birds WHERE {KEY_COLUMN} IN ({placeholders})"


def delete_by_names_sql(placeholders: str) -> str:
    return f"DELETE FROM birds WHERE {KEY_COLUMN} IN ({placeholders})"


def _to_birds(result: QueryResult) -> List[Bird]:
    return [Bird.model_validate(row) for row in result.rows]


# ══════════════════════════════════════════════════════════════════════════
# Service
# ══════════════════════════════════════════════════════════════════════════

class BirdService:
    """
    Stateless translation between bird operations and SQL statements.

    Error Handling Strategy:
        The store raises StoreRejectionError for every driver failure. This
        service lets it propagate, except on the unconditional list where a
        failure is a server problem and is reported without detail.
    """

    async def list_birds(self, store: BirdStore) -> List[Bird]:
        """
        Return every bird in the table.

        Raises:
            NotFoundError: The table is empty (→ 404)
            DatabaseError: The query failed (→ 500; detail logged only)
        """
        try:
            result = await store.execute(SELECT_ALL_SQL)
        except StoreRejectionError as e:
            logger.error("DB Query error on GET all: %s", e.detail, exc_info=True)
            raise DatabaseError(context={"detail": e.detail, "kind": e.kind}) from e

        if result.rowcount < 1:
            raise NotFoundError(
                message="No birds were found in the database",
                resource="birds",
            )
        return _to_birds(result)

    async def get_birds_by_names(self, store: BirdStore, names: Sequence[str]) -> List[Bird]:
        """
        Return the birds whose key is in `names`.

        Names with no matching row are omitted from the result rather than
        treated as errors; callers pass candidate names from external
        catalogs that may be larger than this dataset. An empty `names`
        returns an empty list without querying.
        """
        if not names:
            return []

        placeholders, params = build_placeholders(names)
        result = await store.execute(select_by_names_sql(placeholders), params)
        return _to_birds(result)

    async def update_bird(
        self, store: BirdStore, formatted_com_name: str, changes: BirdUpdate
    ) -> Bird:
        """
        Overwrite every non-key column of one bird.

        Fields absent from `changes` are written as NULL.

        Raises:
            NotFoundError: No bird has this key (→ 404); nothing is inserted
            StoreRejectionError: e.g. NOT NULL violation on com_name (→ 400)
        """
        values = changes.model_dump()
        params = {column: values.get(column) for column in MUTABLE_COLUMNS}
        params[KEY_COLUMN] = formatted_com_name

        result = await store.execute(UPDATE_SQL, params)
        if result.rowcount < 1:
            raise NotFoundError(
                message="No bird found with the provided name.",
                resource="bird",
                context={"formatted_com_name": formatted_com_name},
            )
        return Bird.model_validate(result.rows[0])

    async def create_bird(self, store: BirdStore, bird: Bird) -> Bird:
        """
        Insert a new bird, key included.

        Uniqueness is enforced by the database only: a duplicate key surfaces
        as StoreRejectionError (→ 400), never as an upsert.
        """
        values = bird.model_dump()
        params = {column: values.get(column) for column in BIRD_COLUMNS}

        result = await store.execute(INSERT_SQL, params)
        logger.info("Bird created: %s", bird.formatted_com_name)
        return Bird.model_validate(result.rows[0])

    async def delete_birds(self, store: BirdStore, names: Sequence[str]) -> DeleteResponse:
        """
        Delete every bird whose key is in `names`.

        The response echoes the requested names verbatim, whether or not each
        one existed. An empty `names` deletes nothing and is reported as 404
        without querying.

        Raises:
            NotFoundError: Zero rows deleted (→ 404, echo included)
        """
        echo = list(names)
        deleted = 0
        if echo:
            placeholders, params = build_placeholders(echo)
            result = await store.execute(delete_by_names_sql(placeholders), params)
            deleted = result.rowcount

        if deleted < 1:
            raise NotFoundError(
                message="No birds found with the provided names.",
                resource="birds",
                echo={"birdNames": echo},
            )

        logger.info("Deleted %d bird(s) of %d requested", deleted, len(echo))
        return DeleteResponse(
            message=f"{deleted} bird(s) deleted successfully.",
            bird_names=echo,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
bird_service = BirdService()
