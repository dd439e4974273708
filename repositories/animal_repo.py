"""
repositories/animal_repo.py
---------------------------
Data access layer for catalog animals.
All SQL executed against the `animal` table goes through here.

The repository is handed a connection by its caller and never opens,
commits or closes it. Each operation runs exactly one statement in a
worker thread and awaits its completion.
"""

import asyncio
from typing import Any, Mapping, Sequence

from psycopg2 import extras

from models.animal import Animal
from repositories import animal_queries as queries
from repositories.animal_mapper import (
    animal_from_payload,
    animal_from_record,
    animals_from_record_set,
)
from repositories.animal_queries import Statement
from repositories.exceptions import AnimalNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class AnimalRepository:
    """Repository for reading and inserting rows of the animal table."""

    def __init__(self, connection):
        """
        Args:
            connection: An open psycopg2 connection (or any DB-API connection
                whose cursor() accepts `cursor_factory`) owned by the caller.
        """
        self._conn = connection

    # ── READ ──────────────────────────────────────────────

    async def read_by_key(self, key: str) -> Animal:
        """
        Fetch a single animal by its unique key.

        Raises:
            AnimalNotFoundError: If no row has this key.
        """
        rows = await self._fetch_all(queries.select_by_key(key))
        if not rows:
            raise AnimalNotFoundError(key)
        return animal_from_record(rows[0])

    async def read_by_kingdom(self, kingdom: str) -> list[Animal]:
        """Fetch every animal listed under `kingdom`."""
        rows = await self._fetch_all(queries.select_by_kingdom(kingdom))
        return animals_from_record_set(rows)

    async def read_by_search_terms(self, terms: Sequence[str]) -> list[Animal]:
        """
        Fetch animals matching any of `terms` in any searchable column.

        Raises:
            EmptyCriteriaError: If `terms` is empty (nothing is sent to the store).
        """
        rows = await self._fetch_all(queries.select_by_search_terms(terms))
        return animals_from_record_set(rows)

    async def read_all(self) -> list[Animal]:
        rows = await self._fetch_all(queries.select_all())
        return animals_from_record_set(rows)

    async def read_by_keys(self, keys: Sequence[str]) -> list[Animal]:
        """
        Fetch the animals stored under any of `keys`. Unknown keys are skipped.

        Raises:
            EmptyCriteriaError: If `keys` is empty (nothing is sent to the store).
        """
        rows = await self._fetch_all(queries.select_by_keys(keys))
        return animals_from_record_set(rows)

    # ── CREATE ────────────────────────────────────────────

    async def insert_from_payload(self, key: str, payload: Mapping[str, Any]) -> None:
        """
        Insert a new animal built from a request payload.

        Args:
            key: Unique catalog identifier for the new animal.
            payload: Request body (see animal_from_payload).
        """
        animal = animal_from_payload(key, payload)
        await self._run(queries.insert_animal(animal), fetch=False)
        logger.info(f"Inserted animal '{key}' ({animal.kingdom})")

    # ── HELPERS ───────────────────────────────────────────

    async def _fetch_all(self, statement: Statement) -> list[Mapping[str, Any]]:
        return await self._run(statement, fetch=True)

    async def _run(self, statement: Statement, fetch: bool) -> list[Mapping[str, Any]]:
        try:
            return await asyncio.to_thread(self._execute, statement, fetch)
        except Exception as e:
            logger.error(f"Animal query failed: {e}")
            raise

    def _execute(self, statement: Statement, fetch: bool) -> list[Mapping[str, Any]]:
        """Blocking part: run one statement on the caller's connection."""
        logger.debug(f"Executing: {statement.sql} params={statement.params!r}")
        with self._conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(statement.sql, statement.params)
            return cur.fetchall() if fetch else []
