"""Base repository for a single keyed table.

A repository is a live handle: every read goes to the database, so it
always reflects the current persisted state rather than a snapshot.
Only insert and read operations are exposed.
"""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, TypeVar

import structlog

from vendingmachine.core.exceptions import UniqueConstraintViolation

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class TableRepository(ABC, Generic[T]):
    """Abstract query handle over one table with a unique text key.

    Subclasses set ``table`` and ``key_column`` and implement the
    row/entity conversions.
    """

    table: str
    key_column: str

    def __init__(self, connection: sqlite3.Connection) -> None:
        """Initialize repository with database connection.

        Args:
            connection: SQLite connection
        """
        self._conn = connection
        self._conn.row_factory = sqlite3.Row

    @abstractmethod
    def _row_to_entity(self, row: sqlite3.Row) -> T:
        """Convert a database row to an entity."""

    @abstractmethod
    def _entity_to_params(self, entity: T) -> dict[str, Any]:
        """Convert an entity to named insert parameters."""

    def _entity_key(self, entity: T) -> str:
        return str(self._entity_to_params(entity)[self.key_column])

    def _insert_sql(self, skip_existing: bool) -> str:
        verb = "INSERT OR IGNORE" if skip_existing else "INSERT"
        return (
            f'{verb} INTO "{self.table}" ({self.key_column}, quantity) '
            f"VALUES (:{self.key_column}, :quantity)"
        )

    def insert(self, entity: T) -> T:
        """Insert a single entity.

        Args:
            entity: Entity to insert

        Returns:
            The inserted entity

        Raises:
            UniqueConstraintViolation: If the key already exists
        """
        self.insert_many([entity])
        return entity

    def insert_many(self, entities: Iterable[T], skip_existing: bool = False) -> int:
        """Insert entities in a single transaction.

        Args:
            entities: Entities to insert, in order
            skip_existing: Leave rows whose key already exists untouched
                instead of failing

        Returns:
            Number of rows actually inserted

        Raises:
            UniqueConstraintViolation: If a key already exists and
                skip_existing is False. Nothing from the batch is kept.
        """
        sql = self._insert_sql(skip_existing)
        cursor = self._conn.cursor()
        inserted = 0
        for entity in entities:
            try:
                cursor.execute(sql, self._entity_to_params(entity))
            except sqlite3.IntegrityError as e:
                self._conn.rollback()
                if "UNIQUE constraint failed" not in str(e):
                    raise
                key = self._entity_key(entity)
                logger.warning("repository.duplicate_key", table=self.table, key=key)
                raise UniqueConstraintViolation(self.table, key) from e
            except Exception:
                self._conn.rollback()
                raise
            inserted += cursor.rowcount
        self._conn.commit()
        return inserted

    def get(self, key: str) -> T | None:
        """Get a row by its unique key.

        Args:
            key: Key value

        Returns:
            Entity if found, None otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute(
            f'SELECT * FROM "{self.table}" WHERE {self.key_column} = ?',  # noqa: S608
            (key,),
        )
        row = cursor.fetchone()
        return self._row_to_entity(row) if row else None

    def get_all(self) -> list[T]:
        """Get every row in insertion order.

        Returns:
            List of entities
        """
        cursor = self._conn.cursor()
        cursor.execute(f'SELECT * FROM "{self.table}" ORDER BY rowid')  # noqa: S608
        return [self._row_to_entity(row) for row in cursor.fetchall()]

    def count(self) -> int:
        """Count rows in the table."""
        cursor = self._conn.cursor()
        cursor.execute(f'SELECT COUNT(*) FROM "{self.table}"')  # noqa: S608
        return cursor.fetchone()[0]

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())

    def __len__(self) -> int:
        return self.count()
