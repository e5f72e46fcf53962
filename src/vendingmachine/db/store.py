"""Store initializer and accessor for the machine database.

``MachineStore`` is the single entry point: it refuses to start without a
database file, makes sure both tables exist, seeds the default stock on
request, and hands out live query handles for each table.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

import structlog

from vendingmachine.config.settings import Settings, get_settings
from vendingmachine.core.exceptions import UniqueConstraintViolation
from vendingmachine.db.connection import get_connection
from vendingmachine.db.repositories import ChangeRepository, ItemRepository
from vendingmachine.db.schema import create_all_tables, get_table_counts
from vendingmachine.db.seed import DEFAULT_CHANGE, DEFAULT_ITEMS

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SeedResult:
    """Rows inserted by a single seeding run."""

    change_inserted: int
    items_inserted: int

    @property
    def total(self) -> int:
        return self.change_inserted + self.items_inserted


class MachineStore:
    """Owns the connection to the machine database.

    Construction fails with StoreNotInitializedError when the database file
    is missing. Otherwise the connection is opened and both tables are
    created if absent, so the accessors return empty handles before seeding.
    """

    def __init__(
        self,
        db_path: Path | str | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        """Open the store.

        Args:
            db_path: Path to the database file. Defaults to the configured path.
            settings: Settings to use instead of the cached environment settings

        Raises:
            StoreNotInitializedError: If the database file does not exist
        """
        self._settings = settings or get_settings()
        self.db_path = Path(db_path) if db_path is not None else self._settings.db_path
        self._client = get_connection(self.db_path)
        try:
            create_all_tables(self._client)
        except Exception:
            self._client.close()
            raise
        logger.debug("store.opened", path=str(self.db_path))

    @property
    def client(self) -> sqlite3.Connection:
        """The underlying SQLite connection."""
        return self._client

    def seed_store(self, skip_existing: bool | None = None) -> SeedResult:
        """Create both tables if needed and insert the default rows.

        By default this may only succeed once per database: a second call
        raises UniqueConstraintViolation and leaves existing rows untouched.

        Args:
            skip_existing: Skip rows whose key already exists instead of
                failing. Defaults to the ``skip_existing_seed_rows`` setting.

        Returns:
            Number of rows inserted into each table

        Raises:
            UniqueConstraintViolation: If a default row already exists and
                skip_existing is off
        """
        if skip_existing is None:
            skip_existing = self._settings.skip_existing_seed_rows

        create_all_tables(self._client)

        try:
            change_inserted = self.change().insert_many(
                DEFAULT_CHANGE, skip_existing=skip_existing
            )
            items_inserted = self.items().insert_many(
                DEFAULT_ITEMS, skip_existing=skip_existing
            )
        except UniqueConstraintViolation as e:
            logger.error("store.seed_failed", path=str(self.db_path), table=e.table, key=e.key)
            raise

        result = SeedResult(change_inserted=change_inserted, items_inserted=items_inserted)
        logger.info(
            "store.seeded",
            path=str(self.db_path),
            change=result.change_inserted,
            items=result.items_inserted,
            skip_existing=skip_existing,
        )
        return result

    def change(self) -> ChangeRepository:
        """Query handle over the ``change`` table."""
        return ChangeRepository(self._client)

    def items(self) -> ItemRepository:
        """Query handle over the ``items`` table."""
        return ItemRepository(self._client)

    def table_counts(self) -> dict[str, int]:
        """Row counts for both tables."""
        return get_table_counts(self._client)

    def close(self) -> None:
        """Close the connection."""
        self._client.close()
        logger.debug("store.closed", path=str(self.db_path))

    def __enter__(self) -> MachineStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
