"""Repository for ItemRow entities."""

from __future__ import annotations

import sqlite3
from typing import Any

from vendingmachine.core.models import ItemRow
from vendingmachine.db.repositories.base import TableRepository
from vendingmachine.db.schema import ITEMS_TABLE


class ItemRepository(TableRepository[ItemRow]):
    """Query handle over the ``items`` table, keyed by name."""

    table = ITEMS_TABLE
    key_column = "name"

    def in_stock(self) -> list[ItemRow]:
        """Get items with a positive quantity.

        Returns:
            List of items ordered by insertion
        """
        cursor = self._conn.cursor()
        cursor.execute(
            f'SELECT * FROM "{self.table}" WHERE quantity > 0 ORDER BY rowid'  # noqa: S608
        )
        return [self._row_to_entity(row) for row in cursor.fetchall()]

    def _row_to_entity(self, row: sqlite3.Row) -> ItemRow:
        return ItemRow.from_row(row)

    def _entity_to_params(self, entity: ItemRow) -> dict[str, Any]:
        return entity.to_dict()
