"""Repository for ChangeRow entities."""

from __future__ import annotations

import sqlite3
from typing import Any

from vendingmachine.core.models import ChangeRow
from vendingmachine.db.repositories.base import TableRepository
from vendingmachine.db.schema import CHANGE_TABLE


class ChangeRepository(TableRepository[ChangeRow]):
    """Query handle over the ``change`` table, keyed by denomination."""

    table = CHANGE_TABLE
    key_column = "denomination"

    def total_coins(self) -> int:
        """Sum of quantities across all denominations."""
        cursor = self._conn.cursor()
        cursor.execute(f'SELECT COALESCE(SUM(quantity), 0) FROM "{self.table}"')  # noqa: S608
        return cursor.fetchone()[0]

    def _row_to_entity(self, row: sqlite3.Row) -> ChangeRow:
        return ChangeRow.from_row(row)

    def _entity_to_params(self, entity: ChangeRow) -> dict[str, Any]:
        return entity.to_dict()
