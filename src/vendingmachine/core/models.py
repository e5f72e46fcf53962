"""Domain models for the vending machine store.

Rows are plain frozen dataclasses; the database file owns the state and
these are read-only copies of it.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ChangeRow:
    """Stock of coins or notes for a single denomination."""

    denomination: str
    quantity: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"denomination": self.denomination, "quantity": self.quantity}

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> ChangeRow:
        """Create from a database row."""
        return cls(denomination=row["denomination"], quantity=row["quantity"])


@dataclass(frozen=True)
class ItemRow:
    """Stock count for a single item."""

    name: str
    quantity: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "quantity": self.quantity}

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> ItemRow:
        """Create from a database row."""
        return cls(name=row["name"], quantity=row["quantity"])
