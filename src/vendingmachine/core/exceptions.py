"""Custom exceptions for the vendingmachine store."""

from __future__ import annotations

from pathlib import Path


class VendingMachineError(Exception):
    """Base exception for all vendingmachine errors."""

    pass


class StoreNotInitializedError(VendingMachineError):
    """Raised when the backing database file does not exist."""

    def __init__(self, db_path: Path | str) -> None:
        self.db_path = Path(db_path)
        super().__init__(f"DB not init-ed: no database file at {self.db_path}")


class UniqueConstraintViolation(VendingMachineError):
    """Raised when an insert collides with an existing unique key."""

    def __init__(self, table: str, key: str) -> None:
        self.table = table
        self.key = key
        super().__init__(f"Duplicate key '{key}' in table '{table}'")


class ConfigurationError(VendingMachineError):
    """Raised when configuration is invalid or missing."""

    pass
