"""Change and stock store for a vending machine."""

from vendingmachine.core.exceptions import (
    StoreNotInitializedError,
    UniqueConstraintViolation,
)
from vendingmachine.db.store import MachineStore, SeedResult

__version__ = "0.1.0"

__all__ = [
    "MachineStore",
    "SeedResult",
    "StoreNotInitializedError",
    "UniqueConstraintViolation",
]
