"""Core domain models and exceptions."""

from vendingmachine.core.models import ChangeRow, ItemRow
from vendingmachine.core.exceptions import (
    ConfigurationError,
    StoreNotInitializedError,
    UniqueConstraintViolation,
    VendingMachineError,
)

__all__ = [
    # Models
    "ChangeRow",
    "ItemRow",
    # Exceptions
    "VendingMachineError",
    "StoreNotInitializedError",
    "UniqueConstraintViolation",
    "ConfigurationError",
]
