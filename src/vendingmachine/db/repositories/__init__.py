"""Query handles for the machine tables."""

from vendingmachine.db.repositories.base import TableRepository
from vendingmachine.db.repositories.change import ChangeRepository
from vendingmachine.db.repositories.items import ItemRepository

__all__ = [
    "TableRepository",
    "ChangeRepository",
    "ItemRepository",
]
