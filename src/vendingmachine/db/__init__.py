"""Database layer for the vending machine store."""

from vendingmachine.db.connection import create_database_file, get_connection
from vendingmachine.db.schema import create_all_tables
from vendingmachine.db.store import MachineStore, SeedResult

__all__ = [
    "get_connection",
    "create_database_file",
    "create_all_tables",
    "MachineStore",
    "SeedResult",
]
