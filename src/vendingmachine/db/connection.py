"""SQLite database connection management."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from vendingmachine.core.exceptions import StoreNotInitializedError


def get_connection(db_path: Path | str) -> sqlite3.Connection:
    """Open a connection to an existing database file.

    The file is never created here; a missing file means the machine
    database has not been initialized.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection returning sqlite3.Row rows

    Raises:
        StoreNotInitializedError: If the file does not exist
    """
    db_path = Path(db_path)

    if not db_path.is_file():
        raise StoreNotInitializedError(db_path)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row

    # Optimize for reliability over speed
    conn.execute("PRAGMA synchronous = FULL")

    return conn


def create_database_file(db_path: Path | str) -> bool:
    """Create an empty database file if none exists.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        True if a new file was created, False if one was already present
    """
    db_path = Path(db_path)
    if db_path.exists():
        return False

    db_path.parent.mkdir(parents=True, exist_ok=True)
    db_path.touch()
    return True
