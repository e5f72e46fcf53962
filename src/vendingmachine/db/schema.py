"""SQLite schema for the vending machine store.

Two tables: ``change`` holds coin and note stock by denomination, and
``items`` holds product stock by name. Both keys are unique.
"""

import sqlite3

CHANGE_TABLE = "change"
ITEMS_TABLE = "items"

TABLES = (CHANGE_TABLE, ITEMS_TABLE)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS "change" (
    denomination TEXT NOT NULL UNIQUE,
    quantity INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS items (
    name TEXT NOT NULL UNIQUE,
    quantity INTEGER NOT NULL
);
"""


def create_all_tables(conn: sqlite3.Connection) -> None:
    """Create both tables if they do not already exist.

    Args:
        conn: SQLite connection
    """
    conn.executescript(SCHEMA_SQL)
    conn.commit()


def get_table_counts(conn: sqlite3.Connection) -> dict[str, int]:
    """Get row counts for all tables.

    Args:
        conn: SQLite connection

    Returns:
        Dictionary mapping table name to row count
    """
    counts = {}
    cursor = conn.cursor()
    for table in TABLES:
        cursor.execute(f'SELECT COUNT(*) FROM "{table}"')  # noqa: S608
        counts[table] = cursor.fetchone()[0]
    return counts
