"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist and
inserts the seed rows into empty tables.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import sqlite3
from typing import Any, Mapping, Sequence

from config import RULE_WIDTH
from db.errors import TableSetupError
from utils.logger import get_logger

logger = get_logger(__name__)

# Users table: demo people, email must be unique
USERS_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT NOT NULL,
    email       TEXT UNIQUE NOT NULL,
    age         INTEGER,
    created_at  TEXT DEFAULT CURRENT_TIMESTAMP
);
"""

# Products table: stock has no floor and may go negative
PRODUCTS_SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT NOT NULL,
    price       REAL NOT NULL,
    category    TEXT,
    stock       INTEGER
);
"""

SEED_USERS: list[dict] = [
    {"name": "Alice Johnson", "email": "alice@example.com", "age": 28},
    {"name": "Bob Smith", "email": "bob@example.com", "age": 32},
    {"name": "Carol Davis", "email": "carol@example.com", "age": 25},
]

SEED_PRODUCTS: list[dict] = [
    {"name": "Coffee Mug", "price": 12.99, "category": "Kitchen", "stock": 50},
    {"name": "Book", "price": 24.99, "category": "Education", "stock": 100},
    {"name": "Laptop Stand", "price": 45.00, "category": "Office", "stock": 25},
]


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def ensure_table(conn: sqlite3.Connection, name: str, schema: str) -> None:
    """
    Execute a CREATE TABLE IF NOT EXISTS statement.
    Safe to call multiple times.

    Raises:
        TableSetupError: If the DDL fails.
    """
    try:
        conn.execute(schema)
        logger.info(f"Table '{name}' is ready.")
    except sqlite3.Error as e:
        logger.error(f"Failed to create {name} table: {e}")
        raise TableSetupError(f"failed to create {name} table: {e}") from e


def seed_if_empty(
    conn: sqlite3.Connection, table: str, rows: Sequence[Mapping[str, Any]]
) -> bool:
    """
    Insert `rows` into `table` only if the table has no rows at all.

    The gate is table-wide: any existing row, seeded or not, skips seeding.
    All rows are inserted in one transaction.

    Returns:
        True if the seed rows were inserted.

    Raises:
        TableSetupError: If counting or inserting fails.
    """
    try:
        count = conn.execute(f"SELECT COUNT(*) FROM {_quote(table)}").fetchone()[0]
    except sqlite3.Error as e:
        logger.error(f"Failed to check {table} count: {e}")
        raise TableSetupError(f"failed to check {table} count: {e}") from e

    if count or not rows:
        return False

    columns = list(rows[0].keys())
    sql = (
        f"INSERT INTO {_quote(table)} ({', '.join(_quote(c) for c in columns)}) "
        f"VALUES ({', '.join('?' for _ in columns)})"
    )
    current = None
    try:
        conn.execute("BEGIN")
        for row in rows:
            current = row
            conn.execute(sql, tuple(row[c] for c in columns))
        conn.execute("COMMIT")
    except (sqlite3.Error, KeyError) as e:
        if conn.in_transaction:
            conn.execute("ROLLBACK")
        label = current.get("name", current) if current else table
        logger.error(f"Failed to insert initial {table} row {label}: {e}")
        raise TableSetupError(f"failed to insert initial {table} row {label}: {e}") from e

    logger.info(f"Seeded {len(rows)} rows into {table}")
    return True


def create_tables(conn: sqlite3.Connection) -> None:
    """
    Create the users and products tables and seed them when empty.
    Safe to call on every startup.
    """
    print("Creating tables if they don't exist...")
    print("-" * RULE_WIDTH)

    ensure_table(conn, "users", USERS_SCHEMA)
    ensure_table(conn, "products", PRODUCTS_SCHEMA)

    if seed_if_empty(conn, "users", SEED_USERS):
        print("Inserted initial users")
    if seed_if_empty(conn, "products", SEED_PRODUCTS):
        print("Inserted initial products")

    print("Tables ready!")
    print()


if __name__ == "__main__":
    from db.connection import open_database
    with open_database() as conn:
        create_tables(conn)
