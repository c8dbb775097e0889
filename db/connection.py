"""
db/connection.py
----------------
Manages the single SQLite connection owned by the demo run.

The connection is opened in autocommit mode, so every multi-statement
unit of work has to go through `transaction()`.
"""

import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional

from config import DB_PATH
from db.errors import DatabaseConnectionError, TransactionError
from utils.logger import get_logger

logger = get_logger(__name__)


def resolve_db_path(raw: Optional[str] = None) -> str:
    """
    Turn the configured database path into an absolute path.

    Args:
        raw: Path to resolve. Defaults to ``config.DB_PATH``.

    Raises:
        DatabaseConnectionError: If the path is empty or cannot be resolved.
    """
    path = DB_PATH if raw is None else raw
    if not path or not path.strip():
        raise DatabaseConnectionError("Database path is empty")
    try:
        return os.path.abspath(path)
    except (OSError, ValueError) as e:
        raise DatabaseConnectionError(f"Cannot resolve database path {path!r}: {e}") from e


def connect(path: str) -> sqlite3.Connection:
    """
    Open a connection to the SQLite file at `path`.

    Raises:
        DatabaseConnectionError: If SQLite cannot open the file.
    """
    try:
        conn = sqlite3.connect(path, isolation_level=None)
    except sqlite3.Error as e:
        logger.error(f"Failed to open database {path}: {e}")
        raise DatabaseConnectionError(f"Cannot open database {path}: {e}") from e
    conn.row_factory = sqlite3.Row
    logger.info(f"Opened database {path}")
    return conn


@contextmanager
def open_database(path: Optional[str] = None) -> Iterator[sqlite3.Connection]:
    """
    Acquire the demo's connection and release it on every exit path.

    Args:
        path: Database file. Defaults to the resolved ``config.DB_PATH``.

    Yields:
        An open sqlite3.Connection.
    """
    abs_path = resolve_db_path(path)
    conn = connect(abs_path)
    print("=== SQLite Python Demo ===")
    print(f"Connected to: {abs_path}\n")
    try:
        yield conn
    finally:
        conn.close()
        logger.info("Database connection closed.")
        print("\nDatabase connection closed.")


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """
    Run the enclosed statements as one atomic unit.

    Commits when the block finishes. If anything inside the block raises,
    the whole scope is rolled back and the failure is re-raised as a
    TransactionError.
    """
    try:
        conn.execute("BEGIN")
    except sqlite3.Error as e:
        raise TransactionError(f"Cannot begin transaction: {e}") from e
    try:
        yield conn
        conn.execute("COMMIT")
    except Exception as e:
        if conn.in_transaction:
            conn.execute("ROLLBACK")
        logger.error(f"Transaction rolled back: {e}")
        raise TransactionError(f"Transaction rolled back: {e}") from e
