"""
repositories/base.py
--------------------
Shared plumbing for the table repositories: statement execution with
errors mapped onto the demo's error taxonomy.
"""

import sqlite3
from typing import Any, Callable, Iterator, Optional, TypeVar

from db.errors import MutationError, QueryError
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseRepository:
    """Holds the connection passed in by the caller; never opens one itself."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def _iter(self, sql: str, params: tuple, convert: Callable[[sqlite3.Row], T]) -> Iterator[T]:
        """
        Lazily yield converted rows of a SELECT.

        The cursor is consumed once, forward only. Failures while stepping
        through the result set are raised as QueryError too.
        """
        try:
            cur = self.conn.execute(sql, params)
            for row in cur:
                yield convert(row)
        except sqlite3.Error as e:
            logger.error(f"Query failed ({sql.strip()}): {e}")
            raise QueryError(f"query failed: {e}") from e

    def _scalar(self, sql: str, params: tuple = ()) -> Optional[Any]:
        """Run a single-value SELECT and return its first column (None for NULL)."""
        try:
            row = self.conn.execute(sql, params).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Query failed ({sql.strip()}): {e}")
            raise QueryError(f"query failed: {e}") from e
        return row[0] if row is not None else None

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Run an INSERT/UPDATE/DELETE and return the cursor."""
        try:
            return self.conn.execute(sql, params)
        except sqlite3.Error as e:
            logger.error(f"Statement failed ({sql.strip()}): {e}")
            raise MutationError(f"statement failed: {e}") from e
