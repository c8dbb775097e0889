"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.
"""

from typing import Iterator, Optional

from models.user import User
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """Repository for CRUD operations on the users table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, name: str, email: str, age: Optional[int] = None) -> int:
        """
        Insert a new user.

        Returns:
            The id SQLite assigned to the new row.

        Raises:
            MutationError: On failure, e.g. a duplicate email.
        """
        cur = self._execute(
            "INSERT INTO users (name, email, age) VALUES (?, ?, ?)",
            (name, email, age),
        )
        logger.info(f"Added user '{name}' #{cur.lastrowid}")
        return int(cur.lastrowid)

    # ── READ ──────────────────────────────────────────────

    def iter_all(self, order_by_id: bool = False) -> Iterator[User]:
        """Yield every user, optionally in id order."""
        sql = "SELECT * FROM users"
        if order_by_id:
            sql += " ORDER BY id"
        return self._iter(sql, (), User.from_row)

    def iter_older_than(self, age: int) -> Iterator[User]:
        """Yield users whose age is known and strictly greater than `age`."""
        return self._iter("SELECT * FROM users WHERE age > ?", (age,), User.from_row)

    def get_by_name(self, name: str) -> list[User]:
        """Fetch every user with exactly this name, in id order."""
        return list(self._iter("SELECT * FROM users WHERE name = ? ORDER BY id", (name,), User.from_row))

    def count(self) -> int:
        return int(self._scalar("SELECT COUNT(*) FROM users"))

    def average_age(self) -> Optional[float]:
        """Average of the non-NULL ages, or None when there are none."""
        value = self._scalar("SELECT AVG(age) FROM users")
        return float(value) if value is not None else None

    def max_id(self) -> int:
        return int(self._scalar("SELECT COALESCE(MAX(id), 0) FROM users"))

    # ── UPDATE ────────────────────────────────────────────

    def update_age_by_name(self, name: str, age: Optional[int]) -> int:
        """
        Set the age of every user called `name`.

        Returns:
            Number of rows affected (0 is not an error).
        """
        cur = self._execute("UPDATE users SET age = ? WHERE name = ?", (age, name))
        return cur.rowcount

    # ── DELETE ────────────────────────────────────────────

    def delete_by_name(self, name: str) -> int:
        """
        Delete every user called `name`.

        Returns:
            Number of rows removed (0 is not an error).
        """
        cur = self._execute("DELETE FROM users WHERE name = ?", (name,))
        if cur.rowcount:
            logger.info(f"Deleted {cur.rowcount} user(s) named '{name}'")
        return cur.rowcount
