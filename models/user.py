"""
models/user.py
--------------
Domain model for rows of the users table.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a single user.

    Attributes:
        id: Database primary key.
        name: Display name (not unique).
        email: Unique email address.
        age: Age in years, or None when the column is NULL.
        created_at: Insert timestamp as stored by SQLite.
    """
    id: int
    name: str
    email: str
    age: Optional[int] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "User":
        """Build a User from a sqlite3.Row of the users table."""
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            age=row["age"],
            created_at=row["created_at"],
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.email})"
