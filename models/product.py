"""
models/product.py
-----------------
Domain model for rows of the products table.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Product:
    """
    Represents a product in the catalogue.

    Attributes:
        id: Database primary key.
        name: Product name (not unique).
        price: Unit price in dollars.
        category: Optional category label.
        stock: Units in stock, or None when the column is NULL. No floor.
    """
    id: int
    name: str
    price: float
    category: Optional[str] = None
    stock: Optional[int] = None

    @classmethod
    def from_row(cls, row) -> "Product":
        """Build a Product from a sqlite3.Row of the products table."""
        return cls(
            id=row["id"],
            name=row["name"],
            price=float(row["price"]),
            category=row["category"],
            stock=row["stock"],
        )

    def __str__(self) -> str:
        return f"{self.name} - ${self.price:.2f}"
