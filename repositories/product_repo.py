"""
repositories/product_repo.py
-----------------------------
Data access layer for products.
All SQL queries related to the `products` table live here.
"""

from typing import Iterator, Optional

from models.product import Product
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ProductRepository(BaseRepository):
    """Repository for CRUD operations on the products table."""

    # ── CREATE ────────────────────────────────────────────

    def add(
        self,
        name: str,
        price: float,
        category: Optional[str] = None,
        stock: Optional[int] = None,
    ) -> int:
        """
        Insert a new product.

        Returns:
            The id SQLite assigned to the new row.
        """
        cur = self._execute(
            "INSERT INTO products (name, price, category, stock) VALUES (?, ?, ?, ?)",
            (name, price, category, stock),
        )
        logger.info(f"Added product '{name}' #{cur.lastrowid}")
        return int(cur.lastrowid)

    # ── READ ──────────────────────────────────────────────

    def iter_all(self, order_by_id: bool = False) -> Iterator[Product]:
        """Yield every product, optionally in id order."""
        sql = "SELECT * FROM products"
        if order_by_id:
            sql += " ORDER BY id"
        return self._iter(sql, (), Product.from_row)

    def iter_priced_above(self, price: float) -> Iterator[Product]:
        """Yield products strictly more expensive than `price`."""
        return self._iter("SELECT * FROM products WHERE price > ?", (price,), Product.from_row)

    def get_by_name(self, name: str) -> list[Product]:
        """Fetch every product with exactly this name, in id order."""
        return list(
            self._iter("SELECT * FROM products WHERE name = ? ORDER BY id", (name,), Product.from_row)
        )

    def count(self) -> int:
        return int(self._scalar("SELECT COUNT(*) FROM products"))

    def total_stock(self) -> Optional[int]:
        """Sum of the non-NULL stock values, or None when there are none."""
        value = self._scalar("SELECT SUM(stock) FROM products")
        return int(value) if value is not None else None

    def max_price(self) -> Optional[float]:
        value = self._scalar("SELECT MAX(price) FROM products")
        return float(value) if value is not None else None

    def max_id(self) -> int:
        return int(self._scalar("SELECT COALESCE(MAX(id), 0) FROM products"))

    # ── UPDATE ────────────────────────────────────────────

    def adjust_stock_by_name(self, name: str, delta: int) -> int:
        """
        Add `delta` (usually negative) to the stock of every product called `name`.
        Rows with NULL stock stay NULL.

        Returns:
            Number of rows affected (0 is not an error).
        """
        cur = self._execute(
            "UPDATE products SET stock = stock + ? WHERE name = ?", (delta, name)
        )
        return cur.rowcount
