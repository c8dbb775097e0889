"""
services/demo_service.py
-------------------------
The demo's operations: each method runs one step's statements through
the repositories and returns plain data for the handlers to print.
"""

import sqlite3
from dataclasses import dataclass
from typing import Iterator, Optional

from db.connection import transaction
from models.product import Product
from models.user import User
from repositories.product_repo import ProductRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)

NEW_USER = {"name": "David Wilson", "email": "david@example.com", "age": 31}
NEW_PRODUCT = {"name": "Smartphone", "price": 699.99, "category": "Electronics", "stock": 25}
TRANSACTION_USER = {"name": "Transaction Test", "email": "test@example.com", "age": 25}


@dataclass
class InsertResult:
    user_id: int
    product_id: int


@dataclass
class UpdateResult:
    users_updated: int
    products_updated: int


@dataclass
class Aggregates:
    """Results of the four scalar aggregate queries. None means SQL NULL."""
    user_count: int
    average_age: Optional[float]
    total_stock: Optional[int]
    max_price: Optional[float]


class DemoService:
    """Runs the demo's statements against one explicitly passed connection."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self.users = UserRepository(conn)
        self.products = ProductRepository(conn)

    # ── INSERT ────────────────────────────────────────────

    def insert_records(self) -> InsertResult:
        """Insert the demo user and product and return their new ids."""
        user_id = self.users.add(**NEW_USER)
        product_id = self.products.add(**NEW_PRODUCT)
        return InsertResult(user_id=user_id, product_id=product_id)

    # ── SELECT ────────────────────────────────────────────

    def all_users(self) -> Iterator[User]:
        return self.users.iter_all()

    def users_older_than(self, age: int = 25) -> Iterator[User]:
        # The query already filters, but rows with NULL age are skipped here as well.
        return (u for u in self.users.iter_older_than(age) if u.age is not None and u.age > age)

    def products_priced_above(self, price: float = 20) -> Iterator[Product]:
        return self.products.iter_priced_above(price)

    # ── UPDATE ────────────────────────────────────────────

    def apply_updates(self) -> UpdateResult:
        """Set Alice Johnson's age to 29 and take 5 Coffee Mugs out of stock."""
        users_updated = self.users.update_age_by_name("Alice Johnson", 29)
        products_updated = self.products.adjust_stock_by_name("Coffee Mug", -5)
        return UpdateResult(users_updated=users_updated, products_updated=products_updated)

    # ── DELETE ────────────────────────────────────────────

    def delete_inserted_user(self) -> int:
        """Remove every user named like the inserted demo user."""
        return self.users.delete_by_name(NEW_USER["name"])

    # ── AGGREGATE ─────────────────────────────────────────

    def aggregates(self) -> Aggregates:
        return Aggregates(
            user_count=self.users.count(),
            average_age=self.users.average_age(),
            total_stock=self.products.total_stock(),
            max_price=self.products.max_price(),
        )

    # ── TRANSACTION ───────────────────────────────────────

    def purchase_book(self, buyer: Optional[dict] = None) -> None:
        """
        Simulate a purchase: one Book leaves stock and the buyer is registered,
        both or neither.

        Raises:
            TransactionError: If either statement fails; nothing is kept.
        """
        buyer = buyer or TRANSACTION_USER
        with transaction(self.conn):
            self.products.adjust_stock_by_name("Book", -1)
            self.users.add(**buyer)
        logger.info(f"Purchase transaction committed for {buyer['email']}")

    # ── FINAL STATE ───────────────────────────────────────

    def final_users(self) -> Iterator[User]:
        return self.users.iter_all(order_by_id=True)

    def final_products(self) -> Iterator[Product]:
        return self.products.iter_all(order_by_id=True)
