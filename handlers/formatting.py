"""
handlers/formatting.py
-----------------------
Turns model objects and aggregate values into report lines.
"""

from typing import Optional

from config import NULL_DISPLAY, RULE_WIDTH
from models.product import Product
from models.user import User


def heading(title: str) -> str:
    return f"{title}\n{'-' * RULE_WIDTH}"


def display(value: Optional[object], fmt: str = "{}") -> str:
    """Format `value` with `fmt`, or return the NULL sentinel when it is absent."""
    if value is None:
        return NULL_DISPLAY
    return fmt.format(value)


def user_line(user: User) -> str:
    return (
        f"  ID: {user.id}, Name: {user.name}, Email: {user.email}, "
        f"Age: {display(user.age)}"
    )


def product_line(product: Product) -> str:
    return f"  {product.name} - ${product.price:.2f} (Stock: {display(product.stock)})"
