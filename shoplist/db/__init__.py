"""SQLite storage for the product dictionary and shopping list items."""

from .items import ItemDB
from .products import ProductDB
from .schema import ensure_schema

__all__ = [
    "ItemDB",
    "ProductDB",
    "ensure_schema",
]
