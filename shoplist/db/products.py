"""Product dictionary storage."""

from __future__ import annotations

import json
import logging
import sqlite3
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from ..models import Product
from ..parsing import merge_new_products, normalize_product_name
from .schema import ensure_schema

if TYPE_CHECKING:
    from ..models import BulkParsedItem

logger = logging.getLogger(__name__)


class ProductDB:
    """Manages the products table, keyed by normalized product name."""

    def __init__(self, db_path: str | Path = "~/.config/shoplist/shoplist.db") -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = ensure_schema(self._db_path)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def get_dictionary(self) -> dict[str, Product]:
        """Return a snapshot of the dictionary in insertion order."""
        conn = self._get_conn()
        rows = conn.execute(
            "SELECT key, name, category, photo FROM products ORDER BY rowid"
        ).fetchall()
        return {
            r["key"]: Product(name=r["name"], category=r["category"], photo=r["photo"])
            for r in rows
        }

    def add_product(self, name: str, category: str, photo: str = "") -> bool:
        """Insert a product unless its normalized name is already known.

        Returns:
            True if a new row was inserted.

        Raises:
            ValueError: If the name is blank.
        """
        key = normalize_product_name(name)
        if not key:
            raise ValueError("product name must not be blank")
        conn = self._get_conn()
        cur = conn.execute(
            """INSERT OR IGNORE INTO products (key, name, category, photo)
               VALUES (?, ?, ?, ?)""",
            (key, name.strip(), category, photo),
        )
        conn.commit()
        return cur.rowcount > 0

    def save_dictionary(self, dictionary: Mapping[str, Product]) -> int:
        """Persist products whose keys are not stored yet.

        Keys are recomputed from each product name, never taken from the
        mapping. Returns the number of inserted rows.
        """
        conn = self._get_conn()
        inserted = 0
        for product in dictionary.values():
            key = normalize_product_name(product.name)
            if not key:
                continue
            cur = conn.execute(
                """INSERT OR IGNORE INTO products (key, name, category, photo)
                   VALUES (?, ?, ?, ?)""",
                (key, product.name, product.category, product.photo),
            )
            inserted += cur.rowcount
        conn.commit()
        if inserted:
            logger.info("Added %d products to the dictionary", inserted)
        return inserted

    def merge_items(self, items: Iterable[BulkParsedItem]) -> int:
        """Add selected, previously unknown items to the dictionary."""
        current = self.get_dictionary()
        merged = merge_new_products(current, items)
        new = {k: v for k, v in merged.items() if k not in current}
        return self.save_dictionary(new)

    def load_common_products(self, path: str | Path) -> int:
        """Bootstrap the dictionary from a JSON product list.

        The file looks like ``{"products": [{"name": ..., "category": ...}]}``.
        Products that are already known are skipped.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file has no "products" list.
        """
        with open(Path(path).expanduser(), encoding="utf-8") as f:
            data = json.load(f)

        entries = data.get("products") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ValueError(f"{path}: expected a JSON object with a 'products' list")

        products = {
            str(i): Product.from_dict(entry)
            for i, entry in enumerate(entries)
            if isinstance(entry, dict) and entry.get("name")
        }
        return self.save_dictionary(products)

    def delete_product(self, name: str) -> None:
        """Delete a product by name (any spelling that normalizes the same)."""
        conn = self._get_conn()
        conn.execute(
            "DELETE FROM products WHERE key = ?", (normalize_product_name(name),)
        )
        conn.commit()
