"""Shopping list item CRUD operations."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from ..models import ListItem
from .schema import ensure_schema

if TYPE_CHECKING:
    from ..models import BulkParsedItem


def _row_to_item(row: sqlite3.Row) -> ListItem:
    return ListItem(
        id=row["id"],
        list_id=row["list_id"],
        name=row["name"],
        category=row["category"],
        quantity=row["quantity"],
        photo=row["photo"],
        in_cart=bool(row["in_cart"]),
        added_by_shopper=bool(row["added_by_shopper"]),
        added_by=row["added_by"],
        order=row["sort_order"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class ItemDB:
    """Manages the list_items table."""

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

    def add_items(
        self,
        list_id: str,
        items: Iterable[BulkParsedItem],
        added_by: str = "",
    ) -> list[int]:
        """Insert the selected parsed items into a list.

        Returns:
            List of inserted row IDs.
        """
        conn = self._get_conn()
        ids: list[int] = []
        for item in items:
            if not item.selected:
                continue
            cur = conn.execute(
                """INSERT INTO list_items
                   (list_id, name, category, quantity, added_by)
                   VALUES (?, ?, ?, ?, ?)""",
                (list_id, item.name, item.category, item.quantity, added_by),
            )
            ids.append(cur.lastrowid)
        conn.commit()
        return ids

    def get_items(self, list_id: str = "default") -> list[ListItem]:
        """Return the items of a list in the order they were added."""
        conn = self._get_conn()
        rows = conn.execute(
            "SELECT * FROM list_items WHERE list_id = ? ORDER BY sort_order, id",
            (list_id,),
        ).fetchall()
        return [_row_to_item(r) for r in rows]

    def set_in_cart(self, item_id: int, in_cart: bool = True) -> bool:
        """Mark an item as picked up (or not).

        Returns:
            False if no item has this ID.
        """
        conn = self._get_conn()
        cur = conn.execute(
            """UPDATE list_items
               SET in_cart = ?,
                   updated_at = datetime('now', 'localtime')
               WHERE id = ?""",
            (int(in_cart), item_id),
        )
        conn.commit()
        return cur.rowcount > 0

    def clear_in_cart(self, list_id: str = "default") -> int:
        """Delete the items of a list that are already in the cart.

        Returns:
            Number of rows deleted.
        """
        conn = self._get_conn()
        cur = conn.execute(
            "DELETE FROM list_items WHERE list_id = ? AND in_cart = 1",
            (list_id,),
        )
        conn.commit()
        return cur.rowcount

    def delete_item(self, item_id: int) -> bool:
        """Delete a list item by ID. Returns False if it did not exist."""
        conn = self._get_conn()
        cur = conn.execute("DELETE FROM list_items WHERE id = ?", (item_id,))
        conn.commit()
        return cur.rowcount > 0
