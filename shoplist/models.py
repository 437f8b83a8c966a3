"""Data models for products, parsed lines, and shopping list items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """A catalog entry in the family product dictionary."""

    name: str
    category: str
    photo: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "category": self.category, "photo": self.photo}

    @classmethod
    def from_dict(cls, data: dict) -> Product:
        return cls(
            name=data["name"],
            category=data.get("category", "other"),
            photo=data.get("photo", "") or "",
        )


@dataclass
class Category:
    name: str  # display name (Hebrew)
    icon: str
    color: str = "#ECEFF1"
    order: int = 100


@dataclass
class ParsedLineItem:
    """Name and free-form quantity recovered from one line of text."""

    name: str
    quantity: str = ""  # unit text preserved, "" if none detected


@dataclass
class SplitResult:
    text: str
    match: Product | None = None


@dataclass
class BulkParsedItem:
    """One candidate item produced from pasted text."""

    original_text: str
    name: str
    category: str
    quantity: str = ""
    matched: bool = False
    selected: bool = True

    def to_dict(self) -> dict:
        return {
            "originalText": self.original_text,
            "name": self.name,
            "category": self.category,
            "quantity": self.quantity,
            "matched": self.matched,
            "selected": self.selected,
        }


@dataclass
class ListItem:
    """A stored shopping list row."""

    id: int
    list_id: str
    name: str
    category: str
    quantity: str = ""
    photo: str = ""
    in_cart: bool = False
    added_by_shopper: bool = False
    added_by: str = ""
    order: int = 0
    created_at: str = ""
    updated_at: str = ""
