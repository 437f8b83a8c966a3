"""Default product categories for a family shopping list."""

from __future__ import annotations

from .models import Category

OTHER_CATEGORY = "other"

_FALLBACK_ICON = "📦"

DEFAULT_CATEGORIES: dict[str, Category] = {
    "dairy": Category(name="חלב וביצים", icon="🥛", color="#E3F2FD", order=0),
    "bread": Category(name="לחם ומאפים", icon="🥖", color="#FFF3E0", order=1),
    "fruits": Category(name="ירקות ופירות", icon="🥬", color="#E8F5E9", order=2),
    "meat": Category(name="בשר ודגים", icon="🥩", color="#FFEBEE", order=3),
    "frozen": Category(name="קפואים", icon="🧊", color="#E1F5FE", order=4),
    "canned": Category(name="שימורים ויבשים", icon="🥫", color="#FBE9E7", order=5),
    "snacks": Category(name="חטיפים ומתוקים", icon="🍪", color="#FFF8E1", order=6),
    "drinks": Category(name="משקאות", icon="🥤", color="#F3E5F5", order=7),
    "cleaning": Category(name="ניקיון", icon="🧹", color="#E0F7FA", order=8),
    "hygiene": Category(name="טיפוח והיגיינה", icon="🧴", color="#FCE4EC", order=9),
    OTHER_CATEGORY: Category(name="אחר", icon=_FALLBACK_ICON, color="#ECEFF1", order=100),
}


def sorted_categories(
    categories: dict[str, Category] | None = None,
) -> list[tuple[str, Category]]:
    """Return (id, category) pairs in display order."""
    cats = DEFAULT_CATEGORIES if categories is None else categories
    return sorted(cats.items(), key=lambda kv: kv[1].order)


def category_icon(
    category_id: str, categories: dict[str, Category] | None = None
) -> str:
    cats = DEFAULT_CATEGORIES if categories is None else categories
    cat = cats.get(category_id)
    return cat.icon if cat else _FALLBACK_ICON
