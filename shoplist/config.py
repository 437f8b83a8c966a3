"""TOML configuration loader for the shopping list tools."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .categories import DEFAULT_CATEGORIES
from .models import Category

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

_DEFAULT_DB_PATH = "~/.config/shoplist/shoplist.db"


@dataclass
class DatabaseConfig:
    path: str = _DEFAULT_DB_PATH


@dataclass
class ParserConfig:
    extra_units: list[str] = field(default_factory=list)


@dataclass
class ListsConfig:
    default_list: str = "default"
    added_by: str = ""


@dataclass
class ShoplistConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    lists: ListsConfig = field(default_factory=ListsConfig)
    categories: dict[str, Category] = field(
        default_factory=lambda: dict(DEFAULT_CATEGORIES)
    )


def _load_categories(raw: dict) -> dict[str, Category]:
    categories = dict(DEFAULT_CATEGORIES)
    for cat_id, values in raw.items():
        base = categories.get(cat_id)
        categories[cat_id] = Category(
            name=values.get("name", base.name if base else cat_id),
            icon=values.get("icon", base.icon if base else "📦"),
            color=values.get("color", base.color if base else "#ECEFF1"),
            order=values.get("order", base.order if base else 50),
        )
    return categories


def load_config(path: str | Path | None = None) -> ShoplistConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The database path and the list member name can be overridden via the
    SHOPLIST_DB and SHOPLIST_USER environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    dbc = raw.get("database", {})
    prs = raw.get("parser", {})
    lst = raw.get("lists", {})

    # Resolve overrides: environment variable → config file → default
    db_path = os.environ.get("SHOPLIST_DB", "") or dbc.get("path", _DEFAULT_DB_PATH)
    added_by = os.environ.get("SHOPLIST_USER", "") or lst.get("added_by", "")

    return ShoplistConfig(
        database=DatabaseConfig(path=db_path),
        parser=ParserConfig(
            extra_units=list(prs.get("extra_units", [])),
        ),
        lists=ListsConfig(
            default_list=lst.get("default_list", "default"),
            added_by=added_by,
        ),
        categories=_load_categories(raw.get("categories", {})),
    )
