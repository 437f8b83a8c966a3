"""Comparison keys for free-text product names."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_product_name(name: str) -> str:
    """Return the dictionary key for a product name.

    Trims, collapses whitespace runs to a single space and case-folds.
    Idempotent: normalizing a key returns the same key.
    """
    return _WHITESPACE.sub(" ", name.strip()).casefold()


normalize = normalize_product_name
