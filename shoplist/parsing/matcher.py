"""Resolve noisy product names against the family product dictionary."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..models import Product
from .normalize import normalize_product_name
from .similarity import similarity

logger = logging.getLogger(__name__)

# Bonus added when the input is a substring of a product name
_CONTAINMENT_BONUS = 0.15
# Minimum share of the input a contained product name must cover
_MIN_COVERAGE = 0.8

_SUGGESTION_LIMIT = 8


def match_threshold(a: str, b: str) -> float:
    """Minimum score for accepting a fuzzy match between two keys.

    Shorter strings need a higher score: two or three letters are
    otherwise close to almost anything.
    """
    min_len = min(len(a), len(b))
    if min_len <= 3:
        return 0.75
    if min_len <= 5:
        return 0.6
    return 0.5


def match_score(key: str, candidate: str) -> float:
    """Score a normalized input against a normalized product name."""
    if key in candidate:
        return min(len(key) / len(candidate) + _CONTAINMENT_BONUS, 1.0)
    if candidate in key:
        coverage = len(candidate) / len(key)
        return coverage if coverage >= _MIN_COVERAGE else 0.0
    return similarity(key, candidate)


def find_best_match(
    input_name: str, dictionary: Mapping[str, Product]
) -> Product | None:
    """Return the product that best matches ``input_name``, or None.

    Exact key and exact name hits short-circuit. Otherwise every product
    is scored and the highest score above its length-adaptive threshold
    wins; ties keep the product encountered first in dictionary order.
    """
    key = normalize_product_name(input_name)
    if not key:
        return None

    if key in dictionary:
        return dictionary[key]

    products = list(dictionary.values())

    # Dictionaries keyed by something other than the normalized name
    for product in products:
        if normalize_product_name(product.name) == key:
            return product

    best: Product | None = None
    best_score = 0.0
    for product in products:
        candidate = normalize_product_name(product.name)
        if not candidate:
            continue
        score = match_score(key, candidate)
        if score > best_score and score > match_threshold(key, candidate):
            best_score = score
            best = product

    if best is not None:
        logger.debug("fuzzy match %r -> %r (%.2f)", input_name, best.name, best_score)
    return best


def suggest_products(
    text: str,
    dictionary: Mapping[str, Product],
    limit: int = _SUGGESTION_LIMIT,
) -> list[Product]:
    """Autocomplete candidates for a partially typed product name.

    Products whose name contains the text (or is contained in it) come
    first, in dictionary order. Falls back to the single best fuzzy match.
    """
    if len(text.strip()) < 2:
        return []

    key = normalize_product_name(text)
    matches: list[Product] = []
    for product in dictionary.values():
        name = normalize_product_name(product.name)
        if name and (key in name or name in key):
            matches.append(product)
            if len(matches) >= limit:
                break

    if not matches:
        best = find_best_match(text, dictionary)
        if best is not None:
            matches.append(best)
    return matches
