"""Split one line of a pasted shopping list into name and quantity."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from functools import lru_cache

from ..models import ParsedLineItem

logger = logging.getLogger(__name__)

# Unit words recognised next to a quantity (packages, units, kg, kilo,
# grams, liter, ml, bottles, bags, boxes, carton)
DEFAULT_UNIT_WORDS: tuple[str, ...] = (
    "חבילות", "חבילה",
    "יחידות", "יחידה", "יח'", "יח",
    'ק"ג', "קילו", "גרם",
    "ליטר", 'מ"ל',
    "בקבוקים", "בקבוק",
    "שקיות", "שקית",
    "קופסאות", "קופסא",
    "קרטון",
    "kg", "gr", "g", "ml", "l", "packs", "pack", "pcs",
)

# Decorations stripped from the start of a line, in this order
_BULLET = re.compile(r"^\s*[-•*·–—]\s*")
# "1.5" is a decimal, not the ordinal "1."; "2)3" is still ordinal "2)"
_ORDINAL = re.compile(r"^\s*\d+(?:\.(?!\d)|\))\s*")
_CHECKMARK = re.compile(r"^\s*(?:✅|✓|☑\ufe0f?|⬜\ufe0f?|🔲)\s*")

_NUMBER = r"(\d+\.?\d*)"

# name - 2 [unit words]
_DASH_QTY = re.compile(rf"(.+?)\s*[-–—]\s*{_NUMBER}\s*(.*)")
# name x2 / name x 2 [trailing]; a marker glued to the name needs the digits
# right after it ("Box 2" is not a multiplier)
_MULTIPLIER_QTY = re.compile(rf"(.+?)(?:\s+[xX×]\s+|\s*[xX×]){_NUMBER}\s*(.*)")
# name 5
_BARE_TRAILING_QTY = re.compile(rf"(.+?)\s+{_NUMBER}")


@lru_cache(maxsize=16)
def _unit_patterns(units: tuple[str, ...]) -> tuple[re.Pattern, re.Pattern]:
    # Longest first so that "יחידות" is not read as "יח" + "ידות"
    ordered = sorted(set(units), key=len, reverse=True)
    unit = "(" + "|".join(re.escape(u) for u in ordered) + r")(?!\w)"
    leading = re.compile(rf"{_NUMBER}\s+(?:{unit})?\s*(.+)", re.IGNORECASE)
    trailing = re.compile(rf"(.+?)\s+{_NUMBER}\s*{unit}", re.IGNORECASE)
    return leading, trailing


def _unit_words(extra: Iterable[str] | None) -> tuple[str, ...]:
    if not extra:
        return DEFAULT_UNIT_WORDS
    return DEFAULT_UNIT_WORDS + tuple(u.strip() for u in extra if u.strip())


def strip_decorations(line: str) -> str:
    """Remove a leading bullet, ordinal and checkmark, then trim."""
    cleaned = _BULLET.sub("", line, count=1)
    cleaned = _ORDINAL.sub("", cleaned, count=1)
    cleaned = _CHECKMARK.sub("", cleaned, count=1)
    return cleaned.strip()


def _join(*parts: str | None) -> str:
    return " ".join(p for p in parts if p).strip()


def _extract_quantity(
    text: str, units: tuple[str, ...]
) -> tuple[str, str, str] | None:
    """Try each quantity pattern in order.

    Returns (pattern, name, quantity) for the first pattern that matches.
    """
    m = _DASH_QTY.fullmatch(text)
    if m:
        return "dash", m.group(1), _join(m.group(2), m.group(3))

    m = _MULTIPLIER_QTY.fullmatch(text)
    if m:
        return "multiplier", m.group(1), _join(m.group(2), m.group(3))

    leading, trailing = _unit_patterns(units)

    m = leading.fullmatch(text)
    if m:
        return "leading", m.group(3), _join(m.group(1), m.group(2))

    m = trailing.fullmatch(text)
    if m:
        return "trailing-unit", m.group(1), _join(m.group(2), m.group(3))

    m = _BARE_TRAILING_QTY.fullmatch(text)
    if m and len(m.group(1).strip()) > 1:
        return "trailing-number", m.group(1), m.group(2)

    return None


def parse_line_item(
    line: str, unit_words: Iterable[str] | None = None
) -> ParsedLineItem | None:
    """Parse one raw line into a name and a quantity.

    Args:
        line: e.g. "• עגבניות - 2 ק\"ג", "Eggs x12", "3 חבילות פסטה"
        unit_words: Extra unit words on top of ``DEFAULT_UNIT_WORDS``.

    Returns:
        ParsedLineItem, or None if nothing is left after cleaning.
        The quantity keeps its unit text and is "" when none is found.
    """
    cleaned = strip_decorations(line)
    if not cleaned:
        return None

    found = _extract_quantity(cleaned, _unit_words(unit_words))
    if found is None:
        return ParsedLineItem(name=cleaned, quantity="")

    pattern, name, quantity = found
    logger.debug("%s quantity in %r: %r", pattern, cleaned, quantity)
    return ParsedLineItem(name=name.strip(), quantity=quantity.strip())
