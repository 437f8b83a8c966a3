"""Turn a pasted block of text into shopping list candidates."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..categories import OTHER_CATEGORY
from ..models import BulkParsedItem, Product
from .matcher import find_best_match
from .normalize import normalize_product_name
from .splitter import try_split_line
from .tokenizer import parse_line_item

logger = logging.getLogger(__name__)


def parse_bulk_text(
    text: str,
    dictionary: Mapping[str, Product],
    unit_words: Iterable[str] | None = None,
) -> list[BulkParsedItem]:
    """Parse every non-blank line of ``text`` against ``dictionary``.

    A line becomes several items only when it splits into two or more
    distinct known products and the whole line is not itself an exact
    product name. Split items carry no quantity.

    Every item is pre-selected and keeps the line it came from in
    ``original_text``.
    """
    units = tuple(unit_words) if unit_words else None
    items: list[BulkParsedItem] = []

    for line in text.split("\n"):
        if not line.strip():
            continue
        parsed = parse_line_item(line, units)
        if parsed is None:
            continue

        match = find_best_match(parsed.name, dictionary)
        is_exact = match is not None and normalize_product_name(
            match.name
        ) == normalize_product_name(parsed.name)

        segments = try_split_line(parsed.name, dictionary)
        distinct = {s.match.name for s in segments if s.match is not None}

        if len(segments) > 1 and len(distinct) >= 2 and not is_exact:
            logger.debug("line %r split into %d items", line, len(segments))
            for seg in segments:
                items.append(
                    BulkParsedItem(
                        original_text=line,
                        name=seg.match.name if seg.match else seg.text,
                        category=seg.match.category if seg.match else OTHER_CATEGORY,
                        quantity="",
                        matched=seg.match is not None,
                    )
                )
        elif match is not None:
            items.append(
                BulkParsedItem(
                    original_text=line,
                    name=match.name,
                    category=match.category,
                    quantity=parsed.quantity,
                    matched=True,
                )
            )
        else:
            items.append(
                BulkParsedItem(
                    original_text=line,
                    name=parsed.name,
                    category=OTHER_CATEGORY,
                    quantity=parsed.quantity,
                    matched=False,
                )
            )

    return items


def merge_new_products(
    dictionary: Mapping[str, Product], items: Iterable[BulkParsedItem]
) -> dict[str, Product]:
    """Return a copy of ``dictionary`` extended with unseen selected items.

    New entries are keyed by the normalized item name; existing entries
    are left as they are.
    """
    merged = dict(dictionary)
    for item in items:
        if not item.selected:
            continue
        key = normalize_product_name(item.name)
        if key and key not in merged:
            merged[key] = Product(name=item.name, category=item.category, photo="")
    added = len(merged) - len(dictionary)
    if added:
        logger.debug("%d new products merged into dictionary", added)
    return merged
