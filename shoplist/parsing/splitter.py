"""Detect lines that bundle several products together."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from ..models import Product, SplitResult
from .matcher import find_best_match

logger = logging.getLogger(__name__)

# comma, slash, then the attached Hebrew conjunction "ו" ("and")
_DELIMITERS: tuple[re.Pattern, ...] = (
    re.compile(r"\s*,\s*"),
    re.compile(r"\s*/\s*"),
    re.compile(r"\s+ו"),
)

_NUMERIC_WORD = re.compile(r"\d+\.?\d*")

_MAX_PHRASE_WORDS = 3
_MIN_SPLIT_MATCHES = 2


def _is_numeric(word: str) -> bool:
    return _NUMERIC_WORD.fullmatch(word) is not None


def _match_count(segments: list[SplitResult]) -> int:
    return sum(1 for s in segments if s.match is not None)


def split_on_delimiters(
    text: str, dictionary: Mapping[str, Product]
) -> list[SplitResult] | None:
    """Split on the first delimiter that yields a usable split.

    A split is usable when it has at least two parts and at least one
    part matches a product. Returns None when no delimiter qualifies.
    """
    for delimiter in _DELIMITERS:
        parts = [p.strip() for p in delimiter.split(text)]
        parts = [p for p in parts if p]
        if len(parts) < 2:
            continue
        results = [SplitResult(p, find_best_match(p, dictionary)) for p in parts]
        if any(r.match is not None for r in results):
            logger.debug("split %r on %r into %d parts", text, delimiter.pattern, len(results))
            return results
    return None


def greedy_segments(
    words: list[str], dictionary: Mapping[str, Product]
) -> list[SplitResult]:
    """Left to right, take the longest phrase (3, 2, then 1 words) that matches."""
    results: list[SplitResult] = []
    i = 0
    while i < len(words):
        if _is_numeric(words[i]):
            i += 1
            continue

        for length in range(min(_MAX_PHRASE_WORDS, len(words) - i), 0, -1):
            phrase = " ".join(words[i : i + length])
            match = find_best_match(phrase, dictionary)
            if match is not None and match.name:
                results.append(SplitResult(phrase, match))
                i += length
                break
        else:
            results.append(SplitResult(words[i], None))
            i += 1
    return results


def single_word_segments(
    words: list[str], dictionary: Mapping[str, Product]
) -> list[SplitResult]:
    """Match every non-numeric word on its own."""
    return [
        SplitResult(w, find_best_match(w, dictionary))
        for w in words
        if not _is_numeric(w)
    ]


def try_split_line(
    text: str, dictionary: Mapping[str, Product]
) -> list[SplitResult]:
    """Break ``text`` into separate products if it looks like several.

    Delimiters are tried first. Otherwise the greedy and single-word
    segmentations compete and the one with more matches wins (greedy on
    ties); it is used only if it has several segments and at least two
    matches. Anything else returns the whole text as one unmatched segment.
    """
    unsplit = [SplitResult(text, None)]

    delimited = split_on_delimiters(text, dictionary)
    if delimited is not None:
        return delimited

    words = text.split()
    if len(words) < 2:
        return unsplit
    if sum(1 for w in words if not _is_numeric(w)) < 2:
        return unsplit

    greedy = greedy_segments(words, dictionary)
    single = single_word_segments(words, dictionary)
    greedy_matches = _match_count(greedy)
    single_matches = _match_count(single)

    if single_matches > greedy_matches:
        best, best_matches = single, single_matches
    else:
        best, best_matches = greedy, greedy_matches

    if len(best) > 1 and best_matches >= _MIN_SPLIT_MATCHES:
        logger.debug(
            "segmented %r into %d parts (%d matched)", text, len(best), best_matches
        )
        return best
    return unsplit
