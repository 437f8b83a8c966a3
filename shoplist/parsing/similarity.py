"""Edit-distance similarity between normalized names."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and substitutions."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Similarity score in [0, 1]: ``1 - distance / max(len(a), len(b))``.

    Two empty strings are identical (score 1.0).
    """
    if a == b:
        return 1.0
    max_len = max(len(a), len(b))
    return 1.0 - levenshtein_distance(a, b) / max_len
