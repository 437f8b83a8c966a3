"""Free-text grocery list interpretation: tokenizing, matching and splitting."""

from .bulk import merge_new_products, parse_bulk_text
from .matcher import find_best_match, match_score, match_threshold, suggest_products
from .normalize import normalize, normalize_product_name
from .similarity import levenshtein_distance, similarity
from .splitter import (
    greedy_segments,
    single_word_segments,
    split_on_delimiters,
    try_split_line,
)
from .tokenizer import DEFAULT_UNIT_WORDS, parse_line_item, strip_decorations

__all__ = [
    "normalize",
    "normalize_product_name",
    "similarity",
    "levenshtein_distance",
    "find_best_match",
    "match_score",
    "match_threshold",
    "suggest_products",
    "parse_line_item",
    "strip_decorations",
    "DEFAULT_UNIT_WORDS",
    "try_split_line",
    "split_on_delimiters",
    "greedy_segments",
    "single_word_segments",
    "parse_bulk_text",
    "merge_new_products",
]
