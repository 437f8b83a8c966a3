"""Family shopping list: free-text list parsing against a product dictionary."""

from .categories import DEFAULT_CATEGORIES, OTHER_CATEGORY
from .config import (
    DatabaseConfig,
    ListsConfig,
    ParserConfig,
    ShoplistConfig,
    load_config,
)
from .models import BulkParsedItem, Category, ListItem, ParsedLineItem, Product, SplitResult
from .parsing import (
    find_best_match,
    merge_new_products,
    normalize_product_name,
    parse_bulk_text,
    parse_line_item,
    similarity,
    suggest_products,
    try_split_line,
)

__all__ = [
    "Product",
    "Category",
    "ParsedLineItem",
    "SplitResult",
    "BulkParsedItem",
    "ListItem",
    "DEFAULT_CATEGORIES",
    "OTHER_CATEGORY",
    "normalize_product_name",
    "similarity",
    "find_best_match",
    "suggest_products",
    "parse_line_item",
    "try_split_line",
    "parse_bulk_text",
    "merge_new_products",
    "ShoplistConfig",
    "DatabaseConfig",
    "ParserConfig",
    "ListsConfig",
    "load_config",
]
