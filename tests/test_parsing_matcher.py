"""Tests for fuzzy product matching and autocomplete suggestions."""

import pytest

from shoplist.models import Product
from shoplist.parsing.matcher import (
    find_best_match,
    match_score,
    match_threshold,
    suggest_products,
)
from shoplist.parsing.normalize import normalize_product_name


def _make_dictionary(*entries: tuple[str, str]) -> dict[str, Product]:
    """Helper to build a dictionary keyed by normalized name."""
    return {
        normalize_product_name(name): Product(name=name, category=category)
        for name, category in entries
    }


@pytest.fixture
def dictionary():
    return _make_dictionary(
        ("Milk", "dairy"),
        ("Bread", "bread"),
        ("Eggs", "dairy"),
        ("Tomatoes", "fruits"),
        ("Cucumbers", "fruits"),
        ("Yellow Cheese", "dairy"),
        ("Olive Oil", "canned"),
    )


class TestThreshold:
    def test_short(self):
        assert match_threshold("abc", "abcdef") == 0.75

    def test_medium(self):
        assert match_threshold("abcd", "abcdef") == 0.6
        assert match_threshold("abcde", "abcdefgh") == 0.6

    def test_long(self):
        assert match_threshold("abcdef", "abcdefgh") == 0.5


class TestScore:
    def test_input_contained_in_candidate(self):
        assert match_score("tomato", "tomatoes") == pytest.approx(6 / 8 + 0.15)

    def test_containment_capped(self):
        assert match_score("cucumber", "cucumbers") == 1.0

    def test_candidate_contained_high_coverage(self):
        assert match_score("olive oils", "olive oil") == pytest.approx(0.9)

    def test_candidate_contained_low_coverage(self):
        assert match_score("fresh milk", "milk") == 0.0

    def test_edit_distance_fallback(self):
        assert match_score("milc", "milk") == pytest.approx(0.75)


class TestFindBestMatch:
    def test_exact_key(self, dictionary):
        assert find_best_match("  MILK ", dictionary).name == "Milk"

    def test_empty_dictionary(self):
        assert find_best_match("milk", {}) is None

    def test_blank_input(self, dictionary):
        assert find_best_match("   ", dictionary) is None

    def test_exact_name_with_foreign_keys(self):
        products = {"p1": Product("Bread", "bread"), "p2": Product("Milk", "dairy")}
        assert find_best_match("milk", products).name == "Milk"

    def test_exact_match_regardless_of_order(self, dictionary):
        reordered = dict(reversed(list(dictionary.items())))
        reordered["milky way"] = Product("Milky Way", "snacks")
        assert find_best_match("milk", reordered).name == "Milk"

    def test_plural(self, dictionary):
        assert find_best_match("tomato", dictionary).name == "Tomatoes"

    def test_partial_phrase(self, dictionary):
        assert find_best_match("cheese", dictionary).name == "Yellow Cheese"

    def test_input_with_suffix(self, dictionary):
        assert find_best_match("olive oils", dictionary).name == "Olive Oil"

    def test_typo(self, dictionary):
        assert find_best_match("milc", dictionary).name == "Milk"

    def test_low_coverage_rejected(self, dictionary):
        assert find_best_match("fresh milk", dictionary) is None

    def test_short_typo_rejected(self, dictionary):
        # similarity 0.75 does not clear the 0.75 threshold for 3 letters
        assert find_best_match("mlk", dictionary) is None

    def test_short_containment_accepted(self):
        products = _make_dictionary(("abcd", "other"))
        assert find_best_match("abc", products).name == "abcd"

    def test_short_containment_rejected(self):
        products = _make_dictionary(("abcdefg", "other"))
        assert find_best_match("abc", products) is None

    def test_short_substitution_rejected(self):
        products = _make_dictionary(("חלב", "dairy"))
        assert find_best_match("חלו", products) is None

    def test_higher_score_wins(self):
        products = _make_dictionary(
            ("Tomato Paste", "canned"), ("Tomatoes", "fruits")
        )
        assert find_best_match("tomato", products).name == "Tomatoes"

    def test_tie_keeps_first(self):
        products = _make_dictionary(("Milk A", "dairy"), ("Milk B", "dairy"))
        assert find_best_match("milk", products).name == "Milk A"
        reordered = dict(reversed(list(products.items())))
        assert find_best_match("milk", reordered).name == "Milk B"


class TestSuggestProducts:
    def test_too_short(self, dictionary):
        assert suggest_products("m", dictionary) == []

    def test_substring(self, dictionary):
        names = [p.name for p in suggest_products("mi", dictionary)]
        assert names == ["Milk"]

    def test_contained_in_text(self, dictionary):
        names = [p.name for p in suggest_products("oil", dictionary)]
        assert names == ["Olive Oil"]

    def test_fuzzy_fallback(self, dictionary):
        names = [p.name for p in suggest_products("milc", dictionary)]
        assert names == ["Milk"]

    def test_no_match(self, dictionary):
        assert suggest_products("zzzz", dictionary) == []

    def test_limit(self):
        products = _make_dictionary(*[(f"Milk {i}", "dairy") for i in range(10)])
        assert len(suggest_products("milk", products)) == 8
        assert len(suggest_products("milk", products, limit=3)) == 3
