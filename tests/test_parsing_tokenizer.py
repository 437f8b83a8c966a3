"""Tests for single-line name/quantity extraction."""

import pytest

from shoplist.models import ParsedLineItem
from shoplist.parsing.tokenizer import parse_line_item, strip_decorations


def _parse(line, **kwargs):
    parsed = parse_line_item(line, **kwargs)
    assert parsed is not None
    return parsed.name, parsed.quantity


class TestStripDecorations:
    @pytest.mark.parametrize(
        "line",
        ["• חלב", "- חלב", "* חלב", "– חלב", "1. חלב", "12) חלב", "✅ חלב", "☑️ חלב", "🔲 חלב"],
    )
    def test_leading_decorations(self, line):
        assert strip_decorations(line) == "חלב"

    def test_combined(self):
        assert strip_decorations("  - 3. ✓ לחם ") == "לחם"

    def test_decimal_is_not_an_ordinal(self):
        assert strip_decorations("1.5 kg sugar") == "1.5 kg sugar"

    def test_paren_ordinal_before_digit(self):
        assert strip_decorations("2)3 ביצים") == "3 ביצים"


class TestParseLineItem:
    def test_dash_quantity(self):
        assert _parse("Tomatoes - 2 kg") == ("Tomatoes", "2 kg")

    def test_dash_quantity_hebrew(self):
        assert _parse("חלב - 2 ליטר") == ("חלב", "2 ליטר")

    def test_multiplier(self):
        assert _parse("Eggs x12") == ("Eggs", "12")

    def test_multiplier_sign(self):
        assert _parse("במבה ×3") == ("במבה", "3")

    @pytest.mark.parametrize(
        "line, expected",
        [("חלב x 2", ("חלב", "2")), ("Eggs x 12", ("Eggs", "12")), ("Eggs X 6 large", ("Eggs", "6 large"))],
    )
    def test_multiplier_standalone_marker(self, line, expected):
        assert _parse(line) == expected

    def test_trailing_x_in_name_is_not_a_multiplier(self):
        assert _parse("Box 2") == ("Box", "2")

    def test_paren_ordinal_then_leading_quantity(self):
        assert _parse("2)3 ביצים") == ("ביצים", "3")

    def test_no_quantity(self):
        assert parse_line_item("Bread") == ParsedLineItem(name="Bread", quantity="")

    def test_leading_quantity_with_unit(self):
        assert _parse("3 חבילות פסטה") == ("פסטה", "3 חבילות")

    def test_leading_quantity_long_unit(self):
        assert _parse("2 יחידות חלב") == ("חלב", "2 יחידות")

    def test_leading_quantity_without_unit(self):
        assert _parse("2 עגבניות") == ("עגבניות", "2")

    def test_leading_decimal_with_latin_unit(self):
        assert _parse("1.5 kg sugar") == ("sugar", "1.5 kg")

    def test_unit_prefix_is_not_a_unit(self):
        assert _parse("2 gouda") == ("gouda", "2")

    def test_trailing_quantity_with_unit(self):
        assert _parse('עגבניות 2 ק"ג') == ("עגבניות", '2 ק"ג')

    def test_trailing_bare_number(self):
        assert _parse("עגבניות 5") == ("עגבניות", "5")

    def test_trailing_number_needs_a_real_name(self):
        assert _parse("א 5") == ("א 5", "")

    def test_hyphenated_name(self):
        assert _parse("Coca-Cola 2") == ("Coca-Cola", "2")

    def test_percent_is_part_of_name(self):
        assert _parse("חלב 3%") == ("חלב 3%", "")

    def test_bullet_and_quantity(self):
        assert _parse("• עגבניות - 2 ק\"ג") == ("עגבניות", '2 ק"ג')

    def test_extra_unit_words(self):
        assert _parse("2 מארז במבה", unit_words=["מארז"]) == ("במבה", "2 מארז")
        assert _parse("2 מארז במבה") == ("מארז במבה", "2")

    @pytest.mark.parametrize("line", ["", "   ", "- ", "✅", "3. "])
    def test_empty_after_cleaning(self, line):
        assert parse_line_item(line) is None
