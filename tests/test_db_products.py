"""Tests for ProductDB dictionary storage."""

import json

import pytest

from shoplist.db.products import ProductDB
from shoplist.models import BulkParsedItem, Product


@pytest.fixture
def db(tmp_path):
    """Create a temporary ProductDB."""
    products = ProductDB(db_path=tmp_path / "test.db")
    yield products
    products.close()


def test_empty_dictionary(db):
    assert db.get_dictionary() == {}


def test_add_product(db):
    assert db.add_product("  Olive  Oil ", "canned") is True
    dictionary = db.get_dictionary()
    assert list(dictionary) == ["olive oil"]
    assert dictionary["olive oil"] == Product(name="Olive  Oil", category="canned")


def test_add_existing_product_ignored(db):
    db.add_product("חלב", "dairy")
    assert db.add_product(" חלב ", "drinks") is False
    assert db.get_dictionary()["חלב"].category == "dairy"


def test_add_blank_product(db):
    with pytest.raises(ValueError):
        db.add_product("   ", "other")


def test_insertion_order(db):
    for name in ("לחם", "חלב", "ביצים"):
        db.add_product(name, "other")
    assert list(db.get_dictionary()) == ["לחם", "חלב", "ביצים"]


def test_save_dictionary_rekeys(db):
    count = db.save_dictionary(
        {"stale-key": Product("Yellow Cheese", "dairy"), "x": Product("", "other")}
    )
    assert count == 1
    assert "yellow cheese" in db.get_dictionary()


def test_merge_items(db):
    db.add_product("חלב", "dairy")
    items = [
        BulkParsedItem("חלב", "חלב", "dairy", matched=True),
        BulkParsedItem("ספגטי", "ספגטי", "other"),
        BulkParsedItem("קמח", "קמח", "other", selected=False),
    ]
    assert db.merge_items(items) == 1
    assert list(db.get_dictionary()) == ["חלב", "ספגטי"]


def test_load_common_products(db, tmp_path):
    path = tmp_path / "common-products.json"
    path.write_text(
        json.dumps(
            {
                "products": [
                    {"name": "חלב", "category": "dairy"},
                    {"name": "לחם", "category": "bread"},
                    {"name": "", "category": "other"},
                ]
            },
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    db.add_product("חלב", "drinks")
    assert db.load_common_products(path) == 1
    dictionary = db.get_dictionary()
    assert dictionary["חלב"].category == "drinks"
    assert dictionary["לחם"].category == "bread"


def test_load_common_products_bad_shape(db, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('["חלב"]', encoding="utf-8")
    with pytest.raises(ValueError):
        db.load_common_products(path)


def test_load_common_products_missing_file(db, tmp_path):
    with pytest.raises(FileNotFoundError):
        db.load_common_products(tmp_path / "missing.json")


def test_delete_product(db):
    db.add_product("Milk", "dairy")
    db.delete_product("  MILK ")
    assert db.get_dictionary() == {}
