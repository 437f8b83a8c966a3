"""CLI entry point for the shopping list tools."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .categories import category_icon
from .config import load_config
from .db import ItemDB, ProductDB
from .parsing import parse_bulk_text, suggest_products


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="shoplist",
        description="רשימת קניות משפחתית — הדביקו רשימה חופשית וקבלו פריטים מזוהים",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="נתיב לקובץ הגדרות (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="הדפסת לוג מפורט"
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="פענוח רשימה חופשית")
    parse_parser.add_argument(
        "file", type=str, nargs="?", default=None,
        help="קובץ טקסט (ברירת מחדל: קלט סטנדרטי)",
    )
    parse_parser.add_argument("--json", action="store_true", help="פלט JSON")
    parse_parser.add_argument(
        "--add", action="store_true",
        help="הוספת הפריטים לרשימה ועדכון מאגר המוצרים",
    )
    parse_parser.add_argument("--list", type=str, default=None, help="מזהה רשימה")

    # suggest
    suggest_parser = sub.add_parser("suggest", help="השלמה אוטומטית לשם מוצר")
    suggest_parser.add_argument("text", type=str)

    # products
    products_parser = sub.add_parser("products", help="הצגת מאגר המוצרים")
    products_parser.add_argument("--json", action="store_true", help="פלט JSON")

    # import-products
    import_parser = sub.add_parser(
        "import-products", help="טעינת מוצרים נפוצים מקובץ JSON"
    )
    import_parser.add_argument("file", type=str)

    # items
    items_parser = sub.add_parser("items", help="הצגת פריטי הרשימה")
    items_parser.add_argument("--list", type=str, default=None, help="מזהה רשימה")
    items_parser.add_argument(
        "--check", type=int, default=None, metavar="ID", help="סימון פריט כנמצא בעגלה"
    )
    items_parser.add_argument(
        "--uncheck", type=int, default=None, metavar="ID", help="ביטול סימון פריט"
    )
    items_parser.add_argument(
        "--remove", type=int, default=None, metavar="ID", help="מחיקת פריט מהרשימה"
    )
    items_parser.add_argument(
        "--clear", action="store_true", help="מחיקת הפריטים שכבר בעגלה"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    try:
        match args.command:
            case "parse":
                _cmd_parse(config, args)
            case "suggest":
                _cmd_suggest(config, args)
            case "products":
                _cmd_products(config, args)
            case "import-products":
                _cmd_import_products(config, args)
            case "items":
                _cmd_items(config, args)
    except (FileNotFoundError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"שגיאה: {e}", file=sys.stderr)
        sys.exit(1)


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _cmd_parse(config, args) -> None:
    text = _read_input(args.file)
    if not text.strip():
        print("לא הוזן טקסט.", file=sys.stderr)
        sys.exit(1)

    products = ProductDB(config.database.path)
    try:
        dictionary = products.get_dictionary()
        items = parse_bulk_text(text, dictionary, config.parser.extra_units)

        if args.json:
            print(json.dumps([i.to_dict() for i in items], ensure_ascii=False, indent=2))
        else:
            if not items:
                print("לא נמצאו פריטים.")
                return
            print(f"🛒 {len(items)} פריטים:")
            for i in items:
                icon = category_icon(i.category, config.categories)
                badge = "זוהה" if i.matched else "חדש"
                qty = f" ({i.quantity})" if i.quantity else ""
                print(f"  {icon} {i.name}{qty}  [{badge}]")

        if not args.add:
            return

        list_id = args.list or config.lists.default_list
        item_db = ItemDB(config.database.path)
        try:
            ids = item_db.add_items(list_id, items, added_by=config.lists.added_by)
        finally:
            item_db.close()
        added = products.merge_items(items)
    finally:
        products.close()

    if not args.json:
        print(f"נוספו {len(ids)} פריטים לרשימה '{list_id}'")
        if added:
            print(f"   {added} מוצרים חדשים נשמרו במאגר")


def _cmd_suggest(config, args) -> None:
    products = ProductDB(config.database.path)
    try:
        suggestions = suggest_products(args.text, products.get_dictionary())
    finally:
        products.close()

    if not suggestions:
        print("אין הצעות.")
        return
    for p in suggestions:
        print(f"  {category_icon(p.category, config.categories)} {p.name}")


def _cmd_products(config, args) -> None:
    products = ProductDB(config.database.path)
    try:
        dictionary = products.get_dictionary()
    finally:
        products.close()

    if args.json:
        data = {k: p.to_dict() for k, p in dictionary.items()}
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return
    if not dictionary:
        print("מאגר המוצרים ריק.")
        return
    print(f"📦 {len(dictionary)} מוצרים במאגר:")
    for p in sorted(dictionary.values(), key=lambda x: (x.category, x.name)):
        print(f"  {category_icon(p.category, config.categories)} {p.name}  [{p.category}]")


def _cmd_import_products(config, args) -> None:
    products = ProductDB(config.database.path)
    try:
        count = products.load_common_products(args.file)
    finally:
        products.close()
    print(f"נטענו {count} מוצרים חדשים")


def _cmd_items(config, args) -> None:
    list_id = args.list or config.lists.default_list
    item_db = ItemDB(config.database.path)
    try:
        if args.check is not None and not item_db.set_in_cart(args.check, True):
            raise ValueError(f"פריט {args.check} לא נמצא")
        if args.uncheck is not None and not item_db.set_in_cart(args.uncheck, False):
            raise ValueError(f"פריט {args.uncheck} לא נמצא")
        if args.remove is not None and not item_db.delete_item(args.remove):
            raise ValueError(f"פריט {args.remove} לא נמצא")
        if args.clear:
            cleared = item_db.clear_in_cart(list_id)
            print(f"נמחקו {cleared} פריטים שכבר בעגלה")
        items = item_db.get_items(list_id)
    finally:
        item_db.close()

    if not items:
        print(f"הרשימה '{list_id}' ריקה.")
        return
    print(f"📝 {len(items)} פריטים ברשימה '{list_id}':")
    for i in items:
        mark = "✓" if i.in_cart else " "
        qty = f" ({i.quantity})" if i.quantity else ""
        icon = category_icon(i.category, config.categories)
        print(f"  {i.id:>3} [{mark}] {icon} {i.name}{qty}")
