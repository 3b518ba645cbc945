"""
CLI entry point for building a CSS selector and optionally matching it against HTML.
Usage:
    python -m app.main --element a --attr 'href$=".png"' --pseudo-class focus
    python -m app.main --id main --class container --html page.html --out data/matches.json
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from utils.logging_config import configure_logging
from utils.io import save_json_atomic
from utils.parser import select_elements
from web_selectors import SelectorBuilder

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Build a CSS selector from its parts")
    parser.add_argument("--element", help="Element (type) selector, e.g. div")
    parser.add_argument("--id", help="Id selector without the leading #")
    parser.add_argument("--class", dest="classes", action="append", default=[], help="Class name, repeatable")
    parser.add_argument("--attr", dest="attrs", action="append", default=[], help="Attribute expression without brackets, repeatable")
    parser.add_argument("--pseudo-class", dest="pseudo_classes", action="append", default=[], help="Pseudo-class without the colon, repeatable")
    parser.add_argument("--pseudo-element", help="Pseudo-element without the colons")
    parser.add_argument("--html", help="HTML file to match the selector against")
    parser.add_argument("--out", help="Write selector and matches as JSON to this file")
    return parser.parse_args(argv)


def build_selector(args) -> SelectorBuilder:
    selector = SelectorBuilder()
    if args.element:
        selector = selector.element(args.element)
    if args.id:
        selector = selector.id(args.id)
    for value in args.classes:
        selector = selector.class_(value)
    for value in args.attrs:
        selector = selector.attr(value)
    for value in args.pseudo_classes:
        selector = selector.pseudo_class(value)
    if args.pseudo_element:
        selector = selector.pseudo_element(args.pseudo_element)
    return selector


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    args = parse_args(argv)

    selector = build_selector(args)

    css = selector.stringify()
    logger.info("Built selector %r", css)
    print(css)

    result = {"selector": css, "matches": []}
    if args.html:
        try:
            html = Path(args.html).read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Could not read HTML file %s: %s", args.html, e)
            return 2
        try:
            result["matches"] = select_elements(html, selector)
        except ValueError as e:
            logger.error("Could not match selector: %s", e)
            return 2
        logger.info("Selector matched %d elements in %s", len(result["matches"]), args.html)

    if args.out:
        save_json_atomic(result, args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
