"""
HTML matching helpers using BeautifulSoup.

Runs a built selector against a document through soupsieve (bs4's `select`).
"""

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError
from typing import Dict, List, Union
import logging

from web_selectors.builder import SelectorBuilder

logger = logging.getLogger(__name__)


def select_elements(html: str, selector: Union[SelectorBuilder, str]) -> List[Dict]:
    css = selector.stringify() if isinstance(selector, SelectorBuilder) else selector
    soup = BeautifulSoup(html, "html.parser")
    try:
        found = soup.select(css)
    except SelectorSyntaxError as e:
        logger.error("Invalid selector %r: %s", css, e)
        raise ValueError(f"Invalid selector {css!r}: {e}") from e

    matches = []
    for el in found:
        attrs = dict(el.attrs)
        matches.append({
            "tag": el.name,
            "id": attrs.get("id"),
            "classes": list(attrs.get("class", [])),
            "attrs": {k: " ".join(v) if isinstance(v, list) else v for k, v in attrs.items()},
            "text": el.get_text(strip=True),
        })
    logger.debug("Selector %r matched %d elements", css, len(matches))
    return matches
