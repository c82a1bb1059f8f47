"""Removal of navigation, ads and other non-article regions."""

from __future__ import annotations

from typing import Iterable

from bs4 import BeautifulSoup

from .selectors import CLUTTER_SELECTORS


def strip_clutter(doc: BeautifulSoup, selectors: Iterable[str] = CLUTTER_SELECTORS) -> int:
    """Remove every element matching a clutter selector, in place.

    Running it again on the same document removes nothing further.

    Args:
        doc: Parsed HTML document, modified in place
        selectors: CSS selectors of elements to drop

    Returns:
        Number of elements removed (nested matches inside an already
        removed element are not counted)
    """
    query = ", ".join(selectors)
    if not query:
        return 0

    removed = 0
    for element in doc.select(query):
        # A match nested inside an earlier match is already gone
        if element.decomposed:
            continue
        element.decompose()
        removed += 1
    return removed
