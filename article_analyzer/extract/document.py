"""HTML parsing and text normalization shared by the extractors."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_WHITESPACE_RUN_RE = re.compile(r"\s\s+")


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML document or fragment into a queryable tree.

    lxml closes implicitly-ended elements (an open <p> or <li> ends at the
    next sibling) and always provides <html> and <body> elements.

    Raises:
        TypeError: If html is None
    """
    if html is None:
        raise TypeError("html must be a string, not None")
    return BeautifulSoup(html, "lxml")


def html_to_text(fragment: str) -> str:
    """Return the text content of an HTML fragment."""
    return parse_html(fragment).get_text()


def normalize_whitespace(text: str) -> str:
    """Collapse runs of two or more whitespace characters into a newline and trim.

    Examples:
        >>> normalize_whitespace("  Lap one.   Lap two.\\n\\n")
        'Lap one.\\nLap two.'
    """
    return _WHITESPACE_RUN_RE.sub("\n", text).strip()
