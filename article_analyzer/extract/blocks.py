"""
Heuristic article text selection from the DOM.

Used when a page carries no usable structured data. The container is
chosen by a fixed priority list rather than by scoring: the first element
in document order that matches any content selector wins. Inside it, text
blocks (paragraphs, headings, list items, quotes) are kept when they are
long enough to be prose rather than UI labels such as "Share" or
"Read more".
"""

from __future__ import annotations

from typing import Iterable

from bs4 import BeautifulSoup, Tag

from .document import normalize_whitespace
from .selectors import CONTENT_SELECTORS, MIN_BLOCK_CHARS, TEXT_BLOCK_TAGS


def select_content_text(
    doc: BeautifulSoup,
    container_selectors: Iterable[str] = CONTENT_SELECTORS,
    block_tags: Iterable[str] = TEXT_BLOCK_TAGS,
    min_block_chars: int = MIN_BLOCK_CHARS,
) -> str:
    """Join the meaningful text blocks of the main content container.

    Args:
        doc: Parsed (and usually clutter-stripped) HTML document
        container_selectors: Candidate container selectors
        block_tags: Tag names treated as text blocks
        min_block_chars: Blocks must be strictly longer than this once trimmed

    Returns:
        Blocks joined by a blank line, or the container's whole normalized
        text when it has no block elements at all. May be empty; length
        validation is up to the caller.
    """
    container = find_content_container(doc, container_selectors)
    blocks = container.select(", ".join(block_tags))

    if not blocks:
        return normalize_whitespace(container.get_text())

    fragments = [block.get_text().strip() for block in blocks]
    return "\n\n".join(text for text in fragments if len(text) > min_block_chars).strip()


def find_content_container(
    doc: BeautifulSoup,
    container_selectors: Iterable[str] = CONTENT_SELECTORS,
) -> Tag:
    """Return the first matching content container, falling back to <body>."""
    query = ", ".join(container_selectors)
    container = doc.select_one(query) if query else None
    if container is not None:
        return container
    return doc.body or doc
