"""
Preview metadata (title and snippet) from Open Graph and meta tags.

This is a lighter path than full text extraction. Missing fields are
cosmetic, so each one falls back to a placeholder instead of failing.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from ..core.errors import PreviewUnavailable
from ..core.types import PreviewMetadata
from .document import parse_html
from .selectors import NO_SNIPPET_PLACEHOLDER, NO_TITLE_PLACEHOLDER

logger = logging.getLogger(__name__)


def extract_preview(html: str, source_url: str) -> PreviewMetadata:
    """Build a preview card for an HTML page.

    Title precedence: og:title, <title>, placeholder.
    Snippet precedence: og:description, meta description, placeholder.

    Raises:
        PreviewUnavailable: If the HTML cannot be parsed at all
    """
    try:
        doc = parse_html(html)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Error parsing HTML for preview", extra={"url": source_url, "error": repr(exc)})
        raise PreviewUnavailable() from exc

    title = (
        _meta_content(doc, property="og:title")
        or _title_text(doc)
        or NO_TITLE_PLACEHOLDER
    )
    snippet = (
        _meta_content(doc, property="og:description")
        or _meta_content(doc, name="description")
        or NO_SNIPPET_PLACEHOLDER
    )
    return PreviewMetadata(title=title, snippet=snippet, url=source_url)


def _meta_content(doc: BeautifulSoup, **attrs: str) -> str | None:
    tag = doc.find("meta", attrs=attrs)
    if tag is None:
        return None
    content = tag.get("content")
    if not isinstance(content, str):
        return None
    return content.strip() or None


def _title_text(doc: BeautifulSoup) -> str | None:
    if doc.title is None:
        return None
    return doc.title.get_text().strip() or None
