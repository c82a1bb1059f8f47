"""
Article content extraction.

This package turns raw HTML into plain article text and preview
metadata, without any site-specific configuration.
"""

from .article import extract_article_text
from .blocks import find_content_container, select_content_text
from .clutter import strip_clutter
from .document import parse_html
from .preview import extract_preview
from .structured import extract_structured_text, find_article_candidate

__all__ = [
    "extract_article_text",
    "extract_preview",
    "extract_structured_text",
    "find_article_candidate",
    "find_content_container",
    "parse_html",
    "select_content_text",
    "strip_clutter",
]
