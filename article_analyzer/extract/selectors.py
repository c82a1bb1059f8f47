"""
Selector tables and thresholds for article extraction.

These are plain data consumed by the traversal code in this package.
Callers and tests may pass their own tables instead of these defaults.
"""

from __future__ import annotations

# Elements that never hold article prose.
CLUTTER_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "nav",
    "footer",
    "aside",
    "header",
    '[role="navigation"]',
    '[role="banner"]',
    '[role="complementary"]',
    '[role="contentinfo"]',
    ".ad",
    ".ads",
    ".advert",
    ".advertisement",
    ".sidebar",
    ".comments",
    "#comments",
    ".cookie-banner",
)

# Candidate article containers. Any match counts; the first one in
# document order wins.
CONTENT_SELECTORS: tuple[str, ...] = (
    "article",
    ".article",
    ".article-body",
    "#article-body",
    ".entry-content",
    ".post-body",
    ".post-content",
    "#main-content",
    ".story-content",
    "main",
)

TEXT_BLOCK_TAGS: tuple[str, ...] = ("p", "h1", "h2", "h3", "li", "blockquote")

STRUCTURED_DATA_SELECTOR = 'script[type="application/ld+json"]'

ARTICLE_TYPES: tuple[str, ...] = ("Article", "NewsArticle", "BlogPosting")

MIN_ARTICLE_CHARS = 100
MIN_STRUCTURED_BODY_CHARS = 100
MIN_BLOCK_CHARS = 20

NO_TITLE_PLACEHOLDER = "No title found"
NO_SNIPPET_PLACEHOLDER = "No description available for this article."
