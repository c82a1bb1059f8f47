"""
Article Analyzer - content extraction and AI analysis for news articles.

This package recovers the main body text and a preview card from the raw
HTML of arbitrary news sites, then sends the text to an LLM for a
summary, keywords and sentiment.

Main entry point is the CLI via the `article-analyzer` command.

Example:
    $ article-analyzer analyze https://example.com/news/story
"""

__all__ = [
    "__version__",
    "extract_article_text",
    "extract_preview",
    "ExtractionFailed",
    "FetchFailed",
    "PreviewUnavailable",
    "PreviewMetadata",
]
__version__ = "0.1.0"

from .core.errors import ExtractionFailed, FetchFailed, PreviewUnavailable
from .core.types import PreviewMetadata
from .extract.article import extract_article_text
from .extract.preview import extract_preview
