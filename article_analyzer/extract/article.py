"""
Article text extraction with a cascade of strategies.

The cascade is an ordered list of stage functions, each returning text or
None (nothing found, hand off to the next stage):
1. structured: JSON-LD articleBody (authoritative when present)
2. blocks: clutter removal followed by content-container heuristics
3. optional library fallbacks from ExtractConfig.fallback
   ("trafilatura", "readability")

Structured data ends the cascade whenever it yields any text: the page
markup is never consulted for an article that describes its own body. Only
when it yields nothing do the DOM stages run, and the first of those
producing at least ``min_article_chars`` characters wins. Anything shorter
is never returned; the call fails with ExtractionFailed.
"""

from __future__ import annotations

import logging
from typing import Callable

from bs4 import BeautifulSoup
from readability import Document
import trafilatura

from ..config import ExtractConfig
from ..core.errors import ExtractionFailed
from .blocks import select_content_text
from .clutter import strip_clutter
from .document import html_to_text, normalize_whitespace, parse_html
from .structured import extract_structured_text

logger = logging.getLogger(__name__)

Stage = Callable[[BeautifulSoup, str, ExtractConfig], "str | None"]


def extract_article_text(html: str, cfg: ExtractConfig | None = None) -> str:
    """Extract the main article body of an HTML page as plain text.

    Args:
        html: The full HTML document
        cfg: Extraction thresholds and fallbacks (defaults if None)

    Returns:
        Plain text with paragraphs separated by a blank line

    Raises:
        ExtractionFailed: If no stage yields enough text, or parsing fails
    """
    cfg = cfg or ExtractConfig()
    try:
        doc = parse_html(html)
        for name, stage in _stages(cfg):
            text = stage(doc, html, cfg)
            if not text:
                logger.debug("Extraction stage found nothing", extra={"stage": name})
                continue
            if len(text) < cfg.min_article_chars:
                logger.debug(
                    "Extraction stage text too short",
                    extra={"stage": name, "text_length": len(text)},
                )
                if name == "structured":
                    break
                continue
            logger.debug("Extraction succeeded", extra={"stage": name, "text_length": len(text)})
            return text
    except Exception as exc:  # noqa: BLE001
        logger.warning("Error parsing HTML during content extraction", extra={"error": repr(exc)})
        raise ExtractionFailed() from exc

    raise ExtractionFailed()


def _stages(cfg: ExtractConfig) -> list[tuple[str, Stage]]:
    """Build the ordered cascade for a config."""
    stages: list[tuple[str, Stage]] = [
        ("structured", _structured_stage),
        ("blocks", _blocks_stage),
    ]
    for name in cfg.fallback:
        stage = _get_fallback(name)
        if stage is None:
            logger.warning("Unknown extraction fallback ignored", extra={"fallback": name})
            continue
        stages.append((name, stage))
    return stages


def _get_fallback(name: str) -> Stage | None:
    if name == "trafilatura":
        return _trafilatura_stage
    if name == "readability":
        return _readability_stage
    return None


def _structured_stage(doc: BeautifulSoup, html: str, cfg: ExtractConfig) -> str | None:
    return extract_structured_text(doc, min_body_chars=cfg.min_structured_body_chars)


def _blocks_stage(doc: BeautifulSoup, html: str, cfg: ExtractConfig) -> str | None:
    strip_clutter(doc)
    return select_content_text(doc, min_block_chars=cfg.min_block_chars) or None


def _trafilatura_stage(doc: BeautifulSoup, html: str, cfg: ExtractConfig) -> str | None:
    text = trafilatura.extract(html, include_comments=False, include_tables=False)
    return text.strip() if text else None


def _readability_stage(doc: BeautifulSoup, html: str, cfg: ExtractConfig) -> str | None:
    content_html = Document(html).summary()
    return normalize_whitespace(html_to_text(content_html)) or None
