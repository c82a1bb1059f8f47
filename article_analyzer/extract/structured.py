"""
Article body extraction from JSON-LD structured data.

Publishers frequently embed a schema.org Article (or NewsArticle /
BlogPosting) object in a ``<script type="application/ld+json">`` block.
When it carries the full ``articleBody`` it is the most reliable source of
text available, so it is tried before any DOM heuristics.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator

from bs4 import BeautifulSoup

from ..core.types import StructuredArticleCandidate
from .document import html_to_text, normalize_whitespace
from .selectors import ARTICLE_TYPES, MIN_STRUCTURED_BODY_CHARS, STRUCTURED_DATA_SELECTOR

logger = logging.getLogger(__name__)


def extract_structured_text(
    doc: BeautifulSoup,
    min_body_chars: int = MIN_STRUCTURED_BODY_CHARS,
    article_types: tuple[str, ...] = ARTICLE_TYPES,
) -> str | None:
    """Extract plain article text from the first qualifying JSON-LD node.

    Args:
        doc: Parsed HTML document
        min_body_chars: articleBody must be strictly longer than this
        article_types: Accepted schema.org types

    Returns:
        The whitespace-normalized body text, or None if no block holds an
        article node with a long enough body
    """
    candidate = find_article_candidate(doc, min_body_chars, article_types)
    if candidate is None:
        return None
    logger.debug("Using JSON-LD %s body", candidate.type_tag)
    return normalize_whitespace(html_to_text(candidate.body_html))


def find_article_candidate(
    doc: BeautifulSoup,
    min_body_chars: int = MIN_STRUCTURED_BODY_CHARS,
    article_types: tuple[str, ...] = ARTICLE_TYPES,
) -> StructuredArticleCandidate | None:
    """Return the first article node across all JSON-LD blocks, in document order."""
    for index, script in enumerate(doc.select(STRUCTURED_DATA_SELECTOR)):
        raw = script.string or script.get_text()
        if not raw.strip():
            continue
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            logger.warning("Skipping malformed JSON-LD block", extra={"block": index, "error": str(exc)})
            continue

        for node in _candidate_nodes(data):
            type_tag = _matching_type(node.get("@type"), article_types)
            body = node.get("articleBody")
            if type_tag and isinstance(body, str) and len(body) > min_body_chars:
                return StructuredArticleCandidate(type_tag=type_tag, body_html=body)
    return None


def _candidate_nodes(data: Any) -> Iterator[dict[str, Any]]:
    """Flatten a JSON-LD root into the nodes worth inspecting.

    A root with an ``@graph`` property yields that graph, a list root is
    used as-is, and anything else is treated as a single node. Entries that
    are not JSON objects are skipped.
    """
    if isinstance(data, dict) and data.get("@graph"):
        nodes = data["@graph"]
    elif isinstance(data, list):
        nodes = data
    else:
        nodes = [data]

    if isinstance(nodes, dict):
        nodes = [nodes]
    if not isinstance(nodes, list):
        return

    for node in nodes:
        if isinstance(node, dict):
            yield node


def _matching_type(type_value: Any, article_types: tuple[str, ...]) -> str | None:
    """Return the accepted type named by an ``@type`` value, if any.

    ``@type`` may be a single string or a list of strings.
    """
    if isinstance(type_value, str):
        return type_value if type_value in article_types else None
    if isinstance(type_value, list):
        for value in type_value:
            if isinstance(value, str) and value in article_types:
                return value
    return None
