"""
Core data types for the article analyzer.

- StructuredArticleCandidate: an article node found in JSON-LD data
- PreviewMetadata: title/snippet card for a URL
- AnalysisResult: LLM summary, keywords and sentiment for an article
- ArticleReport: everything gathered for one URL, including failures
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Sentiment(str, Enum):
    """Overall sentiment classification of an article."""

    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


@dataclass
class StructuredArticleCandidate:
    """An article-typed node taken from a JSON-LD block.

    Attributes:
        type_tag: The schema.org type that matched (e.g. "NewsArticle")
        body_html: The raw articleBody value, which may contain markup
    """
    type_tag: str
    body_html: str


@dataclass
class PreviewMetadata:
    """Preview card data for an article URL.

    Attributes:
        title: Open Graph title, <title> text, or a placeholder
        snippet: Open Graph or meta description, or a placeholder
        url: The source URL, passed through unchanged
    """
    title: str
    snippet: str
    url: str


@dataclass
class AnalysisResult:
    """Structured result of analysing one article.

    Attributes:
        summary: A concise summary of the article's main points
        keywords: Key topics such as people, teams, places or technical terms
        sentiment: Overall sentiment of the article
        sentiment_reason: One sentence explaining the sentiment
        meta: Extra details such as the model used
    """
    summary: str
    keywords: list[str]
    sentiment: Sentiment
    sentiment_reason: str
    meta: dict[str, str] = field(default_factory=dict)


@dataclass
class ArticleReport:
    """Everything gathered for a single URL.

    Any of preview, text or analysis may be None; the matching user-facing
    message is then recorded in errors under the stage name
    ("preview", "text" or "analysis").
    """
    url: str
    text: str | None = None
    preview: PreviewMetadata | None = None
    analysis: AnalysisResult | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors
