"""
Core data structures and error taxonomy.

This package contains the dataclasses shared by every pipeline stage
and the exceptions surfaced to callers.
"""

from .errors import (
    AnalysisFailed,
    ArticleAnalyzerError,
    ExtractionFailed,
    FetchFailed,
    PreviewUnavailable,
)
from .types import AnalysisResult, ArticleReport, PreviewMetadata, Sentiment, StructuredArticleCandidate

__all__ = [
    "AnalysisFailed",
    "AnalysisResult",
    "ArticleAnalyzerError",
    "ArticleReport",
    "ExtractionFailed",
    "FetchFailed",
    "PreviewMetadata",
    "PreviewUnavailable",
    "Sentiment",
    "StructuredArticleCandidate",
]
