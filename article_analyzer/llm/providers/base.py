"""Abstract interface for LLM-driven article analysis."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.types import AnalysisResult


class AnalysisProvider(ABC):
    """Provider interface for summary, keyword and sentiment analysis."""

    @abstractmethod
    def analyze_article(self, text: str, source: str | None = None) -> AnalysisResult:
        """Analyze the plain text of one article.

        Args:
            text: The full article text
            source: Optional URL or label of the article, used for logging

        Returns:
            AnalysisResult with summary, keywords and sentiment

        Raises:
            AnalysisFailed: If the call fails or the response is unusable
        """
        raise NotImplementedError
