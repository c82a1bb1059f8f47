"""
Failures surfaced by the article analyzer.

Every exception carries a static, user-safe message. Technical details
(status codes, parser errors) live in attributes and in the logs, never
in the message shown to the user.
"""

from __future__ import annotations


class ArticleAnalyzerError(Exception):
    """Base class for all typed failures of this package."""

    message = "An unexpected error occurred while processing the article."

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class ExtractionFailed(ArticleAnalyzerError):
    """No cascade stage produced enough article text."""

    message = "Could not extract meaningful article content from this page."


class FetchFailed(ArticleAnalyzerError):
    """The remote document could not be retrieved.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status code, or None for network-level failures
        reason: Short technical description kept for logging
    """

    message = "Failed to fetch the article. The website might be blocking requests."

    def __init__(self, url: str, status_code: int | None = None, reason: str | None = None):
        super().__init__()
        self.url = url
        self.status_code = status_code
        self.reason = reason


class PreviewUnavailable(ArticleAnalyzerError):
    """The HTML could not be parsed at all, so no preview can be built."""

    message = "Could not parse the article's website to generate a preview."


class AnalysisFailed(ArticleAnalyzerError):
    """The remote analysis call failed or returned an unusable payload."""

    message = "Failed to analyze the article. Please try again later."

    def __init__(self, reason: str | None = None):
        super().__init__()
        self.reason = reason
