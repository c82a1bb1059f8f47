"""
Fetch, extract and analyze articles.

This module coordinates the workflow around the extractors:
1. Fetch the page (once for the text, once for the preview)
2. Extract article text and preview metadata independently
3. Send the extracted text to the analysis provider

The text and preview flows share nothing and run concurrently in
analyze_url; either may fail without affecting the other.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from .config import AppConfig, FetchConfig
from .core.errors import ArticleAnalyzerError, FetchFailed
from .core.types import AnalysisResult, ArticleReport, PreviewMetadata
from .extract.article import extract_article_text
from .extract.preview import extract_preview
from .fetch.fetcher import FetchResult, fetch_url, fetch_url_async
from .llm.providers.base import AnalysisProvider

logger = logging.getLogger(__name__)


def fetch_html(url: str, cfg: FetchConfig, transport: httpx.BaseTransport | None = None) -> str:
    """Fetch a page synchronously, raising FetchFailed on any failure."""
    result = fetch_url(
        url,
        timeout=cfg.timeout_seconds,
        retries=cfg.retries,
        user_agent=cfg.user_agent,
        trust_env=cfg.trust_env,
        proxy_template=cfg.proxy_template,
        transport=transport,
    )
    return _html_or_raise(result)


async def fetch_html_async(
    url: str,
    cfg: FetchConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Fetch a page asynchronously, raising FetchFailed on any failure."""
    result = await fetch_url_async(
        url,
        timeout=cfg.timeout_seconds,
        retries=cfg.retries,
        user_agent=cfg.user_agent,
        trust_env=cfg.trust_env,
        proxy_template=cfg.proxy_template,
        transport=transport,
    )
    return _html_or_raise(result)


async def fetch_article_text(
    url: str,
    cfg: AppConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Fetch a URL and extract its article text.

    Raises:
        FetchFailed: If the page cannot be retrieved
        ExtractionFailed: If no meaningful text can be extracted
    """
    html = await fetch_html_async(url, cfg.fetch, transport)
    text = await asyncio.to_thread(extract_article_text, html, cfg.extract)
    logger.info("Article text extracted", extra={"url": url, "text_length": len(text)})
    return text


async def fetch_article_preview(
    url: str,
    cfg: AppConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PreviewMetadata:
    """Fetch a URL and build its preview card.

    Raises:
        FetchFailed: If the page cannot be retrieved
        PreviewUnavailable: If the HTML cannot be parsed
    """
    html = await fetch_html_async(url, cfg.fetch, transport)
    return await asyncio.to_thread(extract_preview, html, url)


def analyze_text(text: str, provider: AnalysisProvider, source: str | None = None) -> AnalysisResult:
    """Analyze already-extracted or pasted article text.

    Raises:
        ValueError: If text is empty
        AnalysisFailed: If the provider call fails
    """
    if not text or not text.strip():
        raise ValueError("Article text is empty")
    return provider.analyze_article(text.strip(), source=source)


async def analyze_url(
    url: str,
    cfg: AppConfig,
    provider: AnalysisProvider | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ArticleReport:
    """Gather preview, text and (optionally) analysis for a URL.

    Typed failures are recorded in the report instead of being raised.
    Analysis runs only when text was extracted and a provider is given.
    """
    report = ArticleReport(url=url)
    preview_result, text_result = await asyncio.gather(
        fetch_article_preview(url, cfg, transport),
        fetch_article_text(url, cfg, transport),
        return_exceptions=True,
    )

    if isinstance(preview_result, ArticleAnalyzerError):
        report.errors["preview"] = preview_result.message
    elif isinstance(preview_result, BaseException):
        raise preview_result
    else:
        report.preview = preview_result

    if isinstance(text_result, ArticleAnalyzerError):
        report.errors["text"] = text_result.message
    elif isinstance(text_result, BaseException):
        raise text_result
    else:
        report.text = text_result

    if report.text and provider is not None:
        try:
            report.analysis = await asyncio.to_thread(analyze_text, report.text, provider, url)
        except ArticleAnalyzerError as exc:
            report.errors["analysis"] = exc.message

    if report.errors:
        logger.warning("Article analysis incomplete", extra={"url": url, "errors": report.errors})
    return report


def _html_or_raise(result: FetchResult) -> str:
    if result.ok:
        return result.text or ""
    logger.warning(
        "Fetch failed",
        extra={"url": result.url, "status_code": result.status_code, "error": result.error},
    )
    raise FetchFailed(result.url, status_code=result.status_code, reason=result.error)
