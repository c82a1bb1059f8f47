"""
HTTP content fetching with httpx.

Two entry points share one contract:
1. fetch_url: synchronous client, used by the CLI commands
2. fetch_url_async: asynchronous client, used when the text and preview
   flows run concurrently

Both retry with a linear back-off, follow redirects, and optionally route
the request through a relay given by a proxy template.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import time
from urllib.parse import quote

import httpx


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either text will be populated (success) or error will be populated (failure),
    but never both. status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        text: The response body text, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    text: str | None
    error: str | None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None


def build_request_url(url: str, proxy_template: str | None = None) -> str:
    """Return the URL to request, routed through a relay when configured.

    Examples:
        >>> build_request_url("https://example.com/a?b=1", "https://relay.test/raw?url={url}")
        'https://relay.test/raw?url=https%3A%2F%2Fexample.com%2Fa%3Fb%3D1'
    """
    if not proxy_template:
        return url
    return proxy_template.format(url=quote(url, safe=""))


def fetch_url(
    url: str,
    timeout: float,
    retries: int,
    user_agent: str,
    trust_env: bool,
    proxy_template: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> FetchResult:
    """Fetch a URL using httpx with retry logic.

    Network errors are retried; an HTTP error status is final and reported
    without retrying.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        retries: Number of retry attempts after initial failure
        user_agent: User-Agent header string
        trust_env: Whether to respect system proxy settings from environment
        proxy_template: Optional relay URL template with a "{url}" placeholder
        transport: Optional httpx transport (e.g. httpx.MockTransport)

    Returns:
        FetchResult with text on success or error message on failure
    """
    headers = {"User-Agent": user_agent}
    request_url = build_request_url(url, proxy_template)
    last_error: str | None = None

    for attempt in range(retries + 1):
        try:
            with httpx.Client(
                timeout=timeout,
                headers=headers,
                follow_redirects=True,
                trust_env=trust_env,
                transport=transport,
            ) as client:
                resp = client.get(request_url)
                return _to_result(url, resp)
        except httpx.HTTPError as exc:
            last_error = f"{type(exc).__name__}: {exc}"
            if attempt < retries:
                # Linear back-off: 0.5s, 1.0s, 1.5s...
                time.sleep(0.5 * (attempt + 1))

    return FetchResult(url=url, status_code=None, text=None, error=last_error)


async def fetch_url_async(
    url: str,
    timeout: float,
    retries: int,
    user_agent: str,
    trust_env: bool,
    proxy_template: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchResult:
    """Asynchronous variant of fetch_url with the same contract."""
    headers = {"User-Agent": user_agent}
    request_url = build_request_url(url, proxy_template)
    last_error: str | None = None

    for attempt in range(retries + 1):
        try:
            async with httpx.AsyncClient(
                timeout=timeout,
                headers=headers,
                follow_redirects=True,
                trust_env=trust_env,
                transport=transport,
            ) as client:
                resp = await client.get(request_url)
                return _to_result(url, resp)
        except httpx.HTTPError as exc:
            last_error = f"{type(exc).__name__}: {exc}"
            if attempt < retries:
                await asyncio.sleep(0.5 * (attempt + 1))

    return FetchResult(url=url, status_code=None, text=None, error=last_error)


def _to_result(url: str, resp: httpx.Response) -> FetchResult:
    if resp.is_success:
        return FetchResult(url=url, status_code=resp.status_code, text=resp.text, error=None)
    return FetchResult(
        url=url,
        status_code=resp.status_code,
        text=None,
        error=f"HTTP {resp.status_code}",
    )
