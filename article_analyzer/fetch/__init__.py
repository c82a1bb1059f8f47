"""
Article fetching.

This package retrieves raw HTML for the extractors. Extraction itself
never performs network I/O.
"""

from .fetcher import FetchResult, build_request_url, fetch_url, fetch_url_async

__all__ = ["FetchResult", "build_request_url", "fetch_url", "fetch_url_async"]
