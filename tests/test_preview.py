"""Tests for preview metadata extraction."""

from __future__ import annotations

import pytest

from article_analyzer.core.errors import PreviewUnavailable
from article_analyzer.core.types import PreviewMetadata
from article_analyzer.extract.preview import extract_preview

URL = "https://example.com/f1/monaco-report"


def test_placeholders_when_no_metadata():
    preview = extract_preview("<html><body><p>Nothing here</p></body></html>", URL)

    assert preview == PreviewMetadata(
        title="No title found",
        snippet="No description available for this article.",
        url=URL,
    )


def test_open_graph_title_wins_over_title_element():
    html = '<html><head><meta property="og:title" content="X"><title>Y</title></head></html>'

    assert extract_preview(html, URL).title == "X"


def test_title_element_used_without_open_graph():
    html = "<html><head><title>  Monaco Grand Prix report \n</title></head></html>"

    assert extract_preview(html, URL).title == "Monaco Grand Prix report"


def test_snippet_precedence():
    both = (
        '<meta name="description" content="Standard description">'
        '<meta property="og:description" content="OG description">'
    )
    standard_only = '<meta name="description" content=" Standard description ">'

    assert extract_preview(f"<head>{both}</head>", URL).snippet == "OG description"
    assert extract_preview(f"<head>{standard_only}</head>", URL).snippet == "Standard description"


def test_blank_values_fall_through():
    html = (
        '<head><meta property="og:title" content="   "><title>Real title</title>'
        '<meta property="og:description" content=""></head>'
    )

    preview = extract_preview(html, URL)

    assert preview.title == "Real title"
    assert preview.snippet == "No description available for this article."


def test_meta_without_content_attribute_is_ignored():
    html = '<head><meta property="og:title"><title>Fallback title</title></head>'

    assert extract_preview(html, URL).title == "Fallback title"


def test_url_is_passed_through_unchanged():
    assert extract_preview("", URL).url == URL


def test_unparseable_input_raises_preview_unavailable():
    with pytest.raises(PreviewUnavailable) as exc_info:
        extract_preview(None, URL)  # type: ignore[arg-type]

    assert exc_info.value.message == PreviewUnavailable.message
