"""Tests for the article text extraction cascade."""

from __future__ import annotations

import json

import pytest

from article_analyzer.config import ExtractConfig
from article_analyzer.core.errors import ExtractionFailed
from article_analyzer.extract import article as article_module
from article_analyzer.extract.article import extract_article_text

BODY_P1 = "Charles Leclerc claimed an emotional home victory at Monaco on Sunday afternoon."
BODY_P2 = "Ferrari's strategy held firm despite late pressure from Oscar Piastri's McLaren."

PARA_1 = "The stewards reviewed the incident at turn one for more than an hour."
PARA_2 = "Both drivers were eventually cleared and the result stands as classified."

NAV_LINKS = "".join(f'<li><a href="/s/{i}">Section {i}</a></li>' for i in range(12))


def _ld(payload) -> str:  # noqa: ANN001
    return f'<script type="application/ld+json">{json.dumps(payload)}</script>'


def _clutter_page(paragraphs: list[str], head: str = "") -> str:
    body = "".join(f"<p>{p}</p>" for p in paragraphs)
    return f"""
    <html>
      <head><title>Race report</title>{head}</head>
      <body>
        <nav><ul>{NAV_LINKS}</ul><p>Navigation paragraph that is long enough to pass the filter.</p></nav>
        <div class="article-body">{body}</div>
        <footer><p>Copyright Paddock Media Group, all rights reserved worldwide.</p></footer>
      </body>
    </html>
    """


def test_structured_data_wins_over_page_content():
    body_html = f"<p>{BODY_P1}</p>\n\n<p>{BODY_P2}</p>"
    html = _clutter_page([PARA_1, PARA_2], head=_ld({"@type": "NewsArticle", "articleBody": body_html}))

    text = extract_article_text(html)

    assert text == f"{BODY_P1}\n{BODY_P2}"
    assert PARA_1 not in text
    assert "Section" not in text


def test_malformed_structured_data_falls_through_to_valid_block():
    body_html = f"{BODY_P1} {BODY_P2}"
    head = (
        '<script type="application/ld+json">{not json at all</script>'
        + _ld({"@type": "Article", "articleBody": body_html})
    )
    html = _clutter_page([PARA_1, PARA_2], head=head)

    assert extract_article_text(html) == body_html


def test_clutter_removed_and_paragraphs_joined():
    html = _clutter_page([PARA_1, PARA_2])

    text = extract_article_text(html)

    assert text == f"{PARA_1}\n\n{PARA_2}"
    assert "Section" not in text
    assert "Navigation paragraph" not in text
    assert "Copyright" not in text


def test_short_result_raises_extraction_failed():
    html = "<html><body><article><p>Only a single short paragraph of text.</p></article></body></html>"

    with pytest.raises(ExtractionFailed) as exc_info:
        extract_article_text(html)

    assert exc_info.value.message == ExtractionFailed.message


def test_empty_document_raises_extraction_failed():
    with pytest.raises(ExtractionFailed):
        extract_article_text("")


def test_short_structured_body_fails_without_dom_fallback():
    # articleBody qualifies by raw length but renders to less than 100 characters
    padded = "<span></span>" * 10 + "Short rendered body."
    html = _clutter_page([PARA_1, PARA_2], head=_ld({"@type": "NewsArticle", "articleBody": padded}))

    with pytest.raises(ExtractionFailed):
        extract_article_text(html)


def test_unexpected_errors_become_extraction_failed(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("parser exploded: <internal detail>")

    monkeypatch.setattr(article_module, "extract_structured_text", boom)

    with pytest.raises(ExtractionFailed) as exc_info:
        extract_article_text(_clutter_page([PARA_1, PARA_2]))

    assert "internal detail" not in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_none_html_raises_extraction_failed():
    with pytest.raises(ExtractionFailed):
        extract_article_text(None)  # type: ignore[arg-type]


def test_thresholds_are_configurable():
    html = "<article><p>A compact but complete race summary.</p></article>"
    cfg = ExtractConfig(min_article_chars=10)

    assert extract_article_text(html, cfg) == "A compact but complete race summary."


def test_library_fallback_runs_after_builtin_cascade(monkeypatch):
    calls = []

    def fake_trafilatura(doc, html, cfg):  # noqa: ANN001
        calls.append(html)
        return "Recovered by the library fallback. " * 4

    monkeypatch.setattr(article_module, "_trafilatura_stage", fake_trafilatura)
    html = "<article><p>Too short to stand alone.</p></article>"

    text = extract_article_text(html, ExtractConfig(fallback=["trafilatura", "unknown"]))

    assert calls == [html]
    assert text.startswith("Recovered by the library fallback.")


def test_library_fallback_not_used_when_builtin_succeeds(monkeypatch):
    def fail_if_called(doc, html, cfg):  # noqa: ANN001
        raise AssertionError("fallback should not run")

    monkeypatch.setattr(article_module, "_readability_stage", fail_if_called)

    text = extract_article_text(_clutter_page([PARA_1, PARA_2]), ExtractConfig(fallback=["readability"]))

    assert text == f"{PARA_1}\n\n{PARA_2}"


def test_unclosed_list_items_are_not_duplicated():
    html = f"<html><body><article><ul><li>{PARA_1}<li>{PARA_2}</ul></article></body></html>"

    assert extract_article_text(html) == f"{PARA_1}\n\n{PARA_2}"


STORY_SENTENCES = [
    "The safety car was deployed on lap thirty-seven after debris was spotted at the hairpin.",
    "Most of the leading runners used the neutralised period to switch onto fresh hard tyres.",
    "Max Verstappen lost two places in the pit lane when his front jack failed to release.",
    "He recovered both positions within six laps and finished a comfortable second overall.",
    "Race control later confirmed that the debris came from a damaged front wing endplate.",
    "The team will investigate the jack failure at the factory before the next round in Austin.",
    "Championship leader Oscar Piastri extended his advantage to forty-one points with the win.",
    "Seven rounds remain, and the title could be decided as early as the Las Vegas weekend.",
]


def _div_only_page() -> str:
    # No block element carries enough text, so the built-in stages find nothing
    story = "".join(
        f"<div>{first} {second}</div>" for first, second in zip(STORY_SENTENCES[::2], STORY_SENTENCES[1::2])
    )
    return f"""
    <html>
      <head><title>Safety car shuffles the order</title></head>
      <body>
        <p>Menu</p>
        <div id="story">{story}</div>
      </body>
    </html>
    """


def test_builtin_stages_fail_on_div_only_page():
    with pytest.raises(ExtractionFailed):
        extract_article_text(_div_only_page())


def test_trafilatura_fallback_recovers_div_only_page():
    text = extract_article_text(_div_only_page(), ExtractConfig(fallback=["trafilatura"]))

    assert len(text) >= 100
    assert STORY_SENTENCES[0] in text


def test_readability_fallback_recovers_div_only_page():
    text = extract_article_text(_div_only_page(), ExtractConfig(fallback=["readability"]))

    assert len(text) >= 100
    assert STORY_SENTENCES[0] in text
