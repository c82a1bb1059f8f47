"""Tests for content container selection and text block joining."""

from __future__ import annotations

from article_analyzer.extract.blocks import find_content_container, select_content_text
from article_analyzer.extract.document import parse_html

LONG_1 = "Lando Norris took pole position in Miami with a stunning final lap."
LONG_2 = "McLaren have now started from the front row in four consecutive races."
LONG_3 = "The championship battle looks set to go down to the final round."


def test_blocks_joined_with_blank_lines_in_document_order():
    doc = parse_html(
        f"""
        <body>
          <article>
            <h1>{LONG_1}</h1>
            <p>Share</p>
            <ul><li>{LONG_2}</li><li>Read more</li></ul>
            <blockquote>{LONG_3}</blockquote>
          </article>
        </body>
        """
    )

    assert select_content_text(doc) == f"{LONG_1}\n\n{LONG_2}\n\n{LONG_3}"


def test_block_must_exceed_minimum_length():
    exactly_20 = "x" * 20
    twenty_one = "y" * 21
    doc = parse_html(f"<article><p>{exactly_20}</p><p>  {twenty_one}  </p></article>")

    assert select_content_text(doc) == twenty_one


def test_first_matching_container_in_document_order_wins():
    doc = parse_html(
        f"""
        <body>
          <div class="post-content"><p>{LONG_1}</p></div>
          <article><p>{LONG_2}</p></article>
        </body>
        """
    )

    container = find_content_container(doc)

    assert container.get("class") == ["post-content"]
    assert select_content_text(doc) == LONG_1


def test_falls_back_to_body_without_container():
    doc = parse_html(f"<html><body><div><p>{LONG_1}</p></div><p>{LONG_2}</p></body></html>")

    assert find_content_container(doc).name == "body"
    assert select_content_text(doc) == f"{LONG_1}\n\n{LONG_2}"


def test_fragments_get_an_implied_body():
    doc = parse_html(f"<p>{LONG_1}</p>")

    assert find_content_container(doc).name == "body"
    assert select_content_text(doc) == LONG_1


def test_head_text_is_not_part_of_the_body_fallback():
    doc = parse_html(f"<html><head><title>Headline title</title></head><div>{LONG_1}</div></html>")

    assert find_content_container(doc).name == "body"
    assert select_content_text(doc) == LONG_1


def test_unclosed_paragraphs_are_separate_blocks():
    doc = parse_html(f"<article><p>{LONG_1}<p>{LONG_2}</article>")

    assert select_content_text(doc) == f"{LONG_1}\n\n{LONG_2}"


def test_unclosed_list_items_are_separate_blocks():
    doc = parse_html(f"<article><ul><li>{LONG_1}<li>{LONG_2}</ul></article>")

    assert select_content_text(doc) == f"{LONG_1}\n\n{LONG_2}"


def test_container_without_blocks_uses_its_text():
    doc = parse_html(
        f"<body><main><div>{LONG_1}</div>\n\n   <div>{LONG_2}</div></main></body>"
    )

    assert select_content_text(doc) == f"{LONG_1}\n{LONG_2}"


def test_custom_tables():
    doc = parse_html(
        f"""
        <body>
          <div class="story"><span>{LONG_1}</span></div>
          <article><p>{LONG_2}</p></article>
        </body>
        """
    )

    text = select_content_text(doc, container_selectors=[".story"], block_tags=["span"], min_block_chars=5)

    assert text == LONG_1
