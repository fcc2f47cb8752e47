"""Unit tests for the clickable block annotator."""

from __future__ import annotations

from bs4 import BeautifulSoup

from devreader.clickable_blocks import (
    CLICKABLE_CLASS,
    SELECTED_CLASSES,
    annotate_clickable_blocks,
    collect_clickable_blocks,
    mark_clickable_blocks,
)
from devreader.reading_models import Block

ARTICLE_HTML = (
    "<h2>Section heading here</h2>"
    '<p class="lead">Intro paragraph with <a href="https://example.dev">a link</a>.</p>'
    "<ul><li>Item one is long enough</li><li>Item two is long enough</li></ul>"
    "<blockquote><p>Quoted paragraph inside a quote.</p></blockquote>"
)


def _clickable(html: str) -> list:
    return BeautifulSoup(html, "html.parser").find_all(class_=CLICKABLE_CLASS)


def test_outer_list_wins_over_its_items() -> None:
    html = "<ul><li>Short</li><li>This list item is definitely long enough to qualify</li></ul>"

    marked = _clickable(annotate_clickable_blocks(html))

    assert [element.name for element in marked] == ["ul"]
    assert collect_clickable_blocks(html) == [
        Block(kind="ul", text="ShortThis list item is definitely long enough to qualify"),
    ]


def test_paragraph_inside_quote_wins_over_quote() -> None:
    html = "<blockquote><p>Quoted paragraph inside a quote.</p></blockquote>"

    assert [block.kind for block in collect_clickable_blocks(html)] == ["p"]


def test_blocks_follow_selector_order_then_document_order() -> None:
    kinds = [block.kind for block in collect_clickable_blocks(ARTICLE_HTML)]

    assert kinds == ["p", "p", "ul", "h2"]


def test_short_blocks_are_skipped() -> None:
    html = "<p>Too short</p><p>Exactly 10</p><p>   </p>"

    assert [block.text for block in collect_clickable_blocks(html)] == ["Exactly 10"]


def test_marking_keeps_classes_and_sets_attributes() -> None:
    html = '<p class="lead">Use x &lt; y in conditions.</p>'

    (element,) = _clickable(annotate_clickable_blocks(html))

    assert element["class"][0] == "lead"
    assert "hover:bg-blue-50" in element["class"]
    assert element["data-sentence"] == "Use x < y in conditions."
    assert element["tabindex"] == "0"


def test_selected_block_is_highlighted() -> None:
    html = "<p>First paragraph text.</p><p>Second paragraph text.</p>"

    first, second = _clickable(annotate_clickable_blocks(html, "Second paragraph text."))

    assert all(name in second["class"] for name in SELECTED_CLASSES)
    assert not any(name in first["class"] for name in SELECTED_CLASSES)
    assert "hover:bg-blue-50" in first["class"]


def test_blocks_with_identical_text_are_selected_together() -> None:
    html = "<p>Repeated paragraph.</p><p>Other paragraph here.</p><p>Repeated paragraph.</p>"

    blocks = collect_clickable_blocks(html, "Repeated paragraph.")

    assert [block.selected for block in blocks] == [True, False, True]


def test_annotating_twice_is_stable() -> None:
    once = annotate_clickable_blocks(ARTICLE_HTML, "Section heading here")

    assert annotate_clickable_blocks(once, "Section heading here") == once


def test_body_inner_html_is_returned() -> None:
    html = "<html><head><title>x</title></head><body><p>Paragraph inside body.</p></body></html>"

    annotated = annotate_clickable_blocks(html)

    assert annotated.startswith("<p ")
    assert "<body" not in annotated and "<title" not in annotated


def test_empty_document() -> None:
    assert annotate_clickable_blocks("") == ""
    assert collect_clickable_blocks("") == []


def test_single_pass_returns_html_and_blocks_together() -> None:
    annotated = mark_clickable_blocks(ARTICLE_HTML, "Section heading here")

    assert annotated.html == annotate_clickable_blocks(ARTICLE_HTML, "Section heading here")
    assert annotated.blocks == collect_clickable_blocks(ARTICLE_HTML, "Section heading here")
    assert [block.selected for block in annotated.blocks] == [False, False, False, True]
