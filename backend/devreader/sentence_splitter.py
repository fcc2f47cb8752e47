"""Split article HTML into sentence-like spans suitable for one-at-a-time reading."""
from __future__ import annotations

import itertools
import re

from bs4 import BeautifulSoup

from .html_text import document_root, parse_html
from .reading_models import Sentence

PLACEHOLDER_PREFIX = "[CODE_BLOCK_"

_CODE_TAGS = ("code", "pre")
_TERMINATORS = ".!?"
# Placeholders glued to either end of a segment; one in the middle keeps the segment marked.
_EDGE_PLACEHOLDERS_RE = re.compile(r"^(?:\s*\[CODE_BLOCK_\d+\])+|(?:\[CODE_BLOCK_\d+\]\s*)+$")

# Shorter fragments ending in a terminator are treated as abbreviations ("Mr.", "Dr.").
_MIN_SENTENCE_LENGTH = 10
_MIN_SENTENCE_WORDS = 2
# An unterminated fragment is glued to the previous sentence only while it stays short.
_MAX_CONTINUATION_LENGTH = 100


def _mask_code_blocks(soup: BeautifulSoup) -> None:
    """Replace the contents of every code/pre element with a placeholder token."""

    counter = itertools.count()
    for element in soup.find_all(_CODE_TAGS):
        if element.parent is None:
            # <code> nested in an already masked <pre>
            continue
        element.string = f"{PLACEHOLDER_PREFIX}{next(counter)}]"


def _normalize_whitespace(text: str) -> str:
    text = re.sub(r"\n+", " ", text)
    text = re.sub(r"\s+", " ", text)
    return text


def _strip_edge_placeholders(text: str) -> str:
    return _EDGE_PLACEHOLDERS_RE.sub("", text).strip()


def _is_boundary_letter(char: str) -> bool:
    return "A" <= char <= "Z"


def split_rough_segments(text: str) -> list[str]:
    """Cut ``text`` after ``.``, ``!`` or ``?`` followed by whitespace and a capital letter.

    The terminator stays with the left segment, the whitespace between the
    segments is dropped and the capital letter opens the next segment.
    """

    segments: list[str] = []
    start = 0
    index = 0
    length = len(text)
    while index < length:
        if text[index] in _TERMINATORS:
            cursor = index + 1
            while cursor < length and text[cursor].isspace():
                cursor += 1
            if cursor > index + 1 and cursor < length and _is_boundary_letter(text[cursor]):
                segments.append(text[start : index + 1])
                start = cursor
                index = cursor
                continue
        index += 1
    segments.append(text[start:])
    return segments


def _merge_segments(segments: list[str]) -> list[str]:
    sentences: list[str] = []
    for part in segments:
        trimmed = _strip_edge_placeholders(part)
        if not trimmed:
            continue

        if trimmed[-1] in _TERMINATORS:
            if len(trimmed) > _MIN_SENTENCE_LENGTH or len(trimmed.split(" ")) > _MIN_SENTENCE_WORDS:
                sentences.append(trimmed)
            elif sentences:
                sentences[-1] += f" {trimmed}"
            continue

        if sentences and len(sentences[-1]) < _MAX_CONTINUATION_LENGTH:
            sentences[-1] += f" {trimmed}"
        else:
            sentences.append(trimmed)
    return sentences


def split_into_sentences(html: str) -> list[str]:
    """Return the sentences of ``html`` in reading order.

    Code and pre blocks never contribute text and never cause a sentence
    boundary. Code at either end of a sentence is cut off; a sentence with
    code in its middle is dropped. The heuristics are approximate: "e.g." or a decimal number
    followed by a capital letter can still split a sentence.
    """

    soup = parse_html(html)
    _mask_code_blocks(soup)
    text = _normalize_whitespace(document_root(soup).get_text())

    sentences = _merge_segments(split_rough_segments(text))
    return [
        sentence.strip()
        for sentence in sentences
        if sentence.strip() and PLACEHOLDER_PREFIX not in sentence
    ]


def segment_sentences(html: str) -> list[Sentence]:
    """Same as :func:`split_into_sentences` but keeps the ordinal position."""

    return [
        Sentence(position=position, text=text)
        for position, text in enumerate(split_into_sentences(html))
    ]


__all__ = [
    "PLACEHOLDER_PREFIX",
    "segment_sentences",
    "split_into_sentences",
    "split_rough_segments",
]
