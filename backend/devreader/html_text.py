"""Utilities for turning article HTML into plain text."""
from __future__ import annotations

from bs4 import BeautifulSoup, Tag

_NOISE_TAGS = ("script", "style")


def parse_html(html: str) -> BeautifulSoup:
    """Parse ``html`` into a private, permissive tree."""

    return BeautifulSoup(html or "", "html.parser")


def document_root(soup: BeautifulSoup) -> Tag:
    """Return ``<body>`` when the document has one, otherwise the whole fragment."""

    body = soup.body
    return body if body is not None else soup


def extract_text_from_html(html: str) -> str:
    """Return the text of ``html`` with scripts and styles removed.

    Text nodes are concatenated as they are, without any whitespace
    normalization.
    """

    soup = parse_html(html)
    for element in soup.find_all(_NOISE_TAGS):
        element.decompose()
    return document_root(soup).get_text()


__all__ = ["document_root", "extract_text_from_html", "parse_html"]
