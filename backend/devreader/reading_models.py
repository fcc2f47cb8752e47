"""Common reading model definitions used across the HTML processing utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

BlockKind = Literal["p", "ul", "ol", "blockquote", "li", "h1", "h2", "h3", "h4", "h5", "h6"]


@dataclass(slots=True)
class Block:
    """A structural part of an article that can be selected as a whole.

    Parameters
    ----------
    kind:
        Tag name of the element the block was built from.
    text:
        Trimmed text content. It doubles as the block identity, so two blocks
        with the same text are selected together.
    selected:
        Whether the block matched the selected text of the current pass.
    """

    kind: BlockKind
    text: str
    selected: bool = False


@dataclass(slots=True)
class Sentence:
    """One sentence-like span of the flattened article text."""

    position: int
    text: str


__all__ = ["Block", "BlockKind", "Sentence"]
