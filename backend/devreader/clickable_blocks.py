"""Mark structural blocks of article HTML as independently clickable units."""
from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .html_text import document_root, parse_html
from .reading_models import Block

# Kinds are visited one after another, so an outer list is only preferred over
# its items because "ul"/"ol" come before "li".
SELECTOR_ORDER: tuple[str, ...] = (
    "p",
    "ul",
    "ol",
    "blockquote",
    "li",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
)

CLICKABLE_CLASS = "clickable-paragraph"
BASE_CLASSES: tuple[str, ...] = ("transition-colors", "p-2", "rounded", "mb-2")
SELECTED_CLASSES: tuple[str, ...] = ("bg-blue-200", "text-blue-900")
IDLE_CLASSES: tuple[str, ...] = ("hover:bg-blue-50", "cursor-pointer")

TEXT_ATTRIBUTE = "data-sentence"
MIN_BLOCK_LENGTH = 10


@dataclass(slots=True)
class _Mark:
    element: Tag
    block: Block


@dataclass(slots=True)
class AnnotatedHtml:
    """Marked HTML together with the blocks that were marked, in visiting order."""

    html: str
    blocks: list[Block]


def _block_classes(selected: bool) -> tuple[str, ...]:
    state = SELECTED_CLASSES if selected else IDLE_CLASSES
    return (CLICKABLE_CLASS, *state, *BASE_CLASSES)


def _merge_classes(existing: list[str] | str | None, extra: tuple[str, ...]) -> list[str]:
    if existing is None:
        current: list[str] = []
    elif isinstance(existing, str):
        current = existing.split()
    else:
        current = list(existing)
    for name in extra:
        if name not in current:
            current.append(name)
    return current


def _touches_marked(element: Tag, marked: set[int]) -> bool:
    """Return True when an ancestor or a descendant of ``element`` is already marked."""

    for parent in element.parents:
        if id(parent) in marked:
            return True
    return any(isinstance(child, Tag) and id(child) in marked for child in element.descendants)


def _plan_marks(soup: BeautifulSoup, selected_text: str | None) -> list[_Mark]:
    root = document_root(soup)
    marks: list[_Mark] = []
    marked: set[int] = set()

    for kind in SELECTOR_ORDER:
        for element in root.find_all(kind):
            text = element.get_text().strip()
            if len(text) < MIN_BLOCK_LENGTH:
                continue
            if _touches_marked(element, marked):
                continue
            selected = selected_text is not None and text == selected_text
            marks.append(_Mark(element=element, block=Block(kind=kind, text=text, selected=selected)))
            marked.add(id(element))
    return marks


def _apply_mark(mark: _Mark) -> None:
    element = mark.element
    element["class"] = _merge_classes(element.get("class"), _block_classes(mark.block.selected))
    element[TEXT_ATTRIBUTE] = mark.block.text
    element["tabindex"] = "0"


def collect_clickable_blocks(html: str, selected_text: str | None = None) -> list[Block]:
    """Return the blocks :func:`annotate_clickable_blocks` would mark, in visiting order."""

    return [mark.block for mark in _plan_marks(parse_html(html), selected_text)]


def mark_clickable_blocks(html: str, selected_text: str | None = None) -> AnnotatedHtml:
    """Mark every qualifying block of ``html`` as clickable.

    Each marked element keeps its own classes and receives the clickable
    marker, presentation classes (selected or idle) and a ``data-sentence``
    attribute with its trimmed text. The client reads that attribute when the
    element is activated. Selection is plain equality with ``selected_text``,
    so blocks sharing the same text are selected together.
    """

    soup = parse_html(html)
    marks = _plan_marks(soup, selected_text)
    for mark in marks:
        _apply_mark(mark)
    return AnnotatedHtml(html=document_root(soup).decode_contents(), blocks=[mark.block for mark in marks])


def annotate_clickable_blocks(html: str, selected_text: str | None = None) -> str:
    """Return only the marked HTML of :func:`mark_clickable_blocks`."""

    return mark_clickable_blocks(html, selected_text).html


__all__ = [
    "AnnotatedHtml",
    "BASE_CLASSES",
    "CLICKABLE_CLASS",
    "IDLE_CLASSES",
    "MIN_BLOCK_LENGTH",
    "SELECTED_CLASSES",
    "SELECTOR_ORDER",
    "TEXT_ATTRIBUTE",
    "annotate_clickable_blocks",
    "collect_clickable_blocks",
    "mark_clickable_blocks",
]
