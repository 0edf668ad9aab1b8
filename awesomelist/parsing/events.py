"""Markdown event stream consumed by the catalog extractor.

The extractor never sees tokenizer internals. :func:`tokenize` flattens the
block/inline token tree produced by ``markdown-it-py`` into a flat sequence of
:class:`MarkdownEvent` values, which is also what tests build by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from markdown_it import MarkdownIt
from markdown_it.token import Token


class EventKind(Enum):
    HEADING_START = "heading_start"
    HEADING_END = "heading_end"
    LINK_START = "link_start"
    LINK_END = "link_end"
    TEXT = "text"
    CODE = "code"
    LIST_START = "list_start"
    LIST_END = "list_end"
    ITEM_START = "item_start"
    ITEM_END = "item_end"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"


@dataclass(frozen=True)
class MarkdownEvent:
    """One structural markdown event.

    ``level`` is only meaningful for headings, ``url`` for link starts and
    ``text`` for text and inline code.
    """

    kind: EventKind
    text: str = ""
    level: int = 0
    url: str = ""


_BLOCK_EVENTS = {
    "heading_close": EventKind.HEADING_END,
    "bullet_list_open": EventKind.LIST_START,
    "ordered_list_open": EventKind.LIST_START,
    "bullet_list_close": EventKind.LIST_END,
    "ordered_list_close": EventKind.LIST_END,
    "list_item_open": EventKind.ITEM_START,
    "list_item_close": EventKind.ITEM_END,
}

_INLINE_EVENTS = {
    "link_close": EventKind.LINK_END,
    "softbreak": EventKind.SOFT_BREAK,
    "hardbreak": EventKind.HARD_BREAK,
}


def create_markdown_parser() -> MarkdownIt:
    """Return a CommonMark parser without tables, linkify or raw HTML rendering."""
    return MarkdownIt("commonmark")


def tokenize(markdown: str, *, parser: Optional[MarkdownIt] = None) -> Iterator[MarkdownEvent]:
    """Yield :class:`MarkdownEvent` values for ``markdown`` in document order."""
    md = parser or create_markdown_parser()
    yield from _block_events(md.parse(markdown))


def _block_events(tokens: Iterable[Token]) -> Iterator[MarkdownEvent]:
    for token in tokens:
        if token.type == "heading_open":
            yield MarkdownEvent(EventKind.HEADING_START, level=_heading_level(token))
        elif token.type in _BLOCK_EVENTS:
            yield MarkdownEvent(_BLOCK_EVENTS[token.type])
        elif token.type == "inline":
            yield from _inline_events(token.children or [])
        elif token.type in {"fence", "code_block"}:
            # Code block bodies are plain text to the extractor.
            if token.content:
                yield MarkdownEvent(EventKind.TEXT, text=token.content)


def _inline_events(tokens: List[Token]) -> Iterator[MarkdownEvent]:
    for token in tokens:
        if token.type in {"text", "text_special"}:
            if token.content:
                yield MarkdownEvent(EventKind.TEXT, text=token.content)
        elif token.type == "code_inline":
            yield MarkdownEvent(EventKind.CODE, text=token.content)
        elif token.type == "link_open":
            href = token.attrGet("href")
            yield MarkdownEvent(EventKind.LINK_START, url=str(href) if href is not None else "")
        elif token.type in _INLINE_EVENTS:
            yield MarkdownEvent(_INLINE_EVENTS[token.type])
        elif token.type == "image":
            # Alt text reads as ordinary text.
            yield from _inline_events(token.children or [])


def _heading_level(token: Token) -> int:
    try:
        return int(token.tag.lstrip("h"))
    except ValueError:
        return 0


__all__ = ["EventKind", "MarkdownEvent", "create_markdown_parser", "tokenize"]
