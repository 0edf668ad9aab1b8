"""Single-pass state machine that turns markdown events into sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..models import Metadata, Section
from .constants import CATEGORY_INDICATORS, EXCLUSION_PATTERNS, KNOWN_SECTIONS
from .entries import is_github_repo_link, split_entry
from .events import EventKind, MarkdownEvent


@dataclass
class ParserState:
    """Everything the extractor remembers between two events."""

    sections: List[Section] = field(default_factory=list)
    metadata: Metadata = field(default_factory=Metadata)
    current_section: Optional[Section] = None
    in_header: bool = False
    header_level: int = 0
    header_text: str = ""
    in_list_item: bool = False
    item_text: str = ""
    link_url: Optional[str] = None
    title_captured: bool = False

    def push_current_section(self) -> None:
        if self.current_section is not None:
            self.sections.append(self.current_section)
            self.current_section = None

    def append_body_text(self, text: str) -> None:
        """Route non-heading text to the open list item and the open section."""
        if self.in_list_item:
            self.item_text += text
        if self.current_section is not None:
            self.current_section.raw_text += text


@dataclass
class ExtractionResult:
    sections: List[Section]
    metadata: Metadata


class CatalogExtractor:
    """Builds sections and entries from a markdown event stream.

    The extractor is stateless between runs; per-document state lives in a
    :class:`ParserState` that is threaded through :meth:`step`.
    """

    def __init__(self, *, exclusion_patterns: Optional[Sequence[str]] = None) -> None:
        patterns = EXCLUSION_PATTERNS if exclusion_patterns is None else exclusion_patterns
        self.exclusion_patterns = [pattern.lower() for pattern in patterns]
        self.known_sections = [section.lower() for section in KNOWN_SECTIONS]

    def extract(self, events: Iterable[MarkdownEvent]) -> ExtractionResult:
        state = ParserState()
        for event in events:
            self.step(state, event)
        return self.finish(state)

    def step(self, state: ParserState, event: MarkdownEvent) -> ParserState:
        """Apply one event to ``state`` and return it."""
        kind = event.kind
        if kind is EventKind.HEADING_START:
            state.in_header = True
            state.header_level = event.level
            state.header_text = ""
        elif kind is EventKind.HEADING_END:
            if state.in_header:
                self._close_heading(state)
        elif kind is EventKind.LINK_START:
            # A second link inside the same item replaces the first.
            state.link_url = event.url
        elif kind in (EventKind.TEXT, EventKind.CODE):
            if state.in_header:
                state.header_text += event.text
            else:
                state.append_body_text(event.text)
        elif kind is EventKind.ITEM_START:
            if not state.in_header:
                state.in_list_item = True
                state.item_text = ""
        elif kind is EventKind.ITEM_END:
            if not state.in_header:
                self._close_item(state)
        elif kind in (EventKind.SOFT_BREAK, EventKind.HARD_BREAK):
            if not state.in_header:
                state.append_body_text("\n")
        return state

    def finish(self, state: ParserState) -> ExtractionResult:
        state.push_current_section()
        state.metadata.total_entries = sum(section.entry_count for section in state.sections)
        return ExtractionResult(sections=state.sections, metadata=state.metadata)

    def should_include_section(self, header: str) -> bool:
        lowered = header.lower()
        if any(pattern in lowered for pattern in self.exclusion_patterns):
            return False
        if any(section in lowered for section in self.known_sections):
            return True
        if any(indicator in lowered for indicator in CATEGORY_INDICATORS):
            return True
        # Unrecognised headings are still categories.
        return True

    def _close_heading(self, state: ParserState) -> None:
        header = state.header_text.strip()
        if not state.title_captured and state.header_level == 1:
            state.metadata.title = header
            state.title_captured = True
        if state.header_level >= 2 and self.should_include_section(header):
            state.push_current_section()
            state.current_section = Section(title=header)
        state.in_header = False

    def _close_item(self, state: ParserState) -> None:
        section = state.current_section
        if section is not None:
            section.raw_text += "\n"
        url = state.link_url
        if (
            state.in_list_item
            and url
            and state.item_text.strip()
            and section is not None
            and is_github_repo_link(url)
        ):
            section.add_entry(split_entry(state.item_text, url))
        state.in_list_item = False
        state.item_text = ""
        state.link_url = None


__all__ = ["CatalogExtractor", "ExtractionResult", "ParserState"]
