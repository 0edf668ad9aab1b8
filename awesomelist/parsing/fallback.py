"""Degraded parser used when full extraction fails."""

from __future__ import annotations

from ..models import Catalog, Metadata, Section
from .errors import EmptyInputError
from .events import EventKind, tokenize

FALLBACK_SECTION_TITLE = "README"


def simple_parse(markdown: str) -> Catalog:
    """Collect raw section text under every level 2+ heading.

    No entries are extracted and the search index stays empty. A document
    without any such heading becomes a single ``README`` section holding the
    whole input.
    """
    if not markdown.strip():
        raise EmptyInputError()

    sections: list[Section] = []
    metadata = Metadata()
    current: Section | None = None
    in_header = False
    header_level = 0
    header_text = ""
    title_captured = False

    for event in tokenize(markdown):
        if event.kind is EventKind.HEADING_START:
            in_header = True
            header_level = event.level
            header_text = ""
        elif event.kind is EventKind.HEADING_END and in_header:
            header = header_text.strip()
            if not title_captured and header_level == 1:
                metadata.title = header
                title_captured = True
            if header_level >= 2:
                if current is not None:
                    sections.append(current)
                current = Section(title=header)
            in_header = False
        elif event.kind is EventKind.TEXT:
            if in_header:
                header_text += event.text
            elif current is not None:
                current.raw_text += event.text
        elif event.kind in (EventKind.SOFT_BREAK, EventKind.HARD_BREAK):
            if not in_header and current is not None:
                current.raw_text += "\n"

    if current is not None:
        sections.append(current)

    if not sections:
        sections.append(Section(title=FALLBACK_SECTION_TITLE, raw_text=markdown))

    metadata.total_entries = sum(section.entry_count for section in sections)
    return Catalog(sections=sections, metadata=metadata)
