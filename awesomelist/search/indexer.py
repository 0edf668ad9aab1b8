"""Inverted index builder over parsed catalog sections."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..models import Priority, SearchIndex, SearchLocation, Section

# Measured in UTF-8 bytes, so two-character CJK words still qualify.
MIN_TOKEN_BYTES = 3


def tokenize_words(text: str) -> List[str]:
    """Split ``text`` into lowercase alphanumeric words of at least three UTF-8 bytes."""
    words: List[str] = []
    for raw in text.split():
        if _byte_length(raw) < MIN_TOKEN_BYTES:
            continue
        cleaned = "".join(char for char in raw if char.isalnum()).lower()
        if _byte_length(cleaned) >= MIN_TOKEN_BYTES:
            words.append(cleaned)
    return words


def _byte_length(word: str) -> int:
    return len(word.encode("utf-8"))


class SearchIndexBuilder:
    """Indexes repository names and descriptions; section titles and raw text are left out."""

    def build(self, sections: Sequence[Section]) -> SearchIndex:
        index = SearchIndex()
        for section_index, section in enumerate(sections):
            for entry_index, entry in enumerate(section.entries):
                self._index_text(
                    index,
                    entry.title,
                    section_index=section_index,
                    entry_index=entry_index,
                    priority=Priority.REPOSITORY_NAME,
                    github_url=entry.url,
                )
                if entry.description:
                    self._index_text(
                        index,
                        entry.description,
                        section_index=section_index,
                        entry_index=entry_index,
                        priority=Priority.DESCRIPTION,
                        github_url=entry.url,
                    )
        return index

    @staticmethod
    def _index_text(
        index: SearchIndex,
        text: str,
        *,
        section_index: int,
        entry_index: Optional[int],
        priority: Priority,
        github_url: Optional[str],
    ) -> None:
        for word in tokenize_words(text):
            location = SearchLocation(
                section_index=section_index,
                entry_index=entry_index,
                source_text=text,
                priority=priority,
                github_url=github_url,
            )
            index.add_term(word, location)


def build_index(sections: Sequence[Section]) -> SearchIndex:
    return SearchIndexBuilder().build(sections)
