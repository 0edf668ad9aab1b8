"""Core data models shared across awesomelist components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

DEFAULT_TITLE = "Awesome Omarchy"
DEFAULT_DESCRIPTION = "A curated list of awesome resources"


class Priority(Enum):
    """Relative importance of where an indexed token came from."""

    REPOSITORY_NAME = "RepositoryName"
    DESCRIPTION = "Description"
    RAW_CONTENT = "RawContent"

    @property
    def multiplier(self) -> float:
        return _PRIORITY_MULTIPLIERS[self]


_PRIORITY_MULTIPLIERS: Dict[Priority, float] = {
    Priority.REPOSITORY_NAME: 2.0,
    Priority.DESCRIPTION: 1.5,
    Priority.RAW_CONTENT: 0.1,
}


@dataclass
class RepositoryEntry:
    """A single GitHub repository link extracted from a list item."""

    title: str
    url: str
    description: str = ""
    tags: List[str] = field(default_factory=list)


@dataclass
class Section:
    """A category heading and the repository entries listed beneath it."""

    title: str
    entries: List[RepositoryEntry] = field(default_factory=list)
    raw_text: str = ""
    entry_count: int = 0

    def add_entry(self, entry: RepositoryEntry) -> None:
        self.entries.append(entry)
        self.entry_count += 1


@dataclass
class Metadata:
    """Document level facts about the parsed list."""

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    last_updated: Optional[str] = None
    total_entries: int = 0


@dataclass
class SearchLocation:
    """Where an indexed token was seen and how much it counts."""

    section_index: int
    entry_index: Optional[int]
    source_text: str
    priority: Priority
    github_url: Optional[str] = None


@dataclass
class SearchResult:
    """Ranked search output, one per distinct section/entry pair."""

    section_index: int
    entry_index: Optional[int]
    display_text: str
    relevance_score: float
    github_url: Optional[str] = None


@dataclass
class SearchIndex:
    """Inverted index from lowercase token to weighted locations."""

    terms: Dict[str, List[SearchLocation]] = field(default_factory=dict)
    total_terms: int = 0

    def add_term(self, term: str, location: SearchLocation) -> None:
        self.terms.setdefault(term.lower(), []).append(location)
        self.total_terms += 1

    def search(self, query: str) -> List[SearchResult]:
        from .search.query import search

        return search(self, query)


@dataclass
class Catalog:
    """Everything produced by parsing one markdown document."""

    sections: List[Section] = field(default_factory=list)
    index: SearchIndex = field(default_factory=SearchIndex)
    metadata: Metadata = field(default_factory=Metadata)

    def search(self, query: str, *, limit: Optional[int] = None) -> List[SearchResult]:
        """Return ranked results for ``query``, optionally truncated to ``limit``."""
        results = self.index.search(query)
        if limit is not None:
            return results[: max(0, limit)]
        return results

    def section_titles(self) -> List[str]:
        return [section.title for section in self.sections]
