"""Ranked substring search over a built :class:`SearchIndex`."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..models import Priority, SearchIndex, SearchResult

EXACT_MATCH = 1.0
PREFIX_MATCH = 0.8
SUFFIX_MATCH = 0.6
CONTAINS_MATCH = 0.4

_ResultKey = Tuple[int, Optional[int]]


def match_score(term: str, query: str) -> float:
    if term == query:
        return EXACT_MATCH
    if term.startswith(query):
        return PREFIX_MATCH
    if term.endswith(query):
        return SUFFIX_MATCH
    return CONTAINS_MATCH


def search(index: SearchIndex, query: str) -> List[SearchResult]:
    """Return one result per matching entry, best score first.

    Every term containing ``query`` contributes; an entry keeps its highest
    score and prefers its repository name as display text. Equal scores are
    ordered by section then entry position, entries without an index first.
    """
    query = query.lower()
    if not query:
        return []

    aggregated: Dict[_ResultKey, SearchResult] = {}
    for term, locations in index.terms.items():
        if query not in term:
            continue
        base = match_score(term, query)
        for location in locations:
            if location.priority is Priority.RAW_CONTENT:
                continue
            score = base * location.priority.multiplier
            key = (location.section_index, location.entry_index)
            result = aggregated.get(key)
            if result is None:
                result = SearchResult(
                    section_index=location.section_index,
                    entry_index=location.entry_index,
                    display_text=location.source_text,
                    relevance_score=score,
                    github_url=location.github_url,
                )
                aggregated[key] = result
            elif score > result.relevance_score:
                result.relevance_score = score
            if location.priority is Priority.REPOSITORY_NAME:
                result.display_text = location.source_text

    return sorted(aggregated.values(), key=_sort_key)


def _sort_key(result: SearchResult) -> Tuple[float, int, int]:
    entry_index = -1 if result.entry_index is None else result.entry_index
    return (-result.relevance_score, result.section_index, entry_index)
