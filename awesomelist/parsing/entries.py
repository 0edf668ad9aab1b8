"""Helpers that turn a list item into a repository entry."""

from __future__ import annotations

from typing import List, Tuple

from ..models import RepositoryEntry
from .constants import GITHUB_EXCLUDED_PATHS, GITHUB_PREFIX, TAG_INDICATORS

_SEPARATORS = (" - ", ": ")


def is_github_repo_link(url: str) -> bool:
    """Return True when ``url`` points at a GitHub repository rather than one of its pages."""
    if not url.startswith(GITHUB_PREFIX):
        return False
    # https://github.com/owner/repo has four slashes
    if url.count("/") < 4:
        return False
    return not any(fragment in url for fragment in GITHUB_EXCLUDED_PATHS)


def split_title_description(text: str) -> Tuple[str, str]:
    """Split ``"Name - what it does"`` (or ``"Name: what it does"``) into its two halves.

    The first ``" - "`` wins over any ``": "``. Text without a separator becomes the
    title and the description is left empty.
    """
    text = text.strip()
    for separator in _SEPARATORS:
        position = text.find(separator)
        if position != -1:
            title = text[:position].strip()
            description = text[position + len(separator):].strip()
            return title, description
    return text, ""


def extract_tags(description: str) -> List[str]:
    lowered = description.lower()
    return [tag for pattern, tag in TAG_INDICATORS if pattern in lowered]


def split_entry(item_text: str, url: str) -> RepositoryEntry:
    """Build a :class:`RepositoryEntry` from the accumulated text of one list item."""
    title, description = split_title_description(item_text)
    return RepositoryEntry(
        title=title,
        url=url,
        description=description,
        tags=extract_tags(description),
    )


__all__ = ["extract_tags", "is_github_repo_link", "split_entry", "split_title_description"]
