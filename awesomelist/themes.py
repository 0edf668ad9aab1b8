"""Theme entries listed in a parsed catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .models import Catalog
from .parsing.entries import is_github_repo_link


class ThemeNotFoundError(LookupError):
    """Raised when a catalog has no theme repositories."""


@dataclass
class ThemeEntry:
    name: str
    url: str
    description: str


def extract_theme_entries(catalog: Catalog) -> List[ThemeEntry]:
    """Return the repositories listed under the first section mentioning themes."""
    themes: List[ThemeEntry] = []
    for section in catalog.sections:
        if "theme" not in section.title.lower():
            continue
        for entry in section.entries:
            if is_github_repo_link(entry.url):
                themes.append(
                    ThemeEntry(name=entry.title, url=entry.url, description=entry.description)
                )
        break

    if not themes:
        raise ThemeNotFoundError("No theme entries found in README")
    return themes


__all__ = ["ThemeEntry", "ThemeNotFoundError", "extract_theme_entries"]
