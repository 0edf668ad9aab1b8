"""Parse curated awesome-list READMEs into searchable catalogs."""

from .models import (
    Catalog,
    Metadata,
    Priority,
    RepositoryEntry,
    SearchIndex,
    SearchLocation,
    SearchResult,
    Section,
)
from .parser import ReadmeParser, parse
from .parsing.errors import EmptyInputError, NoSectionsFoundError, ParseError

__all__ = [
    "Catalog",
    "EmptyInputError",
    "Metadata",
    "NoSectionsFoundError",
    "ParseError",
    "Priority",
    "ReadmeParser",
    "RepositoryEntry",
    "SearchIndex",
    "SearchLocation",
    "SearchResult",
    "Section",
    "parse",
]
