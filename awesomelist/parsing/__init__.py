"""Markdown to catalog extraction."""

from .entries import extract_tags, is_github_repo_link, split_entry, split_title_description
from .errors import EmptyInputError, NoSectionsFoundError, ParseError
from .events import EventKind, MarkdownEvent, tokenize
from .extractor import CatalogExtractor, ExtractionResult, ParserState
from .fallback import simple_parse

__all__ = [
    "CatalogExtractor",
    "EmptyInputError",
    "EventKind",
    "ExtractionResult",
    "MarkdownEvent",
    "NoSectionsFoundError",
    "ParseError",
    "ParserState",
    "extract_tags",
    "is_github_repo_link",
    "simple_parse",
    "split_entry",
    "split_title_description",
    "tokenize",
]
