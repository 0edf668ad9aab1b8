"""Search index construction and querying."""

from .indexer import SearchIndexBuilder, build_index, tokenize_words
from .query import match_score, search

__all__ = ["SearchIndexBuilder", "build_index", "match_score", "search", "tokenize_words"]
