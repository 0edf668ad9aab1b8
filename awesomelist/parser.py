"""Entry point that turns an awesome-list README into a searchable catalog."""

from __future__ import annotations

from typing import Optional, Sequence

from markdown_it import MarkdownIt

from .logging import get_logger
from .models import Catalog
from .parsing.errors import EmptyInputError, NoSectionsFoundError
from .parsing.events import create_markdown_parser, tokenize
from .parsing.extractor import CatalogExtractor
from .search.indexer import SearchIndexBuilder


class ReadmeParser:
    """Parses awesome-list markdown into a :class:`Catalog`."""

    def __init__(
        self,
        *,
        exclusion_patterns: Optional[Sequence[str]] = None,
        markdown: Optional[MarkdownIt] = None,
        index_builder: SearchIndexBuilder | None = None,
    ) -> None:
        self.extractor = CatalogExtractor(exclusion_patterns=exclusion_patterns)
        self.markdown = markdown or create_markdown_parser()
        self.index_builder = index_builder or SearchIndexBuilder()
        self.logger = get_logger("parser")

    def parse(self, markdown: str) -> Catalog:
        """Parse ``markdown`` in one pass.

        Raises:
            EmptyInputError: if ``markdown`` is blank.
            NoSectionsFoundError: if no section heading survived filtering.
        """
        if not markdown.strip():
            raise EmptyInputError()

        result = self.extractor.extract(tokenize(markdown, parser=self.markdown))
        if not result.sections:
            raise NoSectionsFoundError()

        index = self.index_builder.build(result.sections)
        self.logger.debug(
            "Parsed %d sections with %d entries (%d index terms)",
            len(result.sections),
            result.metadata.total_entries,
            len(index.terms),
        )
        return Catalog(sections=result.sections, index=index, metadata=result.metadata)


def parse(markdown: str) -> Catalog:
    """Parse ``markdown`` with the default settings."""
    return ReadmeParser().parse(markdown)


__all__ = ["ReadmeParser", "parse"]
