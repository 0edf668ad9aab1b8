"""Loads a catalog from a local README, reusing the on-disk cache when possible."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import AwesomeListConfig, load_config
from .logging import get_logger
from .models import Catalog
from .parser import ReadmeParser
from .parsing.errors import ParseError
from .parsing.fallback import simple_parse
from .stores import CatalogCache, fingerprint_markdown, parser_signature


@dataclass
class LoadOutcome:
    """Catalog returned by :class:`CatalogLoader` and where it came from."""

    catalog: Catalog
    source: str
    path: Path
    config: AwesomeListConfig


class CatalogLoader:
    """Reads markdown, parses it with a degraded fallback and caches the result.

    Every call returns a freshly built (or freshly decoded) catalog; callers
    swap their reference instead of mutating the previous one. Without an
    explicit ``config`` the ``.awesomelist.yml`` next to each README is read
    on every call.
    """

    SOURCE_CACHE = "cache"
    SOURCE_PARSER = "parser"
    SOURCE_FALLBACK = "fallback"
    SOURCE_EMPTY = "empty"

    def __init__(
        self,
        config: AwesomeListConfig | None = None,
        *,
        parser: ReadmeParser | None = None,
        cache: CatalogCache | None = None,
    ) -> None:
        self.config = config
        self._parser = parser
        self._cache = cache
        self.logger = get_logger("loader")

    def load(self, path: str | Path, *, refresh: bool = False, use_cache: bool = True) -> LoadOutcome:
        source_path = Path(path).expanduser().resolve()
        if not source_path.exists():
            raise FileNotFoundError(f"README not found: {source_path}")
        config = self.config or load_config(source_path.parent)
        parser = self._parser or ReadmeParser(exclusion_patterns=config.parser.exclusion_patterns)
        markdown = source_path.read_text(encoding="utf-8")
        fingerprint = fingerprint_markdown(markdown)
        signature = parser_signature(parser.extractor.exclusion_patterns)

        cache = self._resolve_cache(config) if use_cache else None
        if cache is not None and not refresh:
            cached = cache.get(fingerprint=fingerprint, signature=signature)
            if cached is not None:
                self.logger.debug("Using cached catalog from %s", cache.path)
                return LoadOutcome(
                    catalog=cached, source=self.SOURCE_CACHE, path=source_path, config=config
                )

        catalog, source = self._parse(markdown, parser)
        if cache is not None and source != self.SOURCE_EMPTY:
            cache.store(catalog, fingerprint=fingerprint, signature=signature)
            cache.persist()
            self.logger.debug("Catalog cached at %s", cache.path)
        self.logger.info(
            "Loaded %d sections (%d entries) from %s",
            len(catalog.sections),
            catalog.metadata.total_entries,
            source_path,
        )
        return LoadOutcome(catalog=catalog, source=source, path=source_path, config=config)

    def _parse(self, markdown: str, parser: ReadmeParser) -> tuple[Catalog, str]:
        try:
            return parser.parse(markdown), self.SOURCE_PARSER
        except ParseError as exc:
            self.logger.warning("Full parse failed (%s); falling back to simple parser", exc)
        try:
            return simple_parse(markdown), self.SOURCE_FALLBACK
        except ParseError as exc:
            self.logger.warning("Simple parse failed (%s); using an empty catalog", exc)
        return Catalog(), self.SOURCE_EMPTY

    def _resolve_cache(self, config: AwesomeListConfig) -> CatalogCache | None:
        if self._cache is not None:
            return self._cache
        if not config.cache.enabled:
            return None
        return CatalogCache(config.cache_path)


__all__ = ["CatalogLoader", "LoadOutcome"]
