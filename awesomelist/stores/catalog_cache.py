"""Persistent cache for parsed catalogs."""

from __future__ import annotations

from datetime import UTC, datetime
import hashlib
import json
from pathlib import Path
from typing import Dict, Optional, Sequence

from ..logging import get_logger
from ..models import Catalog
from .codec import CatalogDecodeError, catalog_from_dict, catalog_to_dict

_CACHE_VERSION = 1


def fingerprint_markdown(markdown: str) -> str:
    return hashlib.sha256(markdown.encode("utf-8")).hexdigest()


def parser_signature(exclusion_patterns: Sequence[str]) -> str:
    """Identify the parser settings a catalog was built with."""
    payload = json.dumps([pattern.lower() for pattern in exclusion_patterns])
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class CatalogCache:
    """Stores one catalog on disk, keyed by its source markdown and parser settings."""

    def __init__(self, path: Path | None) -> None:
        self._path = path
        self._entry: Optional[Dict[str, object]] = None
        self._dirty = False
        self.logger = get_logger("cache")
        if self._path is not None:
            self._load(self._path)

    @property
    def path(self) -> Path | None:
        return self._path

    def get(
        self, *, fingerprint: str | None = None, signature: str | None = None
    ) -> Optional[Catalog]:
        """Return the cached catalog, or None when missing, stale or unreadable.

        With ``fingerprint`` set, the cached catalog is only returned when it was
        built from markdown with the same fingerprint; ``signature`` does the same
        for the parser settings.
        """
        entry = self._entry
        if not entry:
            return None
        if fingerprint is not None and entry.get("fingerprint") != fingerprint:
            return None
        if signature is not None and entry.get("signature") != signature:
            return None
        try:
            return catalog_from_dict(entry.get("catalog"))
        except CatalogDecodeError as exc:
            self.logger.debug("Discarding unreadable cached catalog: %s", exc)
            return None

    def store(
        self,
        catalog: Catalog,
        *,
        fingerprint: str | None = None,
        signature: str | None = None,
    ) -> None:
        self._entry = {
            "signature": signature,
            "fingerprint": fingerprint,
            "catalog": catalog_to_dict(catalog),
            "updated_at": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
        }
        self._dirty = True

    def persist(self) -> None:
        if not self._dirty or self._path is None:
            return
        payload = {
            "version": _CACHE_VERSION,
            "entry": self._entry,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
        )
        self._dirty = False

    def clear(self) -> None:
        self._entry = None
        self._dirty = False
        if self._path is not None and self._path.exists():
            self._path.unlink()

    # ------------------------------------------------------------------
    # Internal helpers

    def _load(self, path: Path) -> None:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return
        except (OSError, json.JSONDecodeError):
            self.logger.debug("Ignoring unreadable cache file %s", path)
            return
        if not isinstance(data, dict) or data.get("version") != _CACHE_VERSION:
            return
        entry = data.get("entry")
        if not isinstance(entry, dict) or "catalog" not in entry:
            return
        self._entry = entry
        self._dirty = False


__all__ = ["CatalogCache", "fingerprint_markdown", "parser_signature"]
