"""JSON encoding for catalogs with stable field names."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ..models import (
    Catalog,
    Metadata,
    Priority,
    RepositoryEntry,
    SearchIndex,
    SearchLocation,
    Section,
)


class CatalogDecodeError(ValueError):
    """Raised when a payload does not describe a catalog."""


def catalog_to_dict(catalog: Catalog) -> Dict[str, Any]:
    return {
        "sections": [asdict(section) for section in catalog.sections],
        "index": {
            "terms": {
                term: [_location_to_dict(location) for location in locations]
                for term, locations in catalog.index.terms.items()
            },
            "total_terms": catalog.index.total_terms,
        },
        "metadata": asdict(catalog.metadata),
    }


def catalog_from_dict(payload: object) -> Catalog:
    data = _require_dict(payload, "catalog")
    sections = [_section_from_dict(item) for item in _require_list(data.get("sections"), "sections")]
    index = _index_from_dict(_require_dict(data.get("index"), "index"))
    metadata = _metadata_from_dict(_require_dict(data.get("metadata"), "metadata"))
    return Catalog(sections=sections, index=index, metadata=metadata)


def dumps(catalog: Catalog, *, indent: Optional[int] = 2) -> str:
    return json.dumps(catalog_to_dict(catalog), indent=indent, ensure_ascii=False)


def loads(text: str) -> Catalog:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogDecodeError(f"Invalid catalog JSON: {exc}") from exc
    return catalog_from_dict(payload)


# ------------------------------------------------------------------
# Internal helpers


def _location_to_dict(location: SearchLocation) -> Dict[str, Any]:
    data = asdict(location)
    data["priority"] = location.priority.value
    return data


def _section_from_dict(payload: object) -> Section:
    data = _require_dict(payload, "section")
    entries = [_entry_from_dict(item) for item in _require_list(data.get("entries"), "entries")]
    return Section(
        title=_require_str(data.get("title"), "section.title"),
        entries=entries,
        raw_text=_require_str(data.get("raw_text", ""), "section.raw_text"),
        entry_count=_require_int(data.get("entry_count", len(entries)), "section.entry_count"),
    )


def _entry_from_dict(payload: object) -> RepositoryEntry:
    data = _require_dict(payload, "entry")
    tags = [tag for tag in _require_list(data.get("tags", []), "entry.tags") if isinstance(tag, str)]
    return RepositoryEntry(
        title=_require_str(data.get("title"), "entry.title"),
        url=_require_str(data.get("url"), "entry.url"),
        description=_require_str(data.get("description", ""), "entry.description"),
        tags=tags,
    )


def _index_from_dict(data: Dict[str, Any]) -> SearchIndex:
    terms_payload = _require_dict(data.get("terms"), "index.terms")
    terms: Dict[str, List[SearchLocation]] = {}
    for term, locations in terms_payload.items():
        terms[str(term)] = [
            _location_from_dict(item) for item in _require_list(locations, "index.terms[]")
        ]
    total_terms = _require_int(
        data.get("total_terms", sum(len(items) for items in terms.values())),
        "index.total_terms",
    )
    return SearchIndex(terms=terms, total_terms=total_terms)


def _location_from_dict(payload: object) -> SearchLocation:
    data = _require_dict(payload, "location")
    priority_value = data.get("priority")
    try:
        priority = Priority(priority_value)
    except ValueError as exc:
        raise CatalogDecodeError(f"Unknown search priority: {priority_value!r}") from exc
    entry_index = data.get("entry_index")
    github_url = data.get("github_url")
    return SearchLocation(
        section_index=_require_int(data.get("section_index"), "location.section_index"),
        entry_index=None if entry_index is None else _require_int(entry_index, "location.entry_index"),
        source_text=_require_str(data.get("source_text"), "location.source_text"),
        priority=priority,
        github_url=None if github_url is None else _require_str(github_url, "location.github_url"),
    )


def _metadata_from_dict(data: Dict[str, Any]) -> Metadata:
    defaults = Metadata()
    last_updated = data.get("last_updated")
    return Metadata(
        title=_require_str(data.get("title", defaults.title), "metadata.title"),
        description=_require_str(data.get("description", defaults.description), "metadata.description"),
        last_updated=None if last_updated is None else _require_str(last_updated, "metadata.last_updated"),
        total_entries=_require_int(data.get("total_entries", 0), "metadata.total_entries"),
    )


def _require_dict(value: object, name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise CatalogDecodeError(f"Expected mapping for {name}")
    return value


def _require_list(value: object, name: str) -> List[Any]:
    if not isinstance(value, list):
        raise CatalogDecodeError(f"Expected list for {name}")
    return value


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise CatalogDecodeError(f"Expected string for {name}")
    return value


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogDecodeError(f"Expected integer for {name}")
    return value


__all__ = ["CatalogDecodeError", "catalog_from_dict", "catalog_to_dict", "dumps", "loads"]
