"""Tests for catalog JSON encoding."""

from __future__ import annotations

import json

import pytest

from awesomelist.models import Catalog, Priority
from awesomelist.parser import parse
from awesomelist.stores.codec import CatalogDecodeError, catalog_from_dict, catalog_to_dict, dumps, loads


def test_round_trip_reproduces_catalog(sample_readme: str) -> None:
    catalog = parse(sample_readme)

    text = dumps(catalog)
    restored = loads(text)

    assert restored == catalog
    assert dumps(restored) == text
    assert restored.search("rust") == catalog.search("rust")


def test_serialised_field_names_are_stable(sample_readme: str) -> None:
    payload = json.loads(dumps(parse(sample_readme)))

    assert set(payload) == {"sections", "index", "metadata"}
    section = payload["sections"][0]
    assert set(section) == {"title", "entries", "raw_text", "entry_count"}
    assert set(section["entries"][0]) == {"title", "url", "description", "tags"}
    assert set(payload["index"]) == {"terms", "total_terms"}
    location = payload["index"]["terms"]["omarchy"][0]
    assert set(location) == {"section_index", "entry_index", "source_text", "priority", "github_url"}
    assert location["priority"] == "RepositoryName"
    assert set(payload["metadata"]) == {"title", "description", "last_updated", "total_entries"}


def test_priority_values_round_trip() -> None:
    for priority in Priority:
        assert Priority(priority.value) is priority


def test_empty_catalog_round_trips() -> None:
    catalog = Catalog()
    assert catalog_from_dict(catalog_to_dict(catalog)) == catalog


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"sections": {}, "index": {"terms": {}}, "metadata": {}}',
        '{"sections": [], "index": {"terms": {"x": [{"section_index": 0, "source_text": "x", "priority": "Bogus"}]}}, "metadata": {}}',
    ],
)
def test_loads_rejects_malformed_payloads(text: str) -> None:
    with pytest.raises(CatalogDecodeError):
        loads(text)
