"""Tests for the catalog cache store."""

from __future__ import annotations

import json
from pathlib import Path

from awesomelist.parser import parse
from awesomelist.stores import CatalogCache, fingerprint_markdown, parser_signature


def test_catalog_cache_round_trip(tmp_path: Path, sample_readme: str) -> None:
    cache_path = tmp_path / "cache" / "catalog.json"
    catalog = parse(sample_readme)
    fingerprint = fingerprint_markdown(sample_readme)

    cache = CatalogCache(cache_path)
    cache.store(catalog, fingerprint=fingerprint)
    cache.persist()

    reloaded = CatalogCache(cache_path)
    assert reloaded.get(fingerprint=fingerprint) == catalog
    assert reloaded.get() == catalog


def test_catalog_cache_invalidates_on_fingerprint_change(tmp_path: Path, sample_readme: str) -> None:
    cache = CatalogCache(tmp_path / "catalog.json")
    cache.store(parse(sample_readme), fingerprint=fingerprint_markdown(sample_readme))

    assert cache.get(fingerprint=fingerprint_markdown(sample_readme + "\n- more")) is None


def test_catalog_cache_invalidates_on_parser_signature_change(tmp_path: Path, sample_readme: str) -> None:
    cache = CatalogCache(tmp_path / "catalog.json")
    cache.store(parse(sample_readme), signature=parser_signature(["license"]))

    assert cache.get(signature=parser_signature(["License"])) is not None
    assert cache.get(signature=parser_signature(["license", "extras"])) is None


def test_catalog_cache_ignores_corrupt_and_foreign_files(tmp_path: Path) -> None:
    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json", encoding="utf-8")
    assert CatalogCache(corrupt).get() is None

    wrong_version = tmp_path / "old.json"
    wrong_version.write_text(json.dumps({"version": 99, "entry": {"catalog": {}}}), encoding="utf-8")
    assert CatalogCache(wrong_version).get() is None

    bad_catalog = tmp_path / "bad.json"
    bad_catalog.write_text(json.dumps({"version": 1, "entry": {"catalog": []}}), encoding="utf-8")
    assert CatalogCache(bad_catalog).get() is None


def test_catalog_cache_clear_removes_file(tmp_path: Path, sample_readme: str) -> None:
    cache_path = tmp_path / "catalog.json"
    cache = CatalogCache(cache_path)
    cache.store(parse(sample_readme))
    cache.persist()
    assert cache_path.exists()

    cache.clear()

    assert not cache_path.exists()
    assert cache.get() is None


def test_catalog_cache_without_path_stays_in_memory(sample_readme: str) -> None:
    cache = CatalogCache(None)
    catalog = parse(sample_readme)
    cache.store(catalog)
    cache.persist()

    assert cache.get() == catalog
