"""Catalog persistence helpers."""

from .catalog_cache import CatalogCache, fingerprint_markdown, parser_signature
from .codec import CatalogDecodeError, catalog_from_dict, catalog_to_dict, dumps, loads

__all__ = [
    "CatalogCache",
    "CatalogDecodeError",
    "catalog_from_dict",
    "catalog_to_dict",
    "dumps",
    "fingerprint_markdown",
    "loads",
    "parser_signature",
]
