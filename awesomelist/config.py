"""Configuration loading for awesomelist (.awesomelist.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .parsing.constants import EXCLUSION_PATTERNS

CONFIG_FILENAME = ".awesomelist.yml"
DEFAULT_CACHE_PATH = Path(".awesomelist") / "catalog.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ParserConfig:
    """Section filtering settings."""

    exclusion_patterns: List[str] = field(default_factory=lambda: list(EXCLUSION_PATTERNS))


@dataclass
class SearchConfig:
    """Query defaults."""

    limit: Optional[int] = None


@dataclass
class CacheConfig:
    """Where parsed catalogs are kept between runs."""

    enabled: bool = True
    path: Optional[Path] = None


@dataclass
class AwesomeListConfig:
    """Represents the settings defined in .awesomelist.yml."""

    root: Path
    parser: ParserConfig = field(default_factory=ParserConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    @property
    def cache_path(self) -> Path:
        return self.cache.path or (self.root / DEFAULT_CACHE_PATH)


def load_config(config_path: Path) -> AwesomeListConfig:
    """Load configuration from disk, falling back to defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AwesomeListConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    parser = ParserConfig()
    parser_data = _as_dict(data.get("parser"))
    if "exclusion_patterns" in parser_data:
        parser.exclusion_patterns = _as_str_list(parser_data.get("exclusion_patterns"))

    search = SearchConfig()
    search_data = _as_dict(data.get("search"))
    if search_data:
        limit = _as_int(search_data.get("limit"))
        search.limit = limit if limit is not None and limit > 0 else None

    cache = CacheConfig()
    cache_data = _as_dict(data.get("cache"))
    if cache_data:
        enabled = _as_bool(cache_data.get("enabled"))
        if enabled is not None:
            cache.enabled = enabled
        cache_path = _as_str(cache_data.get("path"))
        if cache_path:
            cache.path = root / cache_path

    return AwesomeListConfig(root=root, parser=parser, search=search, cache=cache)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
