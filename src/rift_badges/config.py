"""Configuration file management for rift-badges.

Reads and writes ~/.rift-badges/config.json for settings such as a custom
badge catalog path and the default number of suggestions.
"""
from __future__ import annotations

import json
from pathlib import Path

from rift_badges.catalog import default_catalog, load_catalog
from rift_badges.engine import DEFAULT_SUGGESTION_LIMIT, BadgeEngine

DEFAULT_CONFIG_PATH: Path = Path.home() / ".rift-badges" / "config.json"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_catalog_path(config_path: Path | None = None) -> Path | None:
    """Return the configured catalog file, or None to use the built-in catalog."""
    config = load_config(config_path)
    raw = config.get("catalog_path")
    if raw:
        return Path(raw)
    return None


def set_catalog_path(catalog: Path, config_path: Path | None = None) -> None:
    config = load_config(config_path)
    config["catalog_path"] = str(catalog)
    save_config(config, config_path)


def get_suggestion_limit(config_path: Path | None = None) -> int:
    """Return the configured suggestion limit, falling back to the default."""
    raw = load_config(config_path).get("suggestion_limit")
    if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 1:
        return raw
    return DEFAULT_SUGGESTION_LIMIT


def set_suggestion_limit(limit: int, config_path: Path | None = None) -> None:
    if limit < 1:
        raise ValueError("Suggestion limit must be at least 1")
    config = load_config(config_path)
    config["suggestion_limit"] = limit
    save_config(config, config_path)


def build_engine(config_path: Path | None = None) -> BadgeEngine:
    """Build an engine over the configured catalog (or the built-in one).

    Raises CatalogError or OSError if a configured catalog cannot be loaded.
    """
    catalog_path = get_catalog_path(config_path)
    catalog = load_catalog(catalog_path) if catalog_path else default_catalog()
    return BadgeEngine(catalog)
