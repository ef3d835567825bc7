"""Tests for the config module."""
import json
from pathlib import Path

import pytest

from rift_badges.catalog import CatalogError
from rift_badges.config import (
    build_engine,
    get_catalog_path,
    get_suggestion_limit,
    load_config,
    save_config,
    set_catalog_path,
    set_suggestion_limit,
)


class TestLoadConfig:
    def test_missing_file_returns_empty(self, tmp_path):
        assert load_config(tmp_path / "nonexistent.json") == {}

    def test_invalid_json_returns_empty(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        assert load_config(path) == {}

    def test_non_object_returns_empty(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_config(path) == {}

    def test_loads_valid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"key": "value"}', encoding="utf-8")
        assert load_config(path) == {"key": "value"}


class TestSaveConfig:
    def test_creates_file(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"hello": "world"}, path)
        assert json.loads(path.read_text()) == {"hello": "world"}

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "sub" / "dir" / "config.json"
        save_config({"nested": True}, path)
        assert path.exists()


class TestCatalogPath:
    def test_not_set_returns_none(self, tmp_path):
        assert get_catalog_path(tmp_path / "config.json") is None

    def test_set_and_get(self, tmp_path):
        config_path = tmp_path / "config.json"
        target = tmp_path / "badges.json"
        set_catalog_path(target, config_path)
        assert get_catalog_path(config_path) == target

    def test_preserves_other_keys(self, tmp_path):
        config_path = tmp_path / "config.json"
        save_config({"other_key": "keep_me"}, config_path)
        set_catalog_path(Path("/some/catalog.json"), config_path)
        config = load_config(config_path)
        assert config["other_key"] == "keep_me"
        assert config["catalog_path"] == "/some/catalog.json"


class TestSuggestionLimit:
    def test_default(self, tmp_path):
        assert get_suggestion_limit(tmp_path / "config.json") == 3

    def test_set_and_get(self, tmp_path):
        config_path = tmp_path / "config.json"
        set_suggestion_limit(5, config_path)
        assert get_suggestion_limit(config_path) == 5

    def test_rejects_below_one(self, tmp_path):
        with pytest.raises(ValueError):
            set_suggestion_limit(0, tmp_path / "config.json")

    def test_invalid_stored_value_falls_back(self, tmp_path):
        config_path = tmp_path / "config.json"
        save_config({"suggestion_limit": "many"}, config_path)
        assert get_suggestion_limit(config_path) == 3


class TestBuildEngine:
    def test_builtin_catalog_by_default(self, tmp_path):
        engine = build_engine(tmp_path / "config.json")
        assert len(engine.catalog) == 15

    def test_configured_catalog(self, tmp_path):
        catalog_file = tmp_path / "badges.json"
        catalog_file.write_text(json.dumps([{
            "id": "kda_player", "name": "KDA Player", "category": "Late Game & Scaling",
            "requirements": [{"metric": "kda", "threshold": 4}],
        }]), encoding="utf-8")
        config_path = tmp_path / "config.json"
        set_catalog_path(catalog_file, config_path)
        engine = build_engine(config_path)
        assert engine.catalog.ids == ["kda_player"]

    def test_broken_catalog_raises(self, tmp_path):
        catalog_file = tmp_path / "badges.json"
        catalog_file.write_text("[{}]", encoding="utf-8")
        config_path = tmp_path / "config.json"
        set_catalog_path(catalog_file, config_path)
        with pytest.raises(CatalogError):
            build_engine(config_path)
