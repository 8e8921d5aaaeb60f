"""
test_config_manager.py
----------------------
Unit tests for JSON config loading, default merging and gameplay tuning.
"""

import json

import pytest

from saloon.core.services import config_manager
from saloon.core.services.config_manager import load_config, _merge_dicts
from saloon.core.runtime.gameplay_config import DEFAULT_CONFIG, load_gameplay_config


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def write_json(tmp_path):
    def _write(name, payload):
        path = tmp_path / name
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return str(path)
    return _write


# ===========================================================
# Merge
# ===========================================================

class TestMergeDicts:

    def test_nested_override(self):
        merged = _merge_dicts({"a": {"x": 1, "y": 2}, "b": 3}, {"a": {"y": 5}})
        assert merged == {"a": {"x": 1, "y": 5}, "b": 3}

    def test_notes_skipped(self):
        merged = _merge_dicts({"a": 1}, {"_notes": "hello", "a": 2})
        assert merged == {"a": 2}

    def test_inputs_untouched(self):
        default = {"a": {"x": 1}}
        override = {"a": {"x": 2}}
        merged = _merge_dicts(default, override)
        merged["a"]["x"] = 99

        assert default == {"a": {"x": 1}}
        assert override == {"a": {"x": 2}}


# ===========================================================
# Loading
# ===========================================================

class TestLoadConfig:

    def test_absolute_path(self, write_json):
        path = write_json("tuning.json", {"speed": 3})
        assert load_config(path, {"speed": 1, "size": 2}) == {"speed": 3, "size": 2}

    def test_missing_file_falls_back_to_defaults(self):
        defaults = {"speed": 1}
        loaded = load_config("does_not_exist.json", defaults)

        assert loaded == defaults
        assert loaded is not defaults

    def test_missing_file_strict_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("does_not_exist.json", {}, strict=True)

    def test_malformed_json_falls_back(self, write_json):
        path = write_json("broken.json", "{ not json")
        assert load_config(path, {"a": 1}) == {"a": 1}

    def test_non_object_top_level_falls_back(self, write_json):
        path = write_json("list.json", [1, 2, 3])
        assert load_config(path, {"a": 1}) == {"a": 1}

    def test_packaged_files_are_indexed(self):
        files = config_manager.get_indexed_files()
        assert "gameplay.json" in files
        assert "particles.json" in files

    def test_lookup_without_extension(self):
        loaded = load_config("gameplay", {})
        assert loaded["player"]["max_ammo"] == 6


# ===========================================================
# Gameplay Tuning
# ===========================================================

class TestGameplayConfig:

    def test_packaged_file_matches_defaults(self):
        assert load_gameplay_config() == DEFAULT_CONFIG

    def test_ranges_become_tuples(self):
        config = load_gameplay_config()
        assert config["enemy"]["peek"] == (0.85, 1.5)
        assert config["enemy"]["hitbox"] == (60, 95)

    def test_overrides_applied_last(self):
        config = load_gameplay_config(overrides={"player": {"max_ammo": 12}})

        assert config["player"]["max_ammo"] == 12
        assert config["player"]["max_lives"] == 3
        assert DEFAULT_CONFIG["player"]["max_ammo"] == 6

    def test_partial_file_keeps_defaults(self, write_json):
        path = write_json("partial.json", {"wave": {"base_target": 3}})
        config = load_gameplay_config(path)

        assert config["wave"]["base_target"] == 3
        assert config["wave"]["min_interval"] == 1.1
        assert config["enemy"]["entry_x"] == 412
