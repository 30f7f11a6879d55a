"""Tests for rules configuration."""

import json

from vennt_rules.config import DEFAULT_CONFIG, get_config, load_config, save_config


class TestGetConfig:
    """Test merging overrides onto defaults."""

    def test_defaults_when_none(self):
        assert get_config(None) == DEFAULT_CONFIG

    def test_override_keeps_other_defaults(self):
        config = get_config({"free_abilities": []})

        assert config["free_abilities"] == []
        assert config["spendable_resources"] == ["hp", "mp", "vim", "hero"]

    def test_does_not_mutate_defaults(self):
        get_config({"path_sentinel_cost": 1})

        assert DEFAULT_CONFIG["path_sentinel_cost"] == 5000


class TestLoadSaveConfig:
    """Test config persistence."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "rules.json") == DEFAULT_CONFIG

    def test_invalid_file_gives_defaults(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text("{broken")

        assert load_config(path) == DEFAULT_CONFIG

    def test_round_trip_merges_defaults(self, tmp_path):
        path = tmp_path / "nested" / "rules.json"

        assert save_config({"magic_path_markers": ["Priest"]}, path)
        config = load_config(path)

        assert json.loads(path.read_text()) == {"magic_path_markers": ["Priest"]}
        assert config["magic_path_markers"] == ["Priest"]
        assert config["free_abilities"] == ["Alchemist's Training"]
