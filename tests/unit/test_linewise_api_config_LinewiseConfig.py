"""Unit tests for linewise.api.config.LinewiseConfig."""

import json

import pytest

from linewise.api.config.get_linewise_home import get_linewise_home
from linewise.api.config.LinewiseConfig import LinewiseConfig

pytestmark = pytest.mark.config


class TestLinewiseHome:
    def test_uses_environment(self, linewise_home):
        assert get_linewise_home() == linewise_home

    def test_defaults_to_user_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("LINEWISE_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_linewise_home() == tmp_path / ".linewise"


class TestLinewiseConfig:
    def test_defaults(self):
        config = LinewiseConfig()

        assert config.log.level == "INFO"
        assert config.log.file == "linewise.log"
        assert config.transform.default_function == "upper"

    def test_load_missing_file(self):
        with pytest.raises(ValueError, match="Configuration file not found"):
            LinewiseConfig.load()

    def test_load_or_default_missing_file(self):
        assert LinewiseConfig.load_or_default() == LinewiseConfig()

    def test_load(self, write_config):
        write_config({"log": {"level": "DEBUG"}, "transform": {"default_function": "lower"}})

        config = LinewiseConfig.load()

        assert config.log.level == "DEBUG"
        assert config.log.backup_count == 3
        assert config.transform.default_function == "lower"

    def test_load_invalid_json(self, linewise_home):
        linewise_home.mkdir(parents=True)
        (linewise_home / "config.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            LinewiseConfig.load()

    def test_load_non_object(self, write_config):
        write_config(["upper"])

        with pytest.raises(ValueError, match="must be a JSON object"):
            LinewiseConfig.load()

    def test_load_unknown_section(self, write_config):
        write_config({"cache": {}})

        with pytest.raises(ValueError, match="Configuration validation error: cache"):
            LinewiseConfig.load()

    def test_load_invalid_level(self, write_config):
        write_config({"log": {"level": "LOUD"}})

        with pytest.raises(ValueError, match="log.level"):
            LinewiseConfig.load_or_default()

    def test_load_unknown_default_function(self, write_config):
        write_config({"transform": {"default_function": "shout"}})

        with pytest.raises(ValueError, match="transform.default_function"):
            LinewiseConfig.load()

    def test_save_round_trip(self, linewise_home):
        config = LinewiseConfig(transform={"default_function": "title"})

        config.save()

        saved = json.loads((linewise_home / "config.json").read_text(encoding="utf-8"))
        assert saved["transform"] == {"default_function": "title"}
        assert LinewiseConfig.load() == config
        assert not (linewise_home / "config.json.tmp").exists()

    def test_load_unreadable_file(self, linewise_home):
        (linewise_home / "config.json").mkdir(parents=True)

        with pytest.raises(ValueError, match="Cannot read config file"):
            LinewiseConfig.load()
