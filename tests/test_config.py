"""Tests for the YAML configuration loader."""

from pathlib import Path

import pytest

from incident_archiver.config import CONFIG_ENV_VAR, load_config
from incident_archiver.errors import ConfigError
from incident_archiver.models import ArchiverConfig


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.yaml")
        assert config == ArchiverConfig()
        assert config.feed_url == "https://status.webshare.io/feed.atom"
        assert config.data_file == "data.json"

    def test_reads_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "feed_url: https://status.example.com/feed.atom\n"
            "data_file: incidents.json\n"
            "repo_dir: /srv/repo\n"
            "request_timeout: 5\n"
            "push: false\n"
            "git:\n"
            "  user_name: Bot\n"
            "  user_email: bot@example.com\n"
            "settings:\n"
            "  log_level: debug\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.feed_url == "https://status.example.com/feed.atom"
        assert config.data_file == "incidents.json"
        assert config.request_timeout == 5.0
        assert config.push is False
        assert config.git.user_name == "Bot"
        assert config.git.user_email == "bot@example.com"
        assert config.log_level == "DEBUG"
        assert config.data_path == Path("/srv/repo/incidents.json")

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("push: false\n", encoding="utf-8")
        config = load_config(path)
        assert config.push is False
        assert config.git == ArchiverConfig().git

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == ArchiverConfig()

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("data_file: other.json\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().data_file == "other.json"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("feed_url: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_bad_timeout(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("request_timeout: soon\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_quoted_push_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text('push: "false"\n', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)


class TestDataPath:
    def test_relative_to_repo_dir(self):
        config = ArchiverConfig(repo_dir="/srv/repo", data_file="data.json")
        assert config.data_path == Path("/srv/repo/data.json")

    def test_absolute_kept(self):
        config = ArchiverConfig(repo_dir="/srv/repo", data_file="/tmp/data.json")
        assert config.data_path == Path("/tmp/data.json")
