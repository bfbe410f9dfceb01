"""
Runtime Configuration Tests
Tests for core/config/runtime.py

Tests:
- defaults
- config file loading (JSON and YAML)
- environment overrides win over file values
"""
import json
import logging

import pytest

from core.config.runtime import (
    RuntimeConfig,
    get_default_config,
    load_runtime_config,
)


class TestDefaults:
    def test_defaults(self):
        config = RuntimeConfig()

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 8080
        assert config.api.cors_origins == ["*"]
        assert config.log_level_value == logging.INFO

    def test_unknown_log_level_falls_back_to_info(self):
        assert RuntimeConfig(log_level="chatty").log_level_value == logging.INFO
        assert RuntimeConfig(log_level="chatty").log_level_name == "info"

    @pytest.mark.parametrize("name, expected", [
        ("debug", "debug"),
        ("WARN", "warning"),
        ("Error", "error"),
        ("NOTSET", "info"),
    ])
    def test_log_level_name(self, name, expected):
        assert RuntimeConfig(log_level=name).log_level_name == expected

    def test_no_file_no_env(self):
        assert load_runtime_config().to_dict() == RuntimeConfig().to_dict()


class TestFiles:
    def test_json_in_cwd(self, tmp_path):
        (tmp_path / "forge.json").write_text(json.dumps({
            "server": {"port": 9000},
            "log_level": "DEBUG",
        }))

        config = load_runtime_config()

        assert config.server.port == 9000
        assert config.server.host == "0.0.0.0"
        assert config.log_level == "DEBUG"

    def test_yaml_path(self, tmp_path):
        path = tmp_path / "service.yaml"
        path.write_text("server:\n  host: 127.0.0.1\napi:\n  cors_origins: ['https://a.example']\n")

        config = load_runtime_config(path)

        assert config.server.host == "127.0.0.1"
        assert config.api.cors_origins == ["https://a.example"]

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_runtime_config(tmp_path / "absent.json")

    def test_unparseable_file_is_skipped(self, tmp_path):
        (tmp_path / "forge.json").write_text("{broken")

        assert load_runtime_config().server.port == 8080


class TestEnvOverrides:
    def test_env_beats_file(self, tmp_path, monkeypatch):
        (tmp_path / "forge.json").write_text(json.dumps({"server": {"port": 9000}}))
        monkeypatch.setenv("FORGE_PORT", "9100")
        monkeypatch.setenv("FORGE_LOG_LEVEL", "warning")
        monkeypatch.setenv("FORGE_CORS_ORIGINS", "https://a.example, https://b.example")

        config = load_runtime_config()

        assert config.server.port == 9100
        assert config.log_level_value == logging.WARNING
        assert config.api.cors_origins == ["https://a.example", "https://b.example"]

    def test_with_env_overrides_does_not_mutate(self, monkeypatch):
        base = RuntimeConfig()
        monkeypatch.setenv("FORGE_HOST", "10.0.0.1")

        overridden = base.with_env_overrides()

        assert overridden.server.host == "10.0.0.1"
        assert base.server.host == "0.0.0.0"

    def test_default_config_is_cached(self):
        assert get_default_config() is get_default_config()

    def test_config_env_names_the_file(self, tmp_path, monkeypatch):
        path = tmp_path / "elsewhere.yaml"
        path.write_text("server:\n  port: 9200\n")
        monkeypatch.setenv("FORGE_CONFIG", str(path))

        assert load_runtime_config().server.port == 9200
