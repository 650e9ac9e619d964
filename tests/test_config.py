"""Tests for config paths and settings.yaml loading."""

from pathlib import Path

from osview.config import (
    DEFAULT_LOG_LEVEL,
    get_config_dir,
    get_credentials_path,
    load_settings,
)


class TestConfigDir:

    def test_env_override(self, config_dir):
        assert get_config_dir() == config_dir
        assert get_credentials_path() == config_dir / "credentials.json"

    def test_xdg_config_home(self, monkeypatch, temp_dir):
        monkeypatch.delenv("OSVIEW_CONFIG_DIR", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir))
        assert get_config_dir() == temp_dir / "osview"

    def test_home_fallback(self, monkeypatch):
        monkeypatch.delenv("OSVIEW_CONFIG_DIR", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert get_config_dir() == Path.home() / ".config" / "osview"


class TestLoadSettings:

    def _write(self, config_dir, text):
        config_dir.mkdir(parents=True, exist_ok=True)
        (config_dir / "settings.yaml").write_text(text)

    def test_defaults_without_file(self, config_dir):
        settings = load_settings()
        assert settings.compute_url is None
        assert settings.log_level == DEFAULT_LOG_LEVEL
        assert settings.log_path == config_dir / "logs" / "osview.log"

    def test_reads_file(self, config_dir, temp_dir):
        self._write(config_dir, (
            "compute_url: http://nova:8774/v2.1\n"
            "log_level: debug\n"
            f"log_file: {temp_dir / 'x.log'}\n"
        ))
        settings = load_settings()
        assert settings.compute_url == "http://nova:8774/v2.1"
        assert settings.log_level == "DEBUG"
        assert settings.log_path == temp_dir / "x.log"

    def test_arguments_override_file(self, config_dir):
        self._write(config_dir, "compute_url: http://from-file\nlog_level: INFO\n")
        settings = load_settings(compute_url="http://from-flag", log_level="error")
        assert settings.compute_url == "http://from-flag"
        assert settings.log_level == "ERROR"

    def test_malformed_yaml_gives_defaults(self, config_dir):
        self._write(config_dir, "compute_url: [unclosed\n")
        settings = load_settings()
        assert settings.compute_url is None

    def test_non_mapping_gives_defaults(self, config_dir):
        self._write(config_dir, "- just\n- a list\n")
        assert load_settings().compute_url is None

    def test_blank_values_ignored(self, config_dir):
        self._write(config_dir, "compute_url: '  '\nlog_level: ''\n")
        settings = load_settings()
        assert settings.compute_url is None
        assert settings.log_level == DEFAULT_LOG_LEVEL
