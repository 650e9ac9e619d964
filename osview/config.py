"""Configuration paths and settings loading for osview."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)


APP_NAME = "osview"

# Defaults for settings.yaml keys
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_config_dir() -> Path:
    """Get the per-user osview configuration directory.

    Can be overridden via OSVIEW_CONFIG_DIR environment variable (used by tests).
    Otherwise follows XDG: ``$XDG_CONFIG_HOME/osview`` or ``~/.config/osview``.
    """
    env_override = os.environ.get("OSVIEW_CONFIG_DIR")
    if env_override:
        return Path(env_override)
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        return Path(xdg_home) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_credentials_path() -> Path:
    """Get path to the persisted credentials file."""
    return get_config_dir() / "credentials.json"


def get_settings_path() -> Path:
    """Get path to the optional settings.yaml."""
    return get_config_dir() / "settings.yaml"


def get_logs_dir() -> Path:
    """Get the directory the log file is written to by default."""
    return get_config_dir() / "logs"


def _load_settings_file() -> dict[str, Any]:
    """Load settings.yaml from the config directory.

    Returns:
        Parsed YAML config dict, or empty dict if missing or unreadable
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        return {}
    try:
        with open(settings_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load settings from %s: %s", settings_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping", settings_path)
        return {}
    return data


@dataclass
class Settings:
    """Runtime settings, merged from settings.yaml and command-line flags."""
    compute_url: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None

    @property
    def log_path(self) -> Path:
        return self.log_file or (get_logs_dir() / f"{APP_NAME}.log")


def load_settings(
    compute_url: Optional[str] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Build Settings from settings.yaml, letting explicit arguments win.

    Args:
        compute_url: Compute endpoint override (e.g. from --compute-url)
        log_level: Log level override (e.g. from --log-level)
    """
    data = _load_settings_file()

    settings = Settings()
    file_compute_url = data.get("compute_url")
    if isinstance(file_compute_url, str) and file_compute_url.strip():
        settings.compute_url = file_compute_url.strip()
    file_log_level = data.get("log_level")
    if isinstance(file_log_level, str) and file_log_level.strip():
        settings.log_level = file_log_level.strip().upper()
    file_log_path = data.get("log_file")
    if isinstance(file_log_path, str) and file_log_path.strip():
        settings.log_file = Path(file_log_path).expanduser()

    if compute_url:
        settings.compute_url = compute_url
    if log_level:
        settings.log_level = log_level.upper()

    return settings
