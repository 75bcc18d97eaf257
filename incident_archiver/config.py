"""
YAML configuration loader.

Reads config.yaml and produces a typed ArchiverConfig.
Falls back to defaults if the config file is missing.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from incident_archiver.errors import ConfigError
from incident_archiver.models import ArchiverConfig, GitIdentity
from incident_archiver import notifier

# Default path: config.yaml next to the project root
_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

# Overrides the default path when set
CONFIG_ENV_VAR = "INCIDENT_ARCHIVER_CONFIG"


def load_config(path: str | Path | None = None) -> ArchiverConfig:
    """
    Load and parse the YAML configuration file.

    Resolution order: the explicit ``path`` argument, then the
    INCIDENT_ARCHIVER_CONFIG environment variable, then config.yaml in
    the project root.

    Raises:
        ConfigError: The file exists but is not valid YAML or not a mapping.
    """
    if path:
        config_path = Path(path)
    elif os.environ.get(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])
    else:
        config_path = _DEFAULT_CONFIG_PATH

    if not config_path.exists():
        notifier.print_notice(f"Config file not found at {config_path}, using defaults.")
        return ArchiverConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path}: expected a mapping at the top level")

    defaults = ArchiverConfig()
    raw_git = raw.get("git") or {}
    raw_settings = raw.get("settings") or {}
    if not isinstance(raw_git, dict) or not isinstance(raw_settings, dict):
        raise ConfigError(f"{config_path}: 'git' and 'settings' must be mappings")

    push = raw.get("push", defaults.push)
    if not isinstance(push, bool):
        raise ConfigError(f"{config_path}: push must be true or false, got {push!r}")

    try:
        timeout = float(raw.get("request_timeout", defaults.request_timeout))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{config_path}: invalid request_timeout") from exc

    return ArchiverConfig(
        feed_url=str(raw.get("feed_url", defaults.feed_url)),
        data_file=str(raw.get("data_file", defaults.data_file)),
        repo_dir=str(raw.get("repo_dir", defaults.repo_dir)),
        request_timeout=timeout,
        push=push,
        git=GitIdentity(
            user_name=str(raw_git.get("user_name", defaults.git.user_name)),
            user_email=str(raw_git.get("user_email", defaults.git.user_email)),
        ),
        log_level=str(raw_settings.get("log_level", defaults.log_level)).upper(),
    )
