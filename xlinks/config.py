"""Configuration management for xlinks."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import XlinksConfig

# Application name for XDG paths
APP_NAME = "xlinks"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "export": {
        "filename": "x-links",
        "sheet_title": "X Links",
    },
    "output": {
        "default_format": "table",  # table, json or links
    },
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory."""
    return Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))


def get_config_path() -> Path:
    """
    Get the path to the config file.

    Priority:
    1. XLINKS_CONFIG environment variable
    2. XDG default: ~/.config/xlinks/config.json
    """
    env_path = os.environ.get("XLINKS_CONFIG")
    if env_path:
        return Path(env_path)
    return get_xdg_config_home() / APP_NAME / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration, merging with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        with open(config_path) as f:
            try:
                user_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
        if not isinstance(user_config, dict):
            raise ConfigError(f"Expected a JSON object in {config_path}")
        config = deep_merge(config, user_config)

    return config


def load_settings() -> XlinksConfig:
    """Load configuration as a validated model."""
    try:
        return XlinksConfig.model_validate(load_config())
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {get_config_path()}: {e}") from e


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
