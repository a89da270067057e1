# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from telepict.constants import APP_NAME, DEFAULT_IMAGE_EXTENSIONS, DEFAULT_SETTINGS_FILE
from telepict.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "window": {"title": APP_NAME, "width": 800, "height": 800, "resizable": True},
    "display": {
        "drawing_width": 600,
        "drawing_height": 600,
        "phrase_columns": 80,
        "phrase_rows": 3,
    },
    "files": {"save_dir": "", "image_extensions": list(DEFAULT_IMAGE_EXTENSIONS)},
    "logging": {"level": "INFO", "log_dir": ""},
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

ENV_OVERRIDES = {
    "TELEPICT_SAVE_DIR": ("files", "save_dir"),
    "TELEPICT_LOG_LEVEL": ("logging", "level"),
    "TELEPICT_LOG_DIR": ("logging", "log_dir"),
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides; the process environment wins over .env."""
    merged = deepcopy(config)
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name, env_values.get(env_name, "")).strip()
        if value:
            merged.setdefault(section, {})
            merged[section][key] = value
    return merged


def _positive_int(config: dict[str, Any], section: str, key: str) -> None:
    value = config.get(section, {}).get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{section}.{key} must be a positive int")


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the GUI relies on."""
    for key in ("width", "height"):
        _positive_int(config, "window", key)
    for key in ("drawing_width", "drawing_height", "phrase_columns", "phrase_rows"):
        _positive_int(config, "display", key)

    level = str(config.get("logging", {}).get("level", "")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {sorted(LOG_LEVELS)}")

    extensions = config.get("files", {}).get("image_extensions")
    if not isinstance(extensions, list) or not extensions:
        raise ConfigError("files.image_extensions must be a non-empty list")
    for ext in extensions:
        if not isinstance(ext, str) or not ext.startswith(".") or len(ext) < 2:
            raise ConfigError(f"files.image_extensions entry must look like '.png', got {ext!r}")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    if config_path.exists():
        loaded = read_json_file(config_path)
        merged = _deep_merge(get_default_config(), loaded)
    else:
        merged = get_default_config()
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path


def log_level(config: dict[str, Any]) -> int:
    name = str(config.get("logging", {}).get("level", "INFO")).upper()
    return logging.getLevelName(name) if name in LOG_LEVELS else logging.INFO
