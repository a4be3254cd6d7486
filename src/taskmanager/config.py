# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

from taskmanager.constants import (
    AUTOSAVE_INTERVAL_SECONDS,
    DATA_FILE_ENV_VAR,
    DEFAULT_DATA_FILE,
    DEFAULT_SETTINGS_FILE,
)
from taskmanager.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "storage": {"data_file": DEFAULT_DATA_FILE},
    "autosave": {"enabled": True, "interval_seconds": AUTOSAVE_INTERVAL_SECONDS},
    "window": {"width": 900, "height": 600},
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
    merged = deepcopy(config)
    data_file = env_values.get(DATA_FILE_ENV_VAR, "").strip()
    if data_file:
        merged.setdefault("storage", {})
        merged["storage"]["data_file"] = data_file
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the application depends on."""
    data_file = config.get("storage", {}).get("data_file")
    if not isinstance(data_file, str) or not data_file.strip():
        raise ConfigError("storage.data_file must be a non-empty string")

    autosave = config.get("autosave", {})
    if not isinstance(autosave.get("enabled"), bool):
        raise ConfigError("autosave.enabled must be true or false")
    interval = autosave.get("interval_seconds")
    if isinstance(interval, bool) or not isinstance(interval, int) or not (1 <= interval <= 3600):
        raise ConfigError("autosave.interval_seconds must be an int in range 1..3600")

    window = config.get("window", {})
    for key in ("width", "height"):
        value = window.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 100:
            raise ConfigError(f"window.{key} must be an int of at least 100")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    if not config_path.exists():
        return _apply_env_overrides(get_default_config(), env_values)

    loaded = read_json_file(config_path)
    merged = _deep_merge(get_default_config(), loaded)
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path


def save_window_size(width: int, height: int, path: str | Path | None = None) -> Path:
    """Store the window size in the settings file, leaving other keys and .env overrides alone."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    stored = read_json_file(config_path) if config_path.exists() else {}
    config = _deep_merge(get_default_config(), stored)
    config["window"] = {"width": max(100, int(width)), "height": max(100, int(height))}
    return save_config(config, config_path)


def resolve_data_file(config: dict[str, Any], base_dir: str | Path | None = None) -> Path:
    """Return the project data path, relative paths resolved against ``base_dir``."""
    data_file = Path(str(config.get("storage", {}).get("data_file") or DEFAULT_DATA_FILE)).expanduser()
    if data_file.is_absolute() or base_dir is None:
        return data_file
    return Path(base_dir) / data_file
