from __future__ import annotations

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

SETTINGS_ENV = "SHEETPACKER_SETTINGS"
LOCAL_SETTINGS_FILE = "sheetpacker.yaml"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "algorithm": "nfdh",
    "json_indent": 2,
    "sheet_gap": 0.05,
    "log_level": "INFO",
    "svg": {
        "sheet_fill": "#f5f5f5",
        "item_fill": "#add8e6",
        "stroke": "#000000",
        "font_size": 12,
    },
}

_EXPECTED_TYPES = {
    "algorithm": str,
    "json_indent": int,
    "sheet_gap": (int, float),
    "log_level": str,
    "svg": dict,
}


class SettingsError(ValueError):
    """Settings file exists but cannot be used."""


def settings_path(explicit: Optional[str] = None) -> Optional[str]:
    """Locate the settings file: explicit path, then env var, then cwd."""

    if explicit:
        return str(Path(explicit).expanduser().resolve())
    env_path = os.getenv(SETTINGS_ENV)
    if env_path:
        return str(Path(env_path).expanduser().resolve())
    local = Path.cwd() / LOCAL_SETTINGS_FILE
    if local.is_file():
        return str(local.resolve())
    return None


def _merge(loaded: Dict[str, Any]) -> Dict[str, Any]:
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    for key, expected in _EXPECTED_TYPES.items():
        if key not in loaded:
            continue
        value = loaded[key]
        if isinstance(value, bool) or not isinstance(value, expected):
            raise SettingsError(f"setting {key!r} has invalid value {value!r}")
        if key == "svg":
            for svg_key in DEFAULT_SETTINGS["svg"]:
                if svg_key in value:
                    settings["svg"][svg_key] = value[svg_key]
        else:
            settings[key] = value
    return settings


@lru_cache(maxsize=None)
def _load_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise SettingsError(f"cannot parse settings file {path}: {e}") from e
    if not isinstance(loaded, dict):
        raise SettingsError(f"settings file {path} must contain a mapping")
    return _merge(loaded)


def load_settings(explicit: Optional[str] = None) -> Dict[str, Any]:
    """Return defaults overlaid with the YAML settings file, if any."""

    path = settings_path(explicit)
    if path is None:
        return copy.deepcopy(DEFAULT_SETTINGS)
    return copy.deepcopy(_load_file(path))


def clear_settings_cache() -> None:
    _load_file.cache_clear()
