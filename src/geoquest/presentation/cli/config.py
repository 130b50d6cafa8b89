"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_CONFIG_KEYS = ("player_name", "data_path")


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "GeoQuest"
        return Path.home() / "GeoQuest"
    return Path.home() / ".config" / "geoquest"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_dex_path() -> Path:
    """Return the per-user collection log path."""
    return get_user_data_dir() / "dex.json"


def _defaults() -> Dict[str, str]:
    return {key: "" for key in _CONFIG_KEYS}


def _normalize(raw: dict) -> Dict[str, str]:
    config = _defaults()
    for key in _CONFIG_KEYS:
        value = raw.get(key)
        if isinstance(value, str):
            config[key] = value.strip()
    return config


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return _normalize(raw)


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
