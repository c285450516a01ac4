"""Configuration file management for bedwars-level.

Reads and writes ~/.bedwars-level/config.json for display defaults used by the
CLI and the MCP server. The level calculation itself never reads config.
"""
from __future__ import annotations

import json
from pathlib import Path

DEFAULT_CONFIG_PATH: Path = Path.home() / ".bedwars-level" / "config.json"

DISPLAY_OPTION_KEYS: tuple[str, ...] = ("display_brackets", "display_icon")


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_display_options(config_path: Path | None = None) -> dict[str, bool]:
    """Return the stored display flags, False for anything unset."""
    config = load_config(config_path)
    return {key: bool(config.get(key, False)) for key in DISPLAY_OPTION_KEYS}


def set_display_options(
    config_path: Path | None = None,
    *,
    display_brackets: bool | None = None,
    display_icon: bool | None = None,
) -> dict[str, bool]:
    """Persist the given display flags, leaving the others untouched."""
    config = load_config(config_path)
    if display_brackets is not None:
        config["display_brackets"] = display_brackets
    if display_icon is not None:
        config["display_icon"] = display_icon
    save_config(config, config_path)
    return get_display_options(config_path)
