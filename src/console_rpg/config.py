"""Configuration loaded from ``config.toml``."""
from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"

DEFAULTS: dict[str, dict[str, Any]] = {
    "storage": {"db_path": "saves/game.db"},
    "logging": {"level": "WARNING", "file": "logs/console_rpg.log", "file_level": "INFO"},
    "game": {"seed_world": True, "world": "starter"},
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config.toml, filling missing keys from DEFAULTS.

    A missing file is not an error; the defaults apply.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    loaded: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "rb") as f:
            loaded = tomllib.load(f)

    config: dict[str, Any] = {}
    for section, values in DEFAULTS.items():
        config[section] = {**values, **loaded.get(section, {})}
    for section, values in loaded.items():
        config.setdefault(section, values)
    return config
