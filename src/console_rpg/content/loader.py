from __future__ import annotations
import tomllib
from pathlib import Path
from typing import Any

CONTENT_DIR = Path(__file__).parent
WORLD_DIR = CONTENT_DIR / "world"

_SECTIONS = ("items", "abilities", "rooms", "monsters", "players")


def load_toml(filepath: Path) -> dict[str, Any]:
    with open(filepath, "rb") as f:
        return tomllib.load(f)


def load_world(name: str = "starter") -> dict[str, list[dict]]:
    """Load one world file from ``content/world``."""
    data = load_toml(WORLD_DIR / f"{name}.toml")
    return {section: data.get(section, []) for section in _SECTIONS}
