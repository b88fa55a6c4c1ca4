from __future__ import annotations

"""Utilities for resolving the map file used by the CLI."""

from pathlib import Path
from typing import Optional


def kb_maps_dir() -> Path:
    return Path.cwd() / "kb" / "maps"


def default_map_path() -> Path:
    return kb_maps_dir() / "mansion.yaml"


def resolve_map_path(path: str | None) -> Optional[str]:
    """Pick the map file to load.

    1. An explicit path is returned as-is (existence is checked by the caller)
    2. Otherwise kb/maps/mansion.yaml under the working directory, if present
    3. Otherwise None, meaning the built-in default map
    """
    if path:
        return path
    candidate = default_map_path()
    if candidate.exists():
        return str(candidate)
    return None


__all__ = ["kb_maps_dir", "default_map_path", "resolve_map_path"]
