from __future__ import annotations

import logging
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from mansion.core.map.file_spec import MapFileSpec, MapSpec
from mansion.io.loaders.errors import LoaderError

logger = logging.getLogger(__name__)


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise LoaderError(path, "Cannot read map file", cause=exc) from exc
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LoaderError(path, f"Expected a mapping at top level, got {type(data).__name__}")
    return data


def load_map(path: str) -> MapSpec:
    """Load a map specification from a YAML file.

    Expected format:
    map:
      name: Detective Quest Mansion
      root: hall
      rooms:
        - id: hall
          name: Hall de Entrada
          left: living_room
          right: library
    """
    data = _read_yaml(path)
    try:
        spec = MapFileSpec.model_validate(data).map
    except ValidationError as exc:
        raise LoaderError(path, "Invalid map definition", cause=exc) from exc
    logger.info("Loaded map '%s' from %s (%d room(s))", spec.name, path, len(spec.rooms))
    return spec


__all__ = ["load_map"]
