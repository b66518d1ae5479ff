"""YAML config loader with environment fallback for the service key."""

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from threeday.config.defaults import GRID_PRESETS
from threeday.config.schema import AppConfig

SERVICE_KEY_ENV = "KMA_SERVICE_KEY"
REDACTED = "***"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    ``grid`` may be given as a preset name (e.g. ``grid: busan``). When the
    service key is not set in the file it is read from ``KMA_SERVICE_KEY``.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    grid = raw.get("grid")
    if isinstance(grid, str):
        if grid.lower() not in GRID_PRESETS:
            raise KeyError(f"Unknown grid preset: {grid}")
        raw["grid"] = GRID_PRESETS[grid.lower()].model_dump()

    service = raw.setdefault("service", {}) or {}
    raw["service"] = service
    if not service.get("service_key"):
        service["service_key"] = os.environ.get(SERVICE_KEY_ENV, "")

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'grid.nx'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        elif isinstance(obj, dict) and part in obj:
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted(config: AppConfig) -> dict[str, Any]:
    """Config as a plain dict with the service key masked."""
    data = json.loads(config.model_dump_json())
    if data["service"]["service_key"]:
        data["service"]["service_key"] = REDACTED
    return data
