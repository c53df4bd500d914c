"""YAML config loader with environment fallback for the API key."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from skycast.config.defaults import DEFAULT_LOCATIONS
from skycast.config.schema import API_KEY_ENV, SkycastConfig
from skycast.errors import ConfigError


def load_config(path: str | Path) -> SkycastConfig:
    """Load and validate config from a YAML file.

    If no locations are specified in the YAML, injects DEFAULT_LOCATIONS.
    An empty ``api.api_key`` is filled from $SKYCAST_API_KEY.
    """
    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    api = raw.get("api") or {}
    if isinstance(api, dict) and not api.get("api_key"):
        api = {**api, "api_key": os.environ.get(API_KEY_ENV, "")}
    raw["api"] = api

    try:
        return SkycastConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def get_config_value(config: SkycastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.base_url'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if part.startswith(("_", "model_")):
            raise KeyError(f"Config key not found: {dotted_key}")
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_json(config: SkycastConfig) -> str:
    """Config as indented JSON with the API key left out."""
    return config.model_dump_json(indent=2, exclude={"api": {"api_key"}})
