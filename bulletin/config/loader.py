"""YAML config loader with hashing and dotted-key lookup."""

import hashlib
from pathlib import Path
from typing import Any

import yaml

from bulletin.config.schema import BulletinConfig


def load_config(path: str | Path | None = None) -> BulletinConfig:
    """Load and validate config from a YAML file.

    With no path, every section takes its defaults. An empty file does too.
    """
    if path is None:
        return BulletinConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return BulletinConfig(**raw)


def config_hash(config: BulletinConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: BulletinConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'render.viewport_width'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
