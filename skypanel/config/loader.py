"""YAML config loader with first-run defaults and dotted-key lookup."""

import logging
from pathlib import Path
from typing import Any

import yaml

from skypanel.config.schema import AppConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing file is created with the default config first.
    """
    path = Path(path)
    if not path.exists():
        write_default_config(path)

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(**raw)


def write_default_config(path: str | Path) -> AppConfig:
    path = Path(path)
    config = AppConfig()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)
    logger.info("Wrote default config to %s", path)
    return config


def resolve_paths(config: AppConfig, base_dir: str | Path) -> AppConfig:
    """Anchor relative cache/icon paths at base_dir. Returns a new AppConfig."""
    base_dir = Path(base_dir)
    updates = {}
    for name in ("cache_file", "icon_dir"):
        value = Path(getattr(config.paths, name))
        if not value.is_absolute():
            updates[name] = str(base_dir / value)
    if not updates:
        return config
    return config.model_copy(update={"paths": config.paths.model_copy(update=updates)})


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'settings.unit'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
