"""Configuration file loading and saving."""

import os
import sys

from pathlib import Path
from typing import Optional

import yaml

from pydantic import ValidationError

from ..utils.debug import debug_log
from .defaults import get_default_config
from .schema import StatusLineConfig, WidgetItem

# TypeError covers a YAML document that is not a mapping
CONFIG_ERRORS = (yaml.YAMLError, ValidationError, OSError, TypeError)

# Module-level cache for config
_cached_config: Optional[StatusLineConfig] = None
_cached_mtime: float = 0.0
_cached_path: Optional[Path] = None


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "context-percent"


def get_config_path() -> Path:
    """Get the full configuration file path."""
    return get_config_dir() / "config.yaml"


def _remember(config: StatusLineConfig, config_path: Path) -> None:
    global _cached_config, _cached_mtime, _cached_path

    _cached_config = config
    _cached_path = config_path
    try:
        _cached_mtime = config_path.stat().st_mtime
    except OSError:
        _cached_mtime = 0.0


def load_config() -> StatusLineConfig:
    """
    Load configuration from YAML file with mtime-based caching.

    If config file doesn't exist, creates it with defaults.
    If config is invalid, falls back to defaults and warns on stderr.
    """
    config_path = get_config_path()

    if _cached_config is not None and _cached_path == config_path:
        try:
            if config_path.stat().st_mtime == _cached_mtime:
                return _cached_config
        except OSError:
            pass

    if not config_path.exists():
        debug_log(f"No config at {config_path}, writing defaults")
        config = get_default_config()
        save_config(config)
        _remember(config, config_path)
        return config

    try:
        config = load_config_file()
        _remember(config, config_path)
        return config

    except CONFIG_ERRORS as e:
        print(
            f"Warning: Failed to load config from {config_path}: {e}",
            file=sys.stderr,
        )
        print("Using default configuration.", file=sys.stderr)
        return get_default_config()


def load_config_file() -> StatusLineConfig:
    """Read and validate the config file without falling back to defaults.

    Raises:
        One of CONFIG_ERRORS if the file is missing, unreadable or invalid
    """
    with open(get_config_path(), encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if config_data is None:
        config_data = {}

    return StatusLineConfig(**config_data)


def save_config(config: StatusLineConfig) -> None:
    """Save configuration to YAML file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(mode="python")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)


def find_item(config: StatusLineConfig, item_id: str) -> Optional[WidgetItem]:
    """Find a configured widget item by id.

    Args:
        config: Status line configuration
        item_id: Item identifier (full id or unique prefix)

    Returns:
        Matching item, or None if missing or ambiguous
    """
    items = [item for line in config.lines for item in line]

    for item in items:
        if item.id == item_id:
            return item

    matches = [item for item in items if item.id.startswith(item_id)]
    if len(matches) == 1:
        return matches[0]
    return None


def replace_item(config: StatusLineConfig, updated: WidgetItem) -> StatusLineConfig:
    """Return a copy of the config with the item sharing updated.id replaced."""
    lines = [
        [updated if item.id == updated.id else item for item in line]
        for line in config.lines
    ]
    return config.model_copy(update={"lines": lines})
