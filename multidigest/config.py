"""Configuration loading helpers for multidigest."""

from pathlib import Path

from .core.settings import find_config_file, load_settings


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'logging.level'."""
    for part in key.split("."):
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()


def config_get(key: str, default=None, start_dir: str | None = None):
    """Get a config value by dot-notation key, e.g. ``config_get("logging.level")``."""
    return _get_nested(load_config(start_dir=start_dir), key, default)


__all__ = ["config_get", "find_config_file", "load_config"]
