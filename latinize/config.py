"""Settings loading."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from latinize.utils.log import LOG_FORMATS, LOG_LEVELS


# Project checkout root; etc/settings.yaml only exists there (not in wheels)
ROOT_DIR = Path(__file__).parent.parent

SETTINGS_ENV_VAR = "LATINIZE_SETTINGS"

DEFAULT_SETTINGS: dict[str, Any] = {
    "logging": {
        "level": "WARNING",
        "format": "pretty",
        "file": None,
    },
    "progress": False,
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def find_settings_file(path: Path | None = None) -> Path | None:
    """
    Locate the settings file to use.

    Order: explicit path, ``LATINIZE_SETTINGS``, then ``etc/settings.yaml``
    under the project root. The last one is only present in a source
    checkout (editable install); an installed package finds nothing there
    and runs on DEFAULT_SETTINGS.

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist
    """
    if path is None and os.environ.get(SETTINGS_ENV_VAR):
        path = Path(os.environ[SETTINGS_ENV_VAR])

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"settings file not found at {path}")
        return path

    default_path = ROOT_DIR / "etc" / "settings.yaml"
    return default_path if default_path.exists() else None


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """
    Load settings.yaml merged over built-in defaults.

    Args:
        path: Optional explicit settings file

    Returns:
        Settings dict
    """
    settings_path = find_settings_file(path)
    if settings_path is None:
        return copy.deepcopy(DEFAULT_SETTINGS)

    with settings_path.open(encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{settings_path}: settings must be a mapping")

    settings = _merge(DEFAULT_SETTINGS, loaded)
    validate_settings(settings, settings_path)
    return settings


def validate_settings(settings: dict[str, Any], source: Path | str = "settings") -> None:
    """
    Check merged settings before they are used.

    Raises:
        ValueError: On a missing section or an unknown value
    """
    log_settings = settings.get("logging")
    if not isinstance(log_settings, dict):
        raise ValueError(f"{source}: 'logging' must be a mapping")

    level = log_settings.get("level")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(
            f"{source}: logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )

    log_format = log_settings.get("format")
    if log_format not in LOG_FORMATS:
        raise ValueError(
            f"{source}: logging.format must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
        )

    log_file = log_settings.get("file")
    if log_file is not None and not isinstance(log_file, str):
        raise ValueError(f"{source}: logging.file must be a path or null")

    if not isinstance(settings.get("progress"), bool):
        raise ValueError(f"{source}: progress must be true or false")
