# tagbridge/core/config.py
"""
Configuration file loading.

Usage:
    from tagbridge.core.config import load_config, ConfigError

    config = load_config("tagbridge.yaml")   # -> BridgeConfig

Loading and validation are separate steps: load_yaml() returns the raw
mapping, load_config() validates it against BridgeConfig.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from tagbridge.config.schema import BridgeConfig
from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import CONFIG

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration file issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match the schema."""

    pass


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If the YAML is invalid or not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> BridgeConfig:
    """
    Load and validate a bridge configuration.

    Args:
        path: YAML file to load. If None, starts from defaults.
        overrides: Values that replace file values (None values are ignored).

    Raises:
        ConfigNotFoundError, ConfigParseError: See load_yaml()
        ConfigValidationError: If the data doesn't match BridgeConfig
    """
    data: Dict[str, Any] = load_yaml(path) if path is not None else {}

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return BridgeConfig(**data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid configuration: {e}", path=Path(path) if path else None
        ) from e


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_yaml",
    "load_config",
]
