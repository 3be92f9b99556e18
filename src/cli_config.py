"""CLI configuration: config file loading and settings precedence.

Settings resolve in priority order: CLI flag, environment variable, config
file, built-in default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """The configuration file or an override could not be used."""


@dataclass
class Settings:
    """Effective settings for one CLI invocation."""
    gallery_url: str = Constants.DEFAULT_GALLERY_URL
    api_key: Optional[str] = None
    timeout: float = Constants.REQUEST_TIMEOUT


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load settings from a YAML (or JSON) file.

    Args:
        config_path: Path to the config file. Keys may sit at the top level
            or under a ``nugetvis`` section.

    Returns:
        Config dict; empty when no path is given or the file is missing.

    Raises:
        ConfigError: When the file cannot be parsed or is not a mapping.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping")
    section = data.get("nugetvis", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Config {config_path}: 'nugetvis' must be a mapping")
    return section


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None and str(value).strip() != "":
            return value
    return None


def _to_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout: {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive: {value!r}")
    return timeout


def resolve_settings(args: Any) -> Settings:
    """Merge CLI arguments, environment and config file into ``Settings``."""
    config = load_config(getattr(args, "CONFIG", None))
    gallery_url = _first(
        getattr(args, "SOURCE", None),
        os.environ.get(Constants.ENV_GALLERY_URL),
        config.get("gallery_url"),
        Constants.DEFAULT_GALLERY_URL,
    )
    api_key = _first(
        getattr(args, "API_KEY", None),
        os.environ.get(Constants.ENV_API_KEY),
        config.get("api_key"),
    )
    timeout = _first(
        getattr(args, "TIMEOUT", None),
        os.environ.get(Constants.ENV_TIMEOUT),
        config.get("timeout"),
        Constants.REQUEST_TIMEOUT,
    )
    return Settings(
        gallery_url=str(gallery_url),
        api_key=str(api_key).strip() if api_key is not None else None,
        timeout=_to_timeout(timeout),
    )
