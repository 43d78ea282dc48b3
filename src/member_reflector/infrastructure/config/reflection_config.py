#!/usr/bin/env python3

"""Configuration for member discovery and value access."""

import os
from typing import Any

from ..logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "MEMBERS_"

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    # Discovery
    "INCLUDE_SLOTS": True,  # Report __slots__ entries as fields
    "INCLUDE_CACHED_PROPERTIES": True,  # Report functools.cached_property as properties

    # Value access
    "ENFORCE_VALUE_TYPES": False,  # Check values against the declared type before setting
}


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Each key can be overridden by ``MEMBERS_<KEY>``, e.g.
    ``MEMBERS_ENFORCE_VALUE_TYPES=true``.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    # Override with environment variables
    for key in config:
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is not None:
            config[key] = _convert(key, config[key], env_value)

    return config


def _convert(key: str, default: Any, env_value: str) -> Any:
    """Convert an environment value to the type of its default."""
    if isinstance(default, bool):
        lowered = env_value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
        logger.warning(f"Ignoring invalid boolean for {ENV_PREFIX}{key}: {env_value!r}")
        return default
    return env_value
