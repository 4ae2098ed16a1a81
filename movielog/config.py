#!/usr/bin/env python3
"""
YAML configuration for the report CLI and dashboard
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from movielog.constants import DEFAULT_SOURCE, DEFAULT_TIMEOUT, DEFAULT_TOP_N

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'source': DEFAULT_SOURCE,       # Path or http(s) URL of the movie log
    'timeout': DEFAULT_TIMEOUT,     # Seconds, URL sources only
    'top_n': DEFAULT_TOP_N,         # Length of the top-rated list
    'include_current': True,        # CURRENT divider above the newest section
}


class ConfigError(Exception):
    """Configuration file exists but cannot be used"""


def load_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from YAML file, falling back to defaults"""
    config = dict(DEFAULT_CONFIG)
    config_path = Path(config_path)

    if not config_path.exists():
        logger.info(f"No config file at {config_path}, using defaults")
        return config

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(loaded).__name__}")

    unknown = set(loaded) - set(DEFAULT_CONFIG)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

    config.update({k: v for k, v in loaded.items() if k in DEFAULT_CONFIG})
    return config
