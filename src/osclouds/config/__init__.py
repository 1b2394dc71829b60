"""Public API for loading OpenStack clouds.yaml configuration."""

from __future__ import annotations

from .loader import load_config_from_file
from .models import (
    AuthOptions,
    CloudNotFoundError,
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConfigSearchExhaustedError,
    HomeDirectoryError,
)
from .paths import default_search_paths
from .protocol import CloudsConfigProvider
from .resolver import load_config
from .store import CloudsConfig

__all__ = [
    "AuthOptions",
    "CloudNotFoundError",
    "CloudsConfig",
    "CloudsConfigProvider",
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigSearchExhaustedError",
    "HomeDirectoryError",
    "default_search_paths",
    "load_config",
    "load_config_from_file",
]
