"""osclouds - load OpenStack credentials from clouds.yaml files.

By default, osclouds' internal logging is disabled when used as a library.
Library users can enable logging by calling osclouds.enable_logging().
"""

from osclouds.common import disable_library_logging, enable_library_logging
from osclouds.config import (
    AuthOptions,
    CloudNotFoundError,
    CloudsConfig,
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConfigSearchExhaustedError,
    HomeDirectoryError,
    load_config,
    load_config_from_file,
)

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "AuthOptions",
    "CloudNotFoundError",
    "CloudsConfig",
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigSearchExhaustedError",
    "HomeDirectoryError",
    "enable_logging",
    "load_config",
    "load_config_from_file",
]
