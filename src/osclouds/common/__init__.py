"""Common models and helpers used across osclouds modules."""

from .logging import create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo, SearchPaths

__all__ = [
    "AppInfo",
    "SearchPaths",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "setup_cli_logging",
]
