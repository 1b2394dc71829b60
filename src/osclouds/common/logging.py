"""Logging utilities for osclouds using Loguru.

- CLI usage: a stderr handler configured by the command-line entrypoint
- Library usage: logging disabled by default, can be enabled by library users
"""

import sys

import loguru
from loguru import logger

from osclouds.constants import APP_NAME

from .models import AppInfo


def setup_cli_logging(app_info: AppInfo, level: str = "WARNING") -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
        diagnose=(app_info.environment == "dev"),
    )

    logger.debug("CLI logging initialized", level=level, version=app_info.version)

    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
