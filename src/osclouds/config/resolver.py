"""Locating the clouds.yaml file to load."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from result import Err, Ok, Result

from osclouds.common import create_logger

from .loader import load_config_from_file
from .models import (
    ConfigParseError,
    ConfigSearchExhaustedError,
    HomeDirectoryError,
)
from .paths import default_search_paths
from .store import CloudsConfig

logger = create_logger("config")

type ResolveError = HomeDirectoryError | ConfigParseError | ConfigSearchExhaustedError


def load_config(
    paths: Sequence[Path | str] | None = None,
) -> Result[CloudsConfig, ResolveError]:
    """Load the first usable clouds.yaml.

    By default this searches the current directory, ~/.config/openstack and
    /etc/openstack, in that order. A file that exists but cannot be parsed
    stops the search; a missing or unreadable file moves on to the next one.

    To load one specific file, use load_config_from_file.
    """
    if paths is None:
        paths_result = default_search_paths()
        if paths_result.is_err():
            return paths_result
        candidates = paths_result.unwrap()
    else:
        candidates = [Path(p) for p in paths]

    for candidate in candidates:
        match load_config_from_file(candidate):
            case Ok(config):
                logger.debug("Using clouds file", path=str(candidate))
                return Ok(config)
            case Err(ConfigParseError() as parse_error):
                return Err(parse_error)
            case Err(error):
                logger.debug("Skipping clouds file", path=str(candidate), reason=error.reason)

    return Err(ConfigSearchExhaustedError(searched=candidates))
