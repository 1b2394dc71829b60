"""Default clouds.yaml search locations."""

from __future__ import annotations

import os
from pathlib import Path

from result import Err, Ok, Result

from osclouds.common import SearchPaths
from osclouds.settings import settings

from .models import HomeDirectoryError


def default_search_paths(search: SearchPaths | None = None) -> Result[list[Path], HomeDirectoryError]:
    """Return the ordered clouds.yaml candidates.

    1) current directory
    2) ~/.config/openstack
    3) /etc/openstack

    Returns Err when the user's home directory cannot be determined, since the
    per-user candidate cannot be built without it.
    """
    search = search or settings.search

    home_result = _get_home_directory()
    if home_result.is_err():
        return home_result
    home = home_result.unwrap()

    return Ok(
        [
            Path(".") / search.filename,
            home / search.user_config_subdir / search.filename,
            Path(search.system_config_dir) / search.filename,
        ]
    )


def _get_home_directory() -> Result[Path, HomeDirectoryError]:
    if os.environ.get("HOME") == "":
        return Err(HomeDirectoryError(reason="$HOME env var not set"))

    try:
        return Ok(Path.home())
    except (RuntimeError, KeyError) as exc:
        return Err(HomeDirectoryError(reason=f"cannot find home directory: {exc}"))
