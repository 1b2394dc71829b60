from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from osclouds.common import SearchPaths
from osclouds.config.models import HomeDirectoryError
from osclouds.config.paths import default_search_paths


def test_default_search_paths_order(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    result = default_search_paths(SearchPaths())

    assert is_ok(result)
    assert result.unwrap() == [
        Path("clouds.yaml"),
        tmp_path / ".config" / "openstack" / "clouds.yaml",
        Path("/etc/openstack/clouds.yaml"),
    ]


def test_default_search_paths_use_custom_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    search = SearchPaths(filename="alt.yaml", user_config_subdir="conf", system_config_dir=str(tmp_path / "etc"))

    paths = default_search_paths(search).unwrap()

    assert paths == [Path("alt.yaml"), tmp_path / "conf" / "alt.yaml", tmp_path / "etc" / "alt.yaml"]


def test_empty_home_is_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "")

    result = default_search_paths(SearchPaths())

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, HomeDirectoryError)
    assert error.message == "config: $HOME env var not set"


def test_home_lookup_failure_is_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    def _no_home(*_args):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", _no_home)

    result = default_search_paths(SearchPaths())

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, HomeDirectoryError)
    assert error.message == "config: cannot find home directory: Could not determine home directory."
