"""Reading and translating a single clouds.yaml file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from osclouds.common import create_logger

from .models import AuthOptions, AuthSection, CloudsFile, ConfigIOError, ConfigParseError, LoadError
from .store import CloudsConfig

logger = create_logger("config")

AUTH_SECTION = "auth"
EMPTY_CONFIG_CAUSE = "config is empty"

_KEPT_IMPLICIT_TAGS = ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")


class _TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as their source text.

    Only nulls and merge keys are resolved implicitly, so `password: 0123` stays
    "0123" and a cloud named `2024` stays "2024".
    """


_TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_IMPLICIT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_config_from_file(path: Path | str) -> Result[CloudsConfig, LoadError]:
    """Load cloud credentials from one clouds.yaml file.

    Clouds without an `auth` section are left out of the returned store.
    """
    path = Path(path)
    logger.debug("Loading clouds file", path=str(path))

    try:
        raw_bytes = path.read_bytes()
    except OSError as exc:
        return Err(ConfigIOError(path=path, reason=str(exc)))

    try:
        data = yaml.load(raw_bytes, Loader=_TextScalarLoader)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            ConfigParseError(
                path=path,
                cause=str(exc),
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
            )
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        return Err(ConfigParseError(path=path, cause="configuration root must be a mapping"))

    try:
        clouds_file = CloudsFile.model_validate(data)
    except ValidationError as exc:
        return Err(_parse_error_from_validation(path, exc))

    if not clouds_file.clouds:
        return Err(ConfigParseError(path=path, cause=EMPTY_CONFIG_CAUSE))

    return _build_clouds(path, clouds_file.clouds)


def _build_clouds(
    path: Path,
    entries: dict[str, dict[str, Any] | None],
) -> Result[CloudsConfig, ConfigParseError]:
    clouds: dict[str, AuthOptions] = {}
    for name, sections in entries.items():
        if not sections or AUTH_SECTION not in sections:
            continue
        try:
            auth = sections[AUTH_SECTION]
            section = AuthSection.model_validate({} if auth is None else auth)
        except ValidationError as exc:
            return Err(_parse_error_from_validation(path, exc, prefix=("clouds", name, AUTH_SECTION)))
        clouds[name] = section.to_auth_options()

    logger.debug("Clouds file loaded", path=str(path), clouds=len(clouds))
    return Ok(CloudsConfig(clouds, source=path))


def _parse_error_from_validation(
    path: Path,
    exc: ValidationError,
    prefix: tuple[str, ...] = (),
) -> ConfigParseError:
    field = None
    cause = str(exc)
    error_details = exc.errors()
    if error_details:
        first = error_details[0]
        loc = (*prefix, *(first.get("loc") or ()))
        field = ".".join(str(part) for part in loc) or None
        cause = first.get("msg", cause)
        if field:
            cause = f"{field}: {cause}"
    return ConfigParseError(path=path, cause=cause, field=field)
