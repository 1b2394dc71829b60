"""In-memory store of loaded cloud credentials."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter
from result import Err, Ok, Result

from .models import AuthOptions, CloudNotFoundError
from .protocol import CloudsConfigProvider

_clouds_adapter = TypeAdapter(dict[str, AuthOptions])


class CloudsConfig(CloudsConfigProvider):
    """Immutable mapping of cloud name to AuthOptions.

    The store copies its input on construction and never changes afterwards,
    so it can be shared between threads without locking.
    """

    def __init__(self, clouds: Mapping[str, AuthOptions], source: Path | None = None) -> None:
        self._clouds: Mapping[str, AuthOptions] = MappingProxyType(_clouds_adapter.validate_python(dict(clouds)))
        self._source = source

    def __repr__(self) -> str:
        return f"CloudsConfig(clouds={list(self.names())!r}, source={self._source!r})"

    def __len__(self) -> int:
        return len(self._clouds)

    def __contains__(self, name: object) -> bool:
        return name in self._clouds

    @property
    def source(self) -> Path | None:
        """Path of the clouds.yaml this store was loaded from, if any."""
        return self._source

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._clouds))

    def get(self, name: str) -> Result[AuthOptions, CloudNotFoundError]:
        options = self._clouds.get(name)
        if options is None:
            return Err(CloudNotFoundError(name=name))
        return Ok(options)

    def get_all(self) -> dict[str, AuthOptions] | None:
        if not self._clouds:
            return None
        return dict(self._clouds)
