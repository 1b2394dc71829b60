"""Cloud configuration access protocol."""

from typing import Protocol

from result import Result

from .models import AuthOptions, CloudNotFoundError


class CloudsConfigProvider(Protocol):
    """Protocol for read-only access to per-cloud credentials."""

    def get(self, name: str) -> Result[AuthOptions, CloudNotFoundError]:
        """Return the credentials configured for one cloud."""
        ...

    def get_all(self) -> dict[str, AuthOptions] | None:
        """Return a copy of all credentials keyed by cloud name.

        Returns:
            A new dict on every call, or None when no clouds are configured.
        """
        ...
