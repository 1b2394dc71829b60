"""Pydantic models for clouds.yaml content, credentials and errors."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

ERROR_PREFIX = "config: "


class AuthOptions(BaseModel):
    """Credentials for one cloud, as consumed by an OpenStack identity client."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    identity_endpoint: str = ""
    username: str = ""
    password: str = ""
    tenant_name: str = ""
    tenant_id: str = ""


class AuthSection(BaseModel):
    """The `auth` section of a cloud entry in clouds.yaml."""

    model_config = ConfigDict(extra="ignore")

    username: str = ""
    password: str = ""
    tenant_name: str = ""
    tenant_id: str = ""
    auth_url: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_auth_options(self) -> AuthOptions:
        return AuthOptions(
            identity_endpoint=self.auth_url,
            password=self.password,
            tenant_id=self.tenant_id,
            tenant_name=self.tenant_name,
            username=self.username,
        )


class CloudsFile(BaseModel):
    """Top-level layout of clouds.yaml: clouds -> cloud name -> section name -> fields."""

    model_config = ConfigDict(extra="ignore")

    clouds: dict[str, dict[str, Any] | None] | None = None


class ConfigIOError(BaseModel):
    """clouds.yaml could not be opened or read."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    reason: str

    @computed_field
    @property
    def message(self) -> str:
        return f"{ERROR_PREFIX}{self.reason}"


class HomeDirectoryError(BaseModel):
    """The current user's home directory could not be determined."""

    model_config = ConfigDict(extra="forbid")

    reason: str

    @computed_field
    @property
    def message(self) -> str:
        return f"{ERROR_PREFIX}{self.reason}"


class ConfigParseError(BaseModel):
    """clouds.yaml exists but is not well-formed."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    cause: str | None = None
    field: str | None = None
    line: int | None = None
    column: int | None = None

    @computed_field
    @property
    def message(self) -> str:
        msg = f"{ERROR_PREFIX}cannot parse {self.path}"
        if self.cause:
            return f"{msg}: {self.cause}"
        return msg


class CloudNotFoundError(BaseModel):
    """A cloud name has no entry in the loaded configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str

    @computed_field
    @property
    def message(self) -> str:
        return f"{ERROR_PREFIX}cloud `{self.name}` not found"


class ConfigSearchExhaustedError(BaseModel):
    """None of the searched locations held a usable clouds.yaml."""

    model_config = ConfigDict(extra="forbid")

    searched: list[Path] = Field(default_factory=list)

    @computed_field
    @property
    def message(self) -> str:
        return f"{ERROR_PREFIX}no usable clouds.yaml file found"


type LoadError = ConfigIOError | ConfigParseError
type ConfigError = ConfigIOError | HomeDirectoryError | ConfigParseError | CloudNotFoundError | ConfigSearchExhaustedError
