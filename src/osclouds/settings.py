from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from osclouds.common import AppInfo, SearchPaths
from osclouds.constants import ENV_PREFIX


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    search: SearchPaths = SearchPaths()

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None

# Convenience access - pre-initialized singleton
settings = get_settings()


__all__ = [
    "AppInfo",
    "SearchPaths",
    "Settings",
    "get_settings",
    "settings",
]
