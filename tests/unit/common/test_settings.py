from __future__ import annotations

import pytest

from osclouds.settings import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("OSCLOUDS_SEARCH__FILENAME", "OSCLOUDS_SEARCH__SYSTEM_CONFIG_DIR", "OSCLOUDS_APP__ENVIRONMENT"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings()

    assert settings.app.project_name == "osclouds"
    assert settings.app.environment == "prod"
    assert settings.search.filename == "clouds.yaml"
    assert settings.search.user_config_subdir == ".config/openstack"
    assert settings.search.system_config_dir == "/etc/openstack"


def test_settings_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OSCLOUDS_SEARCH__FILENAME", "clouds-public.yaml")
    monkeypatch.setenv("OSCLOUDS_APP__ENVIRONMENT", "dev")

    settings = Settings()

    assert settings.search.filename == "clouds-public.yaml"
    assert settings.search.system_config_dir == "/etc/openstack"
    assert settings.app.environment == "dev"
