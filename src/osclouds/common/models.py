"""Common models used across osclouds."""

from typing import Literal

from pydantic import BaseModel

from osclouds.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "prod"


class SearchPaths(BaseModel):
    """Where clouds.yaml is looked up.

    Attributes:
        filename: Name of the clouds file in every search directory
        user_config_subdir: Directory below the user's home holding the per-user file
        system_config_dir: Absolute directory holding the system-wide file
    """

    filename: str = "clouds.yaml"
    user_config_subdir: str = ".config/openstack"
    system_config_dir: str = "/etc/openstack"
