"""Configuration - settings and environment name resolution."""

from .environment import default_file_names, resolve_environment_name
from .settings import LogLevel, Settings, build_settings

__all__ = [
    "LogLevel",
    "Settings",
    "build_settings",
    "default_file_names",
    "resolve_environment_name",
]
