"""Application configuration: YAML file plus environment overrides."""

from .loader import get_app_config, reload_app_config
from .models import AppSettings, HTTPSettings, LoggingSettings, RepositoryCacheSettings

__all__ = [
    "AppSettings",
    "HTTPSettings",
    "LoggingSettings",
    "RepositoryCacheSettings",
    "get_app_config",
    "reload_app_config",
]
