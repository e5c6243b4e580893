"""
Configuration management for resource_fetch.

This module provides configuration models plus loading from files and
environment variables.
"""

from .loader import ConfigLoader, ConfigLoadError
from .manager import ConfigManager, config_manager, get_config, reset_config, set_config
from .models import (
    FeatureFlags,
    FTPConfig,
    GlobalConfig,
    HTTPConfig,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "ConfigManager",
    "config_manager",
    "get_config",
    "set_config",
    "reset_config",
    "GlobalConfig",
    "LoggingConfig",
    "LogLevel",
    "HTTPConfig",
    "FTPConfig",
    "FeatureFlags",
    "ConfigLoader",
    "ConfigLoadError",
]
