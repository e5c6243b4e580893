"""
Configuration loader for resource_fetch.

This module handles loading configuration from configuration files and
environment variables.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from .models import GlobalConfig


class ConfigLoadError(ValueError):
    """Raised when a configuration source cannot be read or is invalid."""


class ConfigLoader:
    """Configuration loader with support for files and environment variables."""

    # Environment variable suffix -> path into the configuration tree
    ENV_MAPPINGS: Dict[str, Tuple[str, ...]] = {
        # Logging
        "LOG_LEVEL": ("logging", "level"),
        "LOG_FILE": ("logging", "file_path"),
        "LOG_FORMAT": ("logging", "format"),
        # HTTP
        "HTTP_TIMEOUT": ("http", "total_timeout"),
        "HTTP_CONNECT_TIMEOUT": ("http", "connect_timeout"),
        "HTTP_READ_TIMEOUT": ("http", "read_timeout"),
        "VERIFY_SSL": ("http", "verify_ssl"),
        "FOLLOW_REDIRECTS": ("http", "follow_redirects"),
        "MAX_REDIRECTS": ("http", "max_redirects"),
        # FTP
        "FTP_TIMEOUT": ("ftp", "socket_timeout"),
        "FTP_CONNECT_TIMEOUT": ("ftp", "connection_timeout"),
        "FTP_ANONYMOUS_USER": ("ftp", "anonymous_user"),
        "FTP_VERIFY_TLS": ("ftp", "verify_tls"),
        # Features
        "ENABLE_FTP": ("features", "enable_ftp"),
    }

    # Values that must stay strings even when they look numeric or boolean
    STRING_KEYS = {("logging", "format"), ("logging", "file_path"), ("ftp", "anonymous_user")}

    def __init__(self, env_prefix: str = "RESOURCE_FETCH_") -> None:
        """Initialize configuration loader."""
        self.config_paths: List[Path] = [
            Path("resource_fetch.yaml"),
            Path("resource_fetch.yml"),
            Path("resource_fetch.json"),
            Path.home() / ".resource_fetch" / "config.yaml",
            Path.home() / ".resource_fetch" / "config.yml",
            Path.home() / ".resource_fetch" / "config.json",
        ]
        self.env_prefix = env_prefix

    def load_config(self, config_file: Optional[Union[str, Path]] = None) -> GlobalConfig:
        """
        Load configuration from all available sources.

        Environment variables override file values.

        Args:
            config_file: Specific config file to load; it must exist

        Returns:
            GlobalConfig instance with merged configuration

        Raises:
            ConfigLoadError: If a file cannot be parsed or the result is invalid
        """
        config_data: Dict[str, Any] = {}

        file_config = self._load_from_file(config_file)
        if file_config:
            config_data.update(file_config)

        env_config = self._load_from_environment()
        if env_config:
            config_data = self._deep_merge(config_data, env_config)

        try:
            return GlobalConfig(**config_data)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid configuration: {e}") from e

    def _load_from_file(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ConfigLoadError(f"Config file not found: {config_path}")
            return self._parse_config_file(config_path)

        for config_path in self.config_paths:
            if config_path.exists():
                return self._parse_config_file(config_path)

        return None

    def _parse_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Parse configuration file based on extension."""
        suffix = config_path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ConfigLoadError(f"Unsupported config file format: {config_path.suffix}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Failed to parse config file {config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config file {config_path} must contain a mapping")
        return data

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        for suffix, config_path in self.ENV_MAPPINGS.items():
            value = os.getenv(f"{self.env_prefix}{suffix}")
            if value is None:
                continue

            if config_path in self.STRING_KEYS:
                converted_value: Any = value
            else:
                converted_value = self._convert_env_value(value)

            current = config
            for key in config_path[:-1]:
                current = current.setdefault(key, {})
            current[config_path[-1]] = converted_value

        return config

    def _convert_env_value(self, value: str) -> Any:
        """Convert environment variable string to appropriate type."""
        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        lower = value.lower()
        if lower in ("true", "yes", "on"):
            return True
        if lower in ("false", "no", "off"):
            return False

        return value

    def _deep_merge(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
