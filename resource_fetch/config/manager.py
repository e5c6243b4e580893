"""
Configuration manager for resource_fetch.

Holds the process-wide default configuration used by fetch calls that do not
pass one explicitly.
"""

import logging
import threading
from pathlib import Path
from typing import Optional, Union

from .loader import ConfigLoader
from .models import GlobalConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Centralized configuration manager."""

    _instance: Optional["ConfigManager"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "ConfigManager":
        """Singleton pattern implementation."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize configuration manager."""
        if hasattr(self, "_initialized"):
            return

        self._initialized = True
        self._config: Optional[GlobalConfig] = None
        self._loader = ConfigLoader()
        self._instance_lock = threading.RLock()

    def load_config(self, config_file: Optional[Union[str, Path]] = None) -> GlobalConfig:
        """
        Load configuration from all sources and make it the current default.

        Args:
            config_file: Specific config file to load

        Returns:
            Loaded configuration

        Raises:
            ConfigLoadError: If a source cannot be parsed or validated
        """
        with self._instance_lock:
            config = self._loader.load_config(config_file)
            self._config = config
            logger.debug("Configuration loaded (config_file=%s)", config_file)
            return config

    def get_config(self) -> GlobalConfig:
        """Get the current configuration, loading it on first use."""
        with self._instance_lock:
            if self._config is None:
                return self.load_config()
            return self._config

    def set_config(self, config: GlobalConfig) -> None:
        """Replace the current configuration."""
        with self._instance_lock:
            self._config = config

    def reset(self) -> None:
        """Forget the current configuration; the next get reloads it."""
        with self._instance_lock:
            self._config = None


config_manager = ConfigManager()


def get_config() -> GlobalConfig:
    """Get the process-wide default configuration."""
    return config_manager.get_config()


def set_config(config: GlobalConfig) -> None:
    """Set the process-wide default configuration."""
    config_manager.set_config(config)


def reset_config() -> None:
    """Reset the process-wide default configuration."""
    config_manager.reset()
