"""
Logging manager for resource_fetch.

The library only creates module loggers; handlers are installed by
applications (the CLI does) through setup_logging.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict

from ..config.models import LoggingConfig
from .filters import SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter


class LoggingManager:
    """Centralized logging manager."""

    def __init__(self) -> None:
        """Initialize logging manager."""
        self._configured = False
        self._handlers: Dict[str, logging.Handler] = {}
        self._loggers: Dict[str, logging.Logger] = {}

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Setup logging based on configuration.

        Args:
            config: Logging configuration
        """
        if self._configured:
            self.cleanup()

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.level.value))

        if config.enable_console:
            self._setup_console_handler(config)

        if config.enable_file and config.file_path:
            self._setup_file_handler(config)

        self._setup_component_loggers(config)

        self._configured = True

        logger = logging.getLogger(__name__)
        logger.debug("Logging system configured")

    def _make_formatter(self, config: LoggingConfig, colored: bool) -> logging.Formatter:
        if config.enable_structured:
            return StructuredFormatter()
        if colored:
            return ColoredFormatter(config.format)
        return logging.Formatter(config.format)

    def _setup_console_handler(self, config: LoggingConfig) -> None:
        """Setup console logging handler."""
        # stdout may carry fetched bytes, so logs go to stderr
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._make_formatter(config, colored=True))
        handler.setLevel(getattr(logging, config.level.value))
        handler.addFilter(SensitiveDataFilter())

        logging.getLogger().addHandler(handler)
        self._handlers["console"] = handler

    def _setup_file_handler(self, config: LoggingConfig) -> None:
        """Setup rotating file logging handler."""
        log_path = Path(str(config.file_path))
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(self._make_formatter(config, colored=False))
        handler.setLevel(getattr(logging, config.level.value))
        handler.addFilter(SensitiveDataFilter())

        logging.getLogger().addHandler(handler)
        self._handlers["file"] = handler

    def _setup_component_loggers(self, config: LoggingConfig) -> None:
        """Setup component-specific logger levels."""
        for component, level in config.component_levels.items():
            logger = logging.getLogger(component)
            logger.setLevel(getattr(logging, level.value))
            self._loggers[component] = logger

    def cleanup(self) -> None:
        """Remove and close the handlers this manager installed."""
        root_logger = logging.getLogger()
        for handler in list(self._handlers.values()):
            root_logger.removeHandler(handler)
            handler.close()

        for logger in self._loggers.values():
            logger.setLevel(logging.NOTSET)

        self._handlers.clear()
        self._loggers.clear()
        self._configured = False

    def is_configured(self) -> bool:
        """Check if logging is configured."""
        return self._configured


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config: LoggingConfig) -> None:
    """
    Setup logging with configuration.

    Args:
        config: Logging configuration
    """
    _logging_manager.setup_logging(config)


def cleanup_logging() -> None:
    """Cleanup logging system."""
    _logging_manager.cleanup()
