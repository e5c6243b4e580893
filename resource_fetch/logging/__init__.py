"""
Logging setup for resource_fetch.

This module provides console/file handlers with credential masking and
optional structured JSON output.
"""

from .filters import SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter
from .manager import LoggingManager, cleanup_logging, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "cleanup_logging",
    "StructuredFormatter",
    "ColoredFormatter",
    "SensitiveDataFilter",
]
