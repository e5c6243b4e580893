"""
Configuration models for resource_fetch.

This module defines all configuration data models with validation and defaults.
Timeouts left as None fall through to the underlying client library's own
defaults.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Default logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    file_path: Optional[Path] = Field(default=None, description="Log file path")
    max_file_size: int = Field(
        default=10 * 1024 * 1024, gt=0, description="Max log file size in bytes"
    )
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")
    enable_console: bool = Field(default=True, description="Enable console logging")
    enable_file: bool = Field(default=False, description="Enable file logging")
    enable_structured: bool = Field(
        default=False, description="Enable structured JSON logging"
    )

    # Component-specific log levels
    component_levels: Dict[str, LogLevel] = Field(
        default_factory=dict, description="Per-component log levels"
    )


class HTTPConfig(BaseModel):
    """HTTP client configuration."""

    total_timeout: Optional[float] = Field(
        default=None, gt=0, description="Total request timeout in seconds"
    )
    connect_timeout: Optional[float] = Field(
        default=None, gt=0, description="Connection timeout in seconds"
    )
    read_timeout: Optional[float] = Field(
        default=None, gt=0, description="Socket read timeout in seconds"
    )
    follow_redirects: bool = Field(default=True, description="Follow redirects")
    max_redirects: int = Field(
        default=10, ge=0, description="Maximum number of redirects to follow"
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")

    @property
    def has_timeouts(self) -> bool:
        return any(
            value is not None
            for value in (self.total_timeout, self.connect_timeout, self.read_timeout)
        )


class FTPConfig(BaseModel):
    """FTP client configuration."""

    connection_timeout: Optional[float] = Field(
        default=None, gt=0, description="Connection timeout in seconds"
    )
    socket_timeout: Optional[float] = Field(
        default=None, gt=0, description="Per-operation socket timeout in seconds"
    )
    anonymous_user: str = Field(
        default="anonymous",
        min_length=1,
        description="User name sent when the URL carries none",
    )
    verify_tls: bool = Field(
        default=True, description="Verify the server certificate on TLS upgrade"
    )


class FeatureFlags(BaseModel):
    """Feature flags for enabling/disabling functionality."""

    enable_ftp: bool = Field(default=True, description="Enable FTP support")


class GlobalConfig(BaseModel):
    """Global configuration container."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    http: HTTPConfig = Field(default_factory=HTTPConfig)
    ftp: FTPConfig = Field(default_factory=FTPConfig)
    features: FeatureFlags = Field(default_factory=FeatureFlags)

    model_config = ConfigDict(validate_assignment=True, extra="forbid")
