"""
Exception hierarchy for the resource fetcher.

This module defines the tagged failures a fetch can end in and the helpers
that translate transport library exceptions (aiohttp, aioftp, OSError) into
them. Every fetch either returns the full byte content of a resource or
raises exactly one FetchError subclass.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Optional

import aiohttp
import aioftp


class ErrorKind(str, Enum):
    """Kinds of fetch failure."""

    INVALID_URL = "invalid_url"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    CONNECT_FAILED = "connect_failed"
    REQUEST_FAILED = "request_failed"
    READ_FAILED = "read_failed"
    RETRIEVE_FAILED = "retrieve_failed"
    CLOSE_FAILED = "close_failed"
    NOT_FOUND = "not_found"
    OPEN_FAILED = "open_failed"


class FetchError(Exception):
    """
    Base exception for all fetch operations.

    Attributes:
        message: Human-readable error message
        url: URL or path that caused the error (if applicable)
        details: Additional error details as keyword arguments
    """

    kind: ErrorKind

    def __init__(self, message: str, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.details = kwargs


class InvalidURLError(FetchError):
    """Raised when a URL parses but lacks a component its fetcher requires."""

    kind = ErrorKind.INVALID_URL


class UnsupportedSchemeError(FetchError):
    """Raised when no fetcher handles the identifier's scheme."""

    kind = ErrorKind.UNSUPPORTED_SCHEME

    def __init__(self, scheme: str, url: Optional[str] = None) -> None:
        super().__init__(f"Unsupported scheme: {scheme}", url)
        self.scheme = scheme


class ConnectFailedError(FetchError):
    """Raised when a transport connection cannot be established."""

    kind = ErrorKind.CONNECT_FAILED

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
    ) -> None:
        super().__init__(message, url)
        self.host = host
        self.port = port


class RequestFailedError(FetchError):
    """Raised when an HTTP request could not be completed."""

    kind = ErrorKind.REQUEST_FAILED


class ReadFailedError(FetchError):
    """Raised when a response body or a local file could not be read."""

    kind = ErrorKind.READ_FAILED


class RetrieveFailedError(FetchError):
    """Raised when an FTP retrieval fails after the session was set up."""

    kind = ErrorKind.RETRIEVE_FAILED


class CloseFailedError(FetchError):
    """
    Raised when an FTP session cannot be terminated cleanly.

    The retrieved data is discarded in this case.
    """

    kind = ErrorKind.CLOSE_FAILED


class ResourceNotFoundError(FetchError):
    """Raised when a local file does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(f"File does not exist: {path}", path)
        self.path = path


class OpenFailedError(FetchError):
    """Raised when a local file exists but cannot be opened."""

    kind = ErrorKind.OPEN_FAILED


class ErrorHandler:
    """
    Utility class for converting transport exceptions into FetchError subclasses.
    """

    # Exceptions an aiohttp request or body read can surface
    HTTP_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)

    # Exceptions an aioftp session step can surface
    FTP_ERRORS = (aioftp.AIOFTPException, OSError, asyncio.TimeoutError)

    @staticmethod
    def handle_request_error(error: Exception, url: Optional[str] = None) -> FetchError:
        """
        Convert an exception raised while issuing an HTTP request.

        Args:
            error: The original aiohttp (or timeout) exception
            url: The URL that was requested

        Returns:
            RequestFailedError carrying the original error's description
        """
        if isinstance(error, asyncio.TimeoutError):
            detail = "request timed out"
        else:
            detail = str(error) or error.__class__.__name__
        return RequestFailedError(f"Request failed: {detail}", url=url, cause=error)

    @staticmethod
    def handle_response_read_error(
        error: Exception, url: Optional[str] = None
    ) -> FetchError:
        """Convert an exception raised while reading an HTTP response body."""
        detail = str(error) or error.__class__.__name__
        return ReadFailedError(
            f"Failed to read response: {detail}", url=url, cause=error
        )

    @staticmethod
    def describe_ftp_error(error: Exception) -> str:
        """
        Render an aioftp/socket exception as a short description.

        StatusCodeError carries the expected and received reply codes plus the
        server's reply lines; those are more useful than its repr.
        """
        if isinstance(error, aioftp.StatusCodeError):
            codes = error.received_codes
            if isinstance(codes, str):
                codes = (codes,)
            received = ", ".join(str(code) for code in codes)
            info = " ".join(line.strip() for line in error.info) if error.info else ""
            return f"server replied {received} {info}".strip()
        if isinstance(error, asyncio.TimeoutError):
            return "operation timed out"
        return str(error) or error.__class__.__name__

    @staticmethod
    def handle_ftp_connect_error(
        error: Exception, url: Optional[str], host: str, port: int
    ) -> FetchError:
        """Convert an exception raised while connecting to an FTP server."""
        return ConnectFailedError(
            f"Failed to connect to FTP server: {ErrorHandler.describe_ftp_error(error)}",
            url=url,
            host=host,
            port=port,
        )

    @staticmethod
    def handle_ftp_retrieve_error(error: Exception, url: Optional[str]) -> FetchError:
        """Convert an exception raised while retrieving an FTP file."""
        return RetrieveFailedError(
            f"Error retrieving file: {ErrorHandler.describe_ftp_error(error)}",
            url=url,
            cause=error,
        )

    @staticmethod
    def handle_file_open_error(error: OSError, path: str) -> FetchError:
        """Convert an OSError raised while opening a local file."""
        return OpenFailedError(f"Failed to open file: {error}", url=path, cause=error)

    @staticmethod
    def handle_file_read_error(error: OSError, path: str) -> FetchError:
        """Convert an OSError raised while reading a local file."""
        return ReadFailedError(f"Failed to read file: {error}", url=path, cause=error)
