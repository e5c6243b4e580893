"""
Tests for the fetch exception hierarchy and ErrorHandler.
"""

import asyncio

import aiohttp
import pytest

from resource_fetch.exceptions import (
    CloseFailedError,
    ConnectFailedError,
    ErrorHandler,
    ErrorKind,
    FetchError,
    InvalidURLError,
    OpenFailedError,
    ReadFailedError,
    RequestFailedError,
    ResourceNotFoundError,
    RetrieveFailedError,
    UnsupportedSchemeError,
)

from conftest import status_code_error


class TestFetchErrors:
    """Test the FetchError subclasses."""

    def test_base_error_attributes(self):
        error = InvalidURLError("Invalid URL", url="http:///x", reason="no host")

        assert error.message == "Invalid URL"
        assert str(error) == "Invalid URL"
        assert error.url == "http:///x"
        assert error.details == {"reason": "no host"}

    @pytest.mark.parametrize(
        "error_class,kind",
        [
            (InvalidURLError, ErrorKind.INVALID_URL),
            (RequestFailedError, ErrorKind.REQUEST_FAILED),
            (ReadFailedError, ErrorKind.READ_FAILED),
            (RetrieveFailedError, ErrorKind.RETRIEVE_FAILED),
            (CloseFailedError, ErrorKind.CLOSE_FAILED),
            (OpenFailedError, ErrorKind.OPEN_FAILED),
        ],
    )
    def test_error_kinds(self, error_class, kind):
        error = error_class("boom")

        assert isinstance(error, FetchError)
        assert error.kind is kind

    def test_unsupported_scheme_message(self):
        error = UnsupportedSchemeError("gopher", url="gopher://example.com/")

        assert error.message == "Unsupported scheme: gopher"
        assert error.scheme == "gopher"
        assert error.kind is ErrorKind.UNSUPPORTED_SCHEME

    def test_not_found_message_names_path(self):
        error = ResourceNotFoundError("data/missing.bin")

        assert error.message == "File does not exist: data/missing.bin"
        assert error.path == "data/missing.bin"
        assert error.url == "data/missing.bin"
        assert error.kind is ErrorKind.NOT_FOUND

    def test_connect_failed_keeps_endpoint(self):
        error = ConnectFailedError("nope", host="ftp.example.org", port=21)

        assert error.host == "ftp.example.org"
        assert error.port == 21
        assert error.kind is ErrorKind.CONNECT_FAILED


class TestErrorHandler:
    """Test translation of transport exceptions."""

    def test_request_error(self):
        cause = aiohttp.ClientConnectionError("Connection refused")
        error = ErrorHandler.handle_request_error(cause, "http://example.com/")

        assert isinstance(error, RequestFailedError)
        assert error.message == "Request failed: Connection refused"
        assert error.url == "http://example.com/"
        assert error.details["cause"] is cause

    def test_request_timeout(self):
        error = ErrorHandler.handle_request_error(asyncio.TimeoutError())
        assert error.message == "Request failed: request timed out"

    def test_request_error_without_text_uses_class_name(self):
        error = ErrorHandler.handle_request_error(aiohttp.ServerDisconnectedError(""))
        assert error.message.startswith("Request failed: ")
        assert error.message != "Request failed: "

    def test_response_read_error(self):
        error = ErrorHandler.handle_response_read_error(
            aiohttp.ClientPayloadError("truncated"), "http://example.com/"
        )

        assert isinstance(error, ReadFailedError)
        assert error.message == "Failed to read response: truncated"

    def test_describe_status_code_error(self):
        description = ErrorHandler.describe_ftp_error(status_code_error("550", "No such file"))
        assert description == "server replied 550 No such file"

    def test_describe_timeout(self):
        assert ErrorHandler.describe_ftp_error(asyncio.TimeoutError()) == "operation timed out"

    def test_describe_os_error(self):
        assert "refused" in ErrorHandler.describe_ftp_error(
            ConnectionRefusedError("Connection refused")
        )

    def test_ftp_connect_error(self):
        error = ErrorHandler.handle_ftp_connect_error(
            ConnectionRefusedError("Connection refused"),
            "ftp://ftp.example.org/f",
            "ftp.example.org",
            21,
        )

        assert isinstance(error, ConnectFailedError)
        assert error.message.startswith("Failed to connect to FTP server: ")
        assert error.host == "ftp.example.org"
        assert error.port == 21

    def test_ftp_retrieve_error(self):
        error = ErrorHandler.handle_ftp_retrieve_error(
            status_code_error("550", "No such file"), "ftp://ftp.example.org/f"
        )

        assert isinstance(error, RetrieveFailedError)
        assert error.message == "Error retrieving file: server replied 550 No such file"

    def test_file_errors(self):
        cause = PermissionError(13, "Permission denied")

        open_error = ErrorHandler.handle_file_open_error(cause, "secret.bin")
        read_error = ErrorHandler.handle_file_read_error(cause, "secret.bin")

        assert isinstance(open_error, OpenFailedError)
        assert open_error.message.startswith("Failed to open file: ")
        assert "Permission denied" in open_error.message
        assert isinstance(read_error, ReadFailedError)
        assert read_error.message.startswith("Failed to read file: ")
