"""
FTP(S) retrieval using aioftp.

Each fetch runs one short-lived session:

    connect -> upgrade to TLS -> login -> retrieve -> quit
                   |
                   +-- on failure: close, connect again in plaintext

The TLS upgrade is always attempted; falling back to plaintext is a single
step, not a retry loop. Login failures are logged and ignored, and a failed
QUIT fails the whole fetch even though the data has arrived.
"""

from __future__ import annotations

import logging
import ssl
from enum import Enum
from typing import Optional, Tuple

import aioftp

from ..config.models import FTPConfig
from ..exceptions import (
    CloseFailedError,
    ConnectFailedError,
    ErrorHandler,
    InvalidURLError,
)
from ..models import DEFAULT_FTP_PORT, ParsedResource
from ..router import ResourceParseError, parse_resource

logger = logging.getLogger(__name__)


class FTPSessionState(str, Enum):
    """Steps of an FTP fetch session."""

    CONNECTED = "connected"
    SECURED = "secured"
    UNSECURED = "unsecured"
    AUTHENTICATED = "authenticated"
    RETRIEVED = "retrieved"
    CLOSED = "closed"


class FTPSession:
    """
    One FTP control connection walked through the fetch steps.

    Attributes:
        host: Server host name, also used for certificate verification
        port: Server port
        state: Last step reached
        client: The aioftp client of the current connection
    """

    def __init__(self, config: FTPConfig, host: str, port: int, url: str) -> None:
        self.config = config
        self.host = host
        self.port = port
        self.url = url
        self.state: Optional[FTPSessionState] = None
        self.client: Optional[aioftp.Client] = None

    def _new_client(self) -> aioftp.Client:
        return aioftp.Client(
            socket_timeout=self.config.socket_timeout,
            connection_timeout=self.config.connection_timeout,
        )

    def _connected(self) -> aioftp.Client:
        if self.client is None:
            raise ConnectFailedError(
                "FTP session is not connected", url=self.url, host=self.host, port=self.port
            )
        return self.client

    def _ssl_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if not self.config.verify_tls:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    async def connect(self) -> None:
        """Open a fresh plaintext control connection."""
        client = self._new_client()
        try:
            await client.connect(self.host, self.port)
        except ErrorHandler.FTP_ERRORS as e:
            client.close()
            raise ErrorHandler.handle_ftp_connect_error(
                e, self.url, self.host, self.port
            ) from e
        self.client = client
        self.state = FTPSessionState.CONNECTED
        logger.debug("Connected to FTP server %s:%s", self.host, self.port)

    async def secure(self) -> None:
        """
        Upgrade the connection to TLS, or fall back to a new plaintext one.

        The connection that failed the upgrade is discarded, never reused.
        """
        try:
            await self._connected().upgrade_to_tls(self._ssl_context())
        except ErrorHandler.FTP_ERRORS as e:
            logger.warning(
                "Failed to secure FTP connection to %s: %s",
                self.host,
                ErrorHandler.describe_ftp_error(e),
            )
            logger.warning("Attempting unsecured connection to %s:%s", self.host, self.port)
            self.close()
            await self.connect()
            self.state = FTPSessionState.UNSECURED
            return
        self.state = FTPSessionState.SECURED
        logger.debug("FTP connection to %s secured with TLS", self.host)

    async def login(self, username: Optional[str], password: Optional[str]) -> None:
        """Authenticate; a rejected login does not stop the session."""
        user = username or self.config.anonymous_user
        try:
            await self._connected().login(user, password or "")
        except ErrorHandler.FTP_ERRORS as e:
            logger.warning(
                "FTP login as %r on %s failed, continuing: %s",
                user,
                self.host,
                ErrorHandler.describe_ftp_error(e),
            )
        else:
            logger.debug("Logged in to %s as %r", self.host, user)
        self.state = FTPSessionState.AUTHENTICATED

    async def retrieve(self, path: str) -> bytes:
        """Download one file into memory."""
        buffer = bytearray()
        client = self._connected()
        try:
            async with client.download_stream(path) as stream:
                async for block in stream.iter_by_block():
                    buffer.extend(block)
        except ErrorHandler.FTP_ERRORS as e:
            raise ErrorHandler.handle_ftp_retrieve_error(e, self.url) from e
        self.state = FTPSessionState.RETRIEVED
        logger.debug("Retrieved %d bytes of %s from %s", len(buffer), path, self.host)
        return bytes(buffer)

    async def quit(self) -> None:
        """Terminate the session with QUIT."""
        try:
            await self._connected().quit()
        except ErrorHandler.FTP_ERRORS as e:
            logger.debug(
                "QUIT on %s failed: %s", self.host, ErrorHandler.describe_ftp_error(e)
            )
            raise CloseFailedError("Failed to close FTP connection", url=self.url) from e
        finally:
            self.close()
        self.state = FTPSessionState.CLOSED

    def close(self) -> None:
        """Release the socket without a protocol-level goodbye."""
        if self.client is not None:
            self.client.close()
            self.client = None


class FTPFetcher:
    """
    Fetches a single file from an ftp:// or ftps:// URL.

    Credentials come from the URL only; without a user name the configured
    anonymous user is sent with an empty password unless the URL has one.
    """

    def __init__(self, config: Optional[FTPConfig] = None) -> None:
        self.config = config or FTPConfig()

    def _parse(self, url: str) -> Tuple[ParsedResource, str]:
        try:
            parsed = parse_resource(url)
        except ResourceParseError as e:
            raise InvalidURLError(f"Invalid URL: {e}", url=url) from e
        if not parsed.has_host:
            raise InvalidURLError("Invalid FTP URL: missing host", url=url)
        return parsed, parsed.host

    async def fetch(self, url: str) -> bytes:
        """
        Retrieve the file a URL points at.

        Args:
            url: Absolute ftp:// or ftps:// URL

        Returns:
            Complete file content

        Raises:
            InvalidURLError: If the URL has no host
            ConnectFailedError: If neither the first nor the fallback connection opens
            RetrieveFailedError: If the server refuses or aborts the transfer
            CloseFailedError: If QUIT fails after a successful transfer
        """
        parsed, host = self._parse(url)
        port = parsed.port or DEFAULT_FTP_PORT
        path = parsed.path or "/"

        session = FTPSession(self.config, host, port, url)
        try:
            await session.connect()
            await session.secure()
            await session.login(parsed.username, parsed.password)
            data = await session.retrieve(path)
        finally:
            # Only QUIT on success; every other exit just drops the socket
            if session.state is not FTPSessionState.RETRIEVED:
                session.close()

        await session.quit()
        return data
