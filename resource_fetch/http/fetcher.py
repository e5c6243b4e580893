"""
HTTP(S) retrieval using AIOHTTP.

One GET per call on a session that lives only for that call. Response status
codes are not inspected: a 404 or 500 page is returned like any other body.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from aiohttp import ClientSession, ClientTimeout, TCPConnector

from ..config.models import HTTPConfig
from ..exceptions import ErrorHandler, InvalidURLError
from ..router import ResourceParseError, parse_resource

logger = logging.getLogger(__name__)


class HTTPFetcher:
    """
    Fetches the full body of an HTTP or HTTPS URL.

    With the default HTTPConfig the client runs on aiohttp's own defaults
    (timeouts, redirect handling, certificate verification).
    """

    def __init__(self, config: Optional[HTTPConfig] = None) -> None:
        self.config = config or HTTPConfig()

    def _session_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"raise_for_status": False}
        if self.config.has_timeouts:
            kwargs["timeout"] = ClientTimeout(
                total=self.config.total_timeout,
                connect=self.config.connect_timeout,
                sock_read=self.config.read_timeout,
            )
        if not self.config.verify_ssl:
            kwargs["connector"] = TCPConnector(ssl=False)
        return kwargs

    def _check_url(self, url: str) -> None:
        try:
            parsed = parse_resource(url)
        except ResourceParseError as e:
            raise InvalidURLError(f"Invalid URL: {e}", url=url) from e
        if not parsed.has_host:
            raise InvalidURLError("Invalid HTTP URL: missing host", url=url)

    async def fetch(self, url: str) -> bytes:
        """
        GET a URL and return its body.

        Args:
            url: Absolute http:// or https:// URL

        Returns:
            Complete response body, whatever the status code

        Raises:
            InvalidURLError: If the URL has no host
            RequestFailedError: If the request could not be sent or answered
            ReadFailedError: If the body could not be read completely
        """
        self._check_url(url)

        async with ClientSession(**self._session_kwargs()) as session:
            try:
                response = await session.get(
                    url,
                    allow_redirects=self.config.follow_redirects,
                    max_redirects=self.config.max_redirects,
                )
            except ErrorHandler.HTTP_ERRORS as e:
                logger.debug("GET %s failed: %r", url, e)
                raise ErrorHandler.handle_request_error(e, url) from e

            async with response:
                if response.status >= 400:
                    logger.warning("GET %s returned status %s", url, response.status)
                else:
                    logger.debug("GET %s returned status %s", url, response.status)

                try:
                    body = await response.read()
                except ErrorHandler.HTTP_ERRORS as e:
                    logger.debug("Reading body of %s failed: %r", url, e)
                    raise ErrorHandler.handle_response_read_error(e, url) from e

        logger.debug("Fetched %d bytes from %s", len(body), url)
        return body
