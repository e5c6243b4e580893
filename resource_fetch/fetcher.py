"""
Uniform resource fetching.

This module provides the ResourceFetcher class and the fetch functions that
dispatch an identifier to the HTTP, FTP or file fetcher and return the
resource's complete content.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from .config import GlobalConfig, get_config
from .exceptions import FetchError, UnsupportedSchemeError
from .file import FileFetcher
from .ftp import FTPFetcher
from .http import HTTPFetcher
from .models import FetchResult, Route, RouteKind
from .router import route as route_identifier

logger = logging.getLogger(__name__)


class ResourceFetcher:
    """
    Fetches HTTP(S) URLs, FTP(S) URLs, file:// URLs and filesystem paths.

    A ResourceFetcher only holds configuration; every fetch opens and releases
    its own connections or file handles, so one instance may serve concurrent
    fetches.

    Example:
        ```python
        import asyncio
        from resource_fetch import ResourceFetcher

        async def main():
            fetcher = ResourceFetcher()
            page = await fetcher.fetch("https://example.com/")
            local = await fetcher.fetch("data/input.csv")

        asyncio.run(main())
        ```
    """

    def __init__(self, config: Optional[GlobalConfig] = None) -> None:
        """
        Initialize the fetcher.

        Args:
            config: Configuration to use. If None, the process-wide default
                from resource_fetch.config.get_config() is used.

        Raises:
            ConfigLoadError: If config is None and the default configuration
                (config files and RESOURCE_FETCH_* variables) is invalid
        """
        self.config = config or get_config()
        self.http = HTTPFetcher(self.config.http)
        self.ftp = FTPFetcher(self.config.ftp)
        self.file = FileFetcher()

    def route(self, identifier: str) -> Route:
        """Decide which fetcher handles an identifier."""
        return route_identifier(identifier, ftp_enabled=self.config.features.enable_ftp)

    async def fetch(self, identifier: str) -> bytes:
        """
        Fetch the complete content of a resource.

        Args:
            identifier: URL or filesystem path

        Returns:
            Resource content

        Raises:
            FetchError: A subclass naming what failed
        """
        return await self._dispatch(self.route(identifier), identifier)

    async def _dispatch(self, target: Route, identifier: str) -> bytes:
        if target.kind is RouteKind.HTTP:
            return await self.http.fetch(target.target)
        if target.kind is RouteKind.FTP:
            return await self.ftp.fetch(target.target)
        if target.kind is RouteKind.FILE:
            return await self.file.fetch(target.target)
        raise UnsupportedSchemeError(target.target, url=identifier)

    async def fetch_result(self, identifier: str) -> FetchResult:
        """
        Fetch a resource, reporting failure as data instead of raising.

        Args:
            identifier: URL or filesystem path

        Returns:
            FetchResult holding either the content or the error message

        Only FetchError is reported in the result; configuration problems are
        raised when the fetcher is built.
        """
        start_time = time.perf_counter()
        target = self.route(identifier)
        try:
            content = await self._dispatch(target, identifier)
        except FetchError as e:
            logger.info("Fetching %s failed: %s", identifier, e.message)
            return FetchResult.failure(
                identifier, e, route=target.kind, elapsed=time.perf_counter() - start_time
            )
        return FetchResult.success(
            identifier, content, route=target.kind, elapsed=time.perf_counter() - start_time
        )


async def fetch(identifier: str, config: Optional[GlobalConfig] = None) -> bytes:
    """
    Fetch the complete content of a resource.

    Args:
        identifier: HTTP(S) URL, FTP(S) URL, file:// URL or filesystem path
        config: Optional configuration (defaults to the process-wide one)

    Returns:
        Resource content

    Raises:
        FetchError: A subclass naming what failed
    """
    return await ResourceFetcher(config).fetch(identifier)


async def fetch_result(
    identifier: str, config: Optional[GlobalConfig] = None
) -> FetchResult:
    """
    Fetch a resource and return a FetchResult instead of raising FetchError.

    Raises:
        ConfigLoadError: If config is None and the process-wide default
            configuration cannot be loaded
    """
    return await ResourceFetcher(config).fetch_result(identifier)


def fetch_sync(identifier: str, config: Optional[GlobalConfig] = None) -> bytes:
    """Blocking wrapper around fetch() for code without an event loop."""
    return asyncio.run(fetch(identifier, config))
