"""
Scheme routing for resource identifiers.

An identifier that parses as an absolute URL is dispatched on its scheme;
anything else is taken as a literal filesystem path.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import SplitResult, unquote, urlsplit

from .models import (
    FILE_SCHEME,
    FTP_SCHEMES,
    HTTP_SCHEMES,
    ParsedResource,
    Route,
)

logger = logging.getLogger(__name__)


class ResourceParseError(ValueError):
    """Raised when an identifier is not an absolute URL."""


def _decode(value: Optional[str]) -> Optional[str]:
    return unquote(value) if value is not None else None


def parse_resource(identifier: str) -> ParsedResource:
    """
    Parse an identifier as an absolute URL.

    Args:
        identifier: Resource identifier

    Returns:
        ParsedResource with decoded components

    Raises:
        ResourceParseError: If the identifier is not an absolute URL
    """
    try:
        parts: SplitResult = urlsplit(identifier)
        port = parts.port
    except ValueError as e:
        raise ResourceParseError(f"Malformed URL {identifier!r}: {e}") from e

    if not parts.scheme:
        raise ResourceParseError(f"No scheme in {identifier!r}")

    # C:\data\x.bin splits into scheme "c". Read it as a Windows path rather
    # than failing with "Unsupported scheme: c" as a strict URL parser would.
    if len(parts.scheme) == 1:
        raise ResourceParseError(f"Drive letter, not a scheme, in {identifier!r}")

    return ParsedResource(
        raw=identifier,
        scheme=parts.scheme,
        host=parts.hostname,
        port=port,
        path=unquote(parts.path),
        username=_decode(parts.username),
        password=_decode(parts.password),
    )


def route(identifier: str, ftp_enabled: bool = True) -> Route:
    """
    Decide which fetcher handles an identifier.

    Args:
        identifier: Resource identifier (URL or filesystem path)
        ftp_enabled: Whether FTP support is available; when False ``ftp`` and
            ``ftps`` are routed as unsupported schemes

    Returns:
        Route naming the fetcher and its target
    """
    logger.info("Fetching URL: %s", identifier)

    try:
        parsed = parse_resource(identifier)
    except ResourceParseError as e:
        logger.debug("Treating %r as a filesystem path (%s)", identifier, e)
        return Route.file(identifier)

    scheme = parsed.scheme
    if scheme in HTTP_SCHEMES:
        return Route.http(identifier)
    if scheme in FTP_SCHEMES:
        if ftp_enabled:
            return Route.ftp(identifier)
        logger.debug("FTP support disabled, rejecting %s URL", scheme)
        return Route.unsupported(scheme)
    if scheme == FILE_SCHEME:
        # The host of file://host/path is ignored
        return Route.file(parsed.path)
    return Route.unsupported(scheme)
