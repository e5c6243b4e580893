"""
Resource identifier models for the resource fetcher.

This module contains the parsed form of a resource identifier and the
routing decision derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RouteKind(str, Enum):
    """Which fetcher a resource identifier is dispatched to."""

    HTTP = "http"
    FTP = "ftp"
    FILE = "file"
    UNSUPPORTED = "unsupported"


# Schemes recognized by each fetcher
HTTP_SCHEMES = frozenset({"http", "https"})
FTP_SCHEMES = frozenset({"ftp", "ftps"})
FILE_SCHEME = "file"

DEFAULT_FTP_PORT = 21


@dataclass(frozen=True)
class ParsedResource:
    """
    Absolute URL split into the components the fetchers need.

    Attributes:
        raw: The identifier exactly as supplied by the caller
        scheme: Lower-cased URL scheme
        host: Host name, if the URL has an authority
        port: Explicit port, if present
        path: Percent-decoded path component
        username: Percent-decoded user name, if present
        password: Percent-decoded password, if present
    """

    raw: str
    scheme: str
    host: Optional[str] = None
    port: Optional[int] = None
    path: str = ""
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def has_host(self) -> bool:
        return bool(self.host)


@dataclass(frozen=True)
class Route:
    """
    Routing decision for one resource identifier.

    ``target`` is the full URL for HTTP and FTP routes, the filesystem path for
    file routes and the offending scheme for unsupported routes.
    """

    kind: RouteKind
    target: str

    @classmethod
    def http(cls, url: str) -> "Route":
        return cls(RouteKind.HTTP, url)

    @classmethod
    def ftp(cls, url: str) -> "Route":
        return cls(RouteKind.FTP, url)

    @classmethod
    def file(cls, path: str) -> "Route":
        return cls(RouteKind.FILE, path)

    @classmethod
    def unsupported(cls, scheme: str) -> "Route":
        return cls(RouteKind.UNSUPPORTED, scheme)
