"""
Data models for the resource fetcher.
"""

from .resource import (
    DEFAULT_FTP_PORT,
    FILE_SCHEME,
    FTP_SCHEMES,
    HTTP_SCHEMES,
    ParsedResource,
    Route,
    RouteKind,
)
from .result import FetchResult

__all__ = [
    "ParsedResource",
    "Route",
    "RouteKind",
    "FetchResult",
    "HTTP_SCHEMES",
    "FTP_SCHEMES",
    "FILE_SCHEME",
    "DEFAULT_FTP_PORT",
]
