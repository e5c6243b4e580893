"""
Uniform async resource fetcher.

Given an HTTP(S) URL, an FTP(S) URL, a file:// URL or a filesystem path, this
package retrieves the resource's full contents as bytes:

- HTTP(S) through AIOHTTP, returning the body whatever the status code
- FTP(S) through aioftp, upgrading to TLS when the server allows it
- Local files through aiofiles, relative to the working directory
"""

from .config import (
    FeatureFlags,
    FTPConfig,
    GlobalConfig,
    HTTPConfig,
    LoggingConfig,
    get_config,
    set_config,
)
from .exceptions import (
    CloseFailedError,
    ConnectFailedError,
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
from .fetcher import ResourceFetcher, fetch, fetch_result, fetch_sync
from .file import FileFetcher
from .ftp import FTPFetcher
from .http import HTTPFetcher
from .models import FetchResult, ParsedResource, Route, RouteKind
from .router import parse_resource, route

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "fetch",
    "fetch_result",
    "fetch_sync",
    "ResourceFetcher",
    # Routing
    "route",
    "parse_resource",
    "Route",
    "RouteKind",
    "ParsedResource",
    # Fetchers
    "HTTPFetcher",
    "FTPFetcher",
    "FileFetcher",
    # Models
    "FetchResult",
    # Configuration
    "GlobalConfig",
    "HTTPConfig",
    "FTPConfig",
    "FeatureFlags",
    "LoggingConfig",
    "get_config",
    "set_config",
    # Exceptions
    "ErrorKind",
    "FetchError",
    "InvalidURLError",
    "UnsupportedSchemeError",
    "ConnectFailedError",
    "RequestFailedError",
    "ReadFailedError",
    "RetrieveFailedError",
    "CloseFailedError",
    "ResourceNotFoundError",
    "OpenFailedError",
]
