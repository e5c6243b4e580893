"""
FTP support for resource_fetch.
"""

from .fetcher import FTPFetcher, FTPSession, FTPSessionState

__all__ = ["FTPFetcher", "FTPSession", "FTPSessionState"]
