"""
Local file support for resource_fetch.
"""

from .fetcher import FileFetcher, resolve_path

__all__ = ["FileFetcher", "resolve_path"]
