"""
HTTP support for resource_fetch.
"""

from .fetcher import HTTPFetcher

__all__ = ["HTTPFetcher"]
