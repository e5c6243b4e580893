"""
Command-line interface for resource_fetch.
"""

from .main import cli, main

__all__ = ["main", "cli"]
