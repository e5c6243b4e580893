"""
Local filesystem retrieval.

Paths are resolved relative to the current working directory: one leading
separator is stripped first, so the path of ``file:///data/x.bin`` and the
bare string ``/data/x.bin`` both read ``data/x.bin`` under the cwd.
"""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from ..exceptions import ErrorHandler, ResourceNotFoundError

logger = logging.getLogger(__name__)


def resolve_path(path_str: str) -> Path:
    """Strip at most one leading ``/`` and return the resulting relative path."""
    if path_str.startswith("/"):
        path_str = path_str[1:]
    return Path(path_str)


class FileFetcher:
    """Reads a whole local file into memory."""

    async def fetch(self, path_str: str) -> bytes:
        """
        Read a file.

        Args:
            path_str: Filesystem path, or the path component of a file:// URL

        Returns:
            Complete file content

        Raises:
            ResourceNotFoundError: If the resolved path does not exist
            OpenFailedError: If the path exists but cannot be opened
            ReadFailedError: If reading fails part way
        """
        path = resolve_path(path_str)
        logger.debug("Path: %s", path)

        # An empty path names nothing; Path("") would be the cwd
        if path_str in ("", "/"):
            raise ResourceNotFoundError("")

        if not await aiofiles.os.path.exists(path):
            raise ResourceNotFoundError(str(path))

        try:
            handle = await aiofiles.open(path, "rb")
        except OSError as e:
            raise ErrorHandler.handle_file_open_error(e, str(path)) from e

        try:
            contents = await handle.read()
        except OSError as e:
            raise ErrorHandler.handle_file_read_error(e, str(path)) from e
        finally:
            await handle.close()

        logger.debug("Read %d bytes from %s", len(contents), path)
        return contents
