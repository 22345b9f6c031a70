"""
File reading service.

Reads the Gist's input files with aiofiles, all at once.
"""
import asyncio
from pathlib import Path
from typing import List, Sequence, Union

import aiofiles

from ...exceptions import FileReadError
from ...logging import get_logger
from ..models import FileEntry


class AsyncFileReader:
    """
    Asynchronous whole-file reader.

    Uses aiofiles for non-blocking I/O. ``read_files`` is a join-all barrier:
    every read runs concurrently and the first failure aborts the batch.
    """

    def __init__(self):
        """Initialize file reader."""
        self._logger = get_logger('quist.files')

    async def read_file(self, file_path: Union[str, Path]) -> FileEntry:
        """
        Read an entire file.

        Args:
            file_path: Path to the file

        Returns:
            FileEntry named after the path's final segment

        Raises:
            FileReadError: If the file is missing, a directory, or unreadable
        """
        path = Path(file_path)
        try:
            async with aiofiles.open(path, 'rb') as f:
                content = await f.read()
        except (IOError, OSError) as e:
            self._logger.error(f"Failed to read {path}: {e}")
            raise FileReadError(path, e.strerror or str(e)) from e

        self._logger.debug(f"Read {path} ({len(content)} bytes)")
        return FileEntry.from_path(path, content)

    async def read_files(self, paths: Sequence[Union[str, Path]]) -> List[FileEntry]:
        """
        Read several files concurrently.

        Args:
            paths: Paths to read

        Returns:
            Entries in the same order as ``paths``

        Raises:
            FileReadError: For the first path that fails
        """
        tasks = [asyncio.ensure_future(self.read_file(path)) for path in paths]
        try:
            return list(await asyncio.gather(*tasks))
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
