"""
Protocol definitions for the lifecycle module.

The coordinator depends on these interfaces rather than on the aiohttp
client or aiofiles directly, so tests can substitute either.
"""
from pathlib import Path
from typing import List, Protocol, Sequence, Union

from ..api.models import ApiResponse, Gist, GistPayload
from .models import FileEntry


class GistClientProtocol(Protocol):
    """Protocol for the remote Gist client."""

    async def create(self, payload: GistPayload) -> ApiResponse[Gist]:
        """
        Create a Gist.

        Args:
            payload: Files and optional description

        Returns:
            ``Ok(Gist)`` or ``Err``
        """
        ...

    async def delete(self, gist_id: str) -> ApiResponse[None]:
        """
        Delete a Gist.

        Args:
            gist_id: Id returned by ``create``

        Returns:
            ``Ok(None)`` or ``Err``
        """
        ...


class FileReaderProtocol(Protocol):
    """Protocol for reading input files."""

    async def read_files(self, paths: Sequence[Union[str, Path]]) -> List[FileEntry]:
        """
        Read every path, failing on the first unreadable one.

        Raises:
            FileReadError: If any path cannot be read
        """
        ...
