"""
Lifecycle coordinator.

Drives one run: read files, create the Gist, report its URL, wait for the
exit signal, delete the Gist.
"""
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..api.models import Err, Gist, GistPayload
from ..exceptions import InputError, PasteCreationError, PasteDeletionError
from ..logging import get_logger
from ..signals import ExitSignal
from .models import FileEntry, LifecyclePhase, Output
from .protocols import FileReaderProtocol, GistClientProtocol
from .services import AsyncFileReader

logger = get_logger('quist.lifecycle')


class LifecycleCoordinator:
    """
    Coordinates the create, wait, delete cycle of a short-lived Gist.

    The only suspension point between creation and deletion is the wait on
    ``exit_signal``; there is no timeout. Any failure aborts the rest of the
    cycle and propagates. A Gist whose deletion fails is reported with
    PasteDeletionError, distinct from a failed creation.
    """

    def __init__(
        self,
        client: GistClientProtocol,
        exit_signal: ExitSignal,
        output: Optional[Output] = None,
        file_reader: Optional[FileReaderProtocol] = None
    ):
        """
        Initialize lifecycle coordinator.

        Args:
            client: Gist API client
            exit_signal: One-shot notification that triggers deletion
            output: Output streams (defaults to sys.stdout/sys.stderr)
            file_reader: File reader implementation
        """
        self._client = client
        self._exit_signal = exit_signal
        self._output = output or Output()
        self._file_reader = file_reader or AsyncFileReader()
        self._phase = LifecyclePhase.PENDING
        self._gist: Optional[Gist] = None

    @property
    def phase(self) -> LifecyclePhase:
        return self._phase

    @property
    def gist(self) -> Optional[Gist]:
        """The created Gist, until it has been deleted."""
        return self._gist

    def _enter(self, phase: LifecyclePhase) -> None:
        logger.debug(f"Lifecycle phase: {self._phase.value} -> {phase.value}")
        self._phase = phase

    async def run(
        self,
        paths: Sequence[Union[str, Path]],
        description: Optional[str] = None
    ) -> Gist:
        """
        Execute the complete lifecycle.

        Args:
            paths: Files to include in the Gist
            description: Optional Gist description

        Returns:
            The Gist that was created and then deleted

        Raises:
            InputError: If no files are given or two share a name
            FileReadError: If any file cannot be read
            PasteCreationError: If the API refuses to create the Gist
            PasteDeletionError: If the API refuses to delete the Gist
            NetworkError: On transport failure
        """
        try:
            self._enter(LifecyclePhase.COLLECTING)
            entries = await self._collect(paths)
            payload = self.build_payload(entries, description)

            self._enter(LifecyclePhase.CREATING)
            gist = await self._create(payload)

            self._enter(LifecyclePhase.AWAITING)
            self._output.note("Waiting for termination in order to delete the Gist...")
            reason = await self._exit_signal.wait()
            logger.info(f"Exit requested ({reason}), deleting Gist {gist.id}")

            self._enter(LifecyclePhase.DELETING)
            await self._delete(gist)

            self._enter(LifecyclePhase.DONE)
            return gist
        except Exception:
            self._enter(LifecyclePhase.FAILED)
            raise

    async def _collect(self, paths: Sequence[Union[str, Path]]) -> List[FileEntry]:
        if not paths:
            raise InputError("no files given")
        logger.info(f"Reading {len(paths)} file(s)")
        return await self._file_reader.read_files(paths)

    @staticmethod
    def build_payload(
        entries: Sequence[FileEntry],
        description: Optional[str] = None
    ) -> GistPayload:
        """
        Build the Gist payload from file entries, in name order.

        Raises:
            InputError: If two entries share a name
        """
        payload = GistPayload(description=description)
        for entry in sorted(entries, key=lambda e: e.name):
            if entry.name in payload.files:
                raise InputError(f"duplicate file name {entry.name!r}")
            payload.add_file(entry.name, entry.content)
        return payload

    async def _create(self, payload: GistPayload) -> Gist:
        logger.info(f"Creating Gist with {len(payload.files)} file(s)")
        response = await self._client.create(payload)

        if isinstance(response, Err):
            raise PasteCreationError(response.message)

        gist = response.value
        self._gist = gist
        logger.info(f"Gist created: {gist.id}")

        self._output.note("URL created: ", end='')
        self._output.result(gist.url)
        return gist

    async def _delete(self, gist: Gist) -> None:
        response = await self._client.delete(gist.id)

        if isinstance(response, Err):
            raise PasteDeletionError(gist.id, response.message, gist.url)

        self._gist = None
        logger.info(f"Gist deleted: {gist.id}")
        self._output.result(f'Gist "{gist.id}" successfully deleted! Bye.')
