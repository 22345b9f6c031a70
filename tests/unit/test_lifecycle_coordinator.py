"""Tests for the lifecycle coordinator."""
import asyncio
import io

import pytest
from unittest.mock import AsyncMock, Mock

from quist.core.api.models import Err, Gist, GistPayload, Ok
from quist.core.exceptions import (
    FileReadError,
    InputError,
    PasteCreationError,
    PasteDeletionError,
)
from quist.core.lifecycle import FileEntry, LifecycleCoordinator, LifecyclePhase, Output
from quist.core.signals import ExitSignal


async def wait_for_phase(coordinator, phase, timeout=1.0):
    """Poll until the coordinator reaches ``phase``."""
    async def _poll():
        while coordinator.phase is not phase:
            await asyncio.sleep(0.005)
    await asyncio.wait_for(_poll(), timeout)


class TestLifecycleCoordinator:
    """Test suite for LifecycleCoordinator."""

    @pytest.fixture
    def gist(self):
        return Gist(id='aa5a315d61ae9438b18d', url='X')

    @pytest.fixture
    def mock_client(self, gist):
        """Create mock Gist client that succeeds."""
        client = Mock()
        client.create = AsyncMock(return_value=Ok(gist))
        client.delete = AsyncMock(return_value=Ok(None))
        return client

    @pytest.fixture
    def output(self):
        return Output(stdout=io.StringIO(), stderr=io.StringIO())

    @pytest.fixture
    def exit_signal(self):
        return ExitSignal()

    @pytest.fixture
    def coordinator(self, mock_client, exit_signal, output):
        """Create LifecycleCoordinator instance."""
        return LifecycleCoordinator(mock_client, exit_signal, output)

    @pytest.mark.asyncio
    async def test_full_cycle(self, coordinator, mock_client, exit_signal, output, text_files, gist):
        """Test create, wait, delete with a pre-delivered notification."""
        exit_signal.notify('test')

        result = await coordinator.run(text_files)

        assert result == gist
        assert coordinator.phase is LifecyclePhase.DONE
        assert coordinator.gist is None
        mock_client.create.assert_awaited_once()
        mock_client.delete.assert_awaited_once_with('aa5a315d61ae9438b18d')

    @pytest.mark.asyncio
    async def test_url_written_to_stdout(self, coordinator, exit_signal, output, text_files):
        """Test the created URL is the first line on stdout."""
        exit_signal.notify('test')

        await coordinator.run(text_files)

        lines = output.stdout.getvalue().splitlines()
        assert lines[0] == 'X'
        assert 'aa5a315d61ae9438b18d' in lines[1]
        assert 'URL created: ' in output.stderr.getvalue()

    @pytest.mark.asyncio
    async def test_payload_sorted_and_decoded(self, coordinator, mock_client, exit_signal, text_files):
        """Test the payload holds every file, in name order."""
        exit_signal.notify('test')

        await coordinator.run(text_files, description='demo')

        payload = mock_client.create.await_args.args[0]
        assert isinstance(payload, GistPayload)
        assert payload.description == 'demo'
        assert payload.to_dict()['files'] == {
            'bar.txt': {'content': 'bar is here\n'},
            'foo.txt': {'content': 'foo is here\n'},
        }
        assert list(payload.to_dict()['files']) == ['bar.txt', 'foo.txt']

    @pytest.mark.asyncio
    async def test_waits_for_signal_before_delete(self, coordinator, mock_client, exit_signal, output, text_files):
        """Test deletion happens only after the notification, exactly once."""
        task = asyncio.ensure_future(coordinator.run(text_files))

        await wait_for_phase(coordinator, LifecyclePhase.AWAITING)
        await asyncio.sleep(0.02)
        assert not task.done()
        assert coordinator.gist is not None
        assert output.stdout.getvalue() == 'X\n'
        mock_client.delete.assert_not_awaited()

        exit_signal.notify('SIGINT')
        await asyncio.wait_for(task, timeout=1)

        mock_client.delete.assert_awaited_once_with('aa5a315d61ae9438b18d')

    @pytest.mark.asyncio
    async def test_creation_error_aborts(self, coordinator, mock_client, exit_signal, output, text_files):
        """Test an Err from create aborts before any delete."""
        mock_client.create.return_value = Err(message='needs auth')
        exit_signal.notify('test')

        with pytest.raises(PasteCreationError, match='needs auth'):
            await coordinator.run(text_files)

        mock_client.delete.assert_not_awaited()
        assert coordinator.phase is LifecyclePhase.FAILED
        assert output.stdout.getvalue() == ''

    @pytest.mark.asyncio
    async def test_deletion_error_reported_distinctly(self, coordinator, mock_client, exit_signal, text_files):
        """Test an Err from delete names the Gist that may still exist."""
        mock_client.delete.return_value = Err(message='needs auth')
        exit_signal.notify('test')

        with pytest.raises(PasteDeletionError) as exc_info:
            await coordinator.run(text_files)

        error = exc_info.value
        assert error.gist_id == 'aa5a315d61ae9438b18d'
        assert error.api_message == 'needs auth'
        assert 'may still exist' in str(error)
        assert coordinator.gist is not None

    @pytest.mark.asyncio
    async def test_unreadable_file_aborts_before_network(self, coordinator, mock_client, text_files, tmp_path):
        """Test a read failure stops the run before create."""
        with pytest.raises(FileReadError, match='missing.txt'):
            await coordinator.run([*text_files, tmp_path / 'missing.txt'])

        mock_client.create.assert_not_awaited()
        assert coordinator.phase is LifecyclePhase.FAILED

    @pytest.mark.asyncio
    async def test_no_files(self, coordinator, mock_client):
        """Test an empty file list is rejected."""
        with pytest.raises(InputError):
            await coordinator.run([])

        mock_client.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_injected_file_reader(self, mock_client, exit_signal, output):
        """Test a custom file reader is used."""
        reader = Mock()
        reader.read_files = AsyncMock(return_value=[FileEntry('b', b'2'), FileEntry('a', b'1')])
        exit_signal.notify('test')
        coordinator = LifecycleCoordinator(mock_client, exit_signal, output, file_reader=reader)

        await coordinator.run(['ignored'])

        reader.read_files.assert_awaited_once_with(['ignored'])
        payload = mock_client.create.await_args.args[0]
        assert payload.files == {'a': '1', 'b': '2'}


class TestBuildPayload:
    """Test suite for LifecycleCoordinator.build_payload."""

    def test_sorted_by_name(self):
        """Test entries are added in name order."""
        entries = [FileEntry('zeta', b'z'), FileEntry('alpha', b'a')]

        payload = LifecycleCoordinator.build_payload(entries)

        assert list(payload.files) == ['alpha', 'zeta']

    def test_duplicate_names_rejected(self):
        """Test two files with the same name cannot both be uploaded."""
        entries = [FileEntry('notes.md', b'a'), FileEntry('notes.md', b'b')]

        with pytest.raises(InputError, match='notes.md'):
            LifecycleCoordinator.build_payload(entries)
