"""
Cancellation signal.

The lifecycle waits on an ExitSignal, a one-shot latched notification. A
notification delivered before anyone waits is kept, and only the first
notification counts.
"""
import asyncio
import signal
from contextlib import contextmanager
from typing import Iterator, Optional

from .logging import get_logger

logger = get_logger('quist.signals')


class ExitSignal:
    """One-shot notification that the run should clean up and exit."""

    def __init__(self):
        self._event = asyncio.Event()
        self._reason: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def notify(self, reason: str = 'notified') -> bool:
        """
        Deliver the notification.

        Returns:
            True for the first notification, False if one was already delivered
        """
        if self._event.is_set():
            logger.debug(f"Ignoring repeated exit notification ({reason})")
            return False
        self._reason = reason
        self._event.set()
        logger.debug(f"Exit notification delivered ({reason})")
        return True

    async def wait(self) -> str:
        """Block until notified. Returns the notification reason."""
        await self._event.wait()
        return self._reason or 'notified'


@contextmanager
def interrupt_handler(
    exit_signal: ExitSignal,
    loop: Optional[asyncio.AbstractEventLoop] = None
) -> Iterator[ExitSignal]:
    """
    Route SIGINT to ``exit_signal`` while the block runs.

    Uses the loop's signal handler support where available and falls back to
    ``signal.signal`` on platforms without it (Windows).
    """
    loop = loop or asyncio.get_running_loop()

    def _on_interrupt():
        exit_signal.notify(signal.SIGINT.name)

    previous = None
    try:
        loop.add_signal_handler(signal.SIGINT, _on_interrupt)
        on_loop = True
    except NotImplementedError:
        on_loop = False
        previous = signal.signal(
            signal.SIGINT,
            lambda signum, frame: loop.call_soon_threadsafe(_on_interrupt)
        )

    try:
        yield exit_signal
    finally:
        if on_loop:
            loop.remove_signal_handler(signal.SIGINT)
        else:
            signal.signal(signal.SIGINT, previous)
