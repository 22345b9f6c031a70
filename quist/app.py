"""
Application facade.

Ties credentials, configuration, the Gist client and the lifecycle together
for one run.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .core.api import APIConfig, AsyncGistClient, Gist, parse_auth
from .core.lifecycle import LifecycleCoordinator, Output
from .core.logging import get_logger
from .core.signals import ExitSignal

logger = get_logger('quist')


@dataclass
class App:
    """
    One short-lived Gist run.

    Example:
        >>> app = App(basic_auth="octocat:ghp_xxx", files=[Path("notes.md")])
        >>> exit_signal = ExitSignal()
        >>> with interrupt_handler(exit_signal):
        ...     await app.run(exit_signal)
    """
    basic_auth: str
    files: List[Union[str, Path]]
    description: Optional[str] = None
    config: APIConfig = field(default_factory=APIConfig.default)

    async def run(self, exit_signal: ExitSignal, output: Optional[Output] = None) -> Gist:
        """
        Create the Gist, wait for ``exit_signal``, delete the Gist.

        Credentials are checked before anything else, so a malformed value
        fails without touching the disk or the network.

        Raises:
            QuistException: On any failure (see LifecycleCoordinator.run)
        """
        credential = parse_auth(self.basic_auth)
        logger.debug(f"Using {self.config.base_url} as {credential.username}")

        async with AsyncGistClient(credential, self.config) as client:
            coordinator = LifecycleCoordinator(client, exit_signal, output)
            return await coordinator.run(self.files, self.description)
