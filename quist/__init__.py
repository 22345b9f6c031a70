"""
quist - short-lived GitHub Gists.

Uploads files as a Gist, prints its URL, and deletes it again on Ctrl-C.

Usage:
    >>> from quist import App, ExitSignal
    >>>
    >>> app = App(basic_auth="octocat:ghp_xxx", files=["notes.md"])
    >>> exit_signal = ExitSignal()
    >>> await app.run(exit_signal)
"""
import logging

from .app import App
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncGistClient,
    BasicAuthCredential,
    parse_auth,
    GistPayload,
    Gist,
    Ok,
    Err,
    NetworkError,
    MalformedResponseError,
)
from .core.exceptions import (
    QuistException,
    UnsupportedAuthError,
    FileReadError,
    InputError,
    PasteCreationError,
    PasteDeletionError,
)
from .core.lifecycle import LifecycleCoordinator, LifecyclePhase, FileEntry, Output
from .core.signals import ExitSignal, interrupt_handler
from .core.utils import get_version

__version__ = get_version()


def setup_logging(level=logging.INFO):
    """
    Configure logging for quist modules.

    Installs a rich handler on stderr for the ``quist`` logger tree, so log
    records never mix with results on stdout.

    Args:
        level: Logging level (default: logging.INFO)
    """
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger('quist')
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))

    for name in ('quist.api', 'quist.lifecycle', 'quist.signals', 'quist.files'):
        child = logging.getLogger(name)
        child.setLevel(level)
        child.propagate = True


__all__ = [
    'App',
    'AsyncGistClient',
    'LifecycleCoordinator',
    'LifecyclePhase',
    'FileEntry',
    'Output',
    'ExitSignal',
    'interrupt_handler',
    'BasicAuthCredential',
    'parse_auth',
    'GistPayload',
    'Gist',
    'Ok',
    'Err',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'QuistException',
    'UnsupportedAuthError',
    'FileReadError',
    'InputError',
    'PasteCreationError',
    'PasteDeletionError',
    'NetworkError',
    'MalformedResponseError',
    'setup_logging',
]
