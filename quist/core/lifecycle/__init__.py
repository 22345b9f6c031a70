"""
Lifecycle module for short-lived Gists.

Create, wait for the exit signal, delete.
"""
from .coordinator import LifecycleCoordinator
from .models import FileEntry, LifecyclePhase, Output
from .protocols import GistClientProtocol, FileReaderProtocol
from .services import AsyncFileReader

__all__ = [
    # Main classes
    'LifecycleCoordinator',
    'AsyncFileReader',

    # Models
    'FileEntry',
    'LifecyclePhase',
    'Output',

    # Protocols
    'GistClientProtocol',
    'FileReaderProtocol',
]
