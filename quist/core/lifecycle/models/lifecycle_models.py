"""
Data models for the Gist lifecycle.
"""
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TextIO, Union


@dataclass(frozen=True)
class FileEntry:
    """
    A file read from disk, ready to be added to a Gist.

    Attributes:
        name: Final path segment of the source path
        content: Raw file bytes
    """
    name: str
    content: bytes = field(repr=False)

    @classmethod
    def from_path(cls, path: Union[str, Path], content: bytes) -> 'FileEntry':
        return cls(name=Path(path).name, content=content)

    @property
    def text(self) -> str:
        """Content decoded as UTF-8, invalid sequences replaced."""
        return self.content.decode('utf-8', errors='replace')


class LifecyclePhase(Enum):
    """Phases of a run, in order."""
    PENDING = 'pending'
    COLLECTING = 'collecting'
    CREATING = 'creating'
    AWAITING = 'awaiting'
    DELETING = 'deleting'
    DONE = 'done'
    FAILED = 'failed'


@dataclass
class Output:
    """
    Output streams of a run.

    ``stdout`` receives results (URL, deletion confirmation); ``stderr``
    receives progress notes.
    """
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def result(self, text: str, end: str = '\n') -> None:
        self.stdout.write(text + end)
        self.stdout.flush()

    def note(self, text: str, end: str = '\n') -> None:
        self.stderr.write(text + end)
        self.stderr.flush()
