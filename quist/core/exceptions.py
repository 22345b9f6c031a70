"""
Custom exceptions for quist.

Every failure that ends a run derives from QuistException so the CLI can
report it as ``quist: <message>`` and exit non-zero.
"""
from pathlib import Path
from typing import Optional, Union


class QuistException(Exception):
    """Base exception for all quist errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnsupportedAuthError(QuistException):
    """Raised when credentials are not in ``username:token`` form."""

    def __init__(self, message: str = "unsupported authentication method; expected 'username:token'") -> None:
        super().__init__(message)


class FileReadError(QuistException):
    """Exception raised when an input file cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        """
        Initialize the exception.

        Args:
            path: Path that failed to read
            reason: Underlying OS error text
        """
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"could not read {self.path}: {reason}")


class PasteCreationError(QuistException):
    """The remote service refused to create the Gist."""

    def __init__(self, message: str) -> None:
        self.api_message = message
        super().__init__(f"failed to create Gist: {message}")


class PasteDeletionError(QuistException):
    """
    The remote service refused to delete the Gist.

    Reported separately from creation failures because the Gist may still
    exist remotely.
    """

    def __init__(self, gist_id: str, message: str, url: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            gist_id: Id of the Gist that could not be deleted
            message: Message returned by the API
            url: Public URL of the Gist (if known)
        """
        self.gist_id = gist_id
        self.api_message = message
        self.url = url
        location = f" at {url}" if url else ""
        super().__init__(
            f"failed to delete Gist {gist_id!r}: {message} (it may still exist{location})"
        )


class InputError(QuistException):
    """Input files cannot form a Gist (none given, or clashing names)."""
    pass
