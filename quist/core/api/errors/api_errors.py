"""Transport-level errors for the Gist API client."""
from typing import Optional

from ...exceptions import QuistException


class NetworkError(QuistException):
    """
    Exception raised when a request could not complete.

    Covers connection failures and timeouts. API-level refusals are returned
    as ``Err`` values instead, never raised as NetworkError.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)


class MalformedResponseError(NetworkError):
    """Response body matched neither the success nor the error shape."""

    def __init__(self, status: int, detail: str) -> None:
        super().__init__(f"unexpected response from API (HTTP {status}): {detail}", status)
