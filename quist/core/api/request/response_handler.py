"""Response handler for Gist API responses."""
import json
from typing import Any, Callable, Optional, TypeVar

from ..errors import MalformedResponseError
from ..models import ApiResponse, Err, Ok

T = TypeVar('T')

# Statuses on which DELETE succeeds with an empty body.
NO_CONTENT_STATUSES = (204, 304)


class ResponseHandler:
    """Decodes API responses into ``Ok`` or ``Err``."""

    @staticmethod
    def parse_json(body: bytes, status: int) -> Any:
        """Parses a JSON response body."""
        try:
            return json.loads(body.decode('utf-8'))
        except (UnicodeDecodeError, ValueError):
            preview = body[:80].decode('utf-8', errors='replace')
            raise MalformedResponseError(status, f"invalid JSON body {preview!r}")

    @staticmethod
    def decode(
        data: Any,
        status: int,
        success: Optional[Callable[[Any], Optional[T]]] = None
    ) -> ApiResponse[T]:
        """
        Decode a parsed body, trying the success shape before the error shape.

        The HTTP status is not used to pick the shape: the API does not use
        status codes consistently enough for that.

        Args:
            data: Parsed JSON body
            status: HTTP status, for error reporting only
            success: Decoder for the success shape, returning None on mismatch.
                When omitted only the error shape is accepted.

        Returns:
            ``Ok`` with the decoded value, or ``Err`` with the API message

        Raises:
            MalformedResponseError: If the body matches neither shape
        """
        if success is not None:
            value = success(data)
            if value is not None:
                return Ok(value)

        error = Err.from_dict(data)
        if error is not None:
            return error

        raise MalformedResponseError(status, "body matches neither success nor error shape")

    @staticmethod
    def is_empty_success(status: int) -> bool:
        """Returns True for statuses that succeed without a body."""
        return status in NO_CONTENT_STATUSES
