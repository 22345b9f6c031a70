"""Gist API errors."""
from .api_errors import NetworkError, MalformedResponseError

__all__ = [
    'NetworkError',
    'MalformedResponseError',
]
