"""Gist API module."""
from .auth import BasicAuthCredential, parse_auth
from .client import AsyncGistClient
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig, DEFAULT_BASE_URL
from .errors import NetworkError, MalformedResponseError
from .models import GistPayload, Gist, Ok, Err, ApiResponse

__all__ = [
    # Client
    'AsyncGistClient',

    # Auth
    'BasicAuthCredential',
    'parse_auth',

    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DEFAULT_BASE_URL',

    # Models
    'GistPayload',
    'Gist',
    'Ok',
    'Err',
    'ApiResponse',

    # Errors
    'NetworkError',
    'MalformedResponseError',
]
