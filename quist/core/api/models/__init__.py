"""Gist API models."""
from .gist_models import GistPayload, Gist, Ok, Err, ApiResponse

__all__ = [
    'GistPayload',
    'Gist',
    'Ok',
    'Err',
    'ApiResponse',
]
