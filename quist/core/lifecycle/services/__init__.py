"""Lifecycle services module."""
from .file_service import AsyncFileReader

__all__ = [
    'AsyncFileReader',
]
