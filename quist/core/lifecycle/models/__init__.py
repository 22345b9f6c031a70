"""Lifecycle models."""
from .lifecycle_models import FileEntry, LifecyclePhase, Output

__all__ = [
    'FileEntry',
    'LifecyclePhase',
    'Output',
]
