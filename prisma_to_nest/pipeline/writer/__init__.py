"""
Writing generated artifacts to disk.
"""

from __future__ import annotations

from .atomic_writer import ArtifactValidationError, AtomicWriter

__all__ = [
    "ArtifactValidationError",
    "AtomicWriter",
]
