"""
Services package.

Provides adapters between the web framework and the core logic.
"""

from .snapshot_builder import SnapshotBuilder

__all__ = [
    "SnapshotBuilder",
]
