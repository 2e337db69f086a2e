"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .snapshot import Part, RequestSnapshot

__all__ = [
    "Part",
    "RequestSnapshot",
]
