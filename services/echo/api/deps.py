"""
Service accessors for the Echo API.

Shared services live on app.state and are created by the lifespan.
"""

from fastapi import Request

from ..core.describer import RequestDescriber
from ..services.snapshot_builder import SnapshotBuilder


def get_describer(request: Request) -> RequestDescriber:
    return request.app.state.describer


def get_snapshot_builder(request: Request) -> SnapshotBuilder:
    return request.app.state.snapshot_builder
