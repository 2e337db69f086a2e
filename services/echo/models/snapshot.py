"""
Request snapshot models.

Encapsulates all data the describer needs from an incoming request.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    """One named section of a multipart request body."""

    model_config = ConfigDict(frozen=True)

    name: str
    filename: Optional[str] = None
    content_type: Optional[str] = None
    data: bytes = b""


class RequestSnapshot(BaseModel):
    """
    Already-parsed view of an incoming request.

    This model decouples the describer from Starlette's Request object.
    Headers are kept as (name, value) pairs in arrival order, one pair per value.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    protocol: str = "HTTP/1.1"
    query_string: Optional[str] = None
    content_type: Optional[str] = None
    headers: List[Tuple[str, str]] = Field(default_factory=list)
    body: bytes = b""
    parts: Optional[List[Part]] = None
