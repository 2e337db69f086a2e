"""
Request Snapshot Builder - Service Layer

Standardizes the flow: Starlette Request -> RequestSnapshot.
"""

import logging
from typing import List, Optional, Tuple

from fastapi import Request
from python_multipart import MultipartParser
from python_multipart.exceptions import MultipartParseError
from python_multipart.multipart import parse_options_header
from starlette.requests import ClientDisconnect

from services.echo.core.describer import MULTIPART_FORM_DATA
from services.echo.core.exceptions import BodyReadError, MalformedBodyError
from services.echo.models.snapshot import Part, RequestSnapshot

logger = logging.getLogger("echo.snapshot_builder")


class MultipartReader:
    """
    Collects multipart/form-data parts from python-multipart parser callbacks.

    Every part keeps its own Content-Type header, whether or not it carries
    a filename.
    """

    def __init__(self, content_type: str):
        _, params = parse_options_header(content_type)
        boundary = params.get(b"boundary")
        if not boundary:
            raise MalformedBodyError("Missing boundary in multipart/form-data content type")
        self.charset = params.get(b"charset", b"utf-8").decode("latin-1")

        self.parts: List[Part] = []
        self._headers: List[Tuple[bytes, bytes]] = []
        self._header_field = b""
        self._header_value = b""
        self._data: List[bytes] = []

        callbacks = {
            "on_part_begin": self.on_part_begin,
            "on_part_data": self.on_part_data,
            "on_part_end": self.on_part_end,
            "on_header_field": self.on_header_field,
            "on_header_value": self.on_header_value,
            "on_header_end": self.on_header_end,
        }
        self.parser = MultipartParser(boundary, callbacks)

    def on_part_begin(self) -> None:
        self._headers = []
        self._data = []

    def on_part_data(self, data: bytes, start: int, end: int) -> None:
        self._data.append(data[start:end])

    def on_header_field(self, data: bytes, start: int, end: int) -> None:
        self._header_field += data[start:end]

    def on_header_value(self, data: bytes, start: int, end: int) -> None:
        self._header_value += data[start:end]

    def on_header_end(self) -> None:
        self._headers.append((self._header_field.lower(), self._header_value))
        self._header_field = b""
        self._header_value = b""

    def on_part_end(self) -> None:
        headers = dict(self._headers)
        disposition = headers.get(b"content-disposition")
        if disposition is None:
            raise MalformedBodyError("Multipart part without Content-Disposition header")

        _, options = parse_options_header(disposition)
        filename = options.get(b"filename")
        content_type = headers.get(b"content-type")
        self.parts.append(
            Part(
                name=options.get(b"name", b"").decode(self.charset, errors="replace"),
                filename=filename.decode(self.charset, errors="replace") if filename is not None else None,
                content_type=content_type.decode("latin-1") if content_type is not None else None,
                data=b"".join(self._data),
            )
        )

    async def read(self, request: Request) -> List[Part]:
        try:
            async for chunk in request.stream():
                if chunk:
                    self.parser.write(chunk)
            self.parser.finalize()
        except MultipartParseError as e:
            raise MalformedBodyError(str(e)) from e
        return self.parts


class SnapshotBuilder:
    """
    Buffers an incoming request into an immutable RequestSnapshot.

    Multipart bodies are parsed into parts in arrival order; any other body
    is kept as raw bytes.
    """

    async def build(self, request: Request) -> RequestSnapshot:
        content_type = request.headers.get("content-type")
        query_string = request.scope.get("query_string", b"").decode("latin-1")
        http_version = request.scope.get("http_version", "1.1")

        body = b""
        parts: Optional[List[Part]] = None
        try:
            if content_type is not None and content_type.startswith(MULTIPART_FORM_DATA):
                parts = await MultipartReader(content_type).read(request)
                logger.debug(f"Read {len(parts)} multipart parts from {request.url.path}")
            else:
                body = await request.body()
        except (ClientDisconnect, OSError) as e:
            raise BodyReadError(e) from e

        return RequestSnapshot(
            method=request.method,
            path=request.url.path,
            protocol=f"HTTP/{http_version}",
            query_string=query_string or None,
            content_type=content_type,
            headers=[
                (name.decode("latin-1"), value.decode("latin-1"))
                for name, value in request.headers.raw
            ],
            body=body,
            parts=parts,
        )
