"""
Where: services/echo/core/describer.py
What: Turns a RequestSnapshot into the ordered echo document.
Why: Keep request introspection independent of the web framework and the log sink.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from urllib.parse import parse_qsl

from services.echo.core.log_sink import LogSink
from services.echo.models.snapshot import Part, RequestSnapshot

logger = logging.getLogger("echo.describer")

METHOD = "method"
PATH = "path"
PROTOCOL = "protocol"
QUERY_STRING = "queryString"
QUERY = "query"
BODY = "body"
FORM = "form"
HEADERS = "headers"

APPLICATION_X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded"
MULTIPART_FORM_DATA = "multipart/form-data"

ParameterValue = Union[str, List[str]]
DecodedParameterMap = Dict[str, ParameterValue]
EchoDocument = Dict[str, Any]


def collapse(pairs: Iterable[Tuple[str, str]]) -> DecodedParameterMap:
    """
    Group (name, value) pairs by name.

    A name seen once maps to its value, a name seen more than once maps to
    the list of all its values in occurrence order.
    """
    collapsed: DecodedParameterMap = {}
    for name, value in pairs:
        if name not in collapsed:
            collapsed[name] = value
            continue
        existing = collapsed[name]
        if isinstance(existing, list):
            existing.append(value)
        else:
            collapsed[name] = [existing, value]
    return collapsed


def decode_parameters(encoded: str) -> Optional[DecodedParameterMap]:
    """
    Decode an application/x-www-form-urlencoded string.

    A token without "=" is kept as a name with an empty value.
    Returns None when the string holds no parameters at all.
    """
    pairs = parse_qsl(encoded, keep_blank_values=True)
    if not pairs:
        return None
    return collapse(pairs)


def describe_multipart_body(parts: List[Part]) -> str:
    return f"<{len(parts)} parts>"


def describe_part(part: Part) -> str:
    """
    Describe a single multipart part.

    Any part carrying a content type is reported as a file, even a text
    field that was sent with one.
    """
    if part.content_type is None:
        return part.data.decode("utf-8", errors="replace")
    return f"<file: {part.filename}, size: {len(part.data)} bytes>"


def describe_form(parts: List[Part]) -> DecodedParameterMap:
    return collapse((part.name, describe_part(part)) for part in parts)


def extract_headers(headers: Iterable[Tuple[str, str]]) -> DecodedParameterMap:
    return collapse(headers)


def build_document(snapshot: RequestSnapshot) -> EchoDocument:
    """
    Build the echo document for a request.

    Key order is fixed: method, path, protocol, [queryString, query],
    [body, form], headers.
    """
    document: EchoDocument = {
        METHOD: snapshot.method,
        PATH: snapshot.path,
        PROTOCOL: snapshot.protocol,
    }

    query_string = snapshot.query_string
    if query_string is not None and query_string.strip():
        document[QUERY_STRING] = query_string
        document[QUERY] = decode_parameters(query_string)

    content_type = snapshot.content_type
    if content_type is not None:
        if content_type == APPLICATION_X_WWW_FORM_URLENCODED:
            form_data = snapshot.body.decode("utf-8", errors="replace")
            document[BODY] = form_data
            document[FORM] = decode_parameters(form_data)
        elif content_type.startswith(MULTIPART_FORM_DATA):
            parts = snapshot.parts or []
            document[BODY] = describe_multipart_body(parts)
            document[FORM] = describe_form(parts)

    document[HEADERS] = extract_headers(snapshot.headers)
    return document


class RequestDescriber:
    """Builds echo documents and hands each one to a log sink."""

    def __init__(self, sink: LogSink):
        self.sink = sink

    def describe(self, snapshot: RequestSnapshot) -> EchoDocument:
        document = build_document(snapshot)
        logger.debug(
            "Described %s %s (%d keys)", snapshot.method, snapshot.path, len(document)
        )
        try:
            self.sink.write(document)
        except Exception as e:
            # The document is still returned when the sink fails.
            logger.warning(
                f"Log sink failed to write request details: {e}",
                extra={"error_type": type(e).__name__},
            )
        return document
