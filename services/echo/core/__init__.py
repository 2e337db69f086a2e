"""
Core logic package.

Provides request description and the log sink it writes to.
"""

from .describer import RequestDescriber, build_document, decode_parameters
from .log_sink import JsonLogSink, LogSink

__all__ = [
    "RequestDescriber",
    "build_document",
    "decode_parameters",
    "JsonLogSink",
    "LogSink",
]
