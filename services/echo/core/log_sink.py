"""
Log sinks for echo documents.

The sink is handed every document after it is built. Writing is a side
effect only: failures here never reach the caller.
"""

import json
import logging
from typing import Any, Dict, Optional, Protocol

from services.common.core.request_context import get_request_id


class LogSink(Protocol):
    """Destination for serialized echo documents."""

    def write(self, document: Dict[str, Any]) -> None: ...


class JsonLogSink:
    """
    Writes each document as pretty-printed JSON in a single INFO entry.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, indent: int = 2):
        self.logger = logger or logging.getLogger("echo.requests")
        self.indent = indent

    def write(self, document: Dict[str, Any]) -> None:
        try:
            details = json.dumps(document, indent=self.indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            self.logger.warning(
                f"Failed to serialize request details: {e}",
                extra={"error_type": type(e).__name__},
            )
            return

        self.logger.info(
            "Request details: %s",
            details,
            extra={"request_id": get_request_id()},
        )
