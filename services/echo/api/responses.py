"""
Echo response classes.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    """JSONResponse rendered with indentation for human readers."""

    def __init__(self, content: Any, indent: int = 2, **kwargs: Any):
        # render() runs inside JSONResponse.__init__
        self.indent = indent
        super().__init__(content, **kwargs)

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=self.indent,
        ).encode("utf-8")
