"""
Echo Service - HTTP request introspection server

Accepts any request on the echo path and responds with a structured
description of it, logging the same description.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request

from .api.deps import get_describer, get_snapshot_builder
from .api.responses import PrettyJSONResponse
from .config import config
from .core.logging_config import setup_logging
from .exceptions import register_exception_handlers
from .lifecycle import manage_lifespan
from .middleware import request_id_middleware

# Logger setup
setup_logging()
logger = logging.getLogger("echo.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with manage_lifespan(app, config):
        yield


app = FastAPI(title="Echo Service", version="1.0.0", lifespan=lifespan, root_path=config.root_path)

# Register middleware (decorator style).
app.middleware("http")(request_id_middleware)

# Register exception handlers.
register_exception_handlers(app)


# ===========================================
# Endpoint definitions.
# ===========================================


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


async def echo(request: Request) -> PrettyJSONResponse:
    """
    Echo endpoint: describe the request and return the description.

    Path, protocol, query, headers and form content are reported; multipart
    file parts are summarized rather than returned.
    """
    snapshot = await get_snapshot_builder(request).build(request)
    document = get_describer(request).describe(snapshot)
    return PrettyJSONResponse(document, indent=config.RESPONSE_INDENT)


# methods=None: every HTTP method, extension methods included.
app.add_route(config.ECHO_PATH, echo, methods=None)
app.add_route(config.ECHO_PATH + "/", echo, methods=None, include_in_schema=False)


if __name__ == "__main__":
    import uvicorn

    host, _, port = config.UVICORN_BIND_ADDR.rpartition(":")
    uvicorn.run(app, host=host or "0.0.0.0", port=int(port))
