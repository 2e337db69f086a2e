"""
Where: services/echo/lifecycle.py
What: Echo startup/shutdown orchestration for shared resources.
Why: Keep main.py focused on app assembly.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .config import EchoConfig
from .core.describer import RequestDescriber
from .core.log_sink import JsonLogSink
from .services.snapshot_builder import SnapshotBuilder

logger = logging.getLogger("echo.main")


@asynccontextmanager
async def manage_lifespan(app: FastAPI, echo_config: EchoConfig) -> AsyncIterator[None]:
    """Manage application lifecycle."""
    sink = JsonLogSink(indent=echo_config.RESPONSE_INDENT)

    app.state.describer = RequestDescriber(sink)
    app.state.snapshot_builder = SnapshotBuilder()

    logger.info("Echo service initialized, serving %s", echo_config.ECHO_PATH)
    try:
        yield
    finally:
        logger.info("Echo service shutting down.")
