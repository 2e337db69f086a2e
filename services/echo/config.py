"""
Echo service configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from pydantic import Field, field_validator
from services.common.core.config import BaseAppConfig


class EchoConfig(BaseAppConfig):
    """
    Configuration management for the Echo service.
    """

    # Server settings
    UVICORN_BIND_ADDR: str = Field(default="0.0.0.0:8000", description="Listen address")

    # Endpoint settings
    ECHO_PATH: str = Field(default="/echo", description="Path prefix of the echo endpoint")
    RESPONSE_INDENT: int = Field(
        default=2, ge=0, description="Indent of the pretty-printed JSON response and log entry"
    )

    # Path settings
    LOG_CONFIG_PATH: str = Field(
        default="/app/config/echo_log.yaml", description="Logging dictConfig YAML path"
    )

    # FastAPI settings
    root_path: str = Field(default="", description="API root path (for proxy)")

    # model_config is inherited

    @field_validator("ECHO_PATH")
    @classmethod
    def normalize_echo_path(cls, value: str) -> str:
        path = "/" + value.strip().strip("/")
        if path == "/":
            raise ValueError("ECHO_PATH must not be the root path")
        return path


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = EchoConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
