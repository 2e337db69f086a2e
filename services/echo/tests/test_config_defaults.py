"""
Where: services/echo/tests/test_config_defaults.py
What: Validate default EchoConfig values and overrides.
Why: Keep config defaults stable as environment defaults evolve.
"""

import pytest
from pydantic import ValidationError

from services.echo.config import EchoConfig


def test_defaults(monkeypatch):
    for name in ("ECHO_PATH", "RESPONSE_INDENT", "LOG_LEVEL", "UVICORN_BIND_ADDR"):
        monkeypatch.delenv(name, raising=False)

    config = EchoConfig(_env_file=None)

    assert config.ECHO_PATH == "/echo"
    assert config.RESPONSE_INDENT == 2
    assert config.LOG_LEVEL == "INFO"
    assert config.UVICORN_BIND_ADDR == "0.0.0.0:8000"
    assert config.root_path == ""


def test_echo_path_from_env_is_normalized(monkeypatch):
    monkeypatch.setenv("ECHO_PATH", "inspect/")

    config = EchoConfig(_env_file=None)

    assert config.ECHO_PATH == "/inspect"


def test_root_echo_path_is_rejected(monkeypatch):
    monkeypatch.setenv("ECHO_PATH", "/")

    with pytest.raises(ValidationError):
        EchoConfig(_env_file=None)


def test_negative_indent_is_rejected(monkeypatch):
    monkeypatch.setenv("RESPONSE_INDENT", "-1")

    with pytest.raises(ValidationError):
        EchoConfig(_env_file=None)
