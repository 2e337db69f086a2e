"""
RequestContext management.
Use ContextVar to share the Request ID across async execution.
"""

from contextvars import ContextVar
from typing import Optional


# Context variable for Request ID (UUID or client supplied X-Request-Id).
_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current Request ID."""
    return _request_id_var.get()


def set_request_id(request_id: str) -> str:
    """
    Set the Request ID supplied by the caller.

    Args:
        request_id: X-Request-Id header value

    Returns:
        The stripped Request ID that was set

    Raises:
        ValueError: if the value is blank
    """
    value = request_id.strip()
    if not value:
        raise ValueError("Request ID must not be blank")
    _request_id_var.set(value)
    return value


def generate_request_id() -> str:
    """
    Generate and set a new Request ID (UUID) for the current context.
    """
    import uuid

    new_id = str(uuid.uuid4())
    _request_id_var.set(new_id)
    return new_id


def clear_request_id() -> None:
    """Clear the Request ID context."""
    _request_id_var.set(None)
