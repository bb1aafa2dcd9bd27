"""Request context management using contextvars.

Async-safe storage for the request id: set by RequestIDMiddleware, read by
the logging filter so every record of a request carries the same id.

Usage:
    set_request_id("9b2f...")
    request_id = get_request_id()
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> None:
    """Bind the request id for the current async task."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the request id bound to this context, if any."""
    return _request_id.get()
