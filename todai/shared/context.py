"""Request context management using contextvars.

Holds the request ID for the request being served so log records can
carry it without threading it through every call.

Usage:
    set_request_id("3f1c...")
    request_id = get_request_id()
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def set_request_id(request_id: str | None) -> Token:
    """Set the request ID for the current async task; returns a reset token."""
    return _current_request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _current_request_id.get()


def clear_request_id(token: Token | None = None) -> None:
    """Reset to the previous value (with token) or clear."""
    if token is not None:
        _current_request_id.reset(token)
    else:
        _current_request_id.set(None)
