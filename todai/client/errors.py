"""Client-side error taxonomy and user-facing messages.

HttpError: the server answered with a non-2xx status.
NetworkError: the server could not be reached.
ParsingError: the server answered with something that is not the expected JSON.
"""

from typing import Any

DEFAULT_ERROR_MESSAGE = "Something went wrong"


class ClientError(Exception):
    """Base exception for failures seen by the API client."""

    kind = "CLIENT_ERROR"


class HttpError(ClientError):
    """Non-2xx response; data is the decoded body (dict, str or None)."""

    kind = "HTTP_ERROR"

    def __init__(self, status: int, data: Any = None) -> None:
        self.status = status
        self.data = data
        super().__init__(f"Request failed ({status})")


class NetworkError(ClientError):
    """Transport failure (connection refused, DNS, reset, timeout)."""

    kind = "FETCH_ERROR"


class ParsingError(ClientError):
    """Body was not JSON or did not have the expected shape."""

    kind = "PARSING_ERROR"

    def __init__(self, message: str, status: int | None = None, text: str | None = None) -> None:
        self.status = status
        self.text = text
        super().__init__(message)


def _message_from_body(data: Any) -> str | None:
    if isinstance(data, str) and data.strip():
        return data
    if isinstance(data, dict):
        for key in ("message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return None


def get_error_message(error: BaseException | None, fallback: str = DEFAULT_ERROR_MESSAGE) -> str:
    """Human-readable message for a failed call.

    The response body's ``message`` (then ``error``, then raw text) wins;
    otherwise a generic message keyed by failure kind; otherwise fallback.
    """
    if error is None:
        return fallback
    if isinstance(error, HttpError):
        return _message_from_body(error.data) or f"Request failed ({error.status})"
    if isinstance(error, NetworkError):
        return "Network error. Is the server running?"
    if isinstance(error, ParsingError):
        return "Received an invalid response from the server."
    message = str(error)
    return message if message.strip() else fallback
