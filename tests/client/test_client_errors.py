"""get_error_message: message derivation for every failure kind."""

import pytest

from todai.client.errors import HttpError, NetworkError, ParsingError, get_error_message


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (HttpError(400, {"error": "VALIDATION_ERROR", "message": "Title is required"}), "Title is required"),
        (HttpError(500, {"error": "Boom"}), "Boom"),
        (HttpError(502, "Bad gateway"), "Bad gateway"),
        (HttpError(503, None), "Request failed (503)"),
        (HttpError(500, {"message": "  "}), "Request failed (500)"),
        (NetworkError("connection refused"), "Network error. Is the server running?"),
        (ParsingError("bad json", status=200, text="<html>"), "Received an invalid response from the server."),
        (RuntimeError("plain"), "plain"),
        (RuntimeError(""), "Failed to save task"),
        (None, "Failed to save task"),
    ],
)
def test_get_error_message(error, expected: str) -> None:
    assert get_error_message(error, "Failed to save task") == expected


def test_default_fallback() -> None:
    assert get_error_message(None) == "Something went wrong"
