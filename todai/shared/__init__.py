"""Shared utilities: request context and cross-cutting helpers.

Used by domain, application, infrastructure and the client. No business logic.
"""

from todai.shared.context import clear_request_id, get_request_id, set_request_id

__all__ = [
    "set_request_id",
    "get_request_id",
    "clear_request_id",
]
