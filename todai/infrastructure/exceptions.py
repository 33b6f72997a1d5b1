"""Infrastructure exceptions for storage operations.

Storage errors extend TodaiException so presentation can map them
to HTTP responses consistently (always 500, generic message).
"""

from todai.domain.exceptions import TodaiException


class StorageException(TodaiException):
    """Unexpected datastore failure (transport error, 5xx, malformed reply)."""

    def __init__(self, message: str = "Server error while accessing tasks") -> None:
        super().__init__(message, "STORAGE_ERROR")


class StoreNotConfiguredException(StorageException):
    """Raised by store operations when no datastore connection was configured."""

    def __init__(self) -> None:
        super().__init__("Task store is not configured")
        self.error_code = "STORE_NOT_CONFIGURED"
