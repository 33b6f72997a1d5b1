"""Application services: task validation."""

from todai.application.services.task_validator import (
    DESCRIPTION_MAX_LENGTH,
    PRIORITY_MAX,
    PRIORITY_MIN,
    TITLE_MAX_LENGTH,
    collect_errors,
    validate_create,
    validate_update,
)

__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "PRIORITY_MAX",
    "PRIORITY_MIN",
    "TITLE_MAX_LENGTH",
    "collect_errors",
    "validate_create",
    "validate_update",
]
