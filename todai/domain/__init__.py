"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application,
infrastructure and client layers.
"""

from todai.domain.enums import TaskStatus
from todai.domain.exceptions import (
    ResourceNotFoundException,
    TaskNotFoundException,
    TodaiException,
    ValidationException,
)

__all__ = [
    # Enums
    "TaskStatus",
    # Exceptions
    "ResourceNotFoundException",
    "TaskNotFoundException",
    "TodaiException",
    "ValidationException",
]
