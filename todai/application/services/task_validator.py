"""Task field validation and normalization.

One module for every task rule. The REST controller runs it before any
store call and the console TaskForm runs the same checks for immediate
feedback, so the two sides always agree on bounds and messages.

Payloads use wire names (``dueDate``); normalized output uses storage
names (``due_date``).
"""

from collections.abc import Mapping
from typing import Any

from todai.application.dtos.task import TaskCreate
from todai.domain.enums import TaskStatus
from todai.domain.exceptions import ValidationException
from todai.shared.utils.datetime import from_timestamp_utc, is_utc_midnight

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000
PRIORITY_MIN = 1
PRIORITY_MAX = 9

# wire name -> storage name
_FIELD_NAMES: dict[str, str] = {
    "title": "title",
    "description": "description",
    "status": "status",
    "priority": "priority",
    "dueDate": "due_date",
}


def check_title(value: Any) -> str:
    """Return the trimmed title or raise ValidationException."""
    if value is None:
        raise ValidationException("Title is required", field="title")
    if not isinstance(value, str):
        raise ValidationException("Title must be a string", field="title")
    title = value.strip()
    if not title:
        raise ValidationException("Title is required", field="title")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationException(
            f"Title cannot exceed {TITLE_MAX_LENGTH} characters", field="title"
        )
    return title


def check_description(value: Any) -> str:
    """Return the trimmed description ('' for None) or raise ValidationException."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationException("Description must be a string", field="description")
    description = value.strip()
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationException(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
    return description


def check_status(value: Any) -> TaskStatus:
    """Return the TaskStatus for value or raise ValidationException."""
    if isinstance(value, TaskStatus):
        return value
    if isinstance(value, str) and value in TaskStatus.values():
        return TaskStatus(value)
    raise ValidationException(
        f"Status must be one of: {', '.join(TaskStatus.values())}", field="status"
    )


def _as_integer(value: Any) -> int | None:
    """int for ints and integral floats; None for anything else (bools included)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def check_priority(value: Any) -> int | None:
    """Return the priority (None clears) or raise ValidationException."""
    if value is None:
        return None
    priority = _as_integer(value)
    if priority is None:
        raise ValidationException("Priority must be an integer", field="priority")
    if not PRIORITY_MIN <= priority <= PRIORITY_MAX:
        raise ValidationException(
            f"Priority must be between {PRIORITY_MIN} and {PRIORITY_MAX}",
            field="priority",
        )
    return priority


def check_due_date(value: Any) -> int | None:
    """Return the due date in unix seconds (None clears) or raise ValidationException.

    Only exact UTC midnights of representable instants are accepted.
    """
    if value is None:
        return None
    seconds = _as_integer(value)
    if seconds is None:
        if isinstance(value, float):
            raise ValidationException(
                "Due date must be a date-only value at UTC midnight", field="dueDate"
            )
        raise ValidationException(
            "Due date must be unix seconds (integer)", field="dueDate"
        )
    try:
        from_timestamp_utc(seconds)
    except ValueError as e:
        raise ValidationException("Due date is not a valid date", field="dueDate") from e
    if not is_utc_midnight(seconds):
        raise ValidationException(
            "Due date must be a date-only value at UTC midnight", field="dueDate"
        )
    return seconds


_CHECKS = {
    "title": check_title,
    "description": check_description,
    "status": check_status,
    "priority": check_priority,
    "dueDate": check_due_date,
}


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationException("Request body must be a JSON object")
    return payload


def validate_create(payload: Any) -> TaskCreate:
    """Validate a create payload (title required) and return normalized fields.

    Raises:
        ValidationException: On the first failing field.
    """
    data = _require_mapping(payload)
    return TaskCreate(
        title=check_title(data.get("title")),
        description=check_description(data.get("description")),
        status=check_status(data["status"]) if "status" in data else TaskStatus.TODO,
        priority=check_priority(data.get("priority")),
        due_date=check_due_date(data.get("dueDate")),
    )


def validate_update(payload: Any) -> dict[str, Any]:
    """Validate a partial update payload.

    Only keys present in the payload appear in the result. ``None`` for
    priority or due_date means "clear the field".

    Raises:
        ValidationException: On the first failing field.
    """
    data = _require_mapping(payload)
    changes: dict[str, Any] = {}
    for wire_name, check in _CHECKS.items():
        if wire_name in data:
            changes[_FIELD_NAMES[wire_name]] = check(data[wire_name])
    return changes


def collect_errors(payload: Mapping[str, Any], *, require_title: bool) -> dict[str, str]:
    """Run every field check and return ``{wire field: message}`` for failures.

    Used by forms that report all problems at once instead of the first one.
    """
    errors: dict[str, str] = {}
    for wire_name, check in _CHECKS.items():
        if wire_name not in payload and not (wire_name == "title" and require_title):
            continue
        try:
            check(payload.get(wire_name))
        except ValidationException as e:
            errors[wire_name] = e.message
    return errors
