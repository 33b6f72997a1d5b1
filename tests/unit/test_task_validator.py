"""Task validator tests: rules, messages, normalization."""

import pytest

from todai.application.services.task_validator import (
    check_due_date,
    check_priority,
    collect_errors,
    validate_create,
    validate_update,
)
from todai.domain.enums import TaskStatus
from todai.domain.exceptions import ValidationException

JAN_22_2026 = 1_769_040_000


def test_validate_create_defaults() -> None:
    fields = validate_create({"title": " Buy milk "})
    assert fields.title == "Buy milk"
    assert fields.description == ""
    assert fields.status is TaskStatus.TODO
    assert fields.priority is None
    assert fields.due_date is None


def test_validate_create_ignores_unknown_keys() -> None:
    fields = validate_create({"title": "a", "owner": "bob", "id": "forced"})
    assert fields.title == "a"


def test_validate_create_null_description_is_empty() -> None:
    assert validate_create({"title": "a", "description": None}).description == ""


def test_validate_create_requires_mapping() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_create(["title"])
    assert exc_info.value.message == "Request body must be a JSON object"


def test_validate_create_title_not_string() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_create({"title": 5})
    assert exc_info.value.message == "Title must be a string"
    assert exc_info.value.field == "title"


def test_validate_update_only_present_keys() -> None:
    """Absent keys are not in the result; null clears priority and dueDate."""
    assert validate_update({}) == {}
    assert validate_update({"status": "done"}) == {"status": TaskStatus.DONE}
    assert validate_update({"priority": None, "dueDate": None}) == {
        "priority": None,
        "due_date": None,
    }


def test_validate_update_rejects_null_title() -> None:
    with pytest.raises(ValidationException):
        validate_update({"title": None})


@pytest.mark.parametrize("value", [1, 9, 5.0])
def test_check_priority_accepts(value) -> None:
    assert check_priority(value) == int(value)


@pytest.mark.parametrize("value", [True, False, "2", 1.5, [1]])
def test_check_priority_rejects_non_integers(value) -> None:
    with pytest.raises(ValidationException) as exc_info:
        check_priority(value)
    assert exc_info.value.message == "Priority must be an integer"


def test_check_due_date_accepts_utc_midnight() -> None:
    assert check_due_date(JAN_22_2026) == JAN_22_2026
    assert check_due_date(float(JAN_22_2026)) == JAN_22_2026


def test_check_due_date_rejects_time_of_day() -> None:
    with pytest.raises(ValidationException) as exc_info:
        check_due_date(JAN_22_2026 + 1)
    assert exc_info.value.message == "Due date must be a date-only value at UTC midnight"
    assert exc_info.value.field == "dueDate"


def test_check_due_date_rejects_fractional_seconds() -> None:
    with pytest.raises(ValidationException) as exc_info:
        check_due_date(JAN_22_2026 + 0.5)
    assert exc_info.value.message == "Due date must be a date-only value at UTC midnight"


def test_check_due_date_rejects_unrepresentable_instant() -> None:
    with pytest.raises(ValidationException) as exc_info:
        check_due_date(86_400 * 10**12)
    assert exc_info.value.message == "Due date is not a valid date"


def test_collect_errors_reports_every_field() -> None:
    errors = collect_errors(
        {"title": "", "status": "nope", "priority": 12, "dueDate": 5},
        require_title=True,
    )
    assert errors == {
        "title": "Title is required",
        "status": "Status must be one of: todo, in-progress, done",
        "priority": "Priority must be between 1 and 9",
        "dueDate": "Due date must be a date-only value at UTC midnight",
    }


def test_collect_errors_partial_payload_without_title() -> None:
    assert collect_errors({"priority": 4}, require_title=False) == {}
    assert collect_errors({}, require_title=True) == {"title": "Title is required"}
