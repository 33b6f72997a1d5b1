"""Create / edit form for a task.

Fields hold raw text as typed. Before submit the values are trimmed,
empty optional inputs become None (an explicit clear on edit) and the
result is checked with the same validator the server runs, so the form
never sends a payload the server would reject on bounds.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from todai.application.services.task_validator import (
    DESCRIPTION_MAX_LENGTH,
    PRIORITY_MAX,
    PRIORITY_MIN,
    TITLE_MAX_LENGTH,
    collect_errors,
)
from todai.client.api import TasksApi
from todai.client.errors import get_error_message
from todai.client.types import Task
from todai.domain.enums import TaskStatus
from todai.shared.utils.datetime import (
    date_input_from_unix_seconds_utc_midnight,
    unix_seconds_utc_midnight_from_date_input,
)
from todai.ui.notifications import Notifier

FIELDS = ("title", "description", "status", "priority", "dueDate")

_LIMITS = {"title": TITLE_MAX_LENGTH, "description": DESCRIPTION_MAX_LENGTH}

# Typed at a prompt to clear an optional field while editing.
CLEAR_TOKEN = "-"


def _parse_status(raw: str) -> Any:
    text = raw.strip()
    for status in TaskStatus:
        if text.lower() in (status.value, status.label.lower()):
            return status.value
    return text


class TaskForm:
    """Form state plus submit logic; the console loop drives the prompts."""

    def __init__(self, api: TasksApi, notifier: Notifier, task: Task | None = None) -> None:
        self._api = api
        self._notifier = notifier
        self.task = task
        self.values: dict[str, str] = {name: "" for name in FIELDS}
        self.values["status"] = TaskStatus.TODO.value
        self.errors: dict[str, str] = {}
        if task is not None:
            self.values.update(
                title=task.title,
                description=task.description,
                status=task.status.value,
                priority="" if task.priority is None else str(task.priority),
                dueDate=""
                if task.due_date is None
                else date_input_from_unix_seconds_utc_midnight(task.due_date),
            )

    @property
    def is_edit(self) -> bool:
        return self.task is not None

    @property
    def heading(self) -> str:
        return "Edit task" if self.is_edit else "Create a new task"

    def set_field(self, name: str, raw: str) -> None:
        if name not in self.values:
            raise KeyError(name)
        self.values[name] = raw
        self.errors.pop(name, None)

    def helper_text(self, name: str) -> str:
        """Counter for text fields (``n/max``), prefixed by the field's error if any."""
        parts = []
        if name in self.errors:
            parts.append(self.errors[name])
        if name in _LIMITS:
            parts.append(f"{len(self.values[name])}/{_LIMITS[name]}")
        return " | ".join(parts)

    def build_payload(self) -> tuple[dict[str, Any], dict[str, str]]:
        """Convert raw values to a wire payload; returns (payload, input errors)."""
        input_errors: dict[str, str] = {}
        payload: dict[str, Any] = {
            "title": self.values["title"].strip(),
            "description": self.values["description"].strip(),
            "status": _parse_status(self.values["status"]),
        }

        priority = self.values["priority"].strip()
        if not priority:
            payload["priority"] = None
        else:
            try:
                payload["priority"] = int(priority)
            except ValueError:
                input_errors["priority"] = "Priority must be an integer"

        due = self.values["dueDate"].strip()
        if not due:
            payload["dueDate"] = None
        else:
            try:
                payload["dueDate"] = unix_seconds_utc_midnight_from_date_input(due)
            except ValueError:
                input_errors["dueDate"] = "Due date must be a date (YYYY-MM-DD)"

        return payload, input_errors

    def validate(self) -> dict[str, Any] | None:
        """Return the payload when valid; otherwise fill errors and return None."""
        payload, input_errors = self.build_payload()
        errors = collect_errors(payload, require_title=True)
        errors.update(input_errors)
        self.errors = errors
        return None if errors else payload

    async def submit(self) -> Task | None:
        """Validate and send. Returns the saved task, or None on any failure."""
        payload = self.validate()
        if payload is None:
            return None
        try:
            if self.task is not None:
                saved = await self._api.update_task(self.task.id, payload)
                self._notifier.show_success("Task updated")
            else:
                saved = await self._api.create_task(payload)
                self._notifier.show_success("Task created")
        except Exception as e:
            self._notifier.show_error(get_error_message(e, "Failed to save task"))
            return None
        return saved

    def prompt(self, input_fn: Callable[[str], str], emit: Callable[[str], None] = print) -> None:
        """Ask for each field in turn. Enter keeps the shown value; ``-`` clears it."""
        emit(self.heading)
        hints = {
            "title": f"Title (required, max {TITLE_MAX_LENGTH})",
            "description": f"Description (max {DESCRIPTION_MAX_LENGTH})",
            "status": "Status (" + ", ".join(TaskStatus.values()) + ")",
            "priority": f"Priority ({PRIORITY_MIN}-{PRIORITY_MAX}, optional)",
            "dueDate": "Due date (YYYY-MM-DD, optional)",
        }
        for name in FIELDS:
            current = self.values[name]
            shown = f" [{current}]" if current else ""
            raw = input_fn(f"{hints[name]}{shown}: ")
            if raw.strip() == CLEAR_TOKEN:
                self.set_field(name, "")
            elif raw.strip():
                self.set_field(name, raw)

    def render_errors(self) -> list[str]:
        return [f"  {name}: {self.helper_text(name)}" for name in FIELDS if name in self.errors]
