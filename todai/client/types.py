"""Client-side task type parsed from the wire JSON."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from todai.client.errors import ParsingError
from todai.domain.enums import TaskStatus

# wire name -> attribute name
_WIRE_TO_ATTR = {
    "title": "title",
    "description": "description",
    "status": "status",
    "priority": "priority",
    "dueDate": "due_date",
    "updatedAt": "updated_at",
}


@dataclass(frozen=True)
class Task:
    """A task as returned by the API (timestamps in unix seconds)."""

    id: str
    title: str
    description: str
    status: TaskStatus
    created_at: int
    updated_at: int
    priority: int | None = None
    due_date: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Task:
        """Parse one task object.

        Raises:
            ParsingError: If data is not a task object.
        """
        if not isinstance(data, dict):
            raise ParsingError(f"Expected a task object, got {type(data).__name__}")
        try:
            return cls(
                id=str(data["id"]),
                title=data["title"],
                description=data.get("description") or "",
                status=TaskStatus(data.get("status", TaskStatus.TODO.value)),
                created_at=int(data["createdAt"]),
                updated_at=int(data["updatedAt"]),
                priority=data.get("priority"),
                due_date=data.get("dueDate"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParsingError(f"Malformed task object: {e}") from e

    def with_updates(self, updates: dict[str, Any]) -> Task:
        """Copy with wire-named updates applied (None clears priority/dueDate)."""
        changes: dict[str, Any] = {}
        for wire_name, value in updates.items():
            attr = _WIRE_TO_ATTR.get(wire_name)
            if attr is None:
                continue
            if attr == "status" and value is not None:
                value = TaskStatus(value)
            changes[attr] = value
        return replace(self, **changes)
