"""DTOs for tasks (no dependency on Firestore or HTTP schemas)."""

from __future__ import annotations

from dataclasses import dataclass

from todai.domain.enums import TaskStatus


@dataclass(frozen=True)
class TaskCreate:
    """Validated, normalized fields for a new task."""

    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: int | None = None
    due_date: int | None = None


@dataclass(frozen=True)
class TaskResult:
    """Stored task. Timestamps and due_date are unix seconds."""

    id: str
    title: str
    description: str
    status: TaskStatus
    priority: int | None
    due_date: int | None
    created_at: int
    updated_at: int
