"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from todai.application.dtos.task import TaskCreate, TaskResult


class ITaskRepository(Protocol):
    """Protocol for the task store.

    Failures other than "not found" raise StorageException.
    """

    async def insert(self, fields: TaskCreate) -> TaskResult:
        """Persist a new task; store assigns id, created_at and updated_at."""

    async def list_all(self) -> list[TaskResult]:
        """Return all tasks, newest created_at first."""

    async def find_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID, or None."""

    async def update_by_id(
        self, task_id: str, changes: dict[str, Any]
    ) -> TaskResult | None:
        """Apply partial changes (None clears priority/due_date); None if missing."""

    async def delete_by_id(self, task_id: str) -> bool:
        """Delete task; False if it did not exist."""
