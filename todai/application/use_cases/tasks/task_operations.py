"""Task CRUD use cases: validate, then one store operation.

Raises ValidationException (400), TaskNotFoundException (404); store
failures propagate as StorageException (500).
"""

from __future__ import annotations

import logging
from typing import Any

from todai.application.dtos.task import TaskResult
from todai.application.interfaces.repositories import ITaskRepository
from todai.application.services.task_validator import validate_create, validate_update
from todai.domain.exceptions import TaskNotFoundException

logger = logging.getLogger(__name__)


class TaskService:
    """Task operations behind the REST controller."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def list_tasks(self) -> list[TaskResult]:
        """All tasks, newest first."""
        return await self.task_repo.list_all()

    async def get_task(self, task_id: str) -> TaskResult:
        task = await self.task_repo.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundException(task_id)
        return task

    async def create_task(self, payload: Any) -> TaskResult:
        """Validate payload (title required) and insert."""
        fields = validate_create(payload)
        created = await self.task_repo.insert(fields)
        logger.info("Task created: %s", created.id)
        return created

    async def update_task(self, task_id: str, payload: Any) -> TaskResult:
        """Validate partial payload and apply it; only present keys change.

        An empty payload still refreshes updated_at, matching a save with
        no field changes.
        """
        changes = validate_update(payload)
        updated = await self.task_repo.update_by_id(task_id, changes)
        if updated is None:
            raise TaskNotFoundException(task_id)
        logger.info("Task updated: %s (%s)", task_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    async def delete_task(self, task_id: str) -> str:
        """Delete task and return its id."""
        if not await self.task_repo.delete_by_id(task_id):
            raise TaskNotFoundException(task_id)
        logger.info("Task deleted: %s", task_id)
        return task_id
