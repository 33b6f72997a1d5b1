"""Task use cases."""

from todai.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskService"]
