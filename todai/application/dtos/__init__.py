"""Application DTOs (no dependency on storage or HTTP)."""

from todai.application.dtos.task import TaskCreate, TaskResult

__all__ = ["TaskCreate", "TaskResult"]
