"""Client data-access layer for the todAI REST API.

TasksApi issues requests, normalizes errors and keeps a tagged TaskCache
(invalidated on mutation, optimistically patched on update).
"""

from todai.client.api import TasksApi
from todai.client.cache import LIST_TAG, ReversiblePatch, TaskCache, task_tag
from todai.client.errors import (
    ClientError,
    HttpError,
    NetworkError,
    ParsingError,
    get_error_message,
)
from todai.client.types import Task

__all__ = [
    "TasksApi",
    "TaskCache",
    "ReversiblePatch",
    "LIST_TAG",
    "task_tag",
    "Task",
    "ClientError",
    "HttpError",
    "NetworkError",
    "ParsingError",
    "get_error_message",
]
