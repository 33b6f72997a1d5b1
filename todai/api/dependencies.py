"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the Firestore handle, the task repository
and the task service. Routes depend only on these, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from todai.application.interfaces.repositories import ITaskRepository
from todai.application.use_cases.tasks import TaskService
from todai.infrastructure.firebase._rest_client import FirestoreRESTClient
from todai.infrastructure.firebase.repositories import FirestoreTaskRepository


def get_firestore_client(request: Request) -> FirestoreRESTClient | None:
    """Process-wide Firestore handle opened by the lifespan (None if not configured)."""
    return getattr(request.app.state, "firestore", None)


def get_task_repo(
    client: Annotated[FirestoreRESTClient | None, Depends(get_firestore_client)],
) -> ITaskRepository:
    """Task repository bound to the shared Firestore handle."""
    return FirestoreTaskRepository(client)


def get_task_service(
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> TaskService:
    """Task use cases (validation + store)."""
    return TaskService(repo)
