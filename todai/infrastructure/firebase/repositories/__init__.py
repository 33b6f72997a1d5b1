"""Firestore-backed repository implementations."""

from todai.infrastructure.firebase.repositories.task_repo_firestore import (
    FirestoreTaskRepository,
)

__all__ = [
    "FirestoreTaskRepository",
]
