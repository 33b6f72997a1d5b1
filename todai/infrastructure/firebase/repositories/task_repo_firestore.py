"""Firestore-backed task repository (implements ITaskRepository)."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

import httpx

from todai.application.dtos.task import TaskCreate, TaskResult
from todai.domain.enums import TaskStatus
from todai.infrastructure.exceptions import StorageException, StoreNotConfiguredException
from todai.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    DocumentSnapshot,
    FirestoreRESTClient,
)
from todai.infrastructure.firebase.collections import COLLECTION_TASKS
from todai.shared.utils.datetime import from_timestamp_utc, to_unix_seconds, utc_now
from todai.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)

# Fields removed from the document when an update sets them to None.
_CLEARABLE_FIELDS = ("priority", "due_date")


def _is_document_id(task_id: str) -> bool:
    """Firestore ids are non-empty, contain no "/" and are not "." or ".."."""
    return bool(task_id) and "/" not in task_id and task_id not in (".", "..")


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Turn transport/HTTP/decoding failures into StorageException."""
    try:
        yield
    except (httpx.HTTPError, DocumentExistsError, KeyError, TypeError, ValueError) as e:
        logger.exception("Firestore error while %s", action)
        raise StorageException(f"Server error while {action}") from e


def _to_result(snapshot: DocumentSnapshot) -> TaskResult:
    d = snapshot.to_dict()
    due_date: datetime | None = d.get("due_date")
    return TaskResult(
        id=snapshot.id,
        title=d["title"],
        description=d.get("description") or "",
        status=TaskStatus(d.get("status", TaskStatus.TODO.value)),
        priority=d.get("priority"),
        due_date=to_unix_seconds(due_date) if due_date is not None else None,
        created_at=to_unix_seconds(d["created_at"]),
        updated_at=to_unix_seconds(d["updated_at"]),
    )


def _to_document_value(field: str, value: Any) -> Any:
    if field == "status":
        return TaskStatus(value).value
    if field == "due_date":
        return from_timestamp_utc(value)
    return value


class FirestoreTaskRepository:
    """Task repository using Firestore.

    Constructed with client=None when no datastore is configured; every
    operation then raises StoreNotConfiguredException.
    """

    def __init__(self, client: FirestoreRESTClient | None) -> None:
        self._client = client

    @property
    def _coll(self):
        if self._client is None:
            raise StoreNotConfiguredException()
        return self._client.collection(COLLECTION_TASKS)

    async def insert(self, fields: TaskCreate) -> TaskResult:
        """Create a task document under a new CUID."""
        coll = self._coll
        task_id = generate_cuid()
        now = utc_now()
        data: dict[str, Any] = {
            "title": fields.title,
            "description": fields.description,
            "status": fields.status.value,
            "created_at": now,
            "updated_at": now,
        }
        if fields.priority is not None:
            data["priority"] = fields.priority
        if fields.due_date is not None:
            data["due_date"] = from_timestamp_utc(fields.due_date)
        with _storage_errors("creating task"):
            await coll.create(task_id, data)
        return TaskResult(
            id=task_id,
            title=fields.title,
            description=fields.description,
            status=fields.status,
            priority=fields.priority,
            due_date=fields.due_date,
            created_at=to_unix_seconds(now),
            updated_at=to_unix_seconds(now),
        )

    async def list_all(self) -> list[TaskResult]:
        """Return all tasks, newest first (server-side order on created_at)."""
        coll = self._coll
        results: list[TaskResult] = []
        with _storage_errors("fetching tasks"):
            async for snapshot in coll.order_by("created_at", "DESCENDING").stream():
                results.append(_to_result(snapshot))
        return results

    async def find_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID."""
        if not _is_document_id(task_id):
            return None
        coll = self._coll
        with _storage_errors("fetching task"):
            doc = await coll.document(task_id).get()
            if not doc:
                return None
            return _to_result(doc)

    async def update_by_id(
        self, task_id: str, changes: dict[str, Any]
    ) -> TaskResult | None:
        """Patch present fields, drop cleared ones, refresh updated_at.

        Uses an exists precondition so an unknown id is reported (None)
        rather than created.
        """
        if not _is_document_id(task_id):
            return None
        coll = self._coll
        data: dict[str, Any] = {}
        delete_fields: list[str] = []
        for field, value in changes.items():
            if value is None and field in _CLEARABLE_FIELDS:
                delete_fields.append(field)
            else:
                data[field] = _to_document_value(field, value)
        data["updated_at"] = utc_now()
        with _storage_errors("updating task"):
            doc = await coll.document(task_id).update(data, tuple(delete_fields))
            if doc is None:
                return None
            return _to_result(doc)

    async def delete_by_id(self, task_id: str) -> bool:
        """Delete task; False when no document had that id."""
        if not _is_document_id(task_id):
            return False
        coll = self._coll
        with _storage_errors("deleting task"):
            return await coll.document(task_id).delete(must_exist=True)
