"""Async client for the todAI task endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from todai.client.cache import (
    LIST_QUERY,
    LIST_TAG,
    ReversiblePatch,
    TaskCache,
    task_query,
    task_tag,
)
from todai.client.errors import HttpError, NetworkError, ParsingError
from todai.client.types import Task
from todai.shared.utils.datetime import to_unix_seconds, utc_now

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"


def _decode_body(resp: httpx.Response) -> Any:
    """JSON body if it parses, otherwise the raw text (None when empty)."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class TasksApi:
    """Task endpoints plus the tagged cache that backs the UI.

    Pass either base_url or a preconfigured http_client (tests use one
    with httpx.MockTransport). The client is closed by aclose() only if
    this instance created it.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        cache: TaskCache | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._http = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(base_url=self._base_url, timeout=timeout)
        )
        self._owns_http = http_client is None
        self.cache = cache if cache is not None else TaskCache()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> TasksApi:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            NetworkError: The server could not be reached.
            HttpError: Non-2xx status (data is the decoded body).
            ParsingError: 2xx response whose body is not JSON.
        """
        url = f"{self._base_url}{path}"
        try:
            resp = await self._http.request(method, url, json=json)
        except httpx.TransportError as e:
            raise NetworkError(str(e) or type(e).__name__) from e
        if not resp.is_success:
            raise HttpError(resp.status_code, _decode_body(resp))
        try:
            return resp.json()
        except ValueError as e:
            raise ParsingError(
                "Response body is not valid JSON", status=resp.status_code, text=resp.text
            ) from e

    async def list_tasks(self, *, refetch: bool = False) -> list[Task]:
        """All tasks, newest first. Served from cache unless refetch or invalidated."""
        if not refetch:
            cached = self.cache.get(LIST_QUERY)
            if cached is not None:
                return cached
        data = await self._request("GET", "/tasks")
        if not isinstance(data, list):
            raise ParsingError("Expected a list of tasks")
        tasks = [Task.from_json(item) for item in data]
        self.cache.put(LIST_QUERY, tasks, [*(task_tag(t.id) for t in tasks), LIST_TAG])
        return tasks

    async def get_task(self, task_id: str, *, refetch: bool = False) -> Task:
        key = task_query(task_id)
        if not refetch:
            cached = self.cache.get(key)
            if cached is not None:
                return cached
        task = Task.from_json(await self._request("GET", f"/tasks/{task_id}"))
        self.cache.put(key, task, [task_tag(task.id)])
        return task

    async def create_task(self, fields: dict[str, Any]) -> Task:
        task = Task.from_json(await self._request("POST", "/tasks", json=fields))
        self.cache.invalidate([LIST_TAG])
        logger.debug("Created task %s", task.id)
        return task

    def _apply_optimistic(self, task_id: str, updates: dict[str, Any]) -> list[ReversiblePatch]:
        optimistic = {**updates, "updatedAt": to_unix_seconds(utc_now())}

        def patch_list(tasks: list[Task]) -> list[Task]:
            return [t.with_updates(optimistic) if t.id == task_id else t for t in tasks]

        def patch_one(task: Task) -> Task:
            return task.with_updates(optimistic)

        patches: list[ReversiblePatch] = []
        try:
            for key, recipe in ((LIST_QUERY, patch_list), (task_query(task_id), patch_one)):
                applied = self.cache.patch(key, recipe)
                if applied is not None:
                    patches.append(applied)
        except (TypeError, ValueError):
            # Values the cache cannot represent (e.g. unknown status) are left
            # to the server to reject.
            for applied in reversed(patches):
                applied.undo()
            return []
        return patches

    async def update_task(self, task_id: str, updates: dict[str, Any]) -> Task:
        """Partial update with an optimistic cache patch.

        The cached list and single-task entries show the new values before
        the request is sent. On failure they are restored and the error is
        re-raised; on success both tags are invalidated.
        """
        patches = self._apply_optimistic(task_id, updates)
        try:
            data = await self._request("PUT", f"/tasks/{task_id}", json=updates)
            task = Task.from_json(data)
        except Exception:
            for applied in reversed(patches):
                applied.undo()
            raise
        self.cache.invalidate([task_tag(task_id), LIST_TAG])
        return task

    async def delete_task(self, task_id: str) -> str:
        """Delete a task; returns the deleted id."""
        data = await self._request("DELETE", f"/tasks/{task_id}")
        self.cache.invalidate([task_tag(task_id), LIST_TAG])
        if isinstance(data, dict) and isinstance(data.get("id"), str):
            return data["id"]
        return task_id
