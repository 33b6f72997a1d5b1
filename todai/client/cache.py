"""Tagged client-side cache for task queries.

Entries are keyed by query (endpoint name + argument) and carry the tags
they depend on. Mutations invalidate tags; every entry holding one of
them is dropped and refetched on the next read.

Optimistic updates go through patch(), which swaps the entry for a
patched copy and returns a ReversiblePatch holding the pre-patch value.
undo() restores that value only if the entry still holds the patched
copy; a refetch that replaced it in the meantime is newer than both.
Reads, patches and undos take the same lock, so no reader sees a
half-applied change.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

Tag = tuple[str, str]
QueryKey = tuple[str, str | None]

TAG_TYPE = "Task"
LIST_TAG: Tag = (TAG_TYPE, "LIST")

LIST_QUERY: QueryKey = ("getTasks", None)


def task_tag(task_id: str) -> Tag:
    """Tag for a single task id."""
    return (TAG_TYPE, task_id)


def task_query(task_id: str) -> QueryKey:
    """Cache key of the single-task query."""
    return ("getTask", task_id)


@dataclass
class CacheEntry:
    data: Any
    tags: frozenset[Tag]


class ReversiblePatch:
    """Undo handle for one optimistic cache patch."""

    def __init__(self, cache: TaskCache, key: QueryKey, previous: Any, patched: Any) -> None:
        self._cache = cache
        self._key = key
        self._previous = previous
        self._patched = patched
        self._undone = False

    def undo(self) -> bool:
        """Restore the snapshot. Returns False if nothing was restored."""
        if self._undone:
            return False
        self._undone = True
        return self._cache._restore(self._key, self._previous, self._patched)


class TaskCache:
    """Query cache with tag invalidation. Mutated only by TasksApi."""

    def __init__(self) -> None:
        self._entries: dict[QueryKey, CacheEntry] = {}
        self._lock = threading.RLock()

    def get(self, key: QueryKey) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            return entry.data if entry is not None else None

    def __contains__(self, key: QueryKey) -> bool:
        with self._lock:
            return key in self._entries

    def put(self, key: QueryKey, data: Any, tags: Iterable[Tag]) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(data=data, tags=frozenset(tags))

    def invalidate(self, tags: Iterable[Tag]) -> list[QueryKey]:
        """Drop every entry that provides any of tags; return the dropped keys."""
        wanted = set(tags)
        with self._lock:
            dropped = [k for k, e in self._entries.items() if e.tags & wanted]
            for key in dropped:
                del self._entries[key]
        return dropped

    def patch(self, key: QueryKey, recipe: Callable[[Any], Any]) -> ReversiblePatch | None:
        """Replace the entry's data with recipe(data); None if the key is not cached.

        recipe must return a new value rather than mutate its argument, so
        the snapshot stays intact.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            previous = entry.data
            patched = recipe(previous)
            entry.data = patched
            return ReversiblePatch(self, key, previous, patched)

    def _restore(self, key: QueryKey, previous: Any, patched: Any) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry.data is not patched:
                return False
            entry.data = previous
            return True
