"""One task card: rendering, inline status change and delete."""

from __future__ import annotations

import textwrap

from todai.client.api import TasksApi
from todai.client.errors import get_error_message
from todai.client.types import Task
from todai.domain.enums import TaskStatus
from todai.shared.utils.datetime import (
    format_local_datetime_from_unix_seconds,
    format_utc_date_from_unix_seconds,
)
from todai.ui.confirm import ConfirmDialog
from todai.ui.notifications import Notifier

_CHIP = {
    TaskStatus.TODO: "( {} )",
    TaskStatus.IN_PROGRESS: "[ {} ]",
    TaskStatus.DONE: "[x {} ]",
}


def status_chip(status: TaskStatus) -> str:
    return _CHIP[status].format(status.label)


class TaskItem:
    """Card for a single task.

    status is local state: it flips immediately on change_status() and
    reverts if the server rejects the update.
    """

    def __init__(
        self,
        task: Task,
        api: TasksApi,
        notifier: Notifier,
        confirm: ConfirmDialog,
    ) -> None:
        self.task = task
        self.status = task.status
        self._api = api
        self._notifier = notifier
        self._confirm = confirm

    def sync(self, task: Task) -> None:
        """Take a fresher copy of the task (e.g. after a refetch)."""
        self.task = task
        self.status = task.status

    def render(self, width: int = 40) -> list[str]:
        """Card lines, each exactly width characters wide."""
        inner = max(width - 4, 10)
        body: list[str] = textwrap.wrap(self.task.title, inner) or [""]
        description = self.task.description or "No description"
        body += textwrap.wrap(description, inner, max_lines=3, placeholder="...")
        body.append(status_chip(self.status))
        if self.task.priority is not None:
            body.append(f"Priority: {self.task.priority}")
        if self.task.due_date is not None:
            body.append(f"Due: {format_utc_date_from_unix_seconds(self.task.due_date)}")
        body.append(f"Created: {format_local_datetime_from_unix_seconds(self.task.created_at)}")
        body.append(f"Updated: {format_local_datetime_from_unix_seconds(self.task.updated_at)}")

        border = "+" + "-" * (width - 2) + "+"
        lines = [border]
        lines += [f"| {line[:inner].ljust(inner)} |" for line in body]
        lines.append(border)
        return lines

    async def change_status(self, new_status: TaskStatus) -> bool:
        previous = self.status
        self.status = new_status
        try:
            await self._api.update_task(self.task.id, {"status": new_status.value})
        except Exception as e:
            self.status = previous
            self._notifier.show_error(get_error_message(e, "Failed to update status"))
            return False
        return True

    async def delete(self) -> bool:
        """Ask for confirmation, then delete. False when cancelled or failed."""
        confirmed = self._confirm.ask(
            "Delete task", "This action cannot be undone.", confirm_text="Delete"
        )
        if not confirmed:
            return False
        try:
            await self._api.delete_task(self.task.id)
        except Exception as e:
            self._notifier.show_error(get_error_message(e, "Failed to delete task"))
            return False
        self._notifier.show_success("Task deleted")
        return True
