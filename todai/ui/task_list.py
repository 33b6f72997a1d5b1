"""Task list screen: loading, error and loaded states."""

from __future__ import annotations

import shutil
from enum import Enum

from todai.client.api import TasksApi
from todai.client.errors import get_error_message
from todai.client.types import Task
from todai.ui.confirm import ConfirmDialog
from todai.ui.notifications import Notifier
from todai.ui.task_item import TaskItem

SKELETON_COUNT = 6
CARD_GAP = 2
ADD_ACTION = "[+] Add task  (type: add)"


class ListState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


def columns_for_width(width: int) -> int:
    """One column on narrow terminals, two on medium, three on wide."""
    if width < 80:
        return 1
    if width < 120:
        return 2
    return 3


def _skeleton_card(width: int) -> list[str]:
    inner = width - 4
    border = "+" + "-" * (width - 2) + "+"
    bars = [int(inner * 0.7), inner, int(inner * 0.9), min(12, inner)]
    return [border, *(f"| {('#' * n).ljust(inner)} |" for n in bars), border]


def _grid(cards: list[list[str]], columns: int, card_width: int) -> list[str]:
    lines: list[str] = []
    gap = " " * CARD_GAP
    for start in range(0, len(cards), columns):
        row = cards[start : start + columns]
        height = max(len(c) for c in row)
        padded = [c + [" " * card_width] * (height - len(c)) for c in row]
        for i in range(height):
            lines.append(gap.join(card[i] for card in padded).rstrip())
        lines.append("")
    return lines


class TaskList:
    """Holds the loaded tasks and renders them as a card grid.

    Cards are numbered from 1 in display order; console commands address
    tasks by that number.
    """

    def __init__(self, api: TasksApi, notifier: Notifier, confirm: ConfirmDialog) -> None:
        self._api = api
        self._notifier = notifier
        self._confirm = confirm
        self.state = ListState.LOADING
        self.error_message: str | None = None
        self.items: list[TaskItem] = []

    async def load(self, *, refetch: bool = False) -> None:
        self.state = ListState.LOADING
        try:
            tasks = await self._api.list_tasks(refetch=refetch)
        except Exception as e:
            self.state = ListState.ERROR
            self.error_message = get_error_message(e, "Please try again.")
            return
        self._set_tasks(tasks)
        self.state = ListState.LOADED
        self.error_message = None

    async def retry(self) -> None:
        await self.load(refetch=True)

    def _set_tasks(self, tasks: list[Task]) -> None:
        existing = {item.task.id: item for item in self.items}
        items = []
        for task in tasks:
            item = existing.get(task.id)
            if item is None:
                item = TaskItem(task, self._api, self._notifier, self._confirm)
            else:
                item.sync(task)
            items.append(item)
        self.items = items

    def item_at(self, number: int) -> TaskItem | None:
        """Card by its 1-based display number."""
        if 1 <= number <= len(self.items):
            return self.items[number - 1]
        return None

    def render(self, width: int | None = None) -> str:
        if width is None:
            width = shutil.get_terminal_size().columns
        columns = columns_for_width(width)
        card_width = max((width - CARD_GAP * (columns - 1)) // columns, 24)

        if self.state is ListState.LOADING:
            cards = [_skeleton_card(card_width) for _ in range(SKELETON_COUNT)]
            return "\n".join(_grid(cards, columns, card_width)).rstrip()

        if self.state is ListState.ERROR:
            return "\n".join(
                [
                    "Failed to load tasks",
                    f"  {self.error_message}",
                    "  [Retry]  (type: retry)",
                ]
            )

        if not self.items:
            return "\n".join(
                [
                    "No tasks yet",
                    "  Create your first task to get started.",
                    "  [Create task]  (type: add)",
                ]
            )

        cards = []
        for number, item in enumerate(self.items, start=1):
            card = item.render(card_width)
            label = f" #{number} "
            card[0] = card[0][:2] + label + card[0][2 + len(label) :]
            cards.append(card)
        lines = _grid(cards, columns, card_width)
        lines.append(ADD_ACTION.rjust(width))
        return "\n".join(lines)
