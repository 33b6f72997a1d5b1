"""`todai` entry point: interactive console client for the task API.

Input is read on a worker thread so the event loop stays free for
network calls; the delete confirmation is a plain blocking prompt.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import shlex
from collections.abc import Callable

from todai.client.api import TasksApi
from todai.core.config import get_settings
from todai.core.logging import setup_logging
from todai.domain.enums import TaskStatus
from todai.ui.confirm import ConfirmDialog
from todai.ui.notifications import Notifier
from todai.ui.task_form import TaskForm
from todai.ui.task_list import TaskList

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  list                    show tasks (refetches from the server)
  add                     create a task
  edit <n>                edit task #n
  status <n> <status>     set status of task #n (todo, in-progress, done)
  delete <n>              delete task #n (asks for confirmation)
  retry                   reload after a failed load
  help                    show this help
  quit                    exit"""


class ConsoleApp:
    """Read-eval-render loop over TaskList / TaskForm / TaskItem."""

    def __init__(
        self,
        api: TasksApi,
        *,
        input_fn: Callable[[str], str] = input,
        emit: Callable[[str], None] = print,
        width: int | None = None,
    ) -> None:
        self.api = api
        self._input = input_fn
        self._emit = emit
        self._width = width
        self.notifier = Notifier(emit=emit)
        self.confirm = ConfirmDialog(input_fn=input_fn, emit=emit)
        self.task_list = TaskList(api, self.notifier, self.confirm)

    def render(self) -> None:
        self._emit(self.task_list.render(self._width))
        note = self.notifier.active()
        if note is not None:
            self._emit(note.render())

    def _item(self, arg: str):
        try:
            number = int(arg)
        except ValueError:
            self.notifier.show_warning(f"Not a task number: {arg}")
            return None
        item = self.task_list.item_at(number)
        if item is None:
            self.notifier.show_warning(f"No task #{number}")
        return item

    async def _run_form(self, form: TaskForm) -> None:
        """Prompt until the form submits or fails on the server; EOF cancels."""
        try:
            await asyncio.to_thread(form.prompt, self._input, self._emit)
            while await form.submit() is None and form.errors:
                for line in form.render_errors():
                    self._emit(line)
                await asyncio.to_thread(form.prompt, self._input, self._emit)
        except (EOFError, KeyboardInterrupt):
            self._emit("")
            self.notifier.show_info("Cancelled")

    async def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the loop should stop."""
        try:
            parts = shlex.split(line)
        except ValueError:
            parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "exit", "q"):
            return False
        if command == "help":
            self._emit(HELP_TEXT)
            return True
        if command == "list":
            await self.task_list.load(refetch=True)
        elif command == "retry":
            await self.task_list.retry()
        elif command == "add":
            await self._run_form(TaskForm(self.api, self.notifier))
            await self.task_list.load()
        elif command == "edit" and len(args) == 1:
            item = self._item(args[0])
            if item is not None:
                await self._run_form(TaskForm(self.api, self.notifier, task=item.task))
                await self.task_list.load()
        elif command == "status" and len(args) == 2:
            item = self._item(args[0])
            if item is not None:
                if args[1] not in TaskStatus.values():
                    self.notifier.show_warning(
                        f"Status must be one of: {', '.join(TaskStatus.values())}"
                    )
                else:
                    await item.change_status(TaskStatus(args[1]))
                    await self.task_list.load()
        elif command == "delete" and len(args) == 1:
            item = self._item(args[0])
            if item is not None and await item.delete():
                await self.task_list.load()
        else:
            self.notifier.show_warning(f"Unknown command: {line.strip()} (try: help)")
            return True

        self.render()
        return True

    async def run(self) -> None:
        self._emit("todAI - Your Intelligent Task Manager")
        self._emit(f"Server: {self.api.base_url}   (type 'help' for commands)")
        await self.task_list.load()
        self.render()
        while True:
            try:
                line = await asyncio.to_thread(self._input, "todai> ")
            except (EOFError, KeyboardInterrupt):
                self._emit("")
                break
            if not await self.handle(line):
                break
        logger.debug("Console client finished")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="todai", description="Console client for the todAI task API")
    parser.add_argument("--base-url", default=settings.api_base_url, help="API base URL")
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.client_timeout_seconds,
        help="Request timeout in seconds",
    )
    return parser.parse_args(argv)


async def _amain(args: argparse.Namespace) -> None:
    async with TasksApi(args.base_url, timeout=args.timeout) as api:
        await ConsoleApp(api).run()


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    setup_logging(logging.WARNING)
    try:
        asyncio.run(_amain(args))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
