"""Transient notifications (success / error / info / warning).

A notification is printed when shown and stays in active() until its
auto-hide deadline passes, so the next screen redraw can repeat it.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

AUTO_HIDE_SECONDS = 4.0


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


_PREFIX = {
    Severity.SUCCESS: "[ok]",
    Severity.ERROR: "[error]",
    Severity.INFO: "[info]",
    Severity.WARNING: "[warn]",
}


@dataclass(frozen=True)
class Notification:
    severity: Severity
    message: str
    expires_at: float

    def render(self) -> str:
        return f"{_PREFIX[self.severity]} {self.message}"


class Notifier:
    """Shows one notification at a time; a new one replaces the current."""

    def __init__(
        self,
        emit: Callable[[str], None] = print,
        clock: Callable[[], float] = time.monotonic,
        auto_hide: float = AUTO_HIDE_SECONDS,
    ) -> None:
        self._emit = emit
        self._clock = clock
        self._auto_hide = auto_hide
        self._current: Notification | None = None

    def show(self, severity: Severity, message: str) -> Notification:
        note = Notification(severity, message, self._clock() + self._auto_hide)
        self._current = note
        self._emit(note.render())
        return note

    def show_success(self, message: str) -> Notification:
        return self.show(Severity.SUCCESS, message)

    def show_error(self, message: str) -> Notification:
        return self.show(Severity.ERROR, message)

    def show_info(self, message: str) -> Notification:
        return self.show(Severity.INFO, message)

    def show_warning(self, message: str) -> Notification:
        return self.show(Severity.WARNING, message)

    def dismiss(self) -> None:
        self._current = None

    def active(self) -> Notification | None:
        """Current notification, or None once it has auto-hidden."""
        if self._current is not None and self._clock() >= self._current.expires_at:
            self._current = None
        return self._current
