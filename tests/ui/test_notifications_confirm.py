"""Notifier auto-hide and ConfirmDialog answers."""

import pytest

from todai.ui.confirm import ConfirmDialog
from todai.ui.notifications import AUTO_HIDE_SECONDS, Notifier, Severity


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_notification_auto_hides_after_four_seconds() -> None:
    clock = FakeClock()
    printed: list[str] = []
    notifier = Notifier(emit=printed.append, clock=clock)

    notifier.show_success("Task created")
    assert printed == ["[ok] Task created"]
    assert notifier.active().severity is Severity.SUCCESS

    clock.now = AUTO_HIDE_SECONDS - 0.1
    assert notifier.active() is not None
    clock.now = AUTO_HIDE_SECONDS
    assert notifier.active() is None


def test_new_notification_replaces_current() -> None:
    notifier = Notifier(emit=lambda _: None, clock=FakeClock())
    notifier.show_info("one")
    notifier.show_error("two")
    assert notifier.active().message == "two"
    assert notifier.active().render() == "[error] two"
    notifier.dismiss()
    assert notifier.active() is None


@pytest.mark.parametrize(("answer", "expected"), [("y", True), ("YES", True), ("", False), ("n", False), ("maybe", False)])
def test_confirm_answers(answer: str, expected: bool) -> None:
    dialog = ConfirmDialog(input_fn=lambda prompt: answer, emit=lambda _: None)
    assert dialog.ask("Delete task", "This action cannot be undone.", confirm_text="Delete") is expected


def test_confirm_eof_cancels() -> None:
    def raise_eof(prompt: str) -> str:
        raise EOFError

    printed: list[str] = []
    dialog = ConfirmDialog(input_fn=raise_eof, emit=printed.append)
    assert dialog.ask("Delete task", "This action cannot be undone.") is False
    assert printed[0] == "! Delete task"
