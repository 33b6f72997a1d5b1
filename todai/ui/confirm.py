"""Blocking yes/no confirmation prompt."""

from collections.abc import Callable

_YES = frozenset({"y", "yes"})


class ConfirmDialog:
    """Asks a yes/no question on the terminal and blocks until answered.

    Anything other than y/yes (including EOF or Ctrl-C) counts as cancel.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        emit: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._emit = emit

    def ask(
        self,
        title: str,
        message: str,
        confirm_text: str = "Confirm",
        cancel_text: str = "Cancel",
    ) -> bool:
        self._emit(f"! {title}")
        self._emit(f"  {message}")
        try:
            answer = self._input(f"  {confirm_text}? [y/N] ({cancel_text} = Enter): ")
        except (EOFError, KeyboardInterrupt):
            self._emit("")
            return False
        return answer.strip().lower() in _YES
