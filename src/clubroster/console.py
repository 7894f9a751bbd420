"""Prompt helpers and the numbered-menu loop shared by both programs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")

RULE = "-" * 50


class Console:
    """Line-based terminal I/O. Input and output functions are injectable."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def say(self, text: str = "") -> None:
        self._output(text)

    def rule(self) -> None:
        self._output(RULE)

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def ask_nonempty(self, prompt: str) -> str:
        """Read a line, re-prompting while it is blank. Surrounding spaces are stripped."""

        while True:
            value = self._input(prompt).strip()
            if value:
                return value
            self.say("This field cannot be empty.")

    def ask_int(self, prompt: str, *, allow_cancel: bool = False) -> Optional[int]:
        """Read an integer, re-prompting until one is entered.

        With ``allow_cancel`` an empty line returns ``None``.
        """

        while True:
            raw = self._input(prompt).strip()
            if allow_cancel and not raw:
                return None
            try:
                return int(raw)
            except ValueError:
                self.say("Enter a whole number.")

    def ask_float(self, prompt: str, *, minimum_exclusive: Optional[float] = None) -> float:
        while True:
            raw = self._input(prompt).strip().replace(",", ".")
            try:
                value = float(raw)
            except ValueError:
                self.say("Enter a number.")
                continue
            if minimum_exclusive is not None and value <= minimum_exclusive:
                self.say(f"Enter a number greater than {minimum_exclusive:g}.")
                continue
            return value

    def choose(self, prompt: str, options: Sequence[T], *, label: Callable[[T], str] = str) -> T:
        for index, option in enumerate(options, start=1):
            self.say(f"{index}. {label(option)}")
        while True:
            choice = self.ask_int(prompt)
            if choice is not None and 1 <= choice <= len(options):
                return options[choice - 1]
            self.say("Invalid option. Try again.")


@dataclass(frozen=True)
class MenuOption:
    label: str
    action: Callable[[], None]


def run_menu(
    console: Console,
    title: str,
    options: Sequence[MenuOption],
    *,
    exit_label: str = "Exit",
) -> None:
    """Show the menu, dispatch the chosen action, and loop until exit.

    The exit entry is numbered after the last option. End of input counts as
    choosing exit. ``LookupError`` and ``ValueError`` raised by an action are
    reported and the menu is shown again.
    """

    exit_choice = len(options) + 1
    while True:
        console.say(title)
        for index, option in enumerate(options, start=1):
            console.say(f"{index}. {option.label}")
        console.say(f"{exit_choice}. {exit_label}")
        try:
            choice = console.ask_int("Choice: ")
        except EOFError:
            logger.info("End of input; leaving menu %r", title)
            return
        console.rule()
        if choice == exit_choice:
            return
        if choice is None or not 1 <= choice <= len(options):
            console.say("Invalid option.")
            continue
        try:
            options[choice - 1].action()
        except (LookupError, ValueError) as exc:
            console.say(str(exc))
        except EOFError:
            logger.info("End of input during %r; leaving menu %r", options[choice - 1].label, title)
            return
        console.rule()
