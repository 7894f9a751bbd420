"""Scripted console used by the driver tests."""

from __future__ import annotations

from typing import Iterable, List

from clubroster.console import Console


class ScriptedConsole(Console):
    """Console fed from a list of answers; raises EOFError when they run out."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []
        super().__init__(input_fn=self._next_answer, output_fn=self.lines.append)

    def _next_answer(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)
