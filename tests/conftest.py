from __future__ import annotations

import pytest

from src.payroll_department.payroll_department.payroll.registry import PayrollRegistry


class ScriptedConsole:
    """Feeds scripted answers to the shell and records everything it writes."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def registry() -> PayrollRegistry:
    return PayrollRegistry()


@pytest.fixture
def scripted_console():
    return ScriptedConsole
