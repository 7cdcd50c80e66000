from __future__ import annotations

import pytest

from foxhare.model.parameters import ParameterSet


class ScriptedInput:
    """Stands in for ``input()``: returns queued lines, then raises EOFError."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def default_params() -> ParameterSet:
    return ParameterSet()


@pytest.fixture
def constants_path(tmp_path):
    return str(tmp_path / "constants.txt")
