from __future__ import annotations
from typing import Any, Callable

LABEL_WIDTH = 16


class Report:
    """Plain-text report built up line by line during a run.

    With ``verbose`` set each line is echoed as soon as it is added, so a
    slow run shows its progress on the console.
    """

    def __init__(self, verbose: bool = False, echo: Callable[[str], Any] = print):
        self.verbose = verbose
        self._echo = echo
        self._lines: list[str] = []

    def add_line(self, text: str) -> None:
        if self.verbose:
            self._echo(text)
        self._lines.append(text)

    def add_field(self, name: str, value: Any) -> None:
        self.add_line(f"{name + ':':<{LABEL_WIDTH}}{value}")

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def render(self) -> str:
        return "\n".join(self._lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._lines)
