"""A shift-reduce parser for the grammar E -> 2E2 | 3E3 | 4."""

from __future__ import annotations

import sys
from dataclasses import dataclass

GRAMMAR_BANNER = "GRAMMAR is -\nE->2E2 \nE->3E3 \nE->4\n"
DEFAULT_INPUT = "32423"
SHIFT = "SHIFT"
REDUCE = "REDUCE TO E -> "
_NUL = "\0"


@dataclass(frozen=True)
class Step:
    """One parser action and the stack and input it left behind."""

    action: str
    stack: str
    remaining: str


@dataclass(frozen=True)
class ParseResult:
    text: str
    steps: tuple[Step, ...]
    accepted: bool

    def render(self) -> str:
        """Return the stack/input/action trace followed by the verdict."""
        parts = ["\nstack \t input \t action", f"\n$\t{self.text}$\t"]
        for step in self.steps:
            parts.append(step.action)
            parts.append(f"\n${step.stack}\t{step.remaining}$\t")
        parts.append("Accept\n" if self.accepted else "Reject\n")
        return "".join(parts)


class _Machine:
    """The parser state: a fixed row of stack cells scanned position by position.

    Reductions look at every cell up to the input length, including cells past
    the current top, so the stack is kept as cells rather than a plain list.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)
        self.remaining = list(text)
        self.cells = [_NUL] * (self.length + 2)
        self.top = 0
        self.steps: list[Step] = []

    def _record(self, action: str) -> None:
        stack = "".join(self.cells).partition(_NUL)[0]
        self.steps.append(Step(action, stack, "".join(self.remaining)))

    def shift(self, position: int) -> None:
        if self.top < 0:
            raise ValueError("parser stack underflow")
        self.cells[self.top] = self.remaining[position]
        self.cells[self.top + 1] = _NUL
        self.remaining[position] = " "
        self._record(SHIFT)

    def reduce_all(self) -> None:
        cells = self.cells
        for z in range(self.length):
            if cells[z] == "4":
                cells[z] = "E"
                cells[z + 1] = _NUL
                self._record(REDUCE + "4")
        for rule in ("2E2", "3E3"):
            for z in range(self.length - 2):
                if "".join(cells[z : z + 3]) == rule:
                    cells[z] = "E"
                    cells[z + 1] = cells[z + 2] = _NUL
                    self._record(REDUCE + rule)
                    self.top -= 2

    def run(self) -> ParseResult:
        for position in range(self.length):
            self.shift(position)
            self.reduce_all()
            self.top += 1
        self.reduce_all()
        accepted = self.cells[0] == "E" and self.cells[1] == _NUL
        return ParseResult(self.text, tuple(self.steps), accepted)


def parse(text: str) -> ParseResult:
    """Parse ``text`` and return the full trace and whether it was accepted."""
    return _Machine(text).run()


def main(argv: list[str] | None = None) -> int:
    """Parse the given string (or the built-in example) and print the trace."""
    if argv is None:
        argv = sys.argv[1:]
    text = argv[0] if argv else DEFAULT_INPUT
    try:
        result = parse(text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(GRAMMAR_BANNER + result.render())
    return 0