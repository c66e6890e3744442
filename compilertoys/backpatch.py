"""Jump lists and backpatching of a quadruple table."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable


@dataclass
class Quad:
    op: str
    arg1: str = ""
    arg2: str = ""
    result: str = ""


def makelist(i: int) -> list[int]:
    """Return a new jump list holding only quad index ``i``."""
    return [i]


def merge(l1: list[int], l2: list[int]) -> list[int]:
    """Return the concatenation of two jump lists."""
    return [*l1, *l2]


def backpatch(quads: list[Quad], targets: Iterable[int], target: int) -> None:
    """Fill in ``target`` as the jump destination of every quad in ``targets``."""
    for index in targets:
        quads[index].result = str(target)


def format_quad_table(quads: list[Quad]) -> str:
    """Return the quad table as tab-separated text with a header line."""
    lines = ["No\tOp\tArg1\tArg2\tResult"]
    lines.extend(
        f"{index}\t{q.op}\t{q.arg1}\t{q.arg2}\t{q.result}" for index, q in enumerate(quads)
    )
    return "\n".join(lines) + "\n"


def _example_quads() -> list[Quad]:
    quads = [
        Quad("if_false", "a<b"),
        Quad("=", "1", "", "x"),
        Quad("goto"),
        Quad("=", "0", "", "x"),
    ]
    false_list = makelist(0)
    next_list = makelist(2)
    backpatch(quads, false_list, 3)
    backpatch(quads, next_list, 4)
    return quads


def main(argv: list[str] | None = None) -> int:
    """Backpatch a small conditional assignment and print the result."""
    print("Quad Table after Backpatching:")
    sys.stdout.write(format_quad_table(_example_quads()))
    return 0