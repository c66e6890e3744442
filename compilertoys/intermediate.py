"""Quadruple, triple and indirect-triple code from postfix expressions."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from compilertoys.notation import PROMPT, infix_to_postfix


@dataclass(frozen=True)
class Quadruple:
    op: str
    arg1: str
    arg2: str
    result: str


@dataclass(frozen=True)
class Triple:
    op: str
    arg1: str
    arg2: str


@dataclass(frozen=True)
class IndirectTriple:
    index: int
    triple: Triple


@dataclass
class IntermediateCode:
    """The three intermediate representations of one expression."""

    quadruples: list[Quadruple] = field(default_factory=list)
    triples: list[Triple] = field(default_factory=list)
    indirect_triples: list[IndirectTriple] = field(default_factory=list)

    def render(self) -> str:
        """Return the three tables as printable text."""
        lines = ["", "Quadruple Representation:", "Op | Arg1 | Arg2 | Result"]
        lines.extend(
            f"{q.op}  |  {q.arg1}   |  {q.arg2}   |  {q.result}" for q in self.quadruples
        )
        lines += ["", "Triple Representation:", "Index | Op | Arg1 | Arg2"]
        lines.extend(
            f"{index}     | {t.op}  | {t.arg1}   | {t.arg2}"
            for index, t in enumerate(self.triples)
        )
        lines += [
            "",
            "Indirect Triple Representation:",
            "Index | Triple Index | Op | Arg1 | Arg2",
        ]
        lines.extend(
            f"{it.index}     | {it.index}            | {it.triple.op}  | "
            f"{it.triple.arg1}   | {it.triple.arg2}"
            for it in self.indirect_triples
        )
        return "\n".join(lines) + "\n"


def generate_intermediate_code(postfix: str) -> IntermediateCode:
    """Build intermediate code for a postfix expression of single-character operands."""
    operands: list[str] = []
    code = IntermediateCode()
    for ch in postfix:
        if ch.isascii() and ch.isalnum():
            operands.append(ch)
            continue
        if len(operands) < 2:
            raise ValueError(f"operator {ch!r} lacks operands")
        arg2 = operands.pop()
        arg1 = operands.pop()
        temp = f"T{len(code.quadruples) + 1}"
        triple = Triple(ch, arg1, arg2)
        code.quadruples.append(Quadruple(ch, arg1, arg2, temp))
        code.triples.append(triple)
        code.indirect_triples.append(IndirectTriple(len(code.triples) - 1, triple))
        operands.append(temp)
    return code


def main(argv: list[str] | None = None) -> int:
    """Read an infix expression and print its intermediate code."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        infix = argv[0]
    else:
        sys.stdout.write(PROMPT)
        sys.stdout.flush()
        tokens = sys.stdin.readline().split()
        infix = tokens[0] if tokens else ""
    try:
        postfix = infix_to_postfix(infix)
        print(f"Postfix Notation: {postfix}")
        code = generate_intermediate_code(postfix)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(code.render())
    return 0