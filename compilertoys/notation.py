"""Conversion of infix expressions to postfix and prefix notation."""

from __future__ import annotations

import sys

PROMPT = "Enter an infix expression: "

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


def precedence(op: str) -> int:
    """Return the binding strength of an operator; anything else binds at 0."""
    return _PRECEDENCE.get(op, 0)


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    stack: list[str] = []
    output: list[str] = []
    for ch in infix:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix by converting its mirror image."""
    mirrored = infix[::-1].translate(str.maketrans("()", ")("))
    return infix_to_postfix(mirrored)[::-1]


def _read_expression(argv: list[str]) -> str:
    if argv:
        return argv[0]
    sys.stdout.write(PROMPT)
    sys.stdout.flush()
    tokens = sys.stdin.readline().split()
    return tokens[0] if tokens else ""


def main(argv: list[str] | None = None) -> int:
    """Read an infix expression and print its postfix and prefix forms."""
    if argv is None:
        argv = sys.argv[1:]
    infix = _read_expression(argv)
    try:
        postfix = infix_to_postfix(infix)
        prefix = infix_to_prefix(infix)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Postfix Notation: {postfix}")
    print(f"Prefix Notation: {prefix}")
    return 0