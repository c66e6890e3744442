"""Canonical collection of LR(0) item sets."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Iterable

VARIABLE_LETTERS = "ABCDEFGHIJKLMNOPQR"
EPSILON = "ε"
END_MARKER = "0"
PROMPT = "ENTER THE PRODUCTIONS OF THE GRAMMAR(0 TO END) :"


@dataclass(frozen=True)
class Production:
    lhs: str
    rhs: str

    def __str__(self) -> str:
        return f"{self.lhs}->{self.rhs}"


@dataclass(frozen=True)
class Item:
    """A production with a dot before position ``dot`` of its right side."""

    lhs: str
    rhs: str
    dot: int = 0

    def __str__(self) -> str:
        return f"{self.lhs}->{self.rhs[: self.dot]}.{self.rhs[self.dot :]}"


def _start_item(production: Production) -> Item:
    rhs = "" if production.rhs == EPSILON else production.rhs
    return Item(production.lhs, rhs)


def _next_symbol(item: Item) -> str | None:
    return item.rhs[item.dot] if item.dot < len(item.rhs) else None


def _advance(item: Item) -> Item:
    return replace(item, dot=item.dot + 1)


def parse_productions(lines: Iterable[str]) -> list[Production]:
    """Read ``A->x|y`` productions up to a ``0`` line, one per alternative."""
    productions: list[Production] = []
    for line in lines:
        text = line.strip()
        if text == END_MARKER:
            break
        if not text:
            continue
        if len(text) < 3 or text[1:3] != "->":
            raise ValueError(f"malformed production: {text!r}")
        productions.extend(Production(text[0], alt) for alt in text[3:].split("|"))
    return productions


def augment(productions: list[Production]) -> list[Production]:
    """Prepend ``S'->S`` using the first unused letter as the new start symbol."""
    if not productions:
        raise ValueError("grammar has no productions")
    used = {p.lhs for p in productions}
    start = next((c for c in VARIABLE_LETTERS if c not in used), None)
    if start is None:
        raise ValueError("no free letter for the augmented start symbol")
    return [Production(start, productions[0].lhs), *productions]


def _goto(
    state: tuple[Item, ...],
    symbol: str,
    variables: set[str],
    initial: tuple[Item, ...],
) -> tuple[Item, ...]:
    items = [_advance(item) for item in state if _next_symbol(item) == symbol]
    # The list grows while it is walked, which closes it under the variables.
    for item in items:
        following = _next_symbol(item)
        if following in variables:
            items.extend(
                candidate
                for candidate in initial
                if candidate.lhs == following and candidate not in items
            )
    return tuple(items)


def canonical_collection(productions: list[Production]) -> list[tuple[Item, ...]]:
    """Return the item sets of an augmented grammar, state 0 first.

    State 0 holds every production with the dot at the front. Two states are
    the same only when they hold the same items in the same order.
    """
    if not productions:
        raise ValueError("grammar has no productions")
    variables = {p.lhs for p in productions}
    initial = tuple(_start_item(p) for p in productions)
    states = [initial]
    for state in states:
        symbols = dict.fromkeys(
            symbol for item in state if (symbol := _next_symbol(item)) is not None
        )
        for symbol in symbols:
            target = _goto(state, symbol, variables, initial)
            if target not in states:
                states.append(target)
    return states


def format_items(states: list[tuple[Item, ...]]) -> str:
    """Return the numbered listing of item sets."""
    parts = ["\n THE SET OF ITEMS ARE \n\n"]
    for index, state in enumerate(states):
        parts.append(f"\n I{index}\n\n")
        parts.extend(f"{item}\n" for item in state)
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Read productions, print the augmented grammar and its LR(0) item sets."""
    if argv is None:
        argv = sys.argv[1:]
    print(PROMPT)
    tokens = list(argv) if argv else sys.stdin.read().split()
    try:
        grammar = augment(parse_productions(tokens))
        states = canonical_collection(grammar)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("\n\n augumented grammar \n")
    sys.stdout.write("".join(f"\n{p} " for p in grammar))
    sys.stdout.write(format_items(states))
    return 0