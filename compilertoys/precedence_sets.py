"""LEADING and TRAILING sets of an operator grammar."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable


@dataclass(frozen=True)
class OperatorGrammar:
    """A grammar of single-character symbols written as ``A->rhs`` productions.

    Nonterminals are the left-hand sides; every other symbol on a right-hand
    side is a terminal. Both are kept in order of first appearance.
    """

    productions: tuple[tuple[str, str], ...]
    nonterminals: tuple[str, ...]
    terminals: tuple[str, ...]

    @classmethod
    def from_productions(cls, productions: Iterable[str]) -> OperatorGrammar:
        """Build a grammar from productions such as ``"E->E+T"``."""
        rules: list[tuple[str, str]] = []
        for text in productions:
            if len(text) < 3 or text[1:3] != "->":
                raise ValueError(f"malformed production: {text!r}")
            rules.append((text[0], text[3:]))
        nonterminals = tuple(dict.fromkeys(lhs for lhs, _ in rules))
        terminals = tuple(
            dict.fromkeys(
                symbol for _, rhs in rules for symbol in rhs if symbol not in nonterminals
            )
        )
        return cls(tuple(rules), nonterminals, terminals)

    def _first_terminal(self, symbols: Iterable[str]) -> str | None:
        return next((s for s in symbols if s not in self.nonterminals), None)

    def leading(self) -> dict[str, tuple[str, ...]]:
        """Return the LEADING set of every nonterminal, terminals in grammar order.

        Each production contributes the first terminal of its right side; the
        sets then flow from B to A along every production ``A->B...``.
        """
        return self._sets(self._first_terminal)

    def trailing(self) -> dict[str, tuple[str, ...]]:
        """Return the TRAILING set of every nonterminal, terminals in grammar order.

        Each production contributes the last terminal of its right side; the
        sets then flow from B to A along every production ``A->B...``, the same
        propagation that LEADING uses.
        """
        return self._sets(lambda rhs: self._first_terminal(reversed(rhs)))

    def _sets(
        self, seed: Callable[[str], str | None]
    ) -> dict[str, tuple[str, ...]]:
        found: dict[str, set[str]] = {nt: set() for nt in self.nonterminals}
        pending: list[tuple[str, str]] = []

        def install(nonterminal: str, terminal: str) -> None:
            if terminal not in found[nonterminal]:
                found[nonterminal].add(terminal)
                pending.append((nonterminal, terminal))

        for lhs, rhs in self.productions:
            terminal = seed(rhs)
            if terminal is not None:
                install(lhs, terminal)

        while pending:
            nonterminal, terminal = pending.pop()
            for lhs, rhs in self.productions:
                if rhs[:1] == nonterminal:
                    install(lhs, terminal)

        return {
            nt: tuple(t for t in self.terminals if t in found[nt])
            for nt in self.nonterminals
        }


def format_sets(title: str, sets: dict[str, Iterable[str]]) -> str:
    """Return one ``Title[A]\\t{a,b,}`` line per nonterminal."""
    return "".join(
        f"{title}[{nonterminal}]\t{{{''.join(f'{t},' for t in terminals)}}}\n"
        for nonterminal, terminals in sets.items()
    )


def _read_productions() -> list[str]:
    sys.stdout.write("Enter the no of productions:")
    sys.stdout.flush()
    tokens = sys.stdin.read().split()
    if not tokens:
        raise ValueError("missing number of productions")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError(f"not a number: {tokens[0]!r}") from None
    print("Enter the productions one by one")
    productions = tokens[1 : 1 + max(count, 0)]
    if len(productions) < count:
        raise ValueError(f"expected {count} productions, got {len(productions)}")
    return productions


def main(argv: list[str] | None = None) -> int:
    """Print the LEADING and TRAILING sets of the given productions."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        productions = list(argv) if argv else _read_productions()
        grammar = OperatorGrammar.from_productions(productions)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(format_sets("Leading", grammar.leading()))
    sys.stdout.write(format_sets("Trailing", grammar.trailing()))
    return 0