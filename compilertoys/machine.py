"""A tiny accumulator-machine code generator with a symbol table."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable

FIRST_ADDRESS = 100


@dataclass
class Symbol:
    name: str
    address: int
    value: int = 0


class UndefinedVariableError(LookupError):
    """Raised when an operand names a variable that was never defined."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class MachineCodeGenerator:
    """Emits LOAD/ADD/SUB/STORE instructions and tracks variable values."""

    def __init__(self) -> None:
        self.symbols: dict[str, Symbol] = {}
        self.instructions: list[str] = []
        self._next_address = FIRST_ADDRESS

    def _lookup(self, name: str) -> Symbol:
        try:
            return self.symbols[name]
        except KeyError:
            raise UndefinedVariableError(name) from None

    def add_variable(self, name: str) -> None:
        """Give ``name`` the next free address unless it already has one."""
        if name not in self.symbols:
            self.symbols[name] = Symbol(name, self._next_address)
            self._next_address += 1

    def generate_assignment(self, var: str, value: int) -> None:
        """Emit code storing the constant ``value`` into ``var``."""
        self.add_variable(var)
        symbol = self._lookup(var)
        self.instructions += [f"LOAD #{value}", f"STORE {symbol.address}"]
        symbol.value = value

    def _generate_operation(
        self,
        result: str,
        op1: str,
        op2: str,
        opcode: str,
        combine: Callable[[int, int], int],
    ) -> None:
        self.add_variable(result)
        target = self._lookup(result)
        left = self._lookup(op1)
        right = self._lookup(op2)
        self.instructions += [
            f"LOAD {left.address}",
            f"{opcode} {right.address}",
            f"STORE {target.address}",
        ]
        target.value = combine(left.value, right.value)

    def generate_addition(self, result: str, op1: str, op2: str) -> None:
        """Emit code for ``result = op1 + op2``."""
        self._generate_operation(result, op1, op2, "ADD", operator.add)

    def generate_subtraction(self, result: str, op1: str, op2: str) -> None:
        """Emit code for ``result = op1 - op2``."""
        self._generate_operation(result, op1, op2, "SUB", operator.sub)

    def format_code(self) -> str:
        """Return the numbered instruction listing."""
        lines = ["", "Generated Machine Code:", "----------------------"]
        lines.extend(f"{index}: {text}" for index, text in enumerate(self.instructions))
        return "\n".join(lines) + "\n"

    def format_symbol_table(self) -> str:
        """Return the symbol table, ordered by variable name."""
        lines = [
            "",
            "Symbol Table:",
            "-------------",
            "Name\t| Address\t| Value",
            "---------------------------------",
        ]
        lines.extend(
            f"{sym.name}\t| {sym.address}\t\t| {sym.value}"
            for sym in sorted(self.symbols.values(), key=lambda s: s.name)
        )
        return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Generate code for a short fixed program and print it."""
    generator = MachineCodeGenerator()
    generator.generate_assignment("x", 5)
    generator.generate_assignment("y", 10)
    generator.generate_addition("z", "x", "y")
    generator.generate_subtraction("result", "z", "x")
    print(generator.format_code(), end="")
    print(generator.format_symbol_table(), end="")
    return 0