"""Small compiler-construction tools: notation conversion, intermediate code, backpatching, machine code, shift-reduce parsing, LEADING/TRAILING and LR(0) sets."""

__version__ = "0.1.0"