# compilertoys

Small, self-contained tools that show classic compiler-construction
techniques at work. Each tool is a module you can import and a command you can
run. There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `compilertoys-notation [EXPR]` | Prints the postfix and prefix forms of an infix expression. |
| `compilertoys-intermediate [EXPR]` | Prints the postfix form of an infix expression, then its quadruples, triples and indirect triples. |
| `compilertoys-backpatch` | Builds a fixed four-quad table with two jumps, backpatches them and prints the table. |
| `compilertoys-machine` | Generates LOAD/ADD/SUB/STORE code for `x = 5; y = 10; z = x + y; result = z - x` and prints the symbol table. |
| `compilertoys-shift-reduce [INPUT]` | Traces a shift-reduce parse with the grammar `E->2E2`, `E->3E3`, `E->4` (default input `32423`) and prints `Accept` or `Reject`. |
| `compilertoys-leading [PRODUCTION ...]` | Prints the LEADING and TRAILING sets of each nonterminal. |
| `compilertoys-lr0 [PRODUCTION ...]` | Prints the augmented grammar and its canonical collection of LR(0) item sets. |

When no expression is given, `compilertoys-notation` and
`compilertoys-intermediate` prompt for one and read the first word of the
next line. When no productions are given, `compilertoys-leading` reads a count
followed by that many productions from standard input, and `compilertoys-lr0`
reads productions from standard input up to a line holding `0`.

On bad input (an unbalanced `)`, an operator without operands, a malformed
production) the commands print `error: ...` to standard error and exit with
status 1.

Example:

```
$ compilertoys-notation "(A+B)*C"
Postfix Notation: AB+C*
Prefix Notation: *+ABC
```

```
$ compilertoys-leading "E->E+T" "E->T" "T->T*F" "T->F" "F->(E)" "F->i"
```

## Grammars

Productions are written as `A->rhs` with single-character symbols. The
nonterminals are the symbols that appear on a left-hand side; every other
symbol is a terminal. `compilertoys.lr0` also accepts alternatives
(`E->E+T|T`) and treats a right side of `ε` as empty; it adds a new start
production using the first letter from `A` to `R` that is not already a
nonterminal.

## Library use

```python
from compilertoys.notation import infix_to_postfix, infix_to_prefix, precedence
from compilertoys.intermediate import generate_intermediate_code
from compilertoys.backpatch import Quad, backpatch, makelist, merge, format_quad_table
from compilertoys.machine import MachineCodeGenerator, UndefinedVariableError
from compilertoys.shift_reduce import parse
from compilertoys.precedence_sets import OperatorGrammar, format_sets
from compilertoys.lr0 import parse_productions, augment, canonical_collection, format_items

infix_to_postfix("(A+B)*C")      # 'AB+C*'
infix_to_prefix("(A+B)*C")       # '*+ABC'

code = generate_intermediate_code("ab+c*")
code.quadruples[0]               # Quadruple(op='+', arg1='a', arg2='b', result='T1')
print(code.render())

quads = [Quad("if_false", "a<b"), Quad("goto")]
backpatch(quads, merge(makelist(0), makelist(1)), 5)
print(format_quad_table(quads))

gen = MachineCodeGenerator()
gen.generate_assignment("x", 5)
gen.generate_assignment("y", 10)
gen.generate_addition("z", "x", "y")
gen.symbols["z"].value           # 15
print(gen.format_code())
print(gen.format_symbol_table())

result = parse("32423")
result.accepted                  # True
print(result.render())

grammar = OperatorGrammar.from_productions(["E->E+T", "E->T", "T->i"])
print(format_sets("Leading", grammar.leading()))
print(format_sets("Trailing", grammar.trailing()))

productions = augment(parse_productions(["E->E+T|T", "T->i", "0"]))
print(format_items(canonical_collection(productions)))
```

`MachineCodeGenerator` assigns addresses from 100 upwards and raises
`UndefinedVariableError` (a `LookupError`) when an operand names a variable
that was never defined.

## What this package does not do

These are teaching tools, not a compiler. Operands and grammar symbols are
single characters; there is no tokenizer for multi-character names or
numbers. The shift-reduce parser knows only its one built-in grammar, the LR(0)
module builds item sets but no parsing table, and the backpatching and
machine-code commands run fixed examples rather than reading a program.