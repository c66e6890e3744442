import io

import pytest

from compilertoys.precedence_sets import OperatorGrammar, format_sets, main

EXPRESSION = ["E->E+T", "E->T", "T->T*F", "T->F", "F->(E)", "F->i"]
SAMPLE = ["E->TX", "X->+TX", "X->ε", "F->i"]


@pytest.fixture
def expression():
    return OperatorGrammar.from_productions(EXPRESSION)


def test_symbols_split_by_left_hand_sides():
    grammar = OperatorGrammar.from_productions(SAMPLE)
    assert grammar.nonterminals == ("E", "X", "F")
    lhs_symbols = set(grammar.nonterminals)
    rhs_symbols = {c for p in SAMPLE for c in p[3:]}
    assert set(grammar.terminals) == rhs_symbols - lhs_symbols
    assert grammar.terminals[0] == "T"


def test_leading_of_expression_grammar(expression):
    assert expression.leading() == {
        "E": ("+", "*", "(", "i"),
        "T": ("*", "(", "i"),
        "F": ("(", "i"),
    }


def test_trailing_of_expression_grammar(expression):
    assert expression.trailing() == {
        "E": ("+", "*", ")", "i"),
        "T": ("*", ")", "i"),
        "F": (")", "i"),
    }


def test_leading_flows_along_leftmost_nonterminal(expression):
    leading = expression.leading()
    for lhs, rhs in expression.productions:
        if rhs[:1] in expression.nonterminals:
            assert set(leading[rhs[0]]) <= set(leading[lhs])


def test_each_production_seeds_its_first_and_last_terminal():
    grammar = OperatorGrammar.from_productions(SAMPLE)
    leading = grammar.leading()
    trailing = grammar.trailing()
    for lhs, rhs in grammar.productions:
        terminals = [c for c in rhs if c not in grammar.nonterminals]
        if terminals:
            assert terminals[0] in leading[lhs]
            assert terminals[-1] in trailing[lhs]


def test_sets_follow_terminal_order(expression):
    for sets in (expression.leading(), expression.trailing()):
        for terminals in sets.values():
            positions = [expression.terminals.index(t) for t in terminals]
            assert positions == sorted(positions)


def test_malformed_production_is_rejected():
    with pytest.raises(ValueError):
        OperatorGrammar.from_productions(["E=T"])


def test_format_sets_line_layout():
    text = format_sets("Leading", {"E": ("+", "i"), "X": ()})
    assert text.splitlines() == ["Leading[E]\t{+,i,}", "Leading[X]\t{}"]


def test_main_with_arguments(capsys, expression):
    assert main(EXPRESSION) == 0
    out = capsys.readouterr().out
    assert out == format_sets("Leading", expression.leading()) + format_sets(
        "Trailing", expression.trailing()
    )


def test_main_reads_count_and_productions(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nS->a\nS->Sb\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    grammar = OperatorGrammar.from_productions(["S->a", "S->Sb"])
    assert format_sets("Leading", grammar.leading()) in out
    assert out.endswith(format_sets("Trailing", grammar.trailing()))


def test_main_rejects_bad_count(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("many S->a\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err