import io

import pytest

from compilertoys.notation import (
    infix_to_postfix,
    infix_to_prefix,
    main,
    precedence,
)


def _operands(text):
    return "".join(ch for ch in text if ch.isalnum())


@pytest.mark.parametrize(
    "op, expected", [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("a", 0), ("(", 0)]
)
def test_precedence(op, expected):
    assert precedence(op) == expected


def test_sample_postfix():
    assert infix_to_postfix("(A+B)*C") == "AB+C*"


def test_sample_prefix():
    assert infix_to_prefix("(A+B)*C") == "*+ABC"


@pytest.mark.parametrize("expr", ["a+b*c", "(a+b)*(c-d)", "x/y-z", "a", "p*(q+r)/s"])
def test_operand_order_is_preserved(expr):
    assert _operands(infix_to_postfix(expr)) == _operands(expr)
    assert _operands(infix_to_prefix(expr)) == _operands(expr)


@pytest.mark.parametrize("expr", ["a+b*c", "x/y-z", "a-b-c"])
def test_parenthesis_free_length_kept(expr):
    assert len(infix_to_postfix(expr)) == len(expr)
    assert len(infix_to_prefix(expr)) == len(expr)


@pytest.mark.parametrize("expr", ["a+b*c", "(a+b)*c", "a*b+c"])
def test_postfix_ends_and_prefix_starts_with_operator(expr):
    postfix = infix_to_postfix(expr)
    prefix = infix_to_prefix(expr)
    assert not postfix[-1].isalnum()
    assert not prefix[0].isalnum()


def test_operands_only_unchanged():
    assert infix_to_postfix("abc") == "abc"
    assert infix_to_prefix("abc") == "abc"


def test_parentheses_removed():
    result = infix_to_postfix("((a+b))")
    assert "(" not in result and ")" not in result


def test_unbalanced_close_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")


def test_main_with_argument(capsys):
    assert main(["(A+B)*C"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Postfix Notation: AB+C*", "Prefix Notation: *+ABC"]


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(A+B)*C\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter an infix expression: ")
    assert "Postfix Notation: AB+C*" in out


def test_main_reports_error(capsys):
    assert main(["a)"]) == 1
    assert "unbalanced" in capsys.readouterr().err