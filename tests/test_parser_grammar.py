from __future__ import annotations

import pytest

from tests.support.harness import ParseError, parse_text
from calc_ref.tree import (
    ArithmeticOrLogical,
    Assignment,
    Call,
    Comparison,
    Conditional,
    Definition,
    Identifier,
    IntegerLiteral,
    Print,
    Sequence,
)

I = IntegerLiteral
N = Identifier

CASES = [
    pytest.param("", Sequence(()), id="empty"),
    pytest.param("42", Sequence((I(42),)), id="integer"),
    pytest.param("-42", Sequence((I(-42),)), id="negative-integer"),
    pytest.param("x", Sequence((N("x"),)), id="identifier"),
    pytest.param("(< 1 2)", Sequence((Comparison("<", I(1), I(2)),)), id="compare"),
    pytest.param("(<> a b)", Sequence((Comparison("<>", N("a"), N("b")),)), id="compare-ne"),
    pytest.param(
        "(- 10 3 2)",
        Sequence((ArithmeticOrLogical("-", (I(10), I(3), I(2))),)),
        id="math-variadic",
    ),
    pytest.param(
        "(- -1 2)",
        Sequence((ArithmeticOrLogical("-", (I(-1), I(2))),)),
        id="math-negative-operand",
    ),
    pytest.param(
        "(and x (or 0 1))",
        Sequence((ArithmeticOrLogical("and", (N("x"), ArithmeticOrLogical("or", (I(0), I(1))))),)),
        id="logical",
    ),
    pytest.param("(if 1 2)", Sequence((Conditional(I(1), I(2), None),)), id="if-no-else"),
    pytest.param("(if c 2 3)", Sequence((Conditional(N("c"), I(2), I(3)),)), id="if-else"),
    pytest.param("(print)", Sequence((Print(()),)), id="print-empty"),
    pytest.param("(print 1 x)", Sequence((Print((I(1), N("x"))),)), id="print-args"),
    pytest.param(
        "(define add (a b) (+ a b))",
        Sequence((Definition("add", ("a", "b"), (ArithmeticOrLogical("+", (N("a"), N("b"))),)),)),
        id="define",
    ),
    pytest.param(
        "(define f () 1 2)",
        Sequence((Definition("f", (), (I(1), I(2))),)),
        id="define-nullary-multi-body",
    ),
    pytest.param("(set x (f))", Sequence((Assignment("x", Call("f", ())),)), id="assign"),
    pytest.param("(f 1 y)", Sequence((Call("f", (I(1), N("y"))),)), id="call"),
    pytest.param("(iffy 1)", Sequence((Call("iffy", (I(1),)),)), id="keyword-prefix-is-name"),
    pytest.param("(set set_x or_else)", Sequence((Assignment("set_x", N("or_else")),)), id="keyword-prefixed-names"),
    pytest.param(
        "; leading\n(f) ; trailing\n2",
        Sequence((Call("f", ()), I(2))),
        id="comments",
    ),
]


@pytest.mark.parametrize("source, expected", CASES)
def test_parse_shapes(source: str, expected: Sequence) -> None:
    assert parse_text(source) == expected


@pytest.mark.parametrize(
    "source, message",
    [
        pytest.param("(+ 1 2", "Unexpected end of input", id="unclosed"),
        pytest.param("(+)", "Unexpected token: )", id="math-needs-operand"),
        pytest.param("()", "Unexpected token: )", id="empty-form"),
        pytest.param("(if 1)", "Unexpected token: )", id="if-needs-branch"),
        pytest.param("(set x)", "Unexpected token: )", id="set-needs-value"),
        pytest.param("(define (a) 1)", "Unexpected token: (", id="define-needs-name"),
        pytest.param("(define f (a))", "Unexpected token: )", id="define-needs-body"),
        pytest.param("(< 1 2 3)", "Unexpected token: 3", id="compare-is-binary"),
        pytest.param("(print 1) )", "Unexpected token: )", id="stray-close"),
        pytest.param("(print #)", "Illegal character: #", id="bad-character"),
        pytest.param("(print if)", "Unexpected token: if", id="keyword-as-operand"),
        pytest.param("(set and 1)", "Unexpected token: and", id="keyword-as-assign-target"),
        pytest.param("(define f (print) 1)", "Unexpected token: print", id="keyword-as-param"),
        pytest.param("(define set () 1)", "Unexpected token: set", id="keyword-as-function-name"),
    ],
)
def test_parse_errors(source: str, message: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_text(source)

    assert exc_info.value.message == message
    assert exc_info.value.pos is not None


def test_positions_point_at_source() -> None:
    prog = parse_text("  (f x)\n(+ 1 2)")
    call, math = prog.exprs

    assert call.pos == 3
    assert call.args[0].pos == 5
    assert math.pos == 9


def test_unclosed_error_is_at_end_of_input() -> None:
    source = "(+ 1 2"

    with pytest.raises(ParseError) as exc_info:
        parse_text(source)

    assert exc_info.value.pos == len(source)
