import pytest

from ceceio.errors import ParsingError
from ceceio.reader.parser import parse_expression, parse_all
from ceceio.types.atom import Number, Boolean, String
from ceceio.types.builtin import BuiltIn
from ceceio.types.expression import (
    Application,
    If,
    IfElse,
    Binding,
    Lambda,
    Cond,
    List,
)
from ceceio.types.nil import Nil
from ceceio.types.symbol import Symbol, Identifier


def n(x):
    return Number(float(x))


def ident(name):
    return Identifier(name)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", Application(BuiltIn.PLUS, [n(1), n(2)])),
        ("(+)", Application(BuiltIn.PLUS, [])),
        ("( not   true )", Application(BuiltIn.NOT, [Boolean(True)])),
        ("(double 3)", Application(ident("double"), [n(3)])),
        ("(if true 1)", If(Boolean(True), n(1))),
        ("(if false 1 2)", IfElse(Boolean(False), n(1), n(2))),
        ("(def x 5)", Binding(ident("x"), n(5))),
        ("(fn [x y] (+ x y))", Lambda([ident("x"), ident("y")], Application(BuiltIn.PLUS, [ident("x"), ident("y")]))),
        ("(fn [] :ok)", Lambda([], Symbol("ok"))),
        ("(cond false 2 4)", Cond([Boolean(False), n(2), n(4)])),
        ("(cond)", Cond([])),
        ("[1 :a \"s\" nil]", List([n(1), Symbol("a"), String("s"), Nil])),
        ("[]", List([])),
        ("'(1 2)", List([n(1), n(2)])),
        ("((fn [x] (+ x x)) 2)", Application(Lambda([ident("x")], Application(BuiltIn.PLUS, [ident("x"), ident("x")])), [n(2)])),
        ("(iffy 1)", Application(ident("iffy"), [n(1)])),
        ("(define 1)", Application(ident("define"), [n(1)])),
    ],
)
def test_parse_expression(source, expected):
    rest, expr = parse_expression(source)
    assert rest == ""
    assert expr == expected


def test_leading_whitespace_and_comments_are_skipped():
    _, expr = parse_expression("  ; a comment\n\t(+ 1 ; inline\n 2)")
    assert expr == Application(BuiltIn.PLUS, [n(1), n(2)])


def test_parse_expression_returns_rest():
    rest, expr = parse_expression("(def id (fn [x] x)))")
    assert isinstance(expr, Binding)
    assert rest == ")"


def test_parse_all_reads_every_form():
    exprs = list(parse_all("(def x 5)\n(+ x 1)\n; done\n"))
    assert exprs == [
        Binding(ident("x"), n(5)),
        Application(BuiltIn.PLUS, [ident("x"), n(1)]),
    ]


def test_parse_all_empty_source():
    assert list(parse_all("  ; nothing here\n")) == []


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1 2", "expected closing parenthesis ')'"),
        ("[1 2", "expected closing bracket ']'"),
        ("(if)", "expected condition"),
        ("(if true)", "expected then branch"),
        ("(if true 1 2 3)", "expected closing parenthesis ')'"),
        ("(def 5 5)", "expected identifier"),
        ("(def x)", "expected expression"),
        ("(fn x x)", "expected '[' before the formal parameters"),
        ("(fn [x 1] x)", "expected identifier or closing bracket ']'"),
        ("(fn [x x] x)", "duplicate formal parameter 'x'"),
        ("(fn [x])", "expected lambda body"),
        ("(5 1)", "expected function name"),
        (")", "expected expression"),
        ("(+ 1 ]", "expected closing parenthesis ')'"),
    ],
)
def test_parse_errors(source, message):
    with pytest.raises(ParsingError) as exc:
        parse_expression(source)
    assert exc.value.message == message


def test_parse_error_position():
    with pytest.raises(ParsingError) as exc:
        parse_expression("(+ 1\n  2")
    err = exc.value
    assert err.line == 2
    assert err.column == 4
    assert err.position == 8
    assert str(err) == "Parsing error: expected closing parenthesis ')' (line 2, column 4)"


def test_committed_forms_do_not_fall_back():
    # Once `def` is read, a bad form is an error, not an application of `def`
    with pytest.raises(ParsingError):
        parse_expression("(def (x) 1)")
