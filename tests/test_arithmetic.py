import math

import pytest
from hypothesis import given, strategies as st

from ceceio.errors import TypeMismatch, ExactArityMismatch
from ceceio.interpreter import Interpreter
from ceceio.types.atom import Number, Boolean

small_ints = st.integers(min_value=-1000, max_value=1000)
nonzero = small_ints.filter(lambda v: v != 0)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(- 5)", -5),
        ("(/ 4)", 0.25),
        ("(+ 7)", 7),
        ("(+)", 0),
        ("(-)", 0),
        ("(*)", 0),
        ("(/)", 0),
        ("(/ (* 2 3) (- 5 6 7))", -0.75),
        ("(% 7 3)", 1),
        ("(% -7 3)", -1),
        ("(% 7.5 2)", 1.5),
    ],
)
def test_arithmetic(interp, source, expected):
    assert interp.parse_and_eval(source) == Number(float(expected))


def test_division_by_zero_is_ieee(interp):
    assert interp.parse_and_eval("(/ 1 0)") == Number(math.inf)
    assert interp.parse_and_eval("(/ -1 0)") == Number(-math.inf)
    assert math.isnan(interp.parse_and_eval("(/ 0 0)").value)
    assert math.isnan(interp.parse_and_eval("(% 1 0)").value)


def test_display_of_result(interp):
    assert str(interp.parse_and_eval("(/ (* 2 3) (- 5 6 7))")) == "-0.75"
    assert str(interp.parse_and_eval("(* 2 3)")) == "6"


@pytest.mark.parametrize(
    "source,text",
    [
        ("(/ 1 0)", "inf"),
        ("(/ -1 0)", "-inf"),
        ("(/ 0 0)", "nan"),
        ("(/ 0 -5)", "-0.0"),
        ("(* -1 0)", "-0.0"),
    ],
)
def test_non_finite_and_signed_zero_results_read_back(interp, source, text):
    result = interp.parse_and_eval(source)
    assert str(result) == text
    again = interp.parse_and_eval(text)
    if math.isnan(result.value):
        assert math.isnan(again.value)
    else:
        assert again.value == result.value
        assert math.copysign(1.0, again.value) == math.copysign(1.0, result.value)


def test_nan_is_not_equal_to_itself(interp):
    assert interp.parse_and_eval("(= (/ 0 0) (/ 0 0))") == Boolean(False)
    interp.run("(def x (/ 0 0))")
    assert interp.parse_and_eval("(= x x)") == Boolean(False)
    assert Number(math.nan) != Number(math.nan)


def test_zero_equals_negative_zero(interp):
    assert interp.parse_and_eval("(= 0 (* -1 0))") == Boolean(True)


@pytest.mark.parametrize(
    "source,received",
    [
        ("(+ 1 :a)", "symbol"),
        ("(- true)", "boolean"),
        ("(* 1 nil)", "nil"),
        ("(/ 1 \"x\")", "string"),
        ("(+ 1 [1])", "list"),
        ("(+ 1 (fn [] 1))", "lambda"),
    ],
)
def test_arithmetic_type_errors(interp, source, received):
    with pytest.raises(TypeMismatch) as exc:
        interp.parse_and_eval(source)
    assert exc.value.expected == "number"
    assert exc.value.received == received


def test_remainder_arity(interp):
    with pytest.raises(ExactArityMismatch) as exc:
        interp.parse_and_eval("(% 1)")
    assert (exc.value.expected, exc.value.received) == (2, 1)


def test_remainder_evaluates_divisor_first(interp):
    with pytest.raises(TypeMismatch) as exc:
        interp.parse_and_eval("(% :ok true)")
    assert exc.value.received == "boolean"


def _eval(source):
    # Fresh interpreter per example
    return Interpreter(prelude=None).parse_and_eval(source)


@given(small_ints, small_ints, small_ints)
def test_addition_is_associative(a, b, c):
    left = _eval(f"(+ (+ {a} {b}) {c})")
    right = _eval(f"(+ {a} (+ {b} {c}))")
    assert left == right


@given(small_ints, small_ints)
def test_addition_and_multiplication_commute(a, b):
    assert _eval(f"(+ {a} {b})") == _eval(f"(+ {b} {a})")
    assert _eval(f"(* {a} {b})") == _eval(f"(* {b} {a})")


@given(small_ints, small_ints, small_ints)
def test_multiplication_is_associative(a, b, c):
    left = _eval(f"(* (* {a} {b}) {c})")
    right = _eval(f"(* {a} (* {b} {c}))")
    assert left == right


@given(small_ints)
def test_negation_is_self_inverse(a):
    assert _eval(f"(- (- {a}))") == Number(float(a))


@given(st.integers(min_value=-10, max_value=10).map(lambda k: 2.0 ** k))
def test_reciprocal_is_self_inverse(a):
    assert _eval(f"(/ (/ {a!r}))") == Number(a)
