import pytest

from ceceio.errors import ExactArityMismatch, TypeMismatch
from ceceio.types.atom import Number


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(count (fn [x] (= (% x 2) 0)) [1 2 3 4])", 2),
        ("(count (fn [x] true) [])", 0),
        ("(count (fn [x] x) [true false true])", 2),
        ("(count (fn [x] 1) [1 2])", 0),
        ("(count (fn [x] (= x :a)) '(:a :b :a))", 2),
        ("(count (fn [x] (= x 2)) [(+ 1 1) 2 3])", 2),
    ],
)
def test_count(interp, source, expected):
    assert interp.parse_and_eval(source) == Number(float(expected))


def test_count_with_named_predicate(interp):
    interp.run("(def big? (fn [x] (= (- x 10) (- x 10) 0)))")
    interp.run("(def xs [10 1 10])")
    assert interp.parse_and_eval("(count big? xs)") == Number(2.0)


def test_count_arity(interp):
    with pytest.raises(ExactArityMismatch):
        interp.parse_and_eval("(count (fn [x] true))")


def test_count_predicate_must_take_one_argument(interp):
    with pytest.raises(ExactArityMismatch) as exc:
        interp.parse_and_eval("(count (fn [x y] true) [1])")
    assert (exc.value.expected, exc.value.received) == (1, 2)


@pytest.mark.parametrize(
    "source,expected,received",
    [
        ("(count 1 [1])", "lambda", "number"),
        ("(count (fn [x] true) 5)", "list", "number"),
    ],
)
def test_count_type_errors(interp, source, expected, received):
    with pytest.raises(TypeMismatch) as exc:
        interp.parse_and_eval(source)
    assert (exc.value.expected, exc.value.received) == (expected, received)
