"""Built-in operators for the ceceio runtime.

Every operator receives its *unevaluated* argument expressions, the
environment and the evaluator, and forces the arguments itself. That keeps
the order in which arguments are evaluated, and therefore the order in which
type errors surface, under each operator's control.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from ceceio import EvaluatorFn, Value
from ceceio.builtin.check import (
    ensure_exact_arity,
    ensure_minimum_arity,
    expect_number,
    expect_boolean,
    expect_lambda,
    expect_list,
)
from ceceio.types.builtin import BuiltIn
from ceceio.types.environment import Environment
from ceceio.types.expression import Expression, Application, Number, Boolean

BuiltinFn = Callable[[list[Expression], Environment, EvaluatorFn], Value]


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def fold(
    op: Callable[[float, float], float],
    identity: float,
    args: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Number:
    """Left fold shared by + - * /.

    - no arguments: 0
    - one argument x: op(identity, x), so (- x) negates and (/ x) inverts
    - otherwise: op(...op(op(a0, a1), a2)..., an)
    """
    if not args:
        return Number(0.0)

    first = expect_number(evaluate_fn(args[0], env))
    if len(args) == 1:
        return Number(op(identity, first))

    acc = first
    for arg in args[1:]:
        acc = op(acc, expect_number(evaluate_fn(arg, env)))
    return Number(acc)


def add(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return fold(operator.add, 0.0, args, env, evaluate_fn)


def sub(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return fold(operator.sub, 0.0, args, env, evaluate_fn)


def mul(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return fold(operator.mul, 1.0, args, env, evaluate_fn)


def div(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return fold(_divide, 1.0, args, env, evaluate_fn)


def remainder(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(% n d) => remainder of n / d, with the sign of n. Evaluates d before n."""
    ensure_exact_arity(2, len(args))
    lhs, rhs = args
    d = expect_number(evaluate_fn(rhs, env))
    n = expect_number(evaluate_fn(lhs, env))
    try:
        return Number(math.fmod(n, d))
    except ValueError:
        # fmod(x, 0) and fmod(inf, y)
        return Number(math.nan)


# -------------------------------
# Equality
# -------------------------------
def equals(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Return true if every argument reduces to a value structurally equal to the first."""
    ensure_minimum_arity(2, len(args))
    values = [evaluate_fn(arg, env) for arg in args]
    first = values[0]
    for other in values[1:]:
        if other != first:
            return Boolean(False)
    return Boolean(True)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    ensure_exact_arity(1, len(args))
    return Boolean(not expect_boolean(evaluate_fn(args[0], env)))


def logical_and(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting AND: false at the first false operand, else true."""
    ensure_minimum_arity(2, len(args))
    for arg in args:
        if not expect_boolean(evaluate_fn(arg, env)):
            return Boolean(False)
    return Boolean(True)


def logical_or(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting OR: true at the first true operand, else false."""
    ensure_minimum_arity(2, len(args))
    for arg in args:
        if expect_boolean(evaluate_fn(arg, env)):
            return Boolean(True)
    return Boolean(False)


# -------------------------------
# Lists
# -------------------------------
def count(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(count pred xs) => how many elements of xs make the one-argument pred true.

    Elements are evaluated one at a time, as the predicate consumes them.
    """
    ensure_exact_arity(2, len(args))
    predicate = expect_lambda(evaluate_fn(args[0], env))
    elements = expect_list(evaluate_fn(args[1], env)).elements
    ensure_exact_arity(1, len(predicate.arguments))

    total = 0
    for element in elements:
        result = evaluate_fn(Application(predicate, [element]), env)
        if result == Boolean(True):
            total += 1
    return Number(float(total))


BUILTINS: dict[BuiltIn, BuiltinFn] = {
    BuiltIn.PLUS: add,
    BuiltIn.MINUS: sub,
    BuiltIn.TIMES: mul,
    BuiltIn.DIVIDE: div,
    BuiltIn.REMAINDER: remainder,
    BuiltIn.EQUAL: equals,
    BuiltIn.NOT: logical_not,
    BuiltIn.AND: logical_and,
    BuiltIn.OR: logical_or,
    BuiltIn.COUNT: count,
}


def apply_builtin(
    builtin: BuiltIn, args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Value:
    return BUILTINS[builtin](args, env, evaluate_fn)
