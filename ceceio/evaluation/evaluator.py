"""Core evaluator for the ceceio interpreter.

A direct tree walk: one exhaustive match over the Expression variants, each
reducing to a non-identifier atom, a Lambda, or an unevaluated List.
"""

from __future__ import annotations

from ceceio import Value
from ceceio.errors import CeceioError
from ceceio.evaluation.apply import apply_application
from ceceio.evaluation.special_forms import if_form, define_form, cond_form
from ceceio.types.builtin import BuiltIn
from ceceio.types.deferred import Deferred
from ceceio.types.environment import Environment
from ceceio.types.expression import (
    Expression,
    Number,
    Boolean,
    String,
    Application,
    If,
    IfElse,
    Binding,
    Lambda,
    Cond,
    List,
)
from ceceio.types.nil import NilType
from ceceio.types.symbol import Symbol, Identifier


def evaluate(expr: Expression, env: Environment) -> Value:
    """Reduce `expr` against `env`."""
    match expr:
        case Identifier():
            value = env.lookup(expr)
            if isinstance(value, Deferred):
                return value.force(env, evaluate)
            return value
        case Number() | Boolean() | String() | Symbol() | BuiltIn() | NilType():
            return expr
        case If() | IfElse():
            return if_form(expr, env, evaluate)
        case Binding():
            return define_form(expr, env, evaluate)
        case Application():
            return apply_application(expr, env, evaluate)
        case Cond():
            return cond_form(expr, env, evaluate)
        case Lambda() | List():
            # Lambdas are first-class values; list elements are forced by their consumer
            return expr
    raise CeceioError(f"Cannot evaluate {expr!r}")
