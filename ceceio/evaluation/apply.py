"""Application engine for ceceio.

This module centralizes function application semantics:
- Built-in operator tags dispatch to the built-in library, which receives the
  unevaluated arguments.
- Identifier and head-expression callees must reduce to a Lambda.
- Lambdas check their exact arity, then evaluate the body inside a scope
  frame binding each formal to its argument, deferred. The frame is popped on
  return, also when the body raises.

Arguments are evaluated lazily: a formal's argument is evaluated, against the
caller's frames, the first time the body looks the formal up, and at most
once. An argument whose formal is never used is never evaluated.

Free identifiers in a body are looked up at call time through the scope
stack and the session table (dynamic scoping); lambdas capture nothing.
"""

from __future__ import annotations

import logging

from ceceio import EvaluatorFn, Value
from ceceio.builtin.check import ensure_exact_arity, expect_lambda
from ceceio.builtin.operators import apply_builtin
from ceceio.types.builtin import BuiltIn
from ceceio.types.deferred import Deferred
from ceceio.types.environment import Environment
from ceceio.types.expression import Expression, Application, Lambda

logger = logging.getLogger(__name__)


def call_lambda(
    fn: Lambda, arguments: list[Deferred], env: Environment, evaluate_fn: EvaluatorFn
) -> Value:
    """Evaluate `fn`'s body with its formals bound to deferred `arguments`.

    A body that is itself a lambda is applied, inside this frame, to the same
    arguments.
    """
    logger.debug("Calling %s with %d argument(s)", fn, len(arguments))
    with env.scope(dict(zip(fn.arguments, arguments))):
        body = fn.body
        if isinstance(body, Lambda):
            ensure_exact_arity(len(body.arguments), len(arguments))
            return call_lambda(body, arguments, env, evaluate_fn)
        return evaluate_fn(body, env)


def apply_lambda(
    fn: Lambda, arguments: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Value:
    """Apply a Lambda to unevaluated argument expressions."""
    ensure_exact_arity(len(fn.arguments), len(arguments))
    caller = env.snapshot()
    return call_lambda(fn, [Deferred(arg, caller) for arg in arguments], env, evaluate_fn)


def apply_application(expr: Application, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    name = expr.name
    if isinstance(name, BuiltIn):
        return apply_builtin(name, expr.arguments, env, evaluate_fn)

    # Identifiers and head expressions alike must reduce to a Lambda
    fn = expect_lambda(evaluate_fn(name, env))
    return apply_lambda(fn, expr.arguments, env, evaluate_fn)
