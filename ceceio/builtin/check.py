"""Arity and type checks shared by every built-in operator."""
from __future__ import annotations

from ceceio.errors import ExactArityMismatch, MinimumArityMismatch, TypeMismatch
from ceceio.types.expression import Expression, Lambda, List, Number, Boolean, rough_type


def ensure_exact_arity(expected: int, received: int) -> None:
    if expected != received:
        raise ExactArityMismatch(expected, received)


def ensure_minimum_arity(at_least: int, received: int) -> None:
    if received < at_least:
        raise MinimumArityMismatch(at_least, received)


def expect_number(value: Expression) -> float:
    if not isinstance(value, Number):
        raise TypeMismatch("number", rough_type(value))
    return value.value


def expect_boolean(value: Expression) -> bool:
    if not isinstance(value, Boolean):
        raise TypeMismatch("boolean", rough_type(value))
    return value.value


def expect_lambda(value: Expression) -> Lambda:
    if not isinstance(value, Lambda):
        raise TypeMismatch("lambda", rough_type(value))
    return value


def expect_list(value: Expression) -> List:
    if not isinstance(value, List):
        raise TypeMismatch("list", rough_type(value))
    return value
