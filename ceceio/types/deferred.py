from __future__ import annotations

from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from ceceio.types.environment import Environment
    from ceceio.types.expression import Expression


class Deferred:
    """An argument expression bound to a formal but not yet evaluated.

    It keeps the caller's scope frames as they were at the call. The first
    lookup of the formal evaluates the expression against those frames and
    caches the result; an argument the body never looks up is never evaluated.
    """

    __slots__ = ("expr", "scopes", "value", "forced")

    def __init__(self, expr: Expression, scopes: list[dict]):
        self.expr = expr
        self.scopes = scopes
        self.value = None
        self.forced = False

    def force(self, env: Environment, evaluate_fn: Callable[..., Expression]) -> Expression:
        if not self.forced:
            with env.frames(self.scopes):
                self.value = evaluate_fn(self.expr, env)
            self.forced = True
        return self.value

    def __str__(self):
        return str(self.value) if self.forced else f"<deferred {self.expr}>"

    def __repr__(self):
        return f"Deferred({self.expr!r}, forced={self.forced})"
