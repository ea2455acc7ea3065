"""Special form: cond, the multi-branch conditional.

(cond c1 r1 c2 r2 ... [default])

Conditions are evaluated strictly in order; the first one that reduces to
boolean true has its result evaluated and returned. With an odd number of
expressions the last one is the default branch, evaluated when nothing
matched. Without a default, an unmatched cond is nil.
"""

from ceceio import EvaluatorFn, Value
from ceceio.types.environment import Environment
from ceceio.types.expression import Cond, Boolean
from ceceio.types.nil import Nil


def cond_form(expr: Cond, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    exprs = expr.expressions
    paired = len(exprs) - len(exprs) % 2

    for i in range(0, paired, 2):
        condition, result = exprs[i], exprs[i + 1]
        if evaluate_fn(condition, env) == Boolean(True):
            return evaluate_fn(result, env)

    if paired < len(exprs):
        return evaluate_fn(exprs[-1], env)
    return Nil
