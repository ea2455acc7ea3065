from ceceio import EvaluatorFn, Value
from ceceio.types.environment import Environment
from ceceio.types.expression import If, IfElse, Boolean
from ceceio.types.nil import Nil


def _holds(condition: Value) -> bool:
    # Only boolean true selects the then-branch; any other value counts as false
    return condition == Boolean(True)


def if_form(expr: If | IfElse, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (if cond then)        -> then, or nil
    (if cond then else)   -> then or else
    Non-boolean conditions are not a type error.
    """
    condition = evaluate_fn(expr.condition, env)

    if isinstance(expr, IfElse):
        branch = expr.if_true if _holds(condition) else expr.if_false
        return evaluate_fn(branch, env)

    if _holds(condition):
        return evaluate_fn(expr.do_this, env)
    return Nil
