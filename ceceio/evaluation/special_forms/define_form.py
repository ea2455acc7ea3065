from ceceio import EvaluatorFn, Value
from ceceio.types.environment import Environment
from ceceio.types.expression import Binding


def define_form(expr: Binding, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (def name value)
    Stores the evaluated value in the session table (overwriting any earlier
    binding) and returns it.
    """
    value = evaluate_fn(expr.expression, env)
    env.define(expr.identifier, value)
    return value
