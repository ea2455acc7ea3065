# Core type aliases for ceceio's data model.
# Source text is parsed into typed Expression nodes (ceceio.types.expression),
# and evaluation reduces an Expression to another Expression: a non-identifier
# atom, a Lambda, or an unevaluated List.
#
# Naming guidance:
# - Expression: use in reader/parser code for syntactic forms.
# - Value:      use in evaluator/runtime code for reduced results.
# Both name the same union; keeping two names documents intent at call sites.

from typing import Callable

from ceceio.types.expression import Expression

Value = Expression

# Evaluator function type: passed into special forms and built-ins so they can
# force their own arguments without importing the evaluator.
EvaluatorFn = Callable[..., Value]

__version__ = "0.1.0"
