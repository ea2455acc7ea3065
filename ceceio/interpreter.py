from __future__ import annotations

import logging
from typing import Literal

from ceceio import Value
from ceceio.config import get_strict_parse
from ceceio.evaluation.evaluator import evaluate
from ceceio.reader.parser import Parser, parse_all
from ceceio.types.environment import Environment
from ceceio.types.expression import Expression

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating ceceio code.
    Maintains one Environment across calls, so later expressions see earlier
    `def`s. Independent Interpreter instances share nothing.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        strict: bool | None = None,
    ):
        self.env: Environment = Environment()
        # Reject trailing input after the first expression in `parse`
        self.strict: bool = get_strict_parse() if strict is None else strict

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import to avoid circular imports
                from ceceio.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError as ex:
                # Be permissive: no prelude found -> proceed
                logger.warning("%s", ex)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in parse_all(code):
            evaluate(expr, self.env)
        logger.debug("Prelude loaded, %d binding(s)", len(self.env.vars))

    def parse(self, source: str) -> Expression:
        """Parse the first expression of `source`.

        Anything after it is ignored, unless the interpreter is strict.
        """
        parser = Parser(source)
        expr = parser.parse_expression()
        if not parser.at_end():
            if self.strict:
                raise parser.error("unexpected input after expression")
            logger.debug("Ignoring trailing input %r", parser.rest())
        return expr

    def eval(self, expr: Expression) -> Value:
        return evaluate(expr, self.env)

    def parse_and_eval(self, source: str) -> Value:
        return self.eval(self.parse(source))

    def run(self, source: str) -> list[Value]:
        """Evaluate every top-level expression of `source`, in order."""
        results: list[Value] = []
        for expr in parse_all(source):
            logger.debug("Evaluating %s", expr)
            results.append(self.eval(expr))
        return results
