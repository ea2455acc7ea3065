from __future__ import annotations
from enum import Enum


class BuiltIn(Enum):
    """Built-in operators. The value is the source token."""

    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    EQUAL = "="
    REMAINDER = "%"
    NOT = "not"
    AND = "and"
    OR = "or"
    COUNT = "count"

    @property
    def rough_type(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


OPERATOR_CHARS = "+-*/=%"
OPERATOR_WORDS = ("not", "and", "or", "count")
