"""Terminal values of the language.

Numbers, booleans and strings are small frozen dataclasses so that two atoms
compare equal exactly when they have the same variant and payload. Symbols,
identifiers, built-in tags and nil live in their own modules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ceceio.types.builtin import BuiltIn
from ceceio.types.nil import NilType
from ceceio.types.symbol import Symbol, Identifier


def format_number(value: float) -> str:
    """Render a float the way it is written in source: `5`, `-0.75`, `-0.0`."""
    negative_zero = value == 0 and math.copysign(1.0, value) < 0
    # int() would drop the sign of -0.0
    if math.isfinite(value) and value.is_integer() and not negative_zero:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, eq=False)
class Number:
    # Equality is float equality: nan differs from everything, 0 equals -0
    value: float

    def __eq__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class String:
    # Raw text between the quotes; escapes are kept as written
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


Atom = Number | Boolean | String | Symbol | Identifier | BuiltIn | NilType

ATOM_TYPES = (Number, Boolean, String, Symbol, Identifier, BuiltIn, NilType)
