"""The Expression sum type: AST node and runtime value at once.

Every syntactic form has one class. Evaluation results are a subset of the
same classes: a non-identifier atom, a `Lambda`, or an unevaluated `List`.
`str()` renders an expression back into source text that parses to an equal
node.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ceceio.types.atom import Atom, ATOM_TYPES, Number, Boolean, String
from ceceio.types.builtin import BuiltIn
from ceceio.types.nil import Nil, NilType
from ceceio.types.symbol import Symbol, Identifier


def _join(exprs) -> str:
    return " ".join(str(e) for e in exprs)


@dataclass
class Application:
    """`(name args*)`. `name` is a BuiltIn, an Identifier or a head expression."""
    name: BuiltIn | Identifier | Expression
    arguments: list[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.arguments:
            return f"({self.name})"
        return f"({self.name} {_join(self.arguments)})"


@dataclass
class If:
    condition: Expression
    do_this: Expression

    def __str__(self) -> str:
        return f"(if {self.condition} {self.do_this})"


@dataclass
class IfElse:
    condition: Expression
    if_true: Expression
    if_false: Expression

    def __str__(self) -> str:
        return f"(if {self.condition} {self.if_true} {self.if_false})"


@dataclass
class Binding:
    identifier: Identifier
    expression: Expression

    def __str__(self) -> str:
        return f"(def {self.identifier} {self.expression})"


@dataclass
class Lambda:
    arguments: list[Identifier]
    body: Expression

    def __str__(self) -> str:
        return f"(fn [{_join(self.arguments)}] {self.body})"


@dataclass
class Cond:
    """Alternating condition/result pairs, optionally ending in a default."""
    expressions: list[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.expressions:
            return "(cond)"
        return f"(cond {_join(self.expressions)})"


@dataclass
class List:
    elements: list[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        return f"[{_join(self.elements)}]"


Expression = Atom | Application | If | IfElse | Binding | Lambda | Cond | List


def is_atom(expr: Expression) -> bool:
    return isinstance(expr, ATOM_TYPES)


def rough_type(expr: Expression) -> str:
    """Coarse, human-readable classification used in error messages."""
    match expr:
        case Number():
            return "number"
        case Symbol():
            return "symbol"
        case Identifier():
            return "identifier"
        case Boolean():
            return "boolean"
        case String():
            return "string"
        case BuiltIn():
            return expr.rough_type
        case NilType():
            return "nil"
        case Application():
            return "application"
        case If() | IfElse():
            return "if"
        case Binding():
            return "binding"
        case Lambda():
            return "lambda"
        case Cond():
            return "cond"
        case List():
            return "list"
    return type(expr).__name__


# --- Down-casting accessors ---

def as_number(expr: Expression) -> float | None:
    return expr.value if isinstance(expr, Number) else None


def as_boolean(expr: Expression) -> bool | None:
    return expr.value if isinstance(expr, Boolean) else None


def as_lambda(expr: Expression) -> Lambda | None:
    return expr if isinstance(expr, Lambda) else None


def as_list(expr: Expression) -> List | None:
    return expr if isinstance(expr, List) else None


def from_python(value) -> Atom:
    """Build an atom from a plain Python value (bool, int, float, str, None)."""
    if value is None:
        return Nil
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Number(float(value))
    if isinstance(value, str):
        return String(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to an atom")
