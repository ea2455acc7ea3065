from __future__ import annotations

"""
Static indexer for ceceio files; it never evaluates code.

Top-level forms are read with the real parser, so diagnostics carry exactly
the ParsingError the interpreter would raise. For every top-level
`(def name expr)` we record where `name` is written and a short detail
(the lambda signature for function definitions).

Parsing stops at the first error; definitions read before it stay indexed,
so completion keeps working on half-typed buffers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import re

from ceceio.errors import ParsingError
from ceceio.reader.parser import Parser
from ceceio.types.expression import Binding, Lambda

DEF_NAME_REGEX = re.compile(r"\(\s*def\s+(?P<name>[^\s()\[\]]+)")


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int
    detail: str = ""


@dataclass
class ParseDiagnostic:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    errors: List[ParseDiagnostic] = field(default_factory=list)
    form_count: int = 0


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _describe(binding: Binding) -> Tuple[str, str]:
    value = binding.expression
    if isinstance(value, Lambda):
        parts = [str(binding.identifier), *(str(f) for f in value.arguments)]
        return "function", "(" + " ".join(parts) + ")"
    return "var", str(value)


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    parser = Parser(text)

    while True:
        try:
            if parser.at_end():
                break
            start = parser.pos
            expr = parser.parse_expression()
        except ParsingError as ex:
            # ParsingError lines and columns are 1-based
            idx.errors.append(ParseDiagnostic(ex.message, ex.line - 1, ex.column - 1))
            break

        idx.form_count += 1
        if not isinstance(expr, Binding):
            continue
        m = DEF_NAME_REGEX.match(text, start)
        offset = m.start("name") if m else start
        line, col = _position_from_offset(text, offset)
        kind, detail = _describe(expr)
        name = str(expr.identifier)
        idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line, col=col, detail=detail)

    return idx


def symbol_at(idx: DocumentIndex, name: str) -> Optional[SymbolDef]:
    return idx.symbols.get(name)


# Builtin signatures for quick hover without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ &rest nums) ; 0 when empty",
    "-": "(- x &rest nums) ; negates a single argument",
    "*": "(* &rest nums) ; 0 when empty",
    "/": "(/ x &rest nums) ; reciprocal of a single argument",
    "%": "(% x y)",
    "=": "(= a b &rest more)",
    "not": "(not bool)",
    "and": "(and &rest bools)",
    "or": "(or &rest bools)",
    "count": "(count pred list)",
}

SPECIAL_FORMS: Dict[str, str] = {
    "if": "(if condition then [else])",
    "def": "(def name expr)",
    "fn": "(fn [formals] body)",
    "cond": "(cond test expr ... [default])",
}
