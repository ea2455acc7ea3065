"""
  ceceio grammar parser

Recursive descent over the source text, producing typed Expression nodes:

    atom                      -> Number, Boolean, BuiltIn, Nil, Symbol, String, Identifier
    (if c then [else])        -> If / IfElse
    (def name expr)           -> Binding
    (fn [formals*] body)      -> Lambda
    (name args*)              -> Application   (name: operator, identifier or (expr))
    (cond exprs*)             -> Cond
    [exprs*]  '(exprs*)       -> List

A parenthesized form commits once its keyword (or function name) has been
read: any later failure, such as a missing `)`, raises ParsingError instead of
trying another alternative. `;` starts a comment that runs to end of line.
"""

from __future__ import annotations

import re
from typing import Iterator

from ceceio.errors import ParsingError
from ceceio.reader.atom_parser import (
    match_atom,
    match_identifier,
    match_fn_identifier,
    syntax_error,
    WORD_BOUNDARY,
)
from ceceio.types.expression import (
    Expression,
    Application,
    If,
    IfElse,
    Binding,
    Lambda,
    Cond,
    List,
)


WHITESPACE_RE = re.compile(r"(?:\s+|;[^\n]*)*")
FORM_KEYWORD_RE = re.compile(rf"(?P<keyword>if|def|fn|cond){WORD_BOUNDARY}")

CLOSERS = ")]"


class Parser:
    def __init__(self, source: str, pos: int = 0):
        self.source = source
        self.pos = pos

    # --- cursor helpers ---
    def skip_whitespace(self) -> None:
        self.pos = WHITESPACE_RE.match(self.source, self.pos).end()

    def at_end(self) -> bool:
        self.skip_whitespace()
        return self.pos >= len(self.source)

    def rest(self) -> str:
        return self.source[self.pos:]

    def error(self, message: str) -> ParsingError:
        return syntax_error(self.source, self.pos, message)

    def _at_closer(self) -> bool:
        return self.pos >= len(self.source) or self.source[self.pos] in CLOSERS

    def _close(self, closer: str, description: str) -> None:
        self.skip_whitespace()
        if not self.source.startswith(closer, self.pos):
            raise self.error(f"expected {description} '{closer}'")
        self.pos += 1

    def _required(self, what: str) -> Expression:
        self.skip_whitespace()
        if self._at_closer():
            raise self.error(f"expected {what}")
        return self.parse_expression()

    def _parse_sequence(self, closer: str, description: str) -> list[Expression]:
        items: list[Expression] = []
        while True:
            self.skip_whitespace()
            if self.source.startswith(closer, self.pos):
                self.pos += 1
                return items
            if self._at_closer():
                raise self.error(f"expected {description} '{closer}'")
            items.append(self.parse_expression())

    # --- grammar ---
    def parse_expression(self) -> Expression:
        self.skip_whitespace()

        found = match_atom(self.source, self.pos)
        if found is not None:
            self.pos, atom = found
            return atom

        if self.source.startswith("(", self.pos):
            self.pos += 1
            return self._parse_parenthesized()

        if self.source.startswith("[", self.pos):
            self.pos += 1
            return List(self._parse_sequence("]", "closing bracket"))

        if self.source.startswith("'(", self.pos):
            self.pos += 2
            return List(self._parse_sequence(")", "closing parenthesis"))

        raise self.error("expected expression")

    def _parse_parenthesized(self) -> Expression:
        self.skip_whitespace()
        m = FORM_KEYWORD_RE.match(self.source, self.pos)
        if m is None:
            return self._parse_application()

        self.pos = m.end()
        keyword = m.group("keyword")
        if keyword == "if":
            return self._parse_if()
        if keyword == "def":
            return self._parse_binding()
        if keyword == "fn":
            return self._parse_lambda()
        return Cond(self._parse_sequence(")", "closing parenthesis"))

    def _parse_if(self) -> Expression:
        condition = self._required("condition")
        if_true = self._required("then branch")
        self.skip_whitespace()
        if self.source.startswith(")", self.pos):
            self.pos += 1
            return If(condition, if_true)
        if_false = self._required("else branch")
        self._close(")", "closing parenthesis")
        return IfElse(condition, if_true, if_false)

    def _parse_binding(self) -> Binding:
        self.skip_whitespace()
        found = match_identifier(self.source, self.pos)
        if found is None:
            raise self.error("expected identifier")
        self.pos, identifier = found
        expression = self._required("expression")
        self._close(")", "closing parenthesis")
        return Binding(identifier, expression)

    def _parse_lambda(self) -> Lambda:
        self.skip_whitespace()
        if not self.source.startswith("[", self.pos):
            raise self.error("expected '[' before the formal parameters")
        self.pos += 1

        formals = []
        while True:
            self.skip_whitespace()
            if self.source.startswith("]", self.pos):
                self.pos += 1
                break
            found = match_identifier(self.source, self.pos)
            if found is None:
                raise self.error("expected identifier or closing bracket ']'")
            if found[1] in formals:
                raise self.error(f"duplicate formal parameter '{found[1]}'")
            self.pos, identifier = found
            formals.append(identifier)

        body = self._required("lambda body")
        self._close(")", "closing parenthesis")
        return Lambda(formals, body)

    def _parse_application(self) -> Application:
        if self.source.startswith("(", self.pos):
            name = self.parse_expression()
        else:
            found = match_fn_identifier(self.source, self.pos)
            if found is None:
                raise self.error("expected function name")
            self.pos, name = found
        arguments = self._parse_sequence(")", "closing parenthesis")
        return Application(name, arguments)

    def parse_all(self) -> Iterator[Expression]:
        while not self.at_end():
            yield self.parse_expression()


def parse_expression(source: str) -> tuple[str, Expression]:
    """Parse one expression from `source`; return (remaining, expression)."""
    parser = Parser(source)
    expr = parser.parse_expression()
    return parser.rest(), expr


def parse_all(source: str) -> Iterator[Expression]:
    """Yield every top-level expression in `source`."""
    yield from Parser(source).parse_all()
