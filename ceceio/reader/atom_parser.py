"""
  Atom recognizer

Recognizes one atomic token at a position in the source. Forms are tried in
a fixed order and the first match wins:

    number -> boolean -> built-in operator -> nil -> :symbol -> "string" -> identifier

Words (`true`, `not`, `nil`, ...) only match at a word boundary, so `notch`
and `nil?` are identifiers. Reserved words are rejected against the full
identifier candidate: `adef` is an identifier, `def` is not. `inf` and
`nan` (optionally signed) read as numbers, so every number prints back to
source that reads as the same number.
"""

from __future__ import annotations

import re

from ceceio.errors import ParsingError
from ceceio.types.atom import Atom, Number, Boolean, String
from ceceio.types.builtin import BuiltIn, OPERATOR_CHARS, OPERATOR_WORDS
from ceceio.types.nil import Nil
from ceceio.types.symbol import Symbol, Identifier


RESERVED_WORDS = frozenset({"if", "true", "false", "nil", "def", "fn", "cond"})
# Spellings of the non-finite numbers, as Python renders them
NUMBER_WORDS = frozenset({"inf", "nan"})

_IDENT_CHAR = r"[A-Za-z0-9_?\-]"
WORD_BOUNDARY = rf"(?!{_IDENT_CHAR})"

NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?(?![A-Za-z_?\d.])"
    rf"|(?:{'|'.join(sorted(NUMBER_WORDS))}){WORD_BOUNDARY})"
)
BOOLEAN_RE = re.compile(rf"(?P<boolean>true|false){WORD_BOUNDARY}")
BUILTIN_RE = re.compile(
    rf"(?P<operator>[{re.escape(OPERATOR_CHARS)}])"  # single character operators
    rf"|(?P<word>{'|'.join(OPERATOR_WORDS)}){WORD_BOUNDARY}"  # word operators
)
NIL_RE = re.compile(rf"nil{WORD_BOUNDARY}")
IDENTIFIER_RE = re.compile(rf"(?![0-9]){_IDENT_CHAR}+")
STRING_RE = re.compile(r'"(?P<body>(?:\\.|[^\\"])*)"', re.DOTALL)


def syntax_error(source: str, pos: int, message: str) -> ParsingError:
    """Build a ParsingError with the line and column of `pos`."""
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return ParsingError(message, pos, line, column)


def match_identifier(source: str, pos: int) -> tuple[int, Identifier] | None:
    m = IDENTIFIER_RE.match(source, pos)
    if not m or m.group() in RESERVED_WORDS or m.group() in NUMBER_WORDS:
        return None
    return m.end(), Identifier(m.group())


def match_builtin(source: str, pos: int) -> tuple[int, BuiltIn] | None:
    m = BUILTIN_RE.match(source, pos)
    if not m:
        return None
    return m.end(), BuiltIn(m.group())


def match_fn_identifier(source: str, pos: int) -> tuple[int, BuiltIn | Identifier] | None:
    """A function name in head position: a built-in operator or an identifier."""
    return match_builtin(source, pos) or match_identifier(source, pos)


def match_atom(source: str, pos: int) -> tuple[int, Atom] | None:
    """Match one atom at `pos`.

    Returns (end, atom), or None if no atomic form starts here. A `:` or `"`
    commits to a symbol or string: a malformed one raises ParsingError.
    """
    if m := NUMBER_RE.match(source, pos):
        return m.end(), Number(float(m.group()))

    if m := BOOLEAN_RE.match(source, pos):
        return m.end(), Boolean(m.group("boolean") == "true")

    if found := match_builtin(source, pos):
        return found

    if m := NIL_RE.match(source, pos):
        return m.end(), Nil

    if source.startswith(":", pos):
        found = match_identifier(source, pos + 1)
        if found is None:
            raise syntax_error(source, pos + 1, "expected identifier after ':'")
        end, identifier = found
        return end, Symbol(identifier.name)

    if source.startswith('"', pos):
        m = STRING_RE.match(source, pos)
        if not m:
            raise syntax_error(source, pos, "unterminated string literal")
        return m.end(), String(m.group("body"))

    return match_identifier(source, pos)


def parse_atom(source: str) -> tuple[str, Atom]:
    """Parse an atom at the start of `source`; return (remaining, atom)."""
    found = match_atom(source, 0)
    if found is None:
        raise syntax_error(source, 0, "expected atom")
    end, atom = found
    return source[end:], atom


def parse_identifier(source: str) -> tuple[str, Identifier]:
    """Parse a non-reserved identifier at the start of `source`."""
    found = match_identifier(source, 0)
    if found is None:
        raise syntax_error(source, 0, "expected identifier")
    end, identifier = found
    return source[end:], identifier
