from lsprotocol.types import CompletionItemKind, DiagnosticSeverity, Position, SymbolKind

from ceceio_lsp.indexer import build_index, BUILTIN_SIGNATURES
from ceceio_lsp.server import (
    DocumentState,
    completion_items,
    diagnostics_for,
    document_symbols,
    extract_word_at,
    hover_text,
)

SOURCE = """; helpers
(def double (fn [x] (+ x x)))
(def limit 10)
  (def   pair (fn [a b] [a b]))
(double limit)
"""


def test_index_definitions():
    idx = build_index(SOURCE)
    assert list(idx.symbols) == ["double", "limit", "pair"]
    double = idx.symbols["double"]
    assert (double.kind, double.line, double.col) == ("function", 1, 5)
    assert double.detail == "(double x)"
    limit = idx.symbols["limit"]
    assert (limit.kind, limit.detail) == ("var", "10")
    pair = idx.symbols["pair"]
    assert (pair.line, pair.col, pair.detail) == (3, 9, "(pair a b)")
    assert idx.form_count == 4
    assert idx.errors == []


def test_index_parse_error_keeps_earlier_definitions():
    idx = build_index("(def ok 1)\n(def broken (fn [x] x)\n")
    assert list(idx.symbols) == ["ok"]
    assert len(idx.errors) == 1
    err = idx.errors[0]
    assert err.message == "expected closing parenthesis ')'"
    assert (err.line, err.col) == (2, 0)


def test_zero_argument_function_detail():
    idx = build_index("(def thunk (fn [] :ok))")
    assert idx.symbols["thunk"].detail == "(thunk)"


def test_diagnostics():
    diags = diagnostics_for(build_index("(+ 1"))
    assert len(diags) == 1
    assert diags[0].severity == DiagnosticSeverity.Error
    assert diags[0].source == "ceceio-ls"
    assert diags[0].range.start == Position(line=0, character=4)


def test_hover():
    state = DocumentState(SOURCE, build_index(SOURCE))
    assert hover_text(state, "count") == BUILTIN_SIGNATURES["count"]
    assert hover_text(state, "fn") == "(fn [formals] body)"
    assert hover_text(state, "double") == "(double x)\nfunction defined at 2:6"
    assert hover_text(state, "unknown") is None


def test_extract_word_at():
    assert extract_word_at(SOURCE, Position(line=4, character=3)) == "double"
    assert extract_word_at(SOURCE, Position(line=4, character=10)) == "limit"
    assert extract_word_at(SOURCE, Position(line=40, character=0)) is None


def test_completion_items():
    state = DocumentState(SOURCE, build_index(SOURCE))
    items = {item.label: item for item in completion_items(state)}
    assert items["+"].kind == CompletionItemKind.Function
    assert items["cond"].kind == CompletionItemKind.Keyword
    assert items["double"].kind == CompletionItemKind.Function
    assert items["limit"].kind == CompletionItemKind.Variable
    assert "double" not in {item.label for item in completion_items(None)}


def test_document_symbols():
    symbols = document_symbols(build_index(SOURCE))
    assert [(s.name, s.kind) for s in symbols] == [
        ("double", SymbolKind.Function),
        ("limit", SymbolKind.Variable),
        ("pair", SymbolKind.Function),
    ]
    assert symbols[0].range.end == Position(line=1, character=11)
