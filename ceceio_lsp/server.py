from __future__ import annotations

"""
A minimal pygls-based Language Server for ceceio.

Features:
- Text synchronization and document store
- Diagnostics: the first parse error of the buffer
- Hover: builtin and special form signatures, top-level `def` sites
- Completion: builtins, special forms and defined names
- Document Symbols: one per top-level `def`

Note: We avoid evaluating the buffer. We build a static index per document.
"""

import logging
from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
    TextDocumentSyncKind,
)

from ceceio import __version__
from ceceio_lsp.indexer import (
    BUILTIN_SIGNATURES,
    SPECIAL_FORMS,
    DocumentIndex,
    build_index,
    symbol_at,
)

logger = logging.getLogger(__name__)

# Characters that end a word when looking up the token under the cursor
WORD_DELIMITERS = " \t()[]\n\r\"'"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class CeceioLanguageServer(LanguageServer):
    CMD_NAME = "ceceio-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__, text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}


ls = CeceioLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: CeceioLanguageServer, params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(ls, uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: CeceioLanguageServer, params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # Full sync: the last change carries the whole buffer
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(ls, uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: CeceioLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(ls: CeceioLanguageServer, uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    logger.debug("Indexed %s: %d form(s), %d error(s)", uri, idx.form_count, len(idx.errors))
    ls.publish_diagnostics(uri, diagnostics_for(idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=_mk_range(err.line, err.col),
            message=err.message,
            severity=DiagnosticSeverity.Error,
            source=CeceioLanguageServer.CMD_NAME,
        )
        for err in idx.errors
    ]


# --- Hover ---
def hover_text(state: DocumentState, word: str) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    if word in SPECIAL_FORMS:
        return SPECIAL_FORMS[word]
    sdef = symbol_at(state.index, word)
    if sdef is None:
        return None
    return f"{sdef.detail}\n{sdef.kind} defined at {sdef.line + 1}:{sdef.col + 1}"


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(ls: CeceioLanguageServer, params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = extract_word_at(state.text, params.position)
    if not word:
        return None

    contents = hover_text(state, word)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
def completion_items(state: Optional[DocumentState]) -> List[CompletionItem]:
    items: List[CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    for name, sig in SPECIAL_FORMS.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind, detail=sdef.detail))
    return items


@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["(", "["]))
def on_completion(ls: CeceioLanguageServer, params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    return CompletionList(is_incomplete=False, items=completion_items(state))


# --- Document Symbols ---
def document_symbols(idx: DocumentIndex) -> List[DocumentSymbol]:
    symbols: List[DocumentSymbol] = []
    for name, sdef in idx.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                detail=sdef.detail,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(ls: CeceioLanguageServer, params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return document_symbols(state.index)


# --- Helpers ---

def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in WORD_DELIMITERS:
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in WORD_DELIMITERS:
        end += 1
    word = line[start:end]
    return word or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
