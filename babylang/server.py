"""
Baby Language Server entry point.

This server provides basic language features for Baby source files using
`pygls`. It reuses the Baby lexer and parser to report syntax errors as
diagnostics and to build a simple index of top-level ``let`` bindings,
supporting definition lookup, hover information and document symbols.


File: server.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from babylang.lexer import Lexer
from babylang.nodes import Node
from babylang.parser import Parser


@dataclass
class BabySymbol:
    """Represents a top-level binding in a Baby file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    detail: str


def _line_range(line: int, length: int) -> Range:
    return Range(Position(line, 0), Position(line, length))


def analyze(uri: str, text: str) -> tuple[List[BabySymbol], List[Diagnostic]]:
    """
    Parse ``text`` and return its top-level symbols and syntax diagnostics.

    Line numbers from the parser are 1-based; LSP positions are 0-based.
    """
    parser = Parser(Lexer(text), uri)
    program = parser.parse()

    diagnostics = [
        Diagnostic(
            range=_line_range(max(line - 1, 0), 0),
            message=message,
            severity=DiagnosticSeverity.Error,
            source="baby",
        )
        for message, line in zip(parser.errors, parser.error_lines)
    ]

    symbols: List[BabySymbol] = []
    for stmt in program[1]:
        if stmt[0] != Node.LET:
            continue
        _, name, op, value, line = stmt
        if value[0] == Node.FUNC:
            detail = f"let {name} {op.value} fun({', '.join(value[1])})"
            kind = SymbolKind.Function
        else:
            detail = f"let {name}"
            kind = SymbolKind.Variable
        symbols.append(BabySymbol(name, kind, uri, line - 1, detail))
    return symbols, diagnostics


class BabyLanguageServer(LanguageServer):
    """Language server for Baby source files."""

    def __init__(self) -> None:
        super().__init__("baby-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[BabySymbol]] = {}
        self.global_symbols: Dict[str, List[BabySymbol]] = {}

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Parse ``text``, update the symbol index for ``uri`` and return
        the document's diagnostics."""
        symbols, diagnostics = analyze(uri, text)
        self.symbols_by_uri[uri] = symbols
        self._rebuild_global_index()
        return diagnostics

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def lookup(self, name: str) -> Optional[BabySymbol]:
        """Return the first binding site of ``name``, if any."""
        matches = self.global_symbols.get(name)
        return matches[0] if matches else None

    def refresh(self, uri: str, text: str) -> None:
        self.publish_diagnostics(uri, self.update_index(uri, text))


lang_server = BabyLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: BabyLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index and check a document when it is opened."""
    ls.refresh(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: BabyLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index and re-check a document when it changes."""
    if params.content_changes:
        ls.refresh(params.text_document.uri, params.content_changes[-1].text)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: BabyLanguageServer, params: DefinitionParams):
    """Return the definition location for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    sym = ls.lookup(word) if word else None
    if sym is None:
        return None
    return Location(uri=sym.uri, range=_line_range(sym.line, len(sym.name)))


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: BabyLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    sym = ls.lookup(word) if word else None
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: BabyLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    result: List[DocumentSymbol] = []
    for sym in ls.symbols_by_uri.get(params.text_document.uri, []):
        rng = _line_range(sym.line, len(sym.name))
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
