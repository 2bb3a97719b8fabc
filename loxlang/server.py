"""
Lox Language Server.

This server provides basic language features for Lox source files using
`pygls`. It reuses the Lox scanner and parser to publish lexical and syntax
diagnostics as the document changes, and builds a simple index of top-level
``var`` declarations supporting definition lookup, hover information, and
document symbols.


File: server.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    DefinitionParams,
    Diagnostic as LspDiagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
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
from pygls.server import LanguageServer

from loxlang.exceptions import Diagnostic
from loxlang.lexer import scan
from loxlang.nodes import VarDecl
from loxlang.parser import parse_program
from loxlang.printer import format_expr


@dataclass
class LoxSymbol:
    """Represents a top-level variable declared in a Lox file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    column: int
    detail: str

    @property
    def range(self) -> Range:
        return Range(
            Position(self.line, self.column),
            Position(self.line, self.column + len(self.name)),
        )


def _line_range(lines: List[str], line: int) -> Range:
    """Range covering source ``line`` (1-based), clamped to the document."""
    index = min(max(line - 1, 0), max(len(lines) - 1, 0))
    length = len(lines[index]) if lines else 0
    return Range(Position(index, 0), Position(index, length))


def to_lsp_diagnostics(diagnostics: List[Diagnostic], text: str) -> List[LspDiagnostic]:
    """Convert scanner/parser diagnostics to LSP diagnostics spanning their line."""
    lines = text.splitlines()
    return [
        LspDiagnostic(
            range=_line_range(lines, diagnostic.line),
            message=f"Error{diagnostic.where}: {diagnostic.message}",
            severity=DiagnosticSeverity.Error,
            source="lox",
        )
        for diagnostic in diagnostics
    ]


def analyze(uri: str, text: str) -> tuple[List[LoxSymbol], List[Diagnostic]]:
    """Scan and parse ``text``; return its top-level symbols and all diagnostics."""
    tokens, lex_errors = scan(text)
    statements, syntax_errors = parse_program(tokens)
    lines = text.splitlines()
    symbols: List[LoxSymbol] = []
    for stmt in statements:
        if not isinstance(stmt, VarDecl):
            continue
        name = stmt.name
        line = name.line - 1
        column = max(lines[line].find(name.lexeme), 0) if line < len(lines) else 0
        if stmt.initializer is None:
            detail = f"var {name.lexeme}"
        else:
            detail = f"var {name.lexeme} = {format_expr(stmt.initializer)}"
        symbols.append(LoxSymbol(name.lexeme, SymbolKind.Variable, uri, line, column, detail))
    return symbols, [*lex_errors, *syntax_errors]


class LoxLanguageServer(LanguageServer):
    """Language server for Lox source files."""

    def __init__(self) -> None:
        super().__init__("lox-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[LoxSymbol]] = {}
        self.global_symbols: Dict[str, List[LoxSymbol]] = {}

    def update_index(self, uri: str, text: str) -> List[LspDiagnostic]:
        """Analyze ``text``, update the symbol index for ``uri`` and return diagnostics."""
        symbols, diagnostics = analyze(uri, text)
        self.symbols_by_uri[uri] = symbols
        self._rebuild_global_index()
        return to_lsp_diagnostics(diagnostics, text)

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def lookup(self, name: str) -> Optional[LoxSymbol]:
        """Return the first indexed declaration of ``name``."""
        matches = self.global_symbols.get(name)
        return matches[0] if matches else None

    def refresh(self, uri: str, text: str) -> None:
        """Re-index a document and publish its diagnostics."""
        self.publish_diagnostics(uri, self.update_index(uri, text))


lang_server = LoxLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LoxLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    ls.refresh(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LoxLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.refresh(doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: LoxLanguageServer, params: DefinitionParams):
    """Return the definition location for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    sym = ls.lookup(word) if word else None
    if sym is None:
        return None
    return Location(uri=sym.uri, range=sym.range)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: LoxLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    sym = ls.lookup(word) if word else None
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: LoxLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    return [
        DocumentSymbol(
            name=sym.name,
            kind=sym.kind,
            range=sym.range,
            selection_range=sym.range,
            detail=sym.detail,
        )
        for sym in symbols
    ]


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
