"""Minimal LSP server for Lox — lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from loxscan import __version__
from loxscan.errors import locate
from loxscan.scanner import scan
from loxscan.tokens import LexicalError

server = LanguageServer(
    "loxscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_len(text: str) -> int:
    """Length of text in UTF-16 code units, the unit LSP positions count in."""
    return len(text.encode("utf-16-le")) // 2


def to_diagnostic(error: LexicalError, source: str) -> Diagnostic:
    """Convert a lexical error into an LSP diagnostic (0-based positions).

    The range runs from the start of the malformed lexeme to the end of its
    source line.
    """
    line, col = locate(source, error.offset)
    line_start = error.offset - (col - 1)
    line_end = source.find("\n", error.offset)
    if line_end == -1:
        line_end = len(source)
    start_char = _utf16_len(source[line_start : error.offset])
    end_char = start_char + max(1, _utf16_len(source[error.offset : line_end]))
    return Diagnostic(
        range=Range(
            start=Position(line=line - 1, character=start_char),
            end=Position(line=line - 1, character=end_char),
        ),
        message=error.message,
        severity=DiagnosticSeverity.Error,
        source="loxscan",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per lexical error."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics = [to_diagnostic(error, source) for error in scan(source).errors]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
