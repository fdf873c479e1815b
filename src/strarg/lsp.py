"""Minimal LSP server for command scripts — diagnostics only."""

from __future__ import annotations

import argparse
from pathlib import Path

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

from strarg.cli import CONFIG_NAME, config_comment, config_layout, load_config
from strarg.command import check_layout
from strarg.script import check_script

server = LanguageServer("strarg-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _diagnostic(line: int, col: int, message: str) -> Diagnostic:
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + 1),
        ),
        message=message,
        severity=DiagnosticSeverity.Error,
        source="strarg",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Check every command line of the document and publish diagnostics.

    The layout and comment prefix come from the strarg.toml beside the
    document, as for the command-line tool.
    """
    doc = ls.workspace.get_text_document(uri)
    doc_dir = Path(doc.path).parent if doc.path else Path(".")
    diagnostics: list[Diagnostic] = []

    try:
        config = load_config(None, doc_dir)
        specs = config_layout(config)
        check_layout(specs)
    except (argparse.ArgumentTypeError, ValueError) as exc:
        diagnostics.append(_diagnostic(0, 0, f"invalid {CONFIG_NAME}: {exc}"))
    else:
        for issue in check_script(doc.source, specs, config_comment(config)):
            diagnostics.append(
                _diagnostic(issue.line - 1, issue.error.cursor, issue.error.message)
            )

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
