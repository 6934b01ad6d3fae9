from __future__ import annotations

"""
A minimal pygls-based Language Server for Lispy.

Features:
- Text synchronization and document store
- Diagnostics: reader syntax errors, unbalanced delimiters, out-of-range integers
- Hover: builtin signatures and names bound by def
- Completion: builtins and names bound by def

Note: We avoid evaluating the buffer. We build a static index per document.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
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
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)

from lispy_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, build_index, word_at


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class LispyLanguageServer(LanguageServer):
    CMD_NAME = "lispy-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.0.1")
        self.documents: Dict[str, DocumentState] = {}


ls = LispyLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(server: LispyLanguageServer, params: DidOpenTextDocumentParams):
    _update(server, params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(server: LispyLanguageServer, params: DidChangeTextDocumentParams):
    _update(server, params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(server: LispyLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    server.documents.pop(uri, None)
    server.publish_diagnostics(uri, [])


def _update(server: LispyLanguageServer, uri: str) -> None:
    # pygls applies open/change events (full or ranged) to the workspace copy
    # before our handlers run, so it always holds the whole buffer
    text = server.workspace.get_text_document(uri).source
    idx = build_index(text)
    server.documents[uri] = DocumentState(text=text, index=idx)
    server.publish_diagnostics(uri, diagnostics_for(idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + 1))


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []

    if idx.syntax_error is not None:
        err = idx.syntax_error
        diags.append(
            Diagnostic(
                range=_mk_range(err.line, err.col),
                message=err.message,
                severity=DiagnosticSeverity.Error,
                source=ls.CMD_NAME,
            )
        )

    if idx.paren_balance != 0 or idx.brace_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unbalanced delimiters detected",
                severity=DiagnosticSeverity.Warning,
                source=ls.CMD_NAME,
            )
        )

    for issue in idx.invalid_numbers:
        diags.append(
            Diagnostic(
                range=_mk_range(issue.line, issue.col),
                message="Integer literal does not fit in 64 bits",
                severity=DiagnosticSeverity.Warning,
                source=ls.CMD_NAME,
            )
        )

    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(server: LispyLanguageServer, params: HoverParams) -> Optional[Hover]:
    state = server.documents.get(params.text_document.uri)
    if not state:
        return None

    word = word_at(state.text, params.position.line, params.position.character)
    if not word:
        return None

    if word in BUILTIN_SIGNATURES:
        contents = BUILTIN_SIGNATURES[word]
    elif word in state.index.symbols:
        sdef = state.index.symbols[word]
        contents = f"{word} (defined at {sdef.line + 1}:{sdef.col + 1})"
    else:
        return None

    return Hover(contents=MarkupContent(kind=MarkupKind.Markdown, value=f"`{contents}`"))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(server: LispyLanguageServer, params: CompletionParams) -> CompletionList:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    state = server.documents.get(params.text_document.uri)
    if state:
        items.extend(
            CompletionItem(label=name, kind=CompletionItemKind.Variable)
            for name in state.index.symbols
            if name not in BUILTIN_SIGNATURES
        )
    return CompletionList(is_incomplete=False, items=items)


def main():
    ls.start_io()


if __name__ == "__main__":
    main()
