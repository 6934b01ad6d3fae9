import pytest
from lsprotocol.types import (
    CompletionParams,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    HoverParams,
    Position,
    Range,
    TextDocumentContentChangeEvent_Type1,
    TextDocumentIdentifier,
    TextDocumentItem,
    VersionedTextDocumentIdentifier,
)
from pygls.workspace import Workspace

from lispy_lsp import server
from lispy_lsp.indexer import build_index
from lispy_lsp.server import LispyLanguageServer

URI = "file:///tmp/sample.lspy"


@pytest.fixture
def published(monkeypatch):
    """Run the module server against a private workspace, recording diagnostics."""
    workspace = Workspace("file:///tmp")
    monkeypatch.setattr(LispyLanguageServer, "workspace", property(lambda self: workspace))
    monkeypatch.setattr(server.ls, "documents", {})
    sent = {}
    monkeypatch.setattr(server.ls, "publish_diagnostics", lambda uri, diags: sent.__setitem__(uri, diags))
    return workspace, sent


def open_document(workspace, text):
    item = TextDocumentItem(uri=URI, language_id="lispy", version=1, text=text)
    # pygls stores the buffer before dispatching to feature handlers
    workspace.put_text_document(item)
    server.did_open(server.ls, DidOpenTextDocumentParams(text_document=item))


def test_ranged_change_keeps_whole_buffer(published):
    workspace, sent = published
    open_document(workspace, "(def {x} 1)\n(+ x 2)")
    assert sent[URI] == []

    change = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=1, character=6), end=Position(line=1, character=6)),
        text=" 3",
    )
    doc_id = VersionedTextDocumentIdentifier(uri=URI, version=2)
    workspace.update_text_document(doc_id, change)
    server.did_change(server.ls, DidChangeTextDocumentParams(text_document=doc_id, content_changes=[change]))

    state = server.ls.documents[URI]
    assert state.text == "(def {x} 1)\n(+ x 2 3)"
    assert "x" in state.index.symbols
    assert sent[URI] == []


def test_open_broken_buffer_publishes_diagnostics(published):
    workspace, sent = published
    open_document(workspace, "(+ 1\n 99999999999999999999")
    messages = [d.message for d in sent[URI]]
    assert any("unclosed" in m for m in messages)
    assert "Unbalanced delimiters detected" in messages
    assert "Integer literal does not fit in 64 bits" in messages


def test_diagnostics_for_positions():
    diags = server.diagnostics_for(build_index("(head {1}\n"))
    error = diags[0]
    assert error.severity == DiagnosticSeverity.Error
    assert (error.range.start.line, error.range.start.character) == (0, 0)
    assert diags[1].severity == DiagnosticSeverity.Warning
    assert server.diagnostics_for(build_index("(head {1})")) == []


def test_close_clears_diagnostics(published):
    workspace, sent = published
    open_document(workspace, "(+ 1")
    assert sent[URI]
    server.did_close(server.ls, DidCloseTextDocumentParams(text_document=TextDocumentIdentifier(uri=URI)))
    assert sent[URI] == []
    assert URI not in server.ls.documents


@pytest.mark.parametrize("line, character, expected", [
    (0, 2, "`(def {name ...} value ...) -> ()`"),
    (1, 4, "`total (defined at 1:7)`"),
])
def test_hover(published, line, character, expected):
    workspace, _ = published
    open_document(workspace, "(def {total} 1)\n(+ total 2)")
    params = HoverParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=line, character=character))
    assert server.on_hover(server.ls, params).contents.value == expected


def test_hover_unknown_word(published):
    workspace, _ = published
    open_document(workspace, "(foo 1)")
    params = HoverParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=2))
    assert server.on_hover(server.ls, params) is None


def test_completion_lists_builtins_and_document_names(published):
    workspace, _ = published
    open_document(workspace, "(def {total head} 1 2)")
    params = CompletionParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=0))
    labels = [item.label for item in server.on_completion(server.ls, params).items]
    assert labels[:3] == ["list", "head", "tail"]
    assert labels.count("head") == 1
    assert labels[-1] == "total"
