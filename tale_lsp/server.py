from __future__ import annotations

"""
A minimal pygls-based Language Server for TALE.

Features:
- Text synchronization and document store
- Diagnostics: reader errors, unexpected `)`, unclosed `(`
- Hover: primitive and special form signatures, `def`-bound names
- Completion: primitives, special forms, `def`-bound names
- Signature Help: for primitives and special forms
- Document Symbols: from indexer

Note: We never evaluate the buffer. We build a static index per document.
"""

import logging
from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    Hover,
    MarkupContent,
    MarkupKind,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    HoverParams,
    DocumentSymbolParams,
    DocumentSymbol,
    SymbolKind,
    SignatureHelp,
    SignatureHelpOptions,
    SignatureInformation,
    ParameterInformation,
    SignatureHelpParams,
)

from tale import __version__
from tale_lsp.indexer import build_index, BUILTIN_SIGNATURES, SPECIAL_FORM_SIGNATURES, DocumentIndex

logger = logging.getLogger(__name__)

SOURCE = "tale-ls"
ALL_SIGNATURES: Dict[str, str] = {**BUILTIN_SIGNATURES, **SPECIAL_FORM_SIGNATURES}


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class TaleLanguageServer(LanguageServer):
    CMD_NAME = "tale-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}

    def update_document(self, uri: str, text: str) -> DocumentState:
        state = DocumentState(text=text, index=build_index(text))
        self.documents[uri] = state
        return state


ls = TaleLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(ls: TaleLanguageServer, params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    state = ls.update_document(uri, params.text_document.text or "")
    ls.publish_diagnostics(uri, compute_diagnostics(state))


@ls.feature("textDocument/didChange")
def did_change(ls: TaleLanguageServer, params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        previous = ls.documents.get(uri)
        text = previous.text if previous else ""
    state = ls.update_document(uri, text)
    ls.publish_diagnostics(uri, compute_diagnostics(state))


@ls.feature("textDocument/didClose")
def did_close(ls: TaleLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def compute_diagnostics(state: DocumentState) -> List[Diagnostic]:
    idx = state.index
    diags: List[Diagnostic] = []

    if idx.unexpected_close is not None:
        line, col = idx.unexpected_close
        diags.append(
            Diagnostic(
                range=_mk_range(line, col),
                message="Unexpected `)`",
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
    if idx.unclosed_open is not None:
        line, col = idx.unclosed_open
        diags.append(
            Diagnostic(
                range=_mk_range(line, col),
                message="Could not find closing `)`",
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
    # Reader errors not tied to a parenthesis position
    if not diags and idx.reader_error is not None:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message=idx.reader_error,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
    return diags


# --- Hover ---
def hover_text(state: DocumentState, position: Position) -> Optional[str]:
    word = _extract_word_at(state.text, position)
    if not word:
        return None
    if word in ALL_SIGNATURES:
        return ALL_SIGNATURES[word]
    sdef = state.index.symbols.get(word)
    if sdef is not None:
        return f"{word}: {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"
    return None


@ls.feature("textDocument/hover")
def on_hover(ls: TaleLanguageServer, params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    contents = hover_text(state, params.position)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
def completion_items(state: Optional[DocumentState]) -> List[CompletionItem]:
    items: List[CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    for name, sig in SPECIAL_FORM_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    if state is not None:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return items


@ls.feature("textDocument/completion", CompletionOptions(trigger_characters=["("]))
def on_completion(ls: TaleLanguageServer, params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    return CompletionList(is_incomplete=False, items=completion_items(state))


# --- Signature Help ---
def signature_help(state: DocumentState, position: Position) -> Optional[SignatureHelp]:
    callee = _extract_callee_name(_get_line_prefix(state.text, position))
    if not callee:
        return None
    sig = ALL_SIGNATURES.get(callee)
    if not sig:
        return None

    # Parameters are the tokens after the callee name
    params_list = [p for p in sig.strip("()").split(" ")[1:] if p]
    parameters = [ParameterInformation(label=p) for p in params_list]
    return SignatureHelp(
        signatures=[SignatureInformation(label=sig, parameters=parameters)],
        active_signature=0,
        active_parameter=0,
    )


@ls.feature("textDocument/signatureHelp", SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(ls: TaleLanguageServer, params: SignatureHelpParams) -> Optional[SignatureHelp]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return signature_help(state, params.position)


# --- Document Symbols ---
def document_symbols(state: DocumentState) -> List[DocumentSymbol]:
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


@ls.feature("textDocument/documentSymbol")
def on_document_symbols(ls: TaleLanguageServer, params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return document_symbols(state)


# --- Helpers ---

def _get_line_prefix(text: str, pos: Position) -> str:
    # Text from the start of the line up to pos
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return ""
    return lines[pos.line][: pos.character]


def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in " \t()\n\r":
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in " \t()\n\r":
        end += 1
    word = line[start:end]
    return word or None


def _extract_callee_name(prefix: str) -> Optional[str]:
    # Token following the last '('
    lp = prefix.rfind("(")
    if lp == -1:
        return None
    tail = prefix[lp + 1:].lstrip()
    if not tail:
        return None
    for sep in (" ", "\t", "\n", "\r", ")"):
        p = tail.find(sep)
        if p != -1:
            tail = tail[:p]
    return tail or None


def main() -> None:
    logger.debug("starting %s over stdio", TaleLanguageServer.CMD_NAME)
    ls.start_io()


if __name__ == "__main__":
    main()
