#!/usr/bin/env python3
"""Yantrabhashi Language Server.

Publishes validator diagnostics for .yb files and provides document
symbols, hover, and code completion.
"""

import sys
import logging

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from src.validator.analyzer import ValidatorOptions
from src.devex.lsp.diagnostics import AnalysisResult, compute_diagnostics
from src.devex.lsp.symbols import get_document_symbols
from src.devex.lsp.hover import get_hover_info
from src.devex.lsp.completion import get_completions

logger = logging.getLogger("yantra-lsp")

server = LanguageServer("yantra-lsp", "0.1.0")

# Options from initializationOptions (e.g. {"checkConditions": false})
_options = ValidatorOptions()

# Cache: uri -> AnalysisResult (latest)
_analysis_cache: dict[str, AnalysisResult] = {}


def _validate_document(uri: str, source: str):
    """Run the validator and publish diagnostics."""
    result = compute_diagnostics(uri, source, _options)
    _analysis_cache[uri] = result
    logger.info("%s: %d diagnostics", uri, len(result.diagnostics))
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=result.diagnostics)
    )


@server.feature(lsp.INITIALIZE)
def initialize(params: lsp.InitializeParams):
    init_options = params.initialization_options or {}
    if isinstance(init_options, dict) and "checkConditions" in init_options:
        _options.check_conditions = bool(init_options["checkConditions"])
    logger.info("condition checking %s",
                "enabled" if _options.check_conditions else "disabled")


@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: lsp.DidOpenTextDocumentParams):
    _validate_document(
        params.text_document.uri,
        params.text_document.text,
    )


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: lsp.DidChangeTextDocumentParams):
    doc = server.workspace.get_text_document(params.text_document.uri)
    _validate_document(params.text_document.uri, doc.source)


@server.feature(lsp.TEXT_DOCUMENT_DID_SAVE)
def did_save(params: lsp.DidSaveTextDocumentParams):
    doc = server.workspace.get_text_document(params.text_document.uri)
    _validate_document(params.text_document.uri, doc.source)


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    _analysis_cache.pop(uri, None)
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=[])
    )


@server.feature(lsp.TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbol(params: lsp.DocumentSymbolParams):
    result = _analysis_cache.get(params.text_document.uri)
    if result:
        return get_document_symbols(result)
    return []


@server.feature(lsp.TEXT_DOCUMENT_HOVER)
def hover(params: lsp.HoverParams):
    result = _analysis_cache.get(params.text_document.uri)
    if result:
        return get_hover_info(result, params.position)
    return None


@server.feature(lsp.TEXT_DOCUMENT_COMPLETION)
def completion(params: lsp.CompletionParams):
    uri = params.text_document.uri
    result = _analysis_cache.get(uri)
    if not result:
        doc = server.workspace.get_text_document(uri)
        result = compute_diagnostics(uri, doc.source, _options)
        _analysis_cache[uri] = result
    return get_completions(result, params.position)


def main():
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    server.start_io()


if __name__ == "__main__":
    main()
