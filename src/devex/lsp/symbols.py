"""Document symbol provider for Yantrabhashi.

Lists every declared variable for the Outline view.
"""

from __future__ import annotations

from lsprotocol import types as lsp

from src.devex.lsp.diagnostics import AnalysisResult
from src.devex.lsp.utils import line_range, name_range


def get_document_symbols(result: AnalysisResult) -> list[lsp.DocumentSymbol]:
    """Extract one Variable symbol per declaration, in source order."""
    if not result.validation:
        return []

    source_lines = result.source.splitlines()
    infos = sorted(result.validation.symbols.symbols.values(), key=lambda s: s.line)
    return [
        lsp.DocumentSymbol(
            name=info.name,
            kind=lsp.SymbolKind.Variable,
            detail=info.var_type.value,
            range=line_range(source_lines, info.line),
            selection_range=name_range(source_lines, info.line, info.name),
        )
        for info in infos
    ]
