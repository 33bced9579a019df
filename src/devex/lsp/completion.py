"""Code completion provider for Yantrabhashi.

Provides keyword, declared-variable, and snippet completions.
"""

from lsprotocol import types as lsp

from src.validator.tokens import KEYWORDS
from src.devex.lsp.diagnostics import AnalysisResult


# ---------------------------------------------------------------------------
# Snippet completions
# ---------------------------------------------------------------------------

_SNIPPETS = [
    (
        "PADAM ANKHE",
        "PADAM name:ANKHE = 0;",
        "Integer variable declaration",
        "PADAM ${1:name}:ANKHE = ${2:0};$0",
    ),
    (
        "PADAM VARTTAI",
        'PADAM name:VARTTAI = "";',
        "String variable declaration",
        'PADAM ${1:name}:VARTTAI = "${2}";$0',
    ),
    (
        "ELAITHE",
        "ELAITHE (...) [ ... ]",
        "If block",
        "ELAITHE (${1:condition}) [\n\t$0\n]",
    ),
    (
        "ELAITHE ALAITHE",
        "ELAITHE (...) [ ... ] ALAITHE [ ... ]",
        "If/else blocks",
        "ELAITHE (${1:condition}) [\n\t$2\n] ALAITHE [\n\t$0\n]",
    ),
    (
        "MALLI-MALLI",
        "MALLI-MALLI (...) [ ... ]",
        "Counting loop",
        ("MALLI-MALLI (PADAM ${1:i}:ANKHE = ${2:1}; ${1:i} <= ${3:10}; "
         "${1:i} = ${1:i} + 1) [\n\t$0\n]"),
    ),
]


# ---------------------------------------------------------------------------
# Completion builders
# ---------------------------------------------------------------------------


def _keyword_completions() -> list[lsp.CompletionItem]:
    items = []
    for kw, doc in KEYWORDS.items():
        items.append(
            lsp.CompletionItem(
                label=kw,
                kind=lsp.CompletionItemKind.Keyword,
                detail=doc,
                insert_text=kw,
            )
        )
    return items


def _snippet_completions() -> list[lsp.CompletionItem]:
    items = []
    for label, filter_text, doc, body in _SNIPPETS:
        items.append(
            lsp.CompletionItem(
                label=label,
                kind=lsp.CompletionItemKind.Snippet,
                detail=doc,
                insert_text=body,
                insert_text_format=lsp.InsertTextFormat.Snippet,
                filter_text=filter_text,
            )
        )
    return items


def _variable_completions(result: AnalysisResult) -> list[lsp.CompletionItem]:
    if not result.validation:
        return []
    items = []
    for name, info in result.validation.symbols.symbols.items():
        items.append(
            lsp.CompletionItem(
                label=name,
                kind=lsp.CompletionItemKind.Variable,
                detail=f"{name}:{info.var_type.value}",
                insert_text=name,
            )
        )
    return items


def get_completions(result: AnalysisResult, position: lsp.Position) -> lsp.CompletionList:
    items: list[lsp.CompletionItem] = []
    items.extend(_variable_completions(result))
    items.extend(_keyword_completions())
    items.extend(_snippet_completions())
    return lsp.CompletionList(is_incomplete=False, items=items)
