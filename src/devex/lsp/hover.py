"""Hover provider for Yantrabhashi.

Shows keyword documentation, or the declared type of a variable.
"""

from typing import Optional

from lsprotocol import types as lsp

from src.validator.tokens import DECLARE, KEYWORDS
from src.devex.lsp.diagnostics import AnalysisResult
from src.devex.lsp.utils import word_at_position


def get_hover_info(result: AnalysisResult, position: lsp.Position) -> Optional[lsp.Hover]:
    word = word_at_position(result.source, position)
    if word is None:
        return None

    if word in KEYWORDS:
        value = f"```yantra\n{word}\n```\n{KEYWORDS[word]}"
    elif result.validation and word in result.validation.symbols:
        info = result.validation.symbols.lookup(word)
        value = (f"```yantra\n{DECLARE} {info.name}:{info.var_type.value}\n```\n"
                 f"{info.var_type.noun} variable, declared on line {info.line}")
    else:
        return None

    return lsp.Hover(
        contents=lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=value)
    )
