"""Shared utility functions for the Yantrabhashi LSP feature modules."""

from __future__ import annotations

import re
from typing import Optional

from lsprotocol import types as lsp

_WORD_CHAR_RE = re.compile(r"[\w-]")


def word_at_position(source: str, position: lsp.Position) -> Optional[str]:
    """Return the identifier or keyword under a 0-based LSP position.

    Hyphens are word characters so that MALLI-MALLI is one word; leading and
    trailing hyphens (a minus sign) are dropped.
    """
    lines = source.splitlines()
    if position.line >= len(lines):
        return None
    text = lines[position.line]
    col = min(position.character, len(text))

    start = col
    while start > 0 and _WORD_CHAR_RE.match(text[start - 1]):
        start -= 1
    end = col
    while end < len(text) and _WORD_CHAR_RE.match(text[end]):
        end += 1
    word = text[start:end].strip("-")
    return word or None


def line_range(source_lines: list[str], line: int) -> lsp.Range:
    """Range covering a whole 1-based source line."""
    line_0 = max(0, line - 1)
    end_col = len(source_lines[line_0]) if line_0 < len(source_lines) else 0
    return lsp.Range(
        start=lsp.Position(line=line_0, character=0),
        end=lsp.Position(line=line_0, character=end_col),
    )


def name_range(source_lines: list[str], line: int, name: str) -> lsp.Range:
    """Range of the first occurrence of ``name`` on a 1-based line."""
    line_0 = max(0, line - 1)
    text = source_lines[line_0] if line_0 < len(source_lines) else ""
    m = re.search(rf"\b{re.escape(name)}\b", text)
    start = m.start() if m else 0
    return lsp.Range(
        start=lsp.Position(line=line_0, character=start),
        end=lsp.Position(line=line_0, character=start + len(name)),
    )
