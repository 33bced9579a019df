"""Statement segmenter for the Yantrabhashi language.

Groups physical source lines into logical statements. A statement ends at a
trailing ';', a trailing '[' or a lone ']'. Loop headers may span several
physical lines and are only closed by ') ['.

String literals are not scanned: a literal containing ';', '[', ']' or '#'
is split (or truncated) at that character.
"""

import re
from dataclasses import dataclass

from .tokens import LOOP

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_INLINE_COMMENT_RE = re.compile(r"#.*$")
_WHITESPACE_RE = re.compile(r"\s+")
_LOOP_OPEN_RE = re.compile(re.escape(LOOP) + r"\s*\(")
_LOOP_CLOSE_RE = re.compile(r"\)\s*\[$")
_TERMINATOR_RE = re.compile(r";\s*$|\[$|^\]$")


@dataclass(frozen=True)
class LogicalStatement:
    text: str
    line_num: int

    def __repr__(self):
        return f"LogicalStatement({self.text!r}, line {self.line_num})"


def normalize(text: str) -> str:
    """Collapse every run of whitespace to a single space."""
    return _WHITESPACE_RE.sub(" ", text).strip()


class Segmenter:
    def __init__(self, source: str):
        self.source = source
        self.statements: list[LogicalStatement] = []
        self._buffer: list[str] = []
        self._start_line = 0
        self._in_loop_header = False

    def segment(self) -> list[LogicalStatement]:
        for line_num, raw_line in enumerate(_LINE_SPLIT_RE.split(self.source), start=1):
            line = _INLINE_COMMENT_RE.sub("", raw_line).strip()
            if not line:
                continue
            if not self._buffer:
                self._start_line = line_num
            self._buffer.append(line)
            text = " ".join(self._buffer)

            if not self._in_loop_header and _LOOP_OPEN_RE.search(text):
                self._in_loop_header = True

            if self._in_loop_header:
                if _LOOP_CLOSE_RE.search(text):
                    self._flush()
                continue

            if _TERMINATOR_RE.search(text):
                self._flush()

        # Unterminated trailing statement; the classifier reports it
        if self._buffer:
            self._flush()
        return self.statements

    def _flush(self):
        text = normalize(" ".join(self._buffer))
        self.statements.append(LogicalStatement(text, self._start_line))
        self._buffer = []
        self._in_loop_header = False


def segment(source: str) -> list[LogicalStatement]:
    """Split source text into logical statements."""
    return Segmenter(source).segment()
