"""Statement forms of the Yantrabhashi language.

Every logical statement is classified into exactly one of the variants
below. Declarations, assignments and print/scan statements are matched as a
prefix; ``consumed`` is the length of the matched text so the caller can
continue with whatever follows on the same logical line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .tokens import DECLARE, ELSE, IF, LOOP, PRINT, SCAN, VarType

_TYPES = f"{VarType.NUMBER.value}|{VarType.TEXT.value}"
_DECL_HEAD = rf"^{DECLARE}\s+(\w+)\s*:\s*({_TYPES})"

_DECLARATION_RE = re.compile(_DECL_HEAD + r"\s*(?:=\s*([^;\s][^;]*))?;+\s*")
_DECLARATION_NO_SEMI_RE = re.compile(_DECL_HEAD + r"\s*=\s*([^;\[]+)$")
_DECLARATION_RUN_ON_RE = re.compile(_DECL_HEAD + r"\s+(?![=;\[])\S")
_ASSIGNMENT_RE = re.compile(r"^(\w+)\s*=(?!=)\s*([^;\s][^;]*);+\s*")
_INPUT_OUTPUT_RE = re.compile(rf"^({PRINT}|{SCAN})\s*\(\s*(.+?)\s*\)\s*;+\s*")
_IF_RE = re.compile(rf"^{IF}\s*\((.+)\)\s*\[$")
_ELSE_RE = re.compile(rf"^{ELSE}\s*\[$")
_ELSE_SEMICOLON_RE = re.compile(rf"^{ELSE}\s*;\s*\[$")
_SEMICOLON_ELSE_RE = re.compile(rf"^;\s*{ELSE}\s*\[$")
_LOOP_RE = re.compile(rf"^{re.escape(LOOP)}\s*\((.+)\)\s*\[$")


class ElseDefect(Enum):
    SEMICOLON_BEFORE_BRACKET = "ALAITHE ; ["
    SEMICOLON_AFTER_ELSE = "] ALAITHE ; ["
    SEMICOLON_AFTER_CLOSER = "] ; ALAITHE ["


@dataclass
class Declaration:
    name: str = ""
    var_type: VarType = None
    value: Optional[str] = None
    consumed: int = 0


@dataclass
class UnterminatedDeclaration:
    name: str = ""
    var_type: VarType = None


@dataclass
class Assignment:
    name: str = ""
    expr: str = ""
    consumed: int = 0


@dataclass
class InputOutput:
    keyword: str = ""
    arg: str = ""
    consumed: int = 0

    @property
    def verb(self) -> str:
        return "print" if self.keyword == PRINT else "scan"


@dataclass
class IfHeader:
    condition: str = ""


@dataclass
class ElseHeader:
    pass


@dataclass
class MalformedElse:
    defect: ElseDefect = ElseDefect.SEMICOLON_BEFORE_BRACKET


@dataclass
class LoopHeader:
    header: str = ""


@dataclass
class BlockCloser:
    remainder: str = ""


@dataclass
class Unknown:
    text: str = ""

    @property
    def opens_block(self) -> bool:
        return self.text.endswith("[")


Statement = Union[
    Declaration, UnterminatedDeclaration, Assignment, InputOutput,
    IfHeader, ElseHeader, MalformedElse, LoopHeader, BlockCloser, Unknown,
]

# Forms that are matched as a prefix and may be followed by more statements
PREFIX_FORMS = (Declaration, Assignment, InputOutput)


def parse_declaration(text: str) -> Optional[Declaration]:
    m = _DECLARATION_RE.match(text)
    if not m:
        return None
    value = m.group(3).strip() if m.group(3) is not None else None
    return Declaration(name=m.group(1), var_type=VarType(m.group(2)),
                       value=value, consumed=m.end())


def parse_unterminated_declaration(text: str) -> Optional[UnterminatedDeclaration]:
    """A declaration with an initializer but no ';', or one that ran into
    the next statement because its ';' was forgotten."""
    m = _DECLARATION_NO_SEMI_RE.match(text) or _DECLARATION_RUN_ON_RE.match(text)
    if not m:
        return None
    return UnterminatedDeclaration(name=m.group(1), var_type=VarType(m.group(2)))


def parse_assignment(text: str) -> Optional[Assignment]:
    m = _ASSIGNMENT_RE.match(text)
    if not m:
        return None
    return Assignment(name=m.group(1), expr=m.group(2).strip(), consumed=m.end())


def parse_input_output(text: str) -> Optional[InputOutput]:
    m = _INPUT_OUTPUT_RE.match(text)
    if not m:
        return None
    return InputOutput(keyword=m.group(1), arg=m.group(2), consumed=m.end())


def parse_if(text: str) -> Optional[IfHeader]:
    m = _IF_RE.match(text)
    return IfHeader(condition=m.group(1).strip()) if m else None


def parse_else(text: str) -> Optional[Union[ElseHeader, MalformedElse]]:
    if _ELSE_RE.match(text):
        return ElseHeader()
    if _ELSE_SEMICOLON_RE.match(text):
        return MalformedElse(ElseDefect.SEMICOLON_BEFORE_BRACKET)
    return None


def parse_else_after_closer(remainder: str) -> Optional[Union[ElseHeader, MalformedElse]]:
    """Recognise the text following ']' in a '] ALAITHE [' line."""
    if _ELSE_RE.match(remainder):
        return ElseHeader()
    if _ELSE_SEMICOLON_RE.match(remainder):
        return MalformedElse(ElseDefect.SEMICOLON_AFTER_ELSE)
    if _SEMICOLON_ELSE_RE.match(remainder):
        return MalformedElse(ElseDefect.SEMICOLON_AFTER_CLOSER)
    return None


def parse_loop(text: str) -> Optional[LoopHeader]:
    m = _LOOP_RE.match(text)
    return LoopHeader(header=m.group(1).strip()) if m else None


_PARSERS = (
    parse_declaration,
    parse_unterminated_declaration,
    parse_assignment,
    parse_input_output,
    parse_if,
    parse_else,
    parse_loop,
)


def classify(text: str) -> Statement:
    """Return the single statement form that ``text`` begins with."""
    if text.startswith("]"):
        return BlockCloser(remainder=text[1:].strip())
    for parser in _PARSERS:
        form = parser(text)
        if form is not None:
            return form
    return Unknown(text=text)
