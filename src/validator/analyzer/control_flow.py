"""Control flow: block closers, ELAITHE/ALAITHE headers, MALLI-MALLI loop headers."""

import re
from typing import Optional

from ..expressions import is_integer_literal, is_string_literal
from ..forms import (
    BlockCloser, ElseDefect, ElseHeader, IfHeader, LoopHeader, MalformedElse,
    parse_else_after_closer,
)
from ..segmenter import normalize
from ..tokens import DECLARE, NUMBER_TYPE, ORDERING_OPS, RESERVED_WORDS, VarType
from .core import ValidationState

_CONDITION_RE = re.compile(r"^(\w+)\s*(==|!=|<=|>=|<|>)\s*(.+)$")
_LOOP_DECL_RE = re.compile(rf"^{DECLARE}\s+(\w+)\s*:\s*{NUMBER_TYPE}\s*=\s*-?\d+$")
_LOOP_UPDATE_RE = re.compile(r"^(\w+)\s*=\s*(\w+)\s*\+\s*1$")

_ELSE_DEFECT_MESSAGES = {
    ElseDefect.SEMICOLON_BEFORE_BRACKET:
        "Invalid ALAITHE syntax. Remove semicolon before '['.",
    ElseDefect.SEMICOLON_AFTER_ELSE:
        "Invalid syntax: Remove semicolon between '] ALAITHE' and '['.",
    ElseDefect.SEMICOLON_AFTER_CLOSER:
        "Invalid syntax: Remove semicolon between ']' and 'ALAITHE'.",
}


class ControlFlowMixin:

    def _close_block(self, state: ValidationState, closer: BlockCloser, line: int) -> str:
        """Pop the innermost block and return the text left to classify."""
        if state.blocks:
            state.blocks.pop()
        else:
            self._error(state, "Unmatched closing bracket ']'", line)

        else_form = parse_else_after_closer(closer.remainder)
        if isinstance(else_form, ElseHeader):
            self._open_block(state, line, "else")
            return ""
        if isinstance(else_form, MalformedElse):
            if state.analyzing:
                self._check_malformed_else(state, else_form, line)
            self._open_block(state, line, "else")
            return ""
        return closer.remainder

    def _check_malformed_else(self, state: ValidationState, form: MalformedElse, line: int):
        self._error(state, _ELSE_DEFECT_MESSAGES[form.defect], line)

    # --- ELAITHE ---

    def _check_if(self, state: ValidationState, header: IfHeader, line: int):
        if self.options.check_conditions and not self._condition_is_valid(state, header.condition):
            self._error(state, "Invalid condition in ELAITHE.", line)

    def _condition_is_valid(self, state: ValidationState, condition: str) -> bool:
        m = _CONDITION_RE.match(condition)
        if not m:
            return False
        name, op, value = m.group(1), m.group(2), m.group(3).strip()
        var_type = state.symbols.type_of(name)
        if var_type is None:
            return False
        if var_type is VarType.TEXT:
            if op in ORDERING_OPS:
                return False
            return is_string_literal(value) or state.symbols.type_of(value) is VarType.TEXT
        return is_integer_literal(value) or state.symbols.type_of(value) is VarType.NUMBER

    # --- MALLI-MALLI ---

    def _check_loop(self, state: ValidationState, header: LoopHeader, line: int) -> bool:
        loop_var = self._loop_variable(header.header)
        if loop_var is None:
            self._error(state, "Invalid MALLI-MALLI syntax.", line)
            return False
        # Declared or reaffirmed as an integer; visible inside the body
        existing = state.symbols.lookup(loop_var)
        state.symbols.define(loop_var, VarType.NUMBER, existing.line if existing else line)
        return True

    def _loop_variable(self, header: str) -> Optional[str]:
        """Return the loop variable of a well-formed 'decl; cond; update' header."""
        header = normalize(header)
        if ";;" in header:
            return None
        parts = [part.strip() for part in header.split(";")]
        if len(parts) != 3 or not all(parts):
            return None
        decl, cond, update = parts

        decl_match = _LOOP_DECL_RE.match(decl)
        if not decl_match:
            return None
        loop_var = decl_match.group(1)
        if loop_var in RESERVED_WORDS:
            return None

        cond_match = _CONDITION_RE.match(cond)
        if not cond_match or cond_match.group(1) != loop_var:
            return None

        update_match = _LOOP_UPDATE_RE.match(update)
        if not update_match or update_match.group(1) != loop_var or update_match.group(2) != loop_var:
            return None
        return loop_var
