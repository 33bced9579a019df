"""Statement dispatch: per-line classification, assignment, print/scan, fallback."""

from ..expressions import is_string_literal
from ..forms import (
    PREFIX_FORMS, Assignment, BlockCloser, Declaration, ElseHeader, IfHeader,
    InputOutput, LoopHeader, MalformedElse, UnterminatedDeclaration, Unknown,
    classify,
)
from ..segmenter import LogicalStatement
from .core import ValidationState


class StatementsMixin:

    def _check_logical_statement(self, state: ValidationState, stmt: LogicalStatement):
        text = stmt.text
        line = stmt.line_num
        while text:
            form = classify(text)
            if isinstance(form, BlockCloser):
                text = self._close_block(state, form, line)
                continue
            if isinstance(form, PREFIX_FORMS):
                if state.analyzing:
                    self._check_prefix_statement(state, form, line)
                text = text[form.consumed:].strip()
                continue
            if not state.analyzing:
                if text.endswith("["):
                    self._open_block(state, line, analyzed=False)
                return
            self._check_terminal_statement(state, form, text, line)
            return

    def _check_prefix_statement(self, state: ValidationState, form, line: int):
        if isinstance(form, Declaration):
            self._check_declaration(state, form, line)
        elif isinstance(form, Assignment):
            self._check_assignment(state, form, line)
        elif isinstance(form, InputOutput):
            self._check_input_output(state, form, line)

    def _check_terminal_statement(self, state: ValidationState, form, text: str, line: int):
        """Check a statement that ends the logical line, opening its block if any."""
        kind = "block"
        # Only a rejected loop header leaves its body unchecked
        header_ok = True
        if isinstance(form, UnterminatedDeclaration):
            self._check_unterminated_declaration(state, form, line)
        elif isinstance(form, IfHeader):
            kind = "if"
            self._check_if(state, form, line)
        elif isinstance(form, ElseHeader):
            kind = "else"
        elif isinstance(form, MalformedElse):
            kind = "else"
            self._check_malformed_else(state, form, line)
        elif isinstance(form, LoopHeader):
            kind = "loop"
            header_ok = self._check_loop(state, form, line)
        elif isinstance(form, Unknown):
            self._check_unknown(state, form, line)
        if text.endswith("["):
            self._open_block(state, line, kind, analyzed=header_ok)

    def _check_assignment(self, state: ValidationState, assign: Assignment, line: int):
        name = assign.name
        var_type = state.symbols.type_of(name)
        if var_type is None:
            self._error(state, f"Undeclared variable '{name}'.", line)
            return
        undeclared = self._undeclared_names(state.symbols, assign.expr)
        if undeclared:
            for ident in undeclared:
                self._error(state, f"Undeclared variable '{ident}'.", line)
            return
        if not self._expr_matches_type(state.symbols, var_type, assign.expr):
            desc = self._describe_expression(state.symbols, assign.expr)
            self._error(
                state,
                f"Type mismatch: Cannot assign {desc} to {var_type.noun} variable '{name}'.",
                line)

    def _check_input_output(self, state: ValidationState, io: InputOutput, line: int):
        if is_string_literal(io.arg):
            return
        if io.arg not in state.symbols:
            self._error(state, f"Undeclared variable '{io.arg}' in {io.verb}.", line)

    def _check_unknown(self, state: ValidationState, form: Unknown, line: int):
        if not form.text.endswith(";") and not form.opens_block:
            self._error(state, "Missing semicolon.", line)
        else:
            self._error(state, "Unknown or invalid statement.", line)
