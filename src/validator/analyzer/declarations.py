"""Declaration checks: reserved names, redeclaration, initializer shapes."""

from ..forms import Declaration, UnterminatedDeclaration
from ..tokens import RESERVED_WORDS, VarType
from .core import ValidationState


class DeclarationsMixin:

    def _check_declaration(self, state: ValidationState, decl: Declaration, line: int):
        name = decl.name
        if name in RESERVED_WORDS:
            self._error(state, f"Variable name '{name}' is reserved.", line)
            return
        if name in state.symbols:
            self._error(state, f"Variable '{name}' already declared.", line)
            return
        state.symbols.define(name, decl.var_type, line)
        if decl.value is not None and not self._value_matches_type(decl.var_type, decl.value):
            expected = "integer" if decl.var_type is VarType.NUMBER else "string in quotes"
            self._error(
                state,
                f"Invalid {decl.var_type.noun} value for '{name}'. Expected {expected}.",
                line)

    def _check_unterminated_declaration(self, state: ValidationState,
                                        decl: UnterminatedDeclaration, line: int):
        self._error(state, "Missing semicolon in variable declaration.", line)
        # Still bind the name so later uses don't cascade into undeclared errors
        if decl.name not in RESERVED_WORDS and decl.name not in state.symbols:
            state.symbols.define(decl.name, decl.var_type, line)
