"""Type utilities: literal shapes, expression typing, and descriptions."""

from ..expressions import (
    ExpressionError, identifiers, is_arithmetic, is_integer_literal, is_name,
    is_string_literal, parse_arithmetic,
)
from ..tokens import ARITHMETIC_OPS, VarType
from .core import SymbolTable


class TypeUtilsMixin:

    def _value_matches_type(self, var_type: VarType, value: str) -> bool:
        """Shape check for a declaration initializer."""
        value = value.strip()
        if var_type is VarType.NUMBER:
            return is_integer_literal(value)
        return is_string_literal(value)

    def _expr_matches_type(self, symbols: SymbolTable, var_type: VarType, expr: str) -> bool:
        expr = expr.strip()
        if var_type is VarType.NUMBER:
            return self._is_integer_expression(symbols, expr)
        if is_string_literal(expr):
            return True
        return is_name(expr) and symbols.type_of(expr) is VarType.TEXT

    def _is_integer_expression(self, symbols: SymbolTable, expr: str) -> bool:
        if is_integer_literal(expr):
            return True
        if is_name(expr):
            return symbols.type_of(expr) is VarType.NUMBER
        if '"' in expr:
            return False
        try:
            names = parse_arithmetic(expr)
        except ExpressionError:
            return False
        return all(symbols.type_of(name) is VarType.NUMBER for name in names)

    def _undeclared_names(self, symbols: SymbolTable, expr: str) -> list[str]:
        """Undeclared identifiers of an arithmetic expression, else []."""
        if not is_arithmetic(expr):
            return []
        return [name for name in identifiers(expr) if name not in symbols]

    def _describe_expression(self, symbols: SymbolTable, expr: str) -> str:
        expr = expr.strip()
        if is_integer_literal(expr):
            return "integer literal"
        if is_string_literal(expr):
            return "string literal"
        if is_name(expr):
            var_type = symbols.type_of(expr)
            if var_type is None:
                return "undeclared variable"
            return f"{var_type.noun} variable"
        if '"' in expr:
            return "mixed string and arithmetic expression"
        if any(op in expr for op in ARITHMETIC_OPS):
            return "arithmetic expression"
        return "invalid expression"
