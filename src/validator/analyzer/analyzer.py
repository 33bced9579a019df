"""Validator assembly: combines all checking mixins into the final Validator class."""

from .core import (
    BlockEntry, Diagnostic, SymbolInfo, SymbolTable, ValidationResult,
    ValidationState, ValidatorBase, ValidatorOptions,
)
from .control_flow import ControlFlowMixin
from .declarations import DeclarationsMixin
from .statements import StatementsMixin
from .type_utils import TypeUtilsMixin


class Validator(
    TypeUtilsMixin,
    ControlFlowMixin,
    StatementsMixin,
    DeclarationsMixin,
    ValidatorBase,
):
    """Static validator for the Yantrabhashi language."""
    pass


def validate(source: str, *, check_conditions: bool = True) -> list[Diagnostic]:
    """Validate ``source`` and return every diagnostic, in discovery order."""
    options = ValidatorOptions(check_conditions=check_conditions)
    return Validator(options).validate(source)


__all__ = [
    "BlockEntry", "Diagnostic", "SymbolInfo", "SymbolTable", "ValidationResult",
    "ValidationState", "Validator", "ValidatorOptions", "validate",
]
