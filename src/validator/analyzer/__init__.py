from .analyzer import (
    Diagnostic, SymbolInfo, SymbolTable, ValidationResult, Validator,
    ValidatorOptions, validate,
)

__all__ = [
    "Diagnostic", "SymbolInfo", "SymbolTable", "ValidationResult", "Validator",
    "ValidatorOptions", "validate",
]
