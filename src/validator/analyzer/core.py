"""Validator core: data structures, per-run state, and orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..segmenter import LogicalStatement, segment
from ..tokens import VarType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    line: int
    message: str

    def to_dict(self) -> dict:
        return {"line": self.line, "message": self.message}


@dataclass
class SymbolInfo:
    name: str
    var_type: VarType
    line: int = 0


@dataclass
class SymbolTable:
    symbols: dict[str, SymbolInfo] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def lookup(self, name: str) -> SymbolInfo | None:
        return self.symbols.get(name)

    def type_of(self, name: str) -> VarType | None:
        info = self.symbols.get(name)
        return info.var_type if info else None

    def define(self, name: str, var_type: VarType, line: int = 0):
        self.symbols[name] = SymbolInfo(name, var_type, line)


@dataclass
class BlockEntry:
    open_line: int
    kind: str = "block"  # "block" | "if" | "else" | "loop"
    # False under a rejected loop header; the body is only bracket-tracked
    analyzed: bool = True


@dataclass
class ValidatorOptions:
    # Type-check ELAITHE conditions (strict) or accept any condition (relaxed)
    check_conditions: bool = True


@dataclass
class ValidationState:
    symbols: SymbolTable = field(default_factory=SymbolTable)
    blocks: list[BlockEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def analyzing(self) -> bool:
        return not self.blocks or self.blocks[-1].analyzed


@dataclass
class ValidationResult:
    statements: list[LogicalStatement]
    diagnostics: list[Diagnostic]
    symbols: SymbolTable

    @property
    def is_valid(self) -> bool:
        return not self.diagnostics


class ValidatorBase:
    def __init__(self, options: ValidatorOptions | None = None):
        self.options = options or ValidatorOptions()

    def analyze(self, source: str) -> ValidationResult:
        state = ValidationState()
        statements = segment(source)
        for stmt in statements:
            self._check_logical_statement(state, stmt)
        self._report_unclosed_blocks(state)
        logger.debug("validated %d statements, %d diagnostics",
                     len(statements), len(state.diagnostics))
        return ValidationResult(
            statements=statements,
            diagnostics=state.diagnostics,
            symbols=state.symbols,
        )

    def validate(self, source: str) -> list[Diagnostic]:
        return self.analyze(source).diagnostics

    def _error(self, state: ValidationState, msg: str, line: int):
        state.diagnostics.append(Diagnostic(line, msg))

    def _open_block(self, state: ValidationState, line: int, kind: str = "block",
                    analyzed: bool = True):
        # Blocks nested in an unchecked block are never analyzed either
        state.blocks.append(BlockEntry(line, kind, analyzed and state.analyzing))

    def _report_unclosed_blocks(self, state: ValidationState):
        for entry in state.blocks:
            self._error(state, "Missing closing ']' for block opened here.", entry.open_line)
        state.blocks.clear()
