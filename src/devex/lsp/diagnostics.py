"""Diagnostic computation for Yantrabhashi documents.

Runs the validator on source text and converts its findings into LSP
Diagnostic objects covering the offending line.
"""

from dataclasses import dataclass, field
from typing import Optional

from lsprotocol import types as lsp

from src.validator.analyzer import ValidationResult, Validator, ValidatorOptions


@dataclass
class AnalysisResult:
    """Cached result of analyzing a document."""

    uri: str
    source: str
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)
    validation: Optional[ValidationResult] = None


def _make_diagnostic(
    source_lines: list[str],
    line: int,
    message: str,
    severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error,
    source: str = "yantra",
) -> lsp.Diagnostic:
    """Create an LSP Diagnostic spanning the text of a 1-based line.

    LSP uses 0-based lines.
    """
    line_0 = max(0, line - 1)
    text = source_lines[line_0] if line_0 < len(source_lines) else ""
    start = len(text) - len(text.lstrip())
    end = max(len(text.rstrip()), start + 1)
    return lsp.Diagnostic(
        range=lsp.Range(
            start=lsp.Position(line=line_0, character=start),
            end=lsp.Position(line=line_0, character=end),
        ),
        message=message,
        severity=severity,
        source=source,
    )


def compute_diagnostics(uri: str, source: str,
                        options: Optional[ValidatorOptions] = None) -> AnalysisResult:
    """Validate the document and return diagnostics."""
    result = AnalysisResult(uri=uri, source=source)
    validation = Validator(options).analyze(source)
    result.validation = validation

    source_lines = source.splitlines()
    for diag in validation.diagnostics:
        result.diagnostics.append(_make_diagnostic(source_lines, diag.line, diag.message))
    return result
