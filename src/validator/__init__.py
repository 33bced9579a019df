"""Yantrabhashi static validator package."""

from .segmenter import LogicalStatement as LogicalStatement, segment as segment
from .analyzer import (
    Diagnostic as Diagnostic,
    Validator as Validator,
    ValidatorOptions as ValidatorOptions,
    validate as validate,
)
