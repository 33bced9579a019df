"""Keyword and type definitions for the Yantrabhashi language."""

from enum import Enum


class VarType(Enum):
    NUMBER = "ANKHE"
    TEXT = "VARTTAI"

    @property
    def noun(self) -> str:
        """Word used for this type in diagnostics ("integer" / "string")."""
        return "integer" if self is VarType.NUMBER else "string"


DECLARE = "PADAM"
NUMBER_TYPE = VarType.NUMBER.value
TEXT_TYPE = VarType.TEXT.value
IF = "ELAITHE"
ELSE = "ALAITHE"
LOOP = "MALLI-MALLI"
PRINT = "CHATIMPU"
SCAN = "CHEPPU"

# Keyword lookup table: keyword -> short description (hover and completion)
KEYWORDS: dict[str, str] = {
    DECLARE: "Declares a variable: PADAM name:TYPE = value;",
    NUMBER_TYPE: "Integer type",
    TEXT_TYPE: "String type (double-quoted literals)",
    IF: "Conditional block: ELAITHE (condition) [ ... ]",
    ELSE: "Alternative branch of an ELAITHE block: ] ALAITHE [ ... ]",
    LOOP: "Counting loop: MALLI-MALLI (PADAM i:ANKHE = 1; i <= n; i = i + 1) [ ... ]",
    PRINT: "Prints a string literal or variable: CHATIMPU(x);",
    SCAN: "Reads input into a declared variable: CHEPPU(x);",
}

# Reserved words may never be used as variable names
RESERVED_WORDS: frozenset[str] = frozenset(KEYWORDS)

RELATIONAL_OPS: tuple[str, ...] = ("==", "!=", "<=", ">=", "<", ">")
ORDERING_OPS: frozenset[str] = frozenset({"<", ">", "<=", ">="})
ARITHMETIC_OPS: frozenset[str] = frozenset({"+", "-", "*", "/"})
