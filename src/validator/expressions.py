"""Expression shapes: literal checks and the integer arithmetic grammar.

Arithmetic right-hand sides are checked by a small recursive-descent parser
over '+ - * / ( )', integer literals and identifiers:

    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := ('+' | '-') factor | NUMBER | IDENT | '(' expr ')'

Nothing is evaluated; the parser only accepts or rejects the shape and
collects the identifiers it saw.
"""

import re
from dataclasses import dataclass

INTEGER_LITERAL_RE = re.compile(r"^-?\d+$")
STRING_LITERAL_RE = re.compile(r'^"[^"]*"$')
NAME_RE = re.compile(r"^\w+$")
# Shared by identifiers() and tokenize(); \d is a Unicode decimal digit
IDENTIFIER_RE = re.compile(r"[^\W\d]\w*")
_NUMBER_TOKEN_RE = re.compile(r"\d+")
_OPERATOR_RE = re.compile(r"[+\-*/]")


class ExpressionError(Exception):
    def __init__(self, message: str, pos: int):
        self.pos = pos
        super().__init__(f"{message} at {pos}")


@dataclass
class ExprToken:
    kind: str  # "NUMBER" | "IDENT" | "OP" | "LPAREN" | "RPAREN" | "EOF"
    value: str
    pos: int

    def __repr__(self):
        return f"ExprToken({self.kind}, {self.value!r}, {self.pos})"


def is_integer_literal(text: str) -> bool:
    return bool(INTEGER_LITERAL_RE.match(text))


def is_string_literal(text: str) -> bool:
    return bool(STRING_LITERAL_RE.match(text))


def is_name(text: str) -> bool:
    return bool(NAME_RE.match(text))


def is_arithmetic(expr: str) -> bool:
    """True for operator-bearing expressions free of string literals."""
    return '"' not in expr and bool(_OPERATOR_RE.search(expr))


def identifiers(expr: str) -> list[str]:
    """Identifiers in order of first appearance, without duplicates."""
    seen: list[str] = []
    for name in IDENTIFIER_RE.findall(expr):
        if name not in seen:
            seen.append(name)
    return seen


def tokenize(expr: str) -> list[ExprToken]:
    tokens: list[ExprToken] = []
    pos = 0
    while pos < len(expr):
        ch = expr[pos]
        if ch.isspace():
            pos += 1
            continue
        m = _NUMBER_TOKEN_RE.match(expr, pos)
        if m:
            tokens.append(ExprToken("NUMBER", m.group(), pos))
            pos = m.end()
            continue
        m = IDENTIFIER_RE.match(expr, pos)
        if m:
            tokens.append(ExprToken("IDENT", m.group(), pos))
            pos = m.end()
            continue
        if ch in "+-*/":
            tokens.append(ExprToken("OP", ch, pos))
        elif ch == '(':
            tokens.append(ExprToken("LPAREN", ch, pos))
        elif ch == ')':
            tokens.append(ExprToken("RPAREN", ch, pos))
        else:
            raise ExpressionError(f"Unexpected character '{ch}'", pos)
        pos += 1
    tokens.append(ExprToken("EOF", "", len(expr)))
    return tokens


class ArithmeticParser:
    def __init__(self, tokens: list[ExprToken]):
        self.tokens = tokens
        self.pos = 0
        self.names: list[str] = []

    def parse(self) -> list[str]:
        """Parse a whole expression and return the identifiers it uses."""
        self._parse_expr()
        tok = self._peek()
        if tok.kind != "EOF":
            raise ExpressionError(f"Unexpected '{tok.value}'", tok.pos)
        return self.names

    def _peek(self) -> ExprToken:
        return self.tokens[self.pos]

    def _advance(self) -> ExprToken:
        tok = self.tokens[self.pos]
        if tok.kind != "EOF":
            self.pos += 1
        return tok

    def _match_op(self, *ops: str) -> bool:
        tok = self._peek()
        if tok.kind == "OP" and tok.value in ops:
            self._advance()
            return True
        return False

    def _parse_expr(self):
        self._parse_term()
        while self._match_op("+", "-"):
            self._parse_term()

    def _parse_term(self):
        self._parse_factor()
        while self._match_op("*", "/"):
            self._parse_factor()

    def _parse_factor(self):
        if self._match_op("+", "-"):
            self._parse_factor()
            return
        tok = self._advance()
        if tok.kind == "NUMBER":
            return
        if tok.kind == "IDENT":
            self.names.append(tok.value)
            return
        if tok.kind == "LPAREN":
            self._parse_expr()
            closing = self._advance()
            if closing.kind != "RPAREN":
                raise ExpressionError("Expected ')'", closing.pos)
            return
        found = tok.value or "end of expression"
        raise ExpressionError(f"Expected operand, got '{found}'", tok.pos)


def parse_arithmetic(expr: str) -> list[str]:
    """Validate an arithmetic expression; raises ExpressionError if malformed."""
    return ArithmeticParser(tokenize(expr)).parse()
