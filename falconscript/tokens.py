"""Token types and tokens shared by the lexers and parsers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token the lexers produce."""

    IDENTIFIER = "Identifier"
    INT = "Int"
    INT_LITERAL = "IntLiteral"
    SEMICOLON = "Semicolon"
    ASSIGNMENT = "Assignment"
    OR = "Or"
    AND = "And"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    GT = "GT"
    GE = "GE"
    LT = "LT"
    LE = "LE"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"
    LPAREN = "LParen"
    RPAREN = "RParen"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class Token:
    """A token with its type and the text it was read from."""

    type: TokenType = TokenType.UNKNOWN
    value: str = ""

    def __bool__(self) -> bool:
        return self.type is not TokenType.UNKNOWN


class LexerError(ValueError):
    """Raised when the input holds a character the lexer does not accept."""


class ParseError(RuntimeError):
    """Raised when the token stream does not fit the grammar."""