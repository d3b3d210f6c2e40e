"""Finite-state lexer for the full expression language.

It adds relational, logical and grouping operators and the semicolon.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto

from .tokens import LexerError, Token, TokenType

_WHITESPACE = frozenset(" \t\n\v\f\r")


class _State(Enum):
    INITIAL = auto()
    ID = auto()
    ID_INT1 = auto()
    ID_INT2 = auto()
    ID_INT3 = auto()
    SEMICOLON = auto()
    OR_HALF = auto()
    OR = auto()
    AND_HALF = auto()
    AND = auto()
    NOT_EQUAL_HALF = auto()
    NOT_EQUAL = auto()
    GT = auto()
    GE = auto()
    LT = auto()
    LE = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    ASSIGNMENT = auto()
    INT_LITERAL = auto()
    LPAREN = auto()
    RPAREN = auto()


_SINGLE_CHAR = {
    "+": (_State.PLUS, TokenType.PLUS),
    "-": (_State.MINUS, TokenType.MINUS),
    "*": (_State.STAR, TokenType.STAR),
    "/": (_State.SLASH, TokenType.SLASH),
    "=": (_State.ASSIGNMENT, TokenType.ASSIGNMENT),
    ">": (_State.GT, TokenType.GT),
    "<": (_State.LT, TokenType.LT),
    "|": (_State.OR_HALF, TokenType.OR),
    "&": (_State.AND_HALF, TokenType.AND),
    "!": (_State.NOT_EQUAL_HALF, TokenType.NOT_EQUAL),
    ";": (_State.SEMICOLON, TokenType.SEMICOLON),
    "(": (_State.LPAREN, TokenType.LPAREN),
    ")": (_State.RPAREN, TokenType.RPAREN),
}

# States whose token is finished: the next character always starts a new token.
_COMPLETE = frozenset(
    {
        _State.SEMICOLON,
        _State.GE,
        _State.LE,
        _State.OR,
        _State.AND,
        _State.NOT_EQUAL,
        _State.PLUS,
        _State.MINUS,
        _State.STAR,
        _State.SLASH,
        _State.LPAREN,
        _State.RPAREN,
    }
)

# Half-read operators that must be doubled: `||` and `&&`.
_DOUBLED = {
    _State.OR_HALF: ("|", TokenType.OR, _State.OR),
    _State.AND_HALF: ("&", TokenType.AND, _State.AND),
}

# Operators that may be followed by `=`: `>=` and `<=`.
_WITH_EQUALS = {
    _State.GT: (TokenType.GE, _State.GE),
    _State.LT: (TokenType.LE, _State.LE),
}


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_ident_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c == "_"


class Lexer:
    """Splits text into tokens of the expression language.

    `pos` is the index of the next character to read; it may be saved and
    assigned back to re-read input from an earlier point.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.pos = 0

    def reset(self, text: str) -> None:
        """Start lexing a new input from its beginning."""
        self.text = text
        self.pos = 0

    def done(self) -> bool:
        return self.pos >= len(self.text)

    def _invalid(self, char: str, position: int) -> LexerError:
        return LexerError(
            f"Input `{self.text}` has an invalid character: `{char}` at pos: {position}"
        )

    def next_token(self) -> Token:
        """Read the next token; a falsy token means the input is used up."""
        token = Token()
        state = _State.INITIAL
        while self.pos < len(self.text):
            c = self.text[self.pos]
            if state is _State.INITIAL:
                token, state = self._start(c)
            elif state in _COMPLETE:
                return token
            elif state in _DOUBLED:
                expected, token_type, next_state = _DOUBLED[state]
                if c != expected:
                    # Single `|` and `&` are not operators of the language.
                    raise self._invalid(c, self.pos + 1)
                token.type = token_type
                token.value += c
                state = next_state
            elif state is _State.NOT_EQUAL_HALF:
                if c != "=":
                    raise self._invalid("!", self.pos)
                token.type = TokenType.NOT_EQUAL
                token.value += c
                state = _State.NOT_EQUAL
            elif state is _State.ASSIGNMENT:
                if c != "=":
                    return token
                token.type = TokenType.EQUAL
                token.value += c
            elif state in _WITH_EQUALS:
                if c != "=":
                    return token
                token.type, state = _WITH_EQUALS[state]
                token.value += c
            elif state is _State.ID:
                if not _is_ident_char(c):
                    return token
                token.value += c
            elif state is _State.INT_LITERAL:
                if not _is_digit(c):
                    return token
                token.value += c
            elif state in (_State.ID_INT1, _State.ID_INT2):
                expected = "n" if state is _State.ID_INT1 else "t"
                if c == expected:
                    state = _State.ID_INT2 if state is _State.ID_INT1 else _State.ID_INT3
                elif _is_ident_char(c):
                    state = _State.ID
                else:
                    return token
                token.value += c
            elif state is _State.ID_INT3:
                if not _is_ident_char(c):
                    token.type = TokenType.INT
                    return token
                state = _State.ID
                token.value += c
            self.pos += 1
        return token

    def __iter__(self) -> Iterator[Token]:
        while token := self.next_token():
            yield token

    def _start(self, c: str) -> tuple[Token, _State]:
        if c in _WHITESPACE:
            return Token(), _State.INITIAL
        if c in _SINGLE_CHAR:
            state, token_type = _SINGLE_CHAR[c]
            return Token(token_type, c), state
        if _is_digit(c):
            return Token(TokenType.INT_LITERAL, c), _State.INT_LITERAL
        if _is_alpha(c):
            state = _State.ID_INT1 if c == "i" else _State.ID
            return Token(TokenType.IDENTIFIER, c), state
        raise self._invalid(c, self.pos + 1)


def tokenize(text: str) -> list[Token]:
    """Return every token of `text`."""
    return list(Lexer(text))