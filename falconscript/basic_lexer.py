"""A small finite-state lexer for `int` declarations and arithmetic."""

from __future__ import annotations

import sys
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
    GT = auto()
    GE = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    ASSIGNMENT = auto()
    INT_LITERAL = auto()


_SINGLE_CHAR = {
    "+": (_State.PLUS, TokenType.PLUS),
    "-": (_State.MINUS, TokenType.MINUS),
    "*": (_State.STAR, TokenType.STAR),
    "/": (_State.SLASH, TokenType.SLASH),
    "=": (_State.ASSIGNMENT, TokenType.ASSIGNMENT),
    ">": (_State.GT, TokenType.GT),
}

_COMPLETE = frozenset(
    {_State.GE, _State.ASSIGNMENT, _State.PLUS, _State.MINUS, _State.STAR, _State.SLASH}
)

_DEMO_INPUTS = ("int a =    10", "intA === a>3", "in b = 233", "int c = a + b;")


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_ident_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c == "_"


class BasicLexer:
    """Splits text into tokens: identifiers, `int`, integers, `+ - * / = > >=`."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.pos = 0

    def reset(self, text: str) -> None:
        """Start lexing a new input from its beginning."""
        self.text = text
        self.pos = 0

    def done(self) -> bool:
        return self.pos >= len(self.text)

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
            elif state is _State.ID:
                if not _is_ident_char(c):
                    return token
                token.value += c
            elif state is _State.GT:
                if c != "=":
                    return token
                token.type = TokenType.GE
                token.value += c
                state = _State.GE
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
        if c in _SINGLE_CHAR:
            state, token_type = _SINGLE_CHAR[c]
            return Token(token_type, c), state
        if _is_digit(c):
            return Token(TokenType.INT_LITERAL, c), _State.INT_LITERAL
        if _is_alpha(c):
            state = _State.ID_INT1 if c == "i" else _State.ID
            return Token(TokenType.IDENTIFIER, c), state
        if c in _WHITESPACE:
            return Token(), _State.INITIAL
        raise LexerError(
            f"Input `{self.text}` has an invalid character: `{c}` at pos: {self.pos + 1}"
        )


def tokenize(text: str) -> list[Token]:
    """Return every token of `text`."""
    return list(BasicLexer(text))


def main(argv: list[str] | None = None) -> int:
    """Print the tokens of each input line; the demo inputs when none are given."""
    inputs = list(argv) if argv else list(_DEMO_INPUTS)
    lexer = BasicLexer()
    for text in inputs:
        lexer.reset(text)
        print(f"`{text}`: ")
        try:
            for token in lexer:
                print(f"[{token.type}]: {token.value}")
        except LexerError as exc:
            print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))