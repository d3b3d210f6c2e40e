import pytest

from falconscript.tokens import LexerError, ParseError, Token, TokenType


@pytest.mark.parametrize(
    "token_type, name",
    [
        (TokenType.IDENTIFIER, "Identifier"),
        (TokenType.INT, "Int"),
        (TokenType.INT_LITERAL, "IntLiteral"),
        (TokenType.NOT_EQUAL, "NotEqual"),
        (TokenType.GE, "GE"),
        (TokenType.PLUS, "Plus"),
        (TokenType.MINUS, "Minus"),
        (TokenType.LPAREN, "LParen"),
        (TokenType.RPAREN, "RParen"),
        (TokenType.UNKNOWN, "Unknown"),
    ],
)
def test_token_type_prints_its_name(token_type, name):
    assert str(token_type) == name


def test_default_token_is_falsy():
    token = Token()
    assert not token
    assert token.type is TokenType.UNKNOWN
    assert token.value == ""


def test_unknown_token_with_text_is_still_falsy():
    assert not Token(TokenType.UNKNOWN, "x")


@pytest.mark.parametrize("token_type", list(TokenType))
def test_truthiness_follows_type(token_type):
    token = Token(token_type, "x")
    assert bool(token) == (token_type is not TokenType.UNKNOWN)
    assert token.value == "x"


def test_tokens_compare_by_type_and_value():
    assert Token(TokenType.PLUS, "+") == Token(TokenType.PLUS, "+")
    assert Token(TokenType.PLUS, "+") != Token(TokenType.MINUS, "+")


def test_lexer_error_is_a_value_error():
    assert issubclass(LexerError, ValueError)
    assert str(LexerError("bad")) == "bad"


def test_parse_error_is_a_runtime_error():
    assert issubclass(ParseError, RuntimeError)
    assert str(ParseError("oops")) == "oops"