import pytest

from falconscript.lexer import Lexer, tokenize
from falconscript.tokens import LexerError, Token, TokenType

T = TokenType


def pairs(text):
    return [(token.type, token.value) for token in tokenize(text)]


def test_declaration_with_relational_operators():
    assert pairs("int d = a>b < 3 != 3 == 5;") == [
        (T.INT, "int"),
        (T.IDENTIFIER, "d"),
        (T.ASSIGNMENT, "="),
        (T.IDENTIFIER, "a"),
        (T.GT, ">"),
        (T.IDENTIFIER, "b"),
        (T.LT, "<"),
        (T.INT_LITERAL, "3"),
        (T.NOT_EQUAL, "!="),
        (T.INT_LITERAL, "3"),
        (T.EQUAL, "=="),
        (T.INT_LITERAL, "5"),
        (T.SEMICOLON, ";"),
    ]


def test_arithmetic_and_comparisons():
    assert pairs("a+b-c*d/e >=233 <= 114514") == [
        (T.IDENTIFIER, "a"),
        (T.PLUS, "+"),
        (T.IDENTIFIER, "b"),
        (T.MINUS, "-"),
        (T.IDENTIFIER, "c"),
        (T.STAR, "*"),
        (T.IDENTIFIER, "d"),
        (T.SLASH, "/"),
        (T.IDENTIFIER, "e"),
        (T.GE, ">="),
        (T.INT_LITERAL, "233"),
        (T.LE, "<="),
        (T.INT_LITERAL, "114514"),
    ]


def test_lone_bang_is_rejected_after_earlier_tokens():
    lexer = Lexer("id <> e !<")
    seen = [(lexer.next_token().type) for _ in range(4)]
    assert seen == [T.IDENTIFIER, T.LT, T.GT, T.IDENTIFIER]
    with pytest.raises(LexerError, match=r"invalid character: `!` at pos: 9"):
        lexer.next_token()


def test_single_pipe_is_rejected():
    with pytest.raises(LexerError, match="invalid character: ` `"):
        tokenize("a | b")


def test_single_ampersand_is_rejected():
    with pytest.raises(LexerError, match="invalid character: `b`"):
        tokenize("a &b")


def test_logical_operators_and_parentheses():
    assert pairs("(a||b)&&c") == [
        (T.LPAREN, "("),
        (T.IDENTIFIER, "a"),
        (T.OR, "||"),
        (T.IDENTIFIER, "b"),
        (T.RPAREN, ")"),
        (T.AND, "&&"),
        (T.IDENTIFIER, "c"),
    ]


def test_run_of_equals_signs_is_one_equal_token():
    assert pairs("a === b") == [
        (T.IDENTIFIER, "a"),
        (T.EQUAL, "==="),
        (T.IDENTIFIER, "b"),
    ]


def test_separated_equals_signs():
    assert pairs("== =") == [(T.EQUAL, "=="), (T.ASSIGNMENT, "=")]


def test_trailing_half_operator_is_returned():
    assert tokenize("|") == [Token(T.OR, "|")]


def test_int_keyword_versus_identifiers():
    assert pairs("int intx in i") == [
        (T.INT, "int"),
        (T.IDENTIFIER, "intx"),
        (T.IDENTIFIER, "in"),
        (T.IDENTIFIER, "i"),
    ]


def test_whitespace_only_gives_no_tokens():
    assert tokenize(" \t\n ") == []
    assert not Lexer("   ").next_token()


def test_unknown_character_is_rejected():
    with pytest.raises(LexerError, match="invalid character: `#`"):
        tokenize("a # b")


def test_restoring_position_rereads_same_token():
    lexer = Lexer("x = 42;")
    lexer.next_token()
    saved = lexer.pos
    first = lexer.next_token()
    second = lexer.next_token()
    lexer.pos = saved
    assert lexer.next_token() == first
    assert lexer.next_token() == second


def test_reset_and_done():
    lexer = Lexer("a;")
    assert list(lexer) == [Token(T.IDENTIFIER, "a"), Token(T.SEMICOLON, ";")]
    assert lexer.done()
    lexer.reset("b")
    assert not lexer.done()
    assert lexer.next_token() == Token(T.IDENTIFIER, "b")
    assert lexer.done()


def test_concatenated_values_rebuild_text_without_spaces():
    text = "int total = (a + 12) * b >= c && d != e;"
    assert "".join(token.value for token in tokenize(text)) == text.replace(" ", "")