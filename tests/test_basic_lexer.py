import pytest

from falconscript.basic_lexer import BasicLexer, main, tokenize
from falconscript.tokens import LexerError, Token, TokenType


def pairs(text):
    return [(t.type, t.value) for t in tokenize(text)]


def test_int_declaration():
    assert pairs("int a =    10") == [
        (TokenType.INT, "int"),
        (TokenType.IDENTIFIER, "a"),
        (TokenType.ASSIGNMENT, "="),
        (TokenType.INT_LITERAL, "10"),
    ]


def test_repeated_equals_and_prefixed_identifier():
    assert pairs("intA === a>3") == [
        (TokenType.IDENTIFIER, "intA"),
        (TokenType.ASSIGNMENT, "="),
        (TokenType.ASSIGNMENT, "="),
        (TokenType.ASSIGNMENT, "="),
        (TokenType.IDENTIFIER, "a"),
        (TokenType.GT, ">"),
        (TokenType.INT_LITERAL, "3"),
    ]


def test_partial_keyword_is_identifier():
    assert pairs("in b = 233") == [
        (TokenType.IDENTIFIER, "in"),
        (TokenType.IDENTIFIER, "b"),
        (TokenType.ASSIGNMENT, "="),
        (TokenType.INT_LITERAL, "233"),
    ]


def test_semicolon_is_rejected():
    with pytest.raises(LexerError, match="invalid character: `;`"):
        tokenize("int c = a + b;")


def test_error_message_format():
    with pytest.raises(LexerError) as info:
        tokenize("a $")
    assert str(info.value) == "Input `a $` has an invalid character: `$` at pos: 3"


def test_greater_equal_and_operators():
    assert pairs("a>=b+c-d*e/f") == [
        (TokenType.IDENTIFIER, "a"),
        (TokenType.GE, ">="),
        (TokenType.IDENTIFIER, "b"),
        (TokenType.PLUS, "+"),
        (TokenType.IDENTIFIER, "c"),
        (TokenType.MINUS, "-"),
        (TokenType.IDENTIFIER, "d"),
        (TokenType.STAR, "*"),
        (TokenType.IDENTIFIER, "e"),
        (TokenType.SLASH, "/"),
        (TokenType.IDENTIFIER, "f"),
    ]


def test_int_at_end_of_input_stays_identifier():
    assert pairs("int") == [(TokenType.IDENTIFIER, "int")]


def test_leading_zeros_are_kept():
    assert pairs("000123") == [(TokenType.INT_LITERAL, "000123")]


def test_underscore_in_identifier():
    assert pairs("a_1 int_x") == [
        (TokenType.IDENTIFIER, "a_1"),
        (TokenType.IDENTIFIER, "int_x"),
    ]


def test_whitespace_only_gives_no_tokens():
    assert tokenize(" \t\n ") == []


@pytest.mark.parametrize("text", ["int a = 10", "x>=3 + 4*5", "  abc  /  7 "])
def test_values_rebuild_input_without_whitespace(text):
    assert "".join(t.value for t in tokenize(text)) == "".join(text.split())


def test_exhausted_lexer_returns_falsy_token():
    lexer = BasicLexer("a")
    assert lexer.next_token() == Token(TokenType.IDENTIFIER, "a")
    assert lexer.done()
    assert not lexer.next_token()


def test_position_stops_after_token():
    lexer = BasicLexer("ab+c")
    lexer.next_token()
    assert lexer.pos == 2
    assert not lexer.done()


def test_reset_starts_over():
    lexer = BasicLexer("a")
    list(lexer)
    lexer.reset("b c")
    assert [t.value for t in lexer] == ["b", "c"]


def test_main_prints_tokens(capsys):
    assert main(["a>=1"]) == 0
    out = capsys.readouterr().out
    assert out == "`a>=1`: \n[Identifier]: a\n[GE]: >=\n[IntLiteral]: 1\n"


def test_main_reports_errors_on_stderr(capsys):
    main(["a;"])
    captured = capsys.readouterr()
    assert "invalid character: `;`" in captured.err
    assert "[Identifier]: a" in captured.out


def test_main_without_arguments_runs_demo(capsys):
    assert main() == 0
    captured = capsys.readouterr()
    assert "[Int]: int" in captured.out
    assert "invalid character: `;`" in captured.err