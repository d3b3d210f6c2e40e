"""A small integer scripting language with lexers, parsers and a REPL."""

__version__ = "0.1.0"

__all__ = [
    "tokens",
    "basic_lexer",
    "lexer",
    "nodes",
    "simple_calculator",
    "calculator",
    "script_parser",
    "repl",
]