"""Parser and evaluator for `int` declarations over `+` and `*` of integers.

Grammar:
    prog           : intDeclare | additive
    intDeclare     : Int Identifier (Assignment additive)?
    additive       : multiplicative (Plus additive)?
    multiplicative : IntLiteral (Star multiplicative)?
"""

from __future__ import annotations

import sys

from .basic_lexer import BasicLexer
from .nodes import ASTNode, NodeType
from .tokens import ParseError, Token, TokenType

_DEMO_INPUTS = (
    "int a = 10",
    "int b = 3 + 4 * 5 + 6 + 7",
    "2+3*5",
    "-2*3*5",
    "20+*3*5",
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class SimpleParser:
    """Recursive-descent parser with one token of look-ahead."""

    def __init__(self) -> None:
        self._lexer = BasicLexer()
        self._ahead = Token()

    def parse(self, script: str) -> ASTNode:
        """Parse `script` and return the root of its syntax tree."""
        self._lexer.reset(script)
        self._ahead = self._lexer.next_token()
        if self._ahead.type is TokenType.INT:
            return self._int_declare()
        return self._additive()

    def _int_declare(self) -> ASTNode:
        self._match(TokenType.INT)
        name = self._match(TokenType.IDENTIFIER)
        node = ASTNode(NodeType.INT_DECLARATION, name)
        if self._ahead.type is TokenType.ASSIGNMENT:
            self._match(TokenType.ASSIGNMENT)
            node.add_child(self._additive())
        return node

    def _additive(self) -> ASTNode:
        left = self._multiplicative()
        if self._ahead.type is not TokenType.PLUS:
            return left
        node = ASTNode(NodeType.ADDITIVE, self._ahead.value)
        node.add_child(left)
        self._match(TokenType.PLUS)
        node.add_child(self._additive())
        return node

    def _multiplicative(self) -> ASTNode:
        left = ASTNode(NodeType.INT_LITERAL, self._match(TokenType.INT_LITERAL))
        if self._ahead.type is not TokenType.STAR:
            return left
        node = ASTNode(NodeType.MULTIPLICATIVE, self._ahead.value)
        node.add_child(left)
        self._match(TokenType.STAR)
        node.add_child(self._multiplicative())
        return node

    def _match(self, expected: TokenType) -> str:
        if self._ahead.type is not expected:
            position = self._lexer.pos - len(self._ahead.value) + 1
            raise ParseError(
                f"parse error at pos({position}): expecting `{expected}` "
                f"but got `{self._ahead.type}`."
            )
        text = self._ahead.value
        self._ahead = self._lexer.next_token()
        return text


def evaluate(node: ASTNode) -> int:
    """Compute the value of a tree built by `SimpleParser`.

    A declaration without an initializer evaluates to 0.
    """
    if node.type is NodeType.INT_DECLARATION:
        return evaluate(node.children[0]) if node.children else 0
    if node.type is NodeType.MULTIPLICATIVE:
        left, right = node.children
        return evaluate(left) * evaluate(right)
    if node.type is NodeType.ADDITIVE:
        left, right = node.children
        return evaluate(left) + evaluate(right)
    if node.type is NodeType.INT_LITERAL:
        value = int(node.value)
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"integer literal out of range: {node.value}")
        return value
    raise ValueError(f"cannot evaluate a {node.type} node")


def main(argv: list[str] | None = None) -> int:
    """Parse, print and evaluate each input; the demo inputs when none are given."""
    inputs = list(argv) if argv else list(_DEMO_INPUTS)
    parser = SimpleParser()
    for text in inputs:
        print(f"`{text}`: ")
        try:
            tree = parser.parse(text)
            tree.dump()
            print(f"Result: {evaluate(tree)}")
        except (ValueError, ParseError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))