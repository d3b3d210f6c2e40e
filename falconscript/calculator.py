"""Parser and evaluator for expressions with declarations, assignment and logic.

Grammar:
    prog       ::= (intDeclare | assign) ";"
    intDeclare ::= "int" Id ( "=" assign )?
    assign     ::= orExp ( "=" assign )?
    orExp      ::= andExp ( "||" andExp )*
    andExp     ::= equalExp ( "&&" equalExp )*
    equalExp   ::= relExp ( ("==" | "!=") relExp )*
    relExp     ::= addExp ( (">" | "<" | ">=" | "<=") addExp )*
    addExp     ::= mulExp ( ("+" | "-") mulExp )*
    mulExp     ::= priExp ( ("*" | "/") priExp )*
    priExp     ::= Id | Literal | "(" assign ")"
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable

from .lexer import Lexer
from .nodes import ASTNode, NodeType
from .tokens import LexerError, ParseError, Token, TokenType

_DEMO_INPUTS = (
    "int a = 233 + 123 -72 * 2 / 3;",
    "int b = a / 3 < 10;",
    "a || b = c || d;",
    "a = b = c = d = 100;",
    "(2>3) + (4<5) + (6<7) == 2;",
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

# Binary operator levels from loosest to tightest binding.
_BINARY_LEVELS: tuple[tuple[frozenset[TokenType], NodeType], ...] = (
    (frozenset({TokenType.OR}), NodeType.LOGICAL),
    (frozenset({TokenType.AND}), NodeType.LOGICAL),
    (frozenset({TokenType.EQUAL, TokenType.NOT_EQUAL}), NodeType.RELATIONAL),
    (
        frozenset({TokenType.GT, TokenType.LT, TokenType.GE, TokenType.LE}),
        NodeType.RELATIONAL,
    ),
    (frozenset({TokenType.PLUS, TokenType.MINUS}), NodeType.ADDITIVE),
    (frozenset({TokenType.STAR, TokenType.SLASH}), NodeType.MULTIPLICATIVE),
)


class Parser:
    """Recursive-descent parser with one token of look-ahead."""

    def __init__(self) -> None:
        self._lexer = Lexer()
        self._ahead = Token()

    def parse(self, script: str) -> ASTNode:
        """Parse one statement ending in `;` and return the root of its tree."""
        self._lexer.reset(script)
        self._ahead = self._lexer.next_token()
        if self._ahead.type is TokenType.INT:
            result = self._int_declare()
        else:
            result = self._assign()
        self._match(TokenType.SEMICOLON)
        return result

    def _int_declare(self) -> ASTNode:
        self._match(TokenType.INT)
        name = self._match(TokenType.IDENTIFIER)
        node = ASTNode(NodeType.INT_DECLARATION, name)
        if self._ahead.type is TokenType.ASSIGNMENT:
            self._match(TokenType.ASSIGNMENT)
            node.add_child(self._assign())
        return node

    def _assign(self) -> ASTNode:
        target = self._binary(0)
        if self._ahead.type is not TokenType.ASSIGNMENT:
            return target
        self._match(TokenType.ASSIGNMENT)
        source = self._assign()
        node = ASTNode(NodeType.ASSIGNMENT, "=")
        node.add_child(target)
        node.add_child(source)
        return node

    def _binary(self, level: int) -> ASTNode:
        if level == len(_BINARY_LEVELS):
            return self._primary()
        operators, node_type = _BINARY_LEVELS[level]
        left = self._binary(level + 1)
        while self._ahead.type in operators:
            node = ASTNode(node_type, self._ahead.value)
            node.add_child(left)
            self._match(self._ahead.type)
            node.add_child(self._binary(level + 1))
            left = node
        return left

    def _primary(self) -> ASTNode:
        kind = self._ahead.type
        if kind is TokenType.IDENTIFIER:
            return ASTNode(NodeType.IDENTIFIER, self._match(TokenType.IDENTIFIER))
        if kind is TokenType.INT_LITERAL:
            return ASTNode(NodeType.INT_LITERAL, self._match(TokenType.INT_LITERAL))
        if kind is TokenType.LPAREN:
            self._match(TokenType.LPAREN)
            node = self._assign()
            self._match(TokenType.RPAREN)
            return node
        raise ParseError(
            f"parse error at pos({self._lexer.pos}): "
            f"unexpected token `{self._ahead.value}`."
        )

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


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero.")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


_OPERATORS: dict[NodeType, dict[str, Callable[[int, int], int]]] = {
    NodeType.LOGICAL: {
        "&&": lambda a, b: int(bool(a) and bool(b)),
        "||": lambda a, b: int(bool(a) or bool(b)),
    },
    NodeType.RELATIONAL: {
        "==": lambda a, b: int(a == b),
        "!=": lambda a, b: int(a != b),
        "<": lambda a, b: int(a < b),
        ">": lambda a, b: int(a > b),
        "<=": lambda a, b: int(a <= b),
        ">=": lambda a, b: int(a >= b),
    },
    NodeType.MULTIPLICATIVE: {"*": operator.mul, "/": _divide},
    NodeType.ADDITIVE: {"+": operator.add, "-": operator.sub},
}


def evaluate(node: ASTNode) -> int:
    """Compute the value of a tree built by `Parser`.

    Variables are not stored: an identifier reads as 0 and an assignment
    yields the value of its right-hand side. Truth values are 1 and 0, and
    division truncates toward zero.
    """
    if node.type is NodeType.INT_DECLARATION:
        return evaluate(node.children[0]) if node.children else 0
    if node.type is NodeType.ASSIGNMENT:
        return evaluate(node.children[1])
    if node.type is NodeType.INT_LITERAL:
        value = int(node.value)
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"integer literal out of range: {node.value}")
        return value
    if node.type is NodeType.IDENTIFIER:
        return 0
    table = _OPERATORS.get(node.type, {})
    if node.value not in table:
        raise ValueError(f"cannot evaluate a {node.type} node ({node.value})")
    left, right = node.children
    return table[node.value](evaluate(left), evaluate(right))


def main(argv: list[str] | None = None) -> int:
    """Parse, print and evaluate each input; the demo inputs when none are given."""
    inputs = list(argv) if argv else list(_DEMO_INPUTS)
    parser = Parser()
    for text in inputs:
        print(f"`{text}`: ")
        try:
            tree = parser.parse(text)
            tree.dump()
            print(f"Result: {evaluate(tree)}")
        except (LexerError, ParseError, ValueError, ZeroDivisionError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))