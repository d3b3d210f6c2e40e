"""Parser for scripts made of `;`-terminated statements.

Grammar:
    prog       ::= statement+
    statement  ::= (intDeclare | assign | orExp) ";"
    intDeclare ::= "int" Id ( "=" assign )?
    assign     ::= (Id "=" assign) | orExp
    orExp      ::= andExp ( "||" andExp )*
    andExp     ::= equalExp ( "&&" equalExp )*
    equalExp   ::= relExp ( ("==" | "!=") relExp )*
    relExp     ::= addExp ( (">" | "<" | ">=" | "<=") addExp )*
    addExp     ::= mulExp ( ("+" | "-") mulExp )*
    mulExp     ::= priExp ( ("*" | "/") priExp )*
    priExp     ::= Id | Literal | "(" assign ")"
"""

from __future__ import annotations

from .lexer import Lexer
from .nodes import ASTNode, NodeType
from .tokens import ParseError, Token, TokenType

PROGRAM_NAME = "pwc"

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


class ScriptParser:
    """Recursive-descent parser with one token of look-ahead and backtracking."""

    def __init__(self) -> None:
        self._lexer = Lexer()
        self._ahead = Token()

    def parse(self, script: str) -> ASTNode:
        """Parse `script` into a Program node holding one child per statement."""
        self._lexer.reset(script)
        self._ahead = self._lexer.next_token()
        program = ASTNode(NodeType.PROGRAM, PROGRAM_NAME)
        while self._ahead.type is not TokenType.UNKNOWN:
            program.add_child(self._statement())
        return program

    def _snapshot(self) -> tuple[Token, int]:
        return self._ahead, self._lexer.pos

    def _restore(self, snapshot: tuple[Token, int]) -> None:
        self._ahead, self._lexer.pos = snapshot

    def _statement(self) -> ASTNode:
        if self._ahead.type is TokenType.INT:
            result = self._int_declare()
        else:
            snapshot = self._snapshot()
            try:
                result = self._assign()
            except ParseError:
                self._restore(snapshot)
                result = self._binary(0)
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
        snapshot = self._snapshot()
        try:
            name = self._match(TokenType.IDENTIFIER)
            self._match(TokenType.ASSIGNMENT)
            source = self._assign()
        except ParseError:
            self._restore(snapshot)
            return self._binary(0)
        node = ASTNode(NodeType.ASSIGNMENT, name)
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