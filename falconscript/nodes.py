"""Abstract syntax tree nodes and their tree-shaped text rendering."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO


class NodeType(Enum):
    """Kinds of node the parsers build."""

    PROGRAM = "Program"
    INT_DECLARATION = "IntDeclaration"
    ASSIGNMENT = "Assignment"
    LOGICAL = "Logical"
    RELATIONAL = "Relational"
    MULTIPLICATIVE = "Multiplicative"
    ADDITIVE = "Additive"
    INT_LITERAL = "IntLiteral"
    IDENTIFIER = "Identifier"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class ASTNode:
    """A node of the syntax tree: its type, its text, its children and its parent."""

    type: NodeType
    value: str = ""
    children: list[ASTNode] = field(default_factory=list)
    parent: ASTNode | None = field(default=None, repr=False)

    def add_child(self, child: ASTNode) -> None:
        """Append `child` and make this node its parent."""
        self.children.append(child)
        child.parent = self

    def clear_children(self) -> None:
        self.children.clear()

    def render(self) -> str:
        """Return the tree below this node as text, one node per line."""
        return "".join(self._lines(()))

    def dump(self, file: TextIO | None = None) -> None:
        """Write the rendered tree to `file`, standard output by default."""
        (file if file is not None else sys.stdout).write(self.render())

    def _lines(self, open_branches: tuple[bool, ...]):
        prefix = "".join("│   " if is_open else "    " for is_open in open_branches[:-1])
        if open_branches:
            prefix += "├── " if open_branches[-1] else "└── "
        line = f"{prefix}[{self.type}]"
        if self.value:
            line += f" ({self.value})"
        yield line + "\n"
        last = len(self.children) - 1
        for index, child in enumerate(self.children):
            yield from child._lines(open_branches + (index != last,))