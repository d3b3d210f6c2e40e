"""Interactive evaluator for scripts with integer variables."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from .nodes import ASTNode, NodeType
from .script_parser import ScriptParser
from .tokens import LexerError, ParseError

_ERROR_PREFIX = "\033[31mError: \033[0m"
_EXIT_COMMAND = "exit();"
_PROMPT = "> "

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ScriptError(RuntimeError):
    """Raised when a statement cannot be evaluated."""


@dataclass
class EvaluatorResult:
    """The value of an evaluated node, with the variable it belongs to, if any."""

    value: int
    variable_name: str = ""
    is_new_variable: bool = False

    def __str__(self) -> str:
        marker = "(*)" if self.is_new_variable else ""
        name = f"{self.variable_name}: " if self.variable_name else ""
        return f"{marker}{name}{self.value}"


def _wrap(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


_ARITHMETIC: dict[NodeType, dict[str, Callable[[int, int], int]]] = {
    NodeType.RELATIONAL: {
        "==": lambda a, b: int(a == b),
        "!=": lambda a, b: int(a != b),
        "<": lambda a, b: int(a < b),
        ">": lambda a, b: int(a > b),
        "<=": lambda a, b: int(a <= b),
        ">=": lambda a, b: int(a >= b),
    },
    NodeType.MULTIPLICATIVE: {"*": operator.mul},
    NodeType.ADDITIVE: {"+": operator.add, "-": operator.sub},
}


class Repl:
    """Holds the variables of a session and evaluates statements against them."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.variables: dict[str, int] = {}
        self._parser = ScriptParser()
        self._results: list[EvaluatorResult] = []

    def evaluate(self, node: ASTNode) -> EvaluatorResult:
        """Evaluate one statement or expression node."""
        kind = node.type
        if kind is NodeType.INT_DECLARATION:
            return self._declare(node)
        if kind is NodeType.ASSIGNMENT:
            return self._assign(node)
        if kind is NodeType.INT_LITERAL:
            value = int(node.value)
            if not _INT_MIN <= value <= _INT_MAX:
                raise ScriptError(f"integer literal out of range: {node.value}")
            return EvaluatorResult(value)
        if kind is NodeType.IDENTIFIER:
            if node.value not in self.variables:
                raise ScriptError(f"variable '{node.value}' is not defined.")
            return EvaluatorResult(self.variables[node.value], node.value)
        if kind is NodeType.LOGICAL:
            return self._logical(node)
        if kind is NodeType.MULTIPLICATIVE and node.value == "/":
            return self._divide(node)
        function = _ARITHMETIC.get(kind, {}).get(node.value)
        if function is None:
            raise ScriptError(f"cannot evaluate a {kind} node ({node.value})")
        left, right = node.children
        return EvaluatorResult(
            _wrap(function(self.evaluate(left).value, self.evaluate(right).value))
        )

    def execute(self, source: str) -> list[EvaluatorResult]:
        """Run every statement of `source` and return the results they report."""
        results: list[EvaluatorResult] = []
        for statement in self._parser.parse(source).children:
            results.extend(self._run_statement(statement))
        return results

    def run(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        """Read statements line by line until end of input or `exit();`."""
        stdin = stdin if stdin is not None else sys.stdin
        out = stdout if stdout is not None else sys.stdout
        err = stderr if stderr is not None else sys.stderr

        print("Welcome to Falcon!", file=out)
        print(_PROMPT, end="", file=out, flush=True)
        buffer = ""
        for raw in stdin:
            line = raw[:-1] if raw.endswith("\n") else raw
            # Only an exit command alone on its line ends the session.
            if line == _EXIT_COMMAND:
                print("bye!", file=out)
                break
            buffer += line + " "
            if not line.rstrip(" ").endswith(";"):
                print(_PROMPT, end="", file=out, flush=True)
                continue
            try:
                for statement in self._parser.parse(buffer).children:
                    if self.verbose:
                        statement.dump(out)
                    for result in self._run_statement(statement):
                        print(result, file=out)
            except (LexerError, ParseError, ScriptError) as exc:
                print(f"{_ERROR_PREFIX}{exc}", file=err)
            buffer = ""
            print("\n" + _PROMPT, end="", file=out, flush=True)

    def _run_statement(self, statement: ASTNode) -> list[EvaluatorResult]:
        self._results = []
        try:
            result = self.evaluate(statement)
            reported = self._results
        finally:
            self._results = []
        # Assignments have already reported themselves while being evaluated.
        if statement.type is not NodeType.ASSIGNMENT:
            reported.append(result)
        return reported

    def _declare(self, node: ASTNode) -> EvaluatorResult:
        if node.value in self.variables:
            raise ScriptError(f"variable '{node.value}' has been defined.")
        value = self.evaluate(node.children[0]).value if node.children else 0
        self.variables[node.value] = value
        return EvaluatorResult(value, node.value, True)

    def _assign(self, node: ASTNode) -> EvaluatorResult:
        if node.value not in self.variables:
            raise ScriptError(f"variable '{node.value}' is not defined.")
        value = self.evaluate(node.children[0]).value
        self.variables[node.value] = value
        result = EvaluatorResult(value, node.value)
        self._results.append(result)
        return result

    def _logical(self, node: ASTNode) -> EvaluatorResult:
        left, right = node.children
        if node.value == "&&":
            return EvaluatorResult(
                int(bool(self.evaluate(left).value) and bool(self.evaluate(right).value))
            )
        if node.value == "||":
            return EvaluatorResult(
                int(bool(self.evaluate(left).value) or bool(self.evaluate(right).value))
            )
        raise ScriptError(f"cannot evaluate a {node.type} node ({node.value})")

    def _divide(self, node: ASTNode) -> EvaluatorResult:
        left, right = node.children
        divisor = self.evaluate(right).value
        if divisor == 0:
            raise ScriptError("division by zero.")
        dividend = self.evaluate(left).value
        quotient = abs(dividend) // abs(divisor)
        if (dividend < 0) != (divisor < 0):
            quotient = -quotient
        return EvaluatorResult(_wrap(quotient))


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session; `-v` or `--verbose` prints each syntax tree."""
    args = sys.argv[1:] if argv is None else list(argv)
    repl = Repl(verbose=len(args) == 1 and args[0] in ("--verbose", "-v"))
    repl.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())