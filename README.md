# falconscript

A tiny language for integer arithmetic and variables, built up in stages:

* a DFA lexer for a minimal token set (`+ - * / = > >=`, integers,
  identifiers and the `int` keyword);
* a simple calculator that parses `int` declarations, `+` and `*`;
* a full expression calculator with `;`, parentheses, comparisons,
  `&&`, `||` and chained assignment;
* **Falcon**, a REPL that keeps variables between statements.

No third-party dependencies are required.

## Installation

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## Command line

### The Falcon REPL

```
falcon
falcon --verbose
```

Statements end with `;` and may span several lines: input is collected
until a line ends with `;` (trailing spaces are ignored), then every
statement collected so far is run. Type `exit();` alone on its own line,
or end the input, to leave.

```
Welcome to Falcon!
> int a = 10;
(*)a: 10

> int b = a * 2 + 1;
(*)b: 21

> a = b - 1;
a: 20

> a > b || b == 21;
1
```

A leading `(*)` marks a newly declared variable. Using an undeclared
variable, declaring one twice, dividing by zero or writing an integer
literal outside the 32-bit signed range prints an error to standard error
and keeps the session going. Arithmetic results wrap around as 32-bit
signed integers and division truncates toward zero. With `-v` or
`--verbose` (as the only argument) the syntax tree of each statement is
printed before it is evaluated.

### Demo commands

```
falcon-lex
falcon-simple-calc
falcon-calc
```

`falcon-lex` prints the tokens of a few sample lines, including one that
ends in a lexical error. `falcon-simple-calc` and `falcon-calc` print the
syntax tree and result of sample expressions for the two calculator
stages; the simple calculator's samples include two that fail to parse.

Run as modules, the same programs take their input lines from the
command line instead of the samples:

```
python -m falconscript.basic_lexer "int x = 42"
python -m falconscript.calculator "int b = (1 + 2) * 3;"
```

## Library use

### Tokens

```python
from falconscript.lexer import tokenize

for token in tokenize("int d = a >= 3;"):
    print(token.type, token.value)
```

`falconscript.basic_lexer.tokenize` does the same for the reduced token
set. Both raise `falconscript.tokens.LexerError` on a character they do
not recognise (for the full lexer, a lone `|`, `&` or `!` is an error).
`BasicLexer` and `Lexer` can also be driven token by token with
`next_token()`, `done()` and `reset(text)`, or iterated directly; a token
is falsy once the input is used up.

### Parsing and evaluating

```python
from falconscript.calculator import Parser, evaluate

tree = Parser().parse("(2>3) + (4<5) + (6<7) == 2;")
print(tree.render())
print(evaluate(tree))   # 1
```

Syntax errors raise `falconscript.tokens.ParseError`. In this stage
variables are not stored: an identifier evaluates to 0 and an assignment
to the value of its right-hand side. `ASTNode.render()` returns the tree
drawn with box characters and `ASTNode.dump(file)` writes it to a stream
(standard output by default). `SimpleParser` with `evaluate` in
`falconscript.simple_calculator` covers the smaller grammar.

### Running scripts

```python
from falconscript.repl import Repl

repl = Repl(verbose=False)
for result in repl.execute("int x = 6; int y = x * 7; y;"):
    print(result)
# (*)x: 6
# (*)y: 42
# y: 42
```

`ScriptParser` in `falconscript.script_parser` turns a script into a
`Program` node with one child per statement. `Repl.execute` evaluates
each statement and returns a list of `EvaluatorResult` values; variables
live in `Repl.variables` across calls. Runtime problems raise
`falconscript.repl.ScriptError`, while bad input raises `LexerError` or
`ParseError`. `Repl.run(stdin, stdout, stderr)` runs the interactive loop
over any text streams.

## Limits

The language has only integers. There is no unary minus, no control
flow, no functions and no output statement besides the REPL echoing each
result. The REPL reads from standard input only; there is no command to
run a script file other than piping it in.