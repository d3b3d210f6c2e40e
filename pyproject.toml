[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "falconscript"
version = "0.1.0"
description = "A small integer scripting language: hand-written DFA lexers, recursive-descent parsers, AST evaluators and an interactive REPL."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "interpreter",
    "lexer",
    "parser",
    "recursive-descent",
    "ast",
    "repl",
    "calculator",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
falcon = "falconscript.repl:main"
falcon-lex = "falconscript.basic_lexer:main"
falcon-simple-calc = "falconscript.simple_calculator:main"
falcon-calc = "falconscript.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["falconscript"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["falconscript"]
