"""
pylox - A Scanner for the Lox Scripting Language
================================================

This package provides the lexical front end of Lox, a small dynamically
typed scripting language: it turns source text into the classified
token stream a parser is written against.

Main Components
---------------
- **lexer**: TokenType, Token, the Lexer and the ``scan()`` helper
- **errors**: error hierarchy and the ErrorCollector diagnostic sink
- **ast**: expression node types and a parenthesized debug printer
- **runner**: LoxOptions configuration and the LoxRunner driver
- **cli**: the ``plox`` command-line tool

Quick Start
-----------
Scan a string:
    >>> from pylox import scan
    >>> tokens, diagnostics = scan("print 1 + 2;")
    >>> [t.type.name for t in tokens]
    ['PRINT', 'NUMBER', 'PLUS', 'NUMBER', 'SEMICOLON', 'EOF']

Or use the command-line tool:
    $ plox tokens script.lox
    $ plox repl
"""

__version__ = "1.0.0"

from pylox.errors import (
    LoxError,
    SourceLocation,
    LexicalError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    LexicalAnalysisError,
    ErrorCollector,
)
from pylox.lexer import (
    TokenType,
    Token,
    KEYWORDS,
    Lexer,
    ScanResult,
    scan,
)
from pylox.ast import (
    Binary,
    Grouping,
    Literal,
    Unary,
    ASTPrinter,
)
from pylox.runner import LoxOptions, LoxRunner, RunResult

__all__ = [
    "__version__",
    # Errors
    "LoxError",
    "SourceLocation",
    "LexicalError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "LexicalAnalysisError",
    "ErrorCollector",
    # Lexer
    "TokenType",
    "Token",
    "KEYWORDS",
    "Lexer",
    "ScanResult",
    "scan",
    # AST
    "Binary",
    "Grouping",
    "Literal",
    "Unary",
    "ASTPrinter",
    # Runner
    "LoxOptions",
    "LoxRunner",
    "RunResult",
]
