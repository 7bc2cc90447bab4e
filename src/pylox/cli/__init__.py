"""
pylox Command-Line Interface
============================

This package provides the ``plox`` command-line tool:

- **plox tokens**: scan a Lox file and print its tokens
- **plox repl**: scan lines typed at an interactive prompt
- **plox ast-demo**: print a sample expression tree

The tool is a Click-based application with unified exit codes and
error reporting (see ``pylox.cli.errors``).
"""

__all__ = ["plox"]
