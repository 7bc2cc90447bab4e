"""
Lox Expression Tree
===================

Expression node types for Lox and a debug printer for them.

Node Hierarchy
--------------
Expr (closed union)
├── Binary   - left operator right
├── Grouping - parenthesized expression
├── Literal  - number, string, boolean or nil value
└── Unary    - prefix operator applied to an operand

The node set is closed, so the printer is one recursive function that
matches on the node class. Adding a node kind means adding a branch
there; an unknown node is a TypeError rather than a silent fallback.

Example
-------
>>> from pylox.ast import ASTPrinter, demo_expression
>>> ASTPrinter().print(demo_expression())
'(* (- 123) (group 45.67))'
"""

from dataclasses import dataclass
from typing import Union

from pylox.lexer import Token, TokenType


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass(frozen=True)
class Binary:
    """Infix operator expression, e.g. ``a + b``."""
    left: "Expr"
    operator: Token
    right: "Expr"


@dataclass(frozen=True)
class Grouping:
    """Parenthesized expression."""
    expression: "Expr"


@dataclass(frozen=True)
class Literal:
    """Constant value; None is Lox ``nil``."""
    value: object


@dataclass(frozen=True)
class Unary:
    """Prefix operator expression, e.g. ``-a`` or ``!a``."""
    operator: Token
    right: "Expr"


Expr = Union[Binary, Grouping, Literal, Unary]


# =============================================================================
# Printer
# =============================================================================

class ASTPrinter:
    """
    Renders an expression tree as Lisp-style parenthesized text.

    Usage:
        printer = ASTPrinter()
        output = printer.print(expr)
    """

    def print(self, expr: Expr) -> str:
        if isinstance(expr, Binary):
            return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)
        if isinstance(expr, Grouping):
            return self._parenthesize("group", expr.expression)
        if isinstance(expr, Literal):
            return self._format_value(expr.value)
        if isinstance(expr, Unary):
            return self._parenthesize(expr.operator.lexeme, expr.right)
        raise TypeError(f"not a Lox expression node: {type(expr).__name__}")

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name]
        parts.extend(self.print(expr) for expr in exprs)
        return f"({' '.join(parts)})"

    @staticmethod
    def _format_value(value: object) -> str:
        if value is None:
            return "nil"
        # Lox spells booleans in lowercase
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)


def demo_expression() -> Expr:
    """Build the sample tree for ``-123 * (45.67)``."""
    return Binary(
        Unary(Token(TokenType.MINUS, "-", None, 1), Literal(123)),
        Token(TokenType.STAR, "*", None, 1),
        Grouping(Literal(45.67)),
    )
