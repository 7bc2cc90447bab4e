# =============================================================================
# test_ast.py - Expression Tree and Printer Tests
# =============================================================================

import pytest

from pylox.ast import ASTPrinter, Binary, Grouping, Literal, Unary, demo_expression
from pylox.lexer import Token, TokenType


def op(token_type: TokenType, lexeme: str) -> Token:
    return Token(token_type, lexeme, None, 1)


class TestASTPrinter:
    """Parenthesized rendering of expression trees."""

    def setup_method(self):
        self.printer = ASTPrinter()

    def test_demo_expression(self):
        assert self.printer.print(demo_expression()) == "(* (- 123) (group 45.67))"

    def test_nil_literal(self):
        assert self.printer.print(Literal(None)) == "nil"

    def test_boolean_literals(self):
        assert self.printer.print(Literal(True)) == "true"
        assert self.printer.print(Literal(False)) == "false"

    def test_number_and_string_literals(self):
        assert self.printer.print(Literal(1.0)) == "1.0"
        assert self.printer.print(Literal("hi")) == "hi"

    def test_nested_binary(self):
        expr = Binary(
            Binary(Literal(1), op(TokenType.PLUS, "+"), Literal(2)),
            op(TokenType.EQUAL_EQUAL, "=="),
            Unary(op(TokenType.BANG, "!"), Grouping(Literal(False))),
        )
        assert self.printer.print(expr) == "(== (+ 1 2) (! (group false)))"

    def test_nodes_from_scanned_tokens(self):
        """Operator tokens straight from the lexer print by their lexeme."""
        from pylox.lexer import scan

        tokens, _ = scan("1 <= 2")
        left, operator, right = tokens[:3]
        expr = Binary(Literal(left.literal), operator, Literal(right.literal))
        assert self.printer.print(expr) == "(<= 1.0 2.0)"

    def test_unknown_node(self):
        with pytest.raises(TypeError):
            self.printer.print("not a node")

    def test_nodes_are_immutable(self):
        import dataclasses

        with pytest.raises(dataclasses.FrozenInstanceError):
            Literal(1).value = 2
