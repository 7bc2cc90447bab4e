# =============================================================================
# test_errors.py - Error Hierarchy and Collector Tests
# =============================================================================
# Tests for message formatting of lexical errors and the ErrorCollector
# diagnostic sink.
# =============================================================================

import pytest

from pylox.errors import (
    ErrorCollector,
    LexicalAnalysisError,
    LexicalError,
    LoxError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedStringError,
)


# =============================================================================
# Hierarchy Tests
# =============================================================================

class TestHierarchy:
    """All package errors share LoxError as their base."""

    @pytest.mark.parametrize("cls", [
        LexicalError,
        UnexpectedCharacterError,
        UnterminatedStringError,
        LexicalAnalysisError,
    ])
    def test_subclasses_lox_error(self, cls):
        assert issubclass(cls, LoxError)

    def test_specific_errors_are_lexical(self):
        assert issubclass(UnexpectedCharacterError, LexicalError)
        assert issubclass(UnterminatedStringError, LexicalError)


# =============================================================================
# Formatting Tests
# =============================================================================

class TestFormatting:
    """Error message format: location, source line, hint."""

    def test_source_location_str(self):
        assert str(SourceLocation("main.lox", 12)) == "main.lox:12"

    def test_unexpected_character_message(self):
        error = UnexpectedCharacterError(
            "@", SourceLocation("t.lox", 3), "var a = @;"
        )
        lines = str(error).splitlines()
        assert lines[0] == "t.lox:3: error: Unexpected character"
        assert lines[1] == "    var a = @;"
        assert lines[2] == "hint: '@' (U+0040) does not start any Lox token"
        assert error.line == 3
        assert error.char == "@"

    def test_unterminated_string_message(self):
        error = UnterminatedStringError(SourceLocation("<input>", 1))
        assert str(error).splitlines()[0] == "<input>:1: error: Unterminated string"
        assert "closing" in error.hint

    def test_without_location(self):
        error = LexicalError("something odd")
        assert str(error) == "error: something odd"
        assert error.line is None

    def test_source_line_needs_location(self):
        error = LexicalError("odd", source_line="x = 1")
        assert "x = 1" not in str(error)

    def test_aggregate_passes_message_through(self):
        error = LexicalAnalysisError("already\nformatted")
        assert str(error) == "already\nformatted"


# =============================================================================
# ErrorCollector Tests
# =============================================================================

class TestErrorCollector:
    """Collecting and reporting multiple errors."""

    def make_error(self, line: int = 1) -> LexicalError:
        return UnexpectedCharacterError("#", SourceLocation("<input>", line))

    def test_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        assert collector.error_count() == 0
        collector.raise_if_errors()

    def test_keeps_order(self):
        collector = ErrorCollector()
        first, second = self.make_error(1), self.make_error(5)
        collector.add(first)
        collector.add(second)
        assert collector.errors == [first, second]
        assert collector.error_count() == 2

    def test_report_summary(self):
        collector = ErrorCollector()
        collector.add(self.make_error(2))
        report = collector.report()
        assert report.startswith("<input>:2: error: Unexpected character")
        assert report.endswith("\n1 error")

    def test_report_plural(self):
        collector = ErrorCollector()
        collector.add(self.make_error())
        collector.add(self.make_error())
        assert collector.report().endswith("\n2 errors")

    def test_report_counts_only_errors(self):
        collector = ErrorCollector()
        collector.add(self.make_error())
        assert "warning" not in collector.report()
        assert not hasattr(collector, "warnings")

    def test_raise_if_errors(self):
        collector = ErrorCollector()
        collector.add(self.make_error())
        with pytest.raises(LexicalAnalysisError) as exc_info:
            collector.raise_if_errors()
        assert str(exc_info.value).endswith("\n1 error")

    def test_clear(self):
        collector = ErrorCollector()
        collector.add(self.make_error())
        collector.clear()
        assert not collector.has_errors()
        assert collector.error_count() == 0
