"""
Lox Error Hierarchy
===================

This module defines the exception hierarchy for pylox. All exceptions
inherit from LoxError, allowing callers to catch every package error
with a single except clause if desired.

Exception Hierarchy
-------------------
LoxError (base)
└── LexicalError - problems found while scanning source text
    ├── UnexpectedCharacterError - character that starts no lexeme
    ├── UnterminatedStringError - string literal without closing quote
    └── LexicalAnalysisError - aggregate report of collected errors

Diagnostics, Not Exceptions
---------------------------
The lexer never raises lexical errors. It builds the error objects and
hands them to an ErrorCollector, then carries on scanning so that one
pass reports every problem in the source. Whether to stop is decided by
the caller, which may raise the aggregate LexicalAnalysisError.

Error messages follow this format:
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
import logging
from typing import List, Optional


logger = logging.getLogger(__name__)


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all pylox errors.

        try:
            runner.run_file("script.lox")
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A line in a named source unit.

    Lox tokens only carry a line number, so unlike a full compiler
    location there is no column here.

    Attributes:
        filename: Name of the source unit (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(LoxError):
    """
    Base class for errors found while scanning.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line the error was reported on, or None without a location."""
        if self.location is None:
            return None
        return self.location.line

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            script.lox:3: error: Unexpected character
                var a = @;
            hint: '@' (U+0040) does not start any Lox token
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnexpectedCharacterError(LexicalError):
    """
    A character that matches none of the recognized lexeme starts.

    The lexer has already consumed the character when this is recorded,
    so scanning resumes with whatever follows it.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            "Unexpected character",
            location=location,
            hint=f"{char!r} (U+{ord(char):04X}) does not start any Lox token",
            source_line=source_line,
        )


class UnterminatedStringError(LexicalError):
    """
    String literal opened but the input ended before a closing quote.

    Lox strings may span lines, so this is only detected at end of input
    and is reported on the last line of the source.
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated string",
            location=location,
            hint="add a closing '\"' to complete the string",
            source_line=source_line,
        )


class LexicalAnalysisError(LexicalError):
    """
    Aggregate error carrying a formatted report of several errors.

    The message is already a complete report from ErrorCollector and is
    passed through without another prefix.
    """

    def _format_message(self) -> str:
        return self.message


# =============================================================================
# Error Collection for Multiple Error Reporting
# =============================================================================

class ErrorCollector:
    """
    Collects lexical errors for batch reporting.

    This is the diagnostic sink the lexer writes to. Errors are kept in
    the order they were discovered, which is source order for a single
    scan.

    Example:
        collector = ErrorCollector()
        tokens = Lexer(source, "script.lox", collector).scan_tokens()

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self):
        self.errors: List[LexicalError] = []

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        logger.debug("recorded %s at line %s", type(error).__name__, error.line)
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display, followed by a count."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a LexicalAnalysisError if any errors were collected."""
        if self.has_errors():
            raise LexicalAnalysisError(self.report())
