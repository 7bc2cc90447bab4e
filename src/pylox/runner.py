"""
Lox Runner
==========

Drives the front end over a source unit: read the text, scan it, and
package the tokens and diagnostics for the caller.

Usage
-----
Command line:
    $ plox tokens script.lox

Programmatic:
    >>> from pylox.runner import LoxRunner
    >>> result = LoxRunner().run_source('print "hi";')
    >>> result.success
    True

Error Handling
--------------
Lexical errors never stop a scan. By default they are returned in
``RunResult.errors`` and ``success`` is False. With ``strict=True`` the
runner raises a LexicalAnalysisError carrying the formatted report of
every error instead.

Each run uses a fresh ErrorCollector, so errors from one run (or one
REPL line) never leak into the next.
"""

import codecs
from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import List, Optional

from pylox.errors import ErrorCollector, LexicalError
from pylox.lexer import Lexer, Token


logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class LoxOptions:
    """
    Runner configuration options.

    Attributes:
        encoding: Text encoding used when reading source files
        strict: Raise LexicalAnalysisError when any lexical error is found
    """
    encoding: str = "utf-8"
    strict: bool = False

    @classmethod
    def from_env(cls) -> "LoxOptions":
        """
        Create LoxOptions from environment variables.

        Environment variables (all optional):
            PYLOX_ENCODING: Source file encoding (e.g. "latin-1")
            PYLOX_STRICT: "1"/"true"/"yes"/"on" or "0"/"false"/"no"/"off"

        Unrecognized values are ignored and the default is kept.
        """
        options = cls()

        if encoding := os.environ.get("PYLOX_ENCODING"):
            try:
                codecs.lookup(encoding)
                options.encoding = encoding
            except LookupError:
                logger.debug("ignoring unknown PYLOX_ENCODING %r", encoding)

        if strict := os.environ.get("PYLOX_STRICT"):
            value = strict.strip().lower()
            if value in _TRUE_VALUES:
                options.strict = True
            elif value in _FALSE_VALUES:
                options.strict = False

        return options


@dataclass
class RunResult:
    """
    Result of scanning one source unit.

    Attributes:
        filename: Name of the scanned source
        tokens: Tokens including the trailing EOF
        errors: Lexical errors in source order
        success: True when no lexical error was recorded
    """
    filename: str
    tokens: List[Token] = field(default_factory=list)
    errors: List[LexicalError] = field(default_factory=list)
    success: bool = False

    @property
    def token_count(self) -> int:
        """Number of tokens, not counting EOF."""
        return max(len(self.tokens) - 1, 0)


class LoxRunner:
    """
    Front-end driver for Lox source.

    Example:
        runner = LoxRunner(LoxOptions(strict=True))
        result = runner.run_file("script.lox")
        for token in result.tokens:
            print(token)
    """

    def __init__(self, options: Optional[LoxOptions] = None):
        self.options = options or LoxOptions()

    def run_source(self, source: str, filename: str = "<input>") -> RunResult:
        """
        Scan Lox source text.

        Args:
            source: Lox source code string
            filename: Source name for error messages

        Returns:
            RunResult with tokens and errors

        Raises:
            LexicalAnalysisError: In strict mode, if any lexical error was found
        """
        reporter = ErrorCollector()
        tokens = Lexer(source, filename, reporter).scan_tokens()

        result = RunResult(
            filename=filename,
            tokens=tokens,
            errors=list(reporter.errors),
            success=not reporter.has_errors(),
        )

        if not result.success:
            logger.debug("%s: %d lexical errors", filename, reporter.error_count())
            if self.options.strict:
                reporter.raise_if_errors()

        return result

    def run_file(self, filepath: str | Path) -> RunResult:
        """
        Scan a Lox source file.

        Raises:
            FileNotFoundError: If the source file does not exist
            LexicalAnalysisError: In strict mode, if any lexical error was found
        """
        path = Path(filepath)

        logger.debug("reading %s as %s", path, self.options.encoding)
        source = path.read_text(encoding=self.options.encoding)
        return self.run_source(source, str(filepath))
