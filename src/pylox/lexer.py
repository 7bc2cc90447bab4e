"""
Lox Lexer (Scanner)
===================

This module implements the scanner for Lox, a small dynamically-typed
scripting language. It converts source text into the ordered token list
a parser consumes.

Token Categories
----------------
- Punctuation: ( ) { } , . - + ; *
- Operators: ! != = == < <= > >= /
- Literals: identifiers, "strings", numbers
- Keywords: and, class, else, false, for, fun, if, nil, or, print,
  return, super, this, true, var, while

Lexical Rules
-------------
- Comments run from // to the end of the line.
- Strings are double quoted, may span lines, and have no escapes.
- Numbers are decimal digits with an optional fractional part; the dot
  is only part of a number when a digit follows it. Every number
  literal is a float.
- Identifiers are ASCII letters, digits and underscores, not starting
  with a digit. Non-ASCII letters are not identifier characters.

Error Recovery
--------------
Unexpected characters and unterminated strings are recorded in an
ErrorCollector and produce no token. Scanning always runs to the end of
the input, so a single pass reports every lexical error.

Example Usage
-------------
>>> from pylox.lexer import scan
>>> tokens, diagnostics = scan('var answer = 42;')
>>> for token in tokens:
...     print(token)
VAR var None
IDENTIFIER answer None
EQUAL = None
NUMBER 42 42.0
SEMICOLON ; None
EOF  None
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional
import string

from pylox.errors import (
    ErrorCollector,
    LexicalError,
    LoxError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedStringError,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Lox language.

    The set is closed: the lexer never produces any other tag.
    """

    # === Single-character Tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


# =============================================================================
# Keyword Mapping
# =============================================================================

# Read-only view; built once at import and shared by every scan
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        type: The TokenType classification
        lexeme: The exact source text of the token ("" for EOF)
        literal: str for STRING, float for NUMBER, None otherwise
        line: Line number in source (1-indexed)
    """
    type: TokenType
    lexeme: str
    literal: str | float | None
    line: int

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"


class ScanResult(NamedTuple):
    """Tokens and diagnostics from one scan, unpackable as a pair."""
    tokens: list[Token]
    diagnostics: list[LexicalError]

    @property
    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Scans Lox source code into tokens.

    A Lexer is built for one source unit and scanned exactly once.
    Lexical errors are reported to the ErrorCollector passed as
    ``reporter`` (a private one is created if none is given).

    Usage:
        lexer = Lexer(source_text, "script.lox")
        tokens = lexer.scan_tokens()
        if lexer.reporter.has_errors():
            ...

    Attributes:
        source: The source code being scanned
        filename: Name of the source unit (for error reporting)
        reporter: ErrorCollector receiving lexical errors
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    # Characters that produce no token
    WHITESPACE = " \r\t"

    SINGLE_TOKENS = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }

    # Operators that become a compound token when followed by "="
    # first char -> (compound type, simple type)
    EQUAL_SUFFIX_TOKENS = {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        reporter: Optional[ErrorCollector] = None,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The Lox source code to scan
            filename: Name of the source unit (for error messages)
            reporter: Sink for lexical errors
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter if reporter is not None else ErrorCollector()

        self._tokens: list[Token] = []
        self._scanned = False

        # Cursor: [_start, _current) is the lexeme being recognized
        self._start = 0
        self._current = 0
        self._line = 1

        # Offset of the first character of the current line
        self._line_start_pos = 0

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source and return its tokens.

        The list always ends with a single EOF token. Lexical errors do
        not stop the scan; they are added to ``self.reporter``.

        Raises:
            LoxError: If this lexer has already been scanned
        """
        if self._scanned:
            raise LoxError("lexer has already scanned its source; create a new Lexer")
        self._scanned = True

        errors_before = self.reporter.error_count()

        while not self._at_end():
            # Beginning of the next lexeme
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))

        logger.debug(
            "scanned %s: %d tokens, %d errors, %d lines",
            self.filename,
            len(self._tokens),
            self.reporter.error_count() - errors_before,
            self._line,
        )
        return self._tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._current + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, counting newlines."""
        char = self.source[self._current]
        self._current += 1

        if char == "\n":
            self._line += 1
            self._line_start_pos = self._current

        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    # =========================================================================
    # Character Classification
    # =========================================================================

    @staticmethod
    def _is_digit(char: str) -> bool:
        return char != "" and char in string.digits

    @classmethod
    def _is_alpha(cls, char: str) -> bool:
        return char != "" and char in cls.IDENT_START

    @classmethod
    def _is_alphanumeric(cls, char: str) -> bool:
        return char != "" and char in cls.IDENT_CHARS

    # =========================================================================
    # Token Creation and Error Reporting
    # =========================================================================

    def _add_token(self, token_type: TokenType, literal: str | float | None = None) -> None:
        lexeme = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, lexeme, literal, self._line))

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self._line)

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Recognize one lexeme starting at ``self._start``."""
        char = self._advance()

        if char in self.SINGLE_TOKENS:
            self._add_token(self.SINGLE_TOKENS[char])
            return

        if char in self.EQUAL_SUFFIX_TOKENS:
            compound, simple = self.EQUAL_SUFFIX_TOKENS[char]
            self._add_token(compound if self._match("=") else simple)
            return

        if char == "/":
            if self._match("/"):
                self._skip_line_comment()
            else:
                self._add_token(TokenType.SLASH)
            return

        # Newlines are counted by _advance
        if char in self.WHITESPACE or char == "\n":
            return

        if char == '"':
            self._scan_string()
            return

        if self._is_digit(char):
            self._scan_number()
            return

        if self._is_alpha(char):
            self._scan_identifier()
            return

        self.reporter.add(
            UnexpectedCharacterError(char, self._location(), self._get_current_line())
        )

    def _skip_line_comment(self) -> None:
        """Skip to the end of the line, leaving the newline unconsumed."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _scan_identifier(self) -> None:
        """
        Scan an identifier or keyword.

        The whole run of identifier characters is taken before the
        keyword lookup, so "classy" is an identifier and not CLASS.
        """
        while self._is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self._start:self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _scan_number(self) -> None:
        """Scan digits with an optional fractional part."""
        while self._is_digit(self._peek()):
            self._advance()

        # A dot belongs to the number only when a digit follows it
        if self._peek() == "." and self._is_digit(self._peek(1)):
            self._advance()
            while self._is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self._start:self._current]))

    def _scan_string(self) -> None:
        """
        Scan a double-quoted string literal.

        Strings can contain raw newlines. The literal excludes the quotes;
        the lexeme includes them.
        """
        while not self._at_end() and self._peek() != '"':
            self._advance()

        if self._at_end():
            self.reporter.add(
                UnterminatedStringError(self._location(), self._get_current_line())
            )
            return

        self._advance()  # closing "

        self._add_token(TokenType.STRING, self.source[self._start + 1:self._current - 1])


# =============================================================================
# Convenience Function
# =============================================================================

def scan(source: str, filename: str = "<input>") -> ScanResult:
    """
    Scan a complete source unit.

    Args:
        source: Lox source text
        filename: Name used in error locations

    Returns:
        ScanResult of (tokens, diagnostics); tokens always end with EOF
    """
    reporter = ErrorCollector()
    tokens = Lexer(source, filename, reporter).scan_tokens()
    return ScanResult(tokens, list(reporter.errors))
