"""
Scanner - turns source text into a list of tokens.

Single pass, left to right, at most two characters of lookahead. Lexical
faults are reported to an error sink and skipped, so a scan always returns
a token list ending in exactly one EOF token.
"""

import string
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)
from .errors import (
    Diagnostic, ErrorReporter, ErrorSink, LexerError,
    create_unexpected_character_error, create_unterminated_string_error
)
from ..log import get_logger

logger = get_logger(__name__)

DIGITS = frozenset(string.digits)
ALPHA = frozenset(string.ascii_letters + "_")
ALPHANUMERIC = DIGITS | ALPHA


class CharClass(Enum):
    """Classification of the first character of a lexeme."""
    PUNCTUATION = auto()
    OPERATOR = auto()
    SLASH = auto()
    WHITESPACE = auto()
    NEWLINE = auto()
    QUOTE = auto()
    DIGIT = auto()
    ALPHA = auto()
    OTHER = auto()


_CHAR_CLASSES: Dict[str, CharClass] = {}
_CHAR_CLASSES.update((c, CharClass.PUNCTUATION) for c in SINGLE_CHAR_TOKENS)
_CHAR_CLASSES.update((c, CharClass.OPERATOR) for c in ONE_OR_TWO_CHAR_TOKENS)
_CHAR_CLASSES.update((c, CharClass.WHITESPACE) for c in " \t\r")
_CHAR_CLASSES.update((c, CharClass.DIGIT) for c in DIGITS)
_CHAR_CLASSES.update((c, CharClass.ALPHA) for c in ALPHA)
_CHAR_CLASSES["/"] = CharClass.SLASH
_CHAR_CLASSES["\n"] = CharClass.NEWLINE
_CHAR_CLASSES['"'] = CharClass.QUOTE


def classify(char: str) -> CharClass:
    """Classify a single character. Total: unknown characters are OTHER."""
    return _CHAR_CLASSES.get(char, CharClass.OTHER)


@dataclass
class Cursor:
    """Position state of one scan."""
    start: int = 0      # first character of the lexeme being recognised
    current: int = 0    # next unread character
    line: int = 1


# What a handler recognised: (token type, literal) or None for no token
Recognized = Optional[Tuple[TokenType, Any]]


class Scanner:
    """
    Lexical analyzer.

    The scanner owns the source text and the keyword table. Cursor state is
    created by each call to scan_tokens() and threaded through every step,
    so the same Scanner can be scanned again and gives the same result.
    """

    def __init__(
        self,
        source: str,
        reporter: Optional[ErrorSink] = None,
        filename: str = "<unknown>",
        keywords: Mapping[str, TokenType] = KEYWORDS,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete, already decoded source text
            reporter: Error sink called as reporter(line, message);
                an ErrorReporter is created when omitted
            filename: Name of the source used in diagnostics
            keywords: Reserved word table
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter if reporter is not None else ErrorReporter(filename)
        self.keywords = keywords
        self.errors: List[Diagnostic] = []

        self._dispatch: Dict[CharClass, Callable[[Cursor, str], Recognized]] = {
            CharClass.PUNCTUATION: self._punctuation,
            CharClass.OPERATOR: self._operator,
            CharClass.SLASH: self._slash,
            CharClass.WHITESPACE: self._whitespace,
            CharClass.NEWLINE: self._newline,
            CharClass.QUOTE: self._string,
            CharClass.DIGIT: self._number,
            CharClass.ALPHA: self._identifier,
            CharClass.OTHER: self._unexpected,
        }

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with a single EOF token
        """
        self.errors.clear()
        cursor = Cursor()
        tokens: List[Token] = []

        logger.debug("Scanning %s (%d characters)", self.filename, len(self.source))

        while not self._is_at_end(cursor):
            token = self.scan_token(cursor)
            if token is not None:
                tokens.append(token)

        tokens.append(Token(TokenType.EOF, "", None, cursor.line))

        logger.debug("Scanned %s: %d tokens, %d errors",
                     self.filename, len(tokens), len(self.errors))
        return tokens

    def scan_token(self, cursor: Cursor) -> Optional[Token]:
        """Recognise the lexeme starting at cursor.current, if any."""
        cursor.start = cursor.current
        line = cursor.line
        char = self._advance(cursor)

        recognized = self._dispatch[classify(char)](cursor, char)
        if recognized is None:
            return None

        token_type, literal = recognized
        lexeme = self.source[cursor.start:cursor.current]
        return Token(token_type, lexeme, literal, line)

    # ------------------------------------------------------------------
    # Handlers, one per CharClass
    # ------------------------------------------------------------------

    def _punctuation(self, cursor: Cursor, char: str) -> Recognized:
        return SINGLE_CHAR_TOKENS[char], None

    def _operator(self, cursor: Cursor, char: str) -> Recognized:
        one_char, two_char = ONE_OR_TWO_CHAR_TOKENS[char]
        return (two_char if self._match(cursor, "=") else one_char), None

    def _slash(self, cursor: Cursor, char: str) -> Recognized:
        if not self._match(cursor, "/"):
            return TokenType.SLASH, None

        # Line comment runs up to, but not including, the newline
        while self._peek(cursor) != "\n" and not self._is_at_end(cursor):
            self._advance(cursor)
        return None

    def _whitespace(self, cursor: Cursor, char: str) -> Recognized:
        return None

    def _newline(self, cursor: Cursor, char: str) -> Recognized:
        cursor.line += 1
        return None

    def _string(self, cursor: Cursor, char: str) -> Recognized:
        """Recognise a string literal. Backslashes are kept as-is."""
        while self._peek(cursor) != '"' and not self._is_at_end(cursor):
            if self._peek(cursor) == "\n":
                cursor.line += 1
            self._advance(cursor)

        if self._is_at_end(cursor):
            self._error(create_unterminated_string_error(cursor.line, self.filename))
            return None

        self._advance(cursor)  # closing quote

        value = self.source[cursor.start + 1:cursor.current - 1]
        return TokenType.STRING, value

    def _number(self, cursor: Cursor, char: str) -> Recognized:
        while self._peek(cursor) in DIGITS:
            self._advance(cursor)

        # A trailing '.' is only part of the number when a digit follows it
        if self._peek(cursor) == "." and self._peek_next(cursor) in DIGITS:
            self._advance(cursor)
            while self._peek(cursor) in DIGITS:
                self._advance(cursor)

        text = self.source[cursor.start:cursor.current]
        return TokenType.NUMBER, float(text)

    def _identifier(self, cursor: Cursor, char: str) -> Recognized:
        while self._peek(cursor) in ALPHANUMERIC:
            self._advance(cursor)

        text = self.source[cursor.start:cursor.current]
        return self.keywords.get(text, TokenType.IDENTIFIER), None

    def _unexpected(self, cursor: Cursor, char: str) -> Recognized:
        self._error(create_unexpected_character_error(char, cursor.line, self.filename))
        return None

    # ------------------------------------------------------------------
    # Cursor primitives
    # ------------------------------------------------------------------

    def _is_at_end(self, cursor: Cursor) -> bool:
        return cursor.current >= len(self.source)

    def _advance(self, cursor: Cursor) -> str:
        char = self.source[cursor.current]
        cursor.current += 1
        return char

    def _match(self, cursor: Cursor, expected: str) -> bool:
        if self._is_at_end(cursor) or self.source[cursor.current] != expected:
            return False
        cursor.current += 1
        return True

    def _peek(self, cursor: Cursor) -> str:
        if self._is_at_end(cursor):
            return "\0"
        return self.source[cursor.current]

    def _peek_next(self, cursor: Cursor) -> str:
        if cursor.current + 1 >= len(self.source):
            return "\0"
        return self.source[cursor.current + 1]

    def _error(self, diagnostic: Diagnostic) -> None:
        self.errors.append(diagnostic)
        if isinstance(self.reporter, ErrorReporter):
            self.reporter.report(diagnostic)
        else:
            self.reporter(diagnostic.line, diagnostic.message)

    def has_errors(self) -> bool:
        """Check if the last scan reported any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        """Get all diagnostics from the last scan."""
        return list(self.errors)


def scan_tokens(
    source: str,
    reporter: Optional[ErrorSink] = None,
    filename: str = "<string>",
) -> List[Token]:
    """
    Convenience function to scan a source string.

    Diagnostics go to reporter; the token list is returned regardless.
    """
    return Scanner(source, reporter, filename).scan_tokens()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Scan a source string, treating the first diagnostic as fatal.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If any diagnostic was reported
    """
    scanner = Scanner(source, filename=filename)
    tokens = scanner.scan_tokens()

    if scanner.has_errors():
        # Raise the first error encountered
        raise LexerError(scanner.errors[0])

    return tokens
