"""
interp Lexer Package

Implements the lexical front end of the interp language: a single-pass
scanner that turns source text into a list of classified tokens.

Key Features:
- Maximal munch for the two-character comparison operators
- Multi-line string literals, captured verbatim
- Decimal number literals decoded to float
- Fixed, read-only keyword table
- Non-fatal error reporting through a pluggable error sink
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, Cursor, CharClass, classify, scan_tokens, tokenize_string
from .errors import Diagnostic, ErrorReporter, LexerError

__all__ = [
    "Scanner",
    "Cursor",
    "CharClass",
    "classify",
    "scan_tokens",
    "tokenize_string",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "ErrorReporter",
    "LexerError",
]
