"""
Error handling for the interp lexer.

Lexical faults never abort a scan. They are reported to an error sink, any
callable taking ``(line, message)``, and scanning carries on. The default
sink, ErrorReporter, records a Diagnostic for every report and logs it.
"""

from typing import Callable, List, Optional
from dataclasses import dataclass

from ..log import get_logger

logger = get_logger(__name__)

# Signature of an error sink: (line, message) -> None
ErrorSink = Callable[[int, str], None]


@dataclass
class Diagnostic:
    """A single line-numbered lexer diagnostic."""
    message: str
    line: int
    severity: str = "error"
    code: Optional[str] = None
    filename: str = "<unknown>"
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.filename}:{self.line}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception wrapping a lexer diagnostic.

    The scanner itself never raises this; it is used by callers that want
    to treat the first diagnostic as fatal (see tokenize_string).
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorReporter:
    """
    Default error sink.

    Remembers whether anything was reported so the caller can decide whether
    to hand the tokens on to a parser.
    """

    def __init__(self, filename: str = "<unknown>"):
        self.filename = filename
        self.diagnostics: List[Diagnostic] = []

    def __call__(self, line: int, message: str) -> None:
        self.report(Diagnostic(message=message, line=line, filename=self.filename))

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        logger.error("[line %d] Error: %s", diagnostic.line, diagnostic.message)

    @property
    def had_error(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    def reset(self) -> None:
        self.diagnostics.clear()


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."


def create_unexpected_character_error(char: str, line: int, filename: str = "<unknown>") -> Diagnostic:
    """Create a diagnostic for a character no lexeme can start with."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        message=UNEXPECTED_CHARACTER,
        line=line,
        code="L001",
        filename=filename,
        help_text=help_text,
    )


def create_unterminated_string_error(line: int, filename: str = "<unknown>") -> Diagnostic:
    """Create a diagnostic for a string literal missing its closing quote."""
    return Diagnostic(
        message=UNTERMINATED_STRING,
        line=line,
        code="L002",
        filename=filename,
        help_text='String literals must be closed with a matching " quote.',
    )
