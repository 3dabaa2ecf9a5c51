"""
interp

Front end of the interp language toolchain.

Architecture:
    interp/
    ├── lexer/           # Tokenization and lexical analysis
    └── log.py           # Logger setup shared by all modules

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, ErrorReporter, scan_tokens

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "ErrorReporter",
    "scan_tokens",

    # Version info
    "__version__",
    "__license__",
]
