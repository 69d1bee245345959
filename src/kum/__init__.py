"""
Kum - Lexer and Tools for the Kum Scripting Language
====================================================

This package turns Kum source text into tokens for later stages.

Main Components
---------------
- **lexer**: Tokenizer with row/column diagnostics
    Converts source text into IdentifierToken, NumberToken, OperatorToken,
    StringToken and LineBreakToken values

- **errors**: Located error hierarchy rooted at KumError

- **cli**: The kum command (interactive loop and file tokenizer)

Quick Start
-----------
    >>> from kum import tokenize
    >>> tokenize("x += 2.5")
    [Token(IDENTIFIER, 'x'), Token(OPERATOR, ADD_ASSIGN), Token(NUMBER, 2.5)]

Or use the command-line tool:
    $ kum repl
    $ kum tokenize program.kum
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from kum.errors import (
    KumError,
    LexerError,
    Position,
    StringTerminatedByLineBreakError,
    UnrecognizedSymbolError,
    UnterminatedStringError,
)
from kum.lexer import (
    FULL,
    REDUCED,
    IdentifierToken,
    Lexer,
    LexerConfig,
    LexResult,
    LineBreakToken,
    NumberToken,
    Operator,
    OperatorToken,
    StringToken,
    Token,
    TokenKind,
    lex,
    tokenize,
)

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "Lexer",
    "LexResult",
    "LexerConfig",
    "FULL",
    "REDUCED",
    "lex",
    "tokenize",
    # Tokens
    "Token",
    "TokenKind",
    "Operator",
    "IdentifierToken",
    "NumberToken",
    "OperatorToken",
    "StringToken",
    "LineBreakToken",
    # Exception hierarchy
    "KumError",
    "LexerError",
    "Position",
    "UnrecognizedSymbolError",
    "UnterminatedStringError",
    "StringTerminatedByLineBreakError",
]
