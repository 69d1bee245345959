"""
Kum Lexer Package
=================

Converts Kum source text into an ordered list of tokens, tracking
row/column positions for diagnostics.

Main Components
---------------
- **Lexer**: The single-pass driver (tokenize / lex)
- **tokens**: Token variants and the Operator enumeration
- **LexerConfig**: Dialect presets (FULL, REDUCED) and environment loading
- **Cursor**: Row/column tracker used while scanning

Example:
    >>> from kum.lexer import tokenize
    >>> tokenize("name + 1\\n")
    [Token(IDENTIFIER, 'name'), Token(OPERATOR, ADD), Token(NUMBER, 1.0), Token(LINE_BREAK)]
"""

from kum.lexer.config import FULL, REDUCED, PRESETS, LexerConfig
from kum.lexer.cursor import Cursor
from kum.lexer.lexer import Lexer, LexResult, lex, tokenize
from kum.lexer.tokens import (
    IdentifierToken,
    LineBreakToken,
    NumberToken,
    Operator,
    OperatorToken,
    StringToken,
    Token,
    TokenKind,
)

__all__ = [
    # Driver
    "Lexer",
    "LexResult",
    "lex",
    "tokenize",
    # Configuration
    "LexerConfig",
    "FULL",
    "REDUCED",
    "PRESETS",
    # Position tracking
    "Cursor",
    # Tokens
    "Token",
    "TokenKind",
    "Operator",
    "IdentifierToken",
    "NumberToken",
    "OperatorToken",
    "StringToken",
    "LineBreakToken",
]
