"""
Kum Lexer
=========

This module implements the single-pass driver that turns Kum source text
into a list of tokens.

At each position the driver skips spaces, then tries the scanners in a
fixed priority order:

    identifier, number, operator, string literal, line break

The first scanner that recognizes something decides the token and how far
to advance. If none does, lexing stops with UnrecognizedSymbolError.

Only the space character is skipped. Tabs and other whitespace are not
part of the language.

Example
-------
>>> from kum.lexer import lex, tokenize
>>> tokenize("x += 2.5")
[Token(IDENTIFIER, 'x'), Token(OPERATOR, ADD_ASSIGN), Token(NUMBER, 2.5)]

The non-raising form returns the tokens produced before the first failure:

>>> result = lex("a #")
>>> result.tokens
[Token(IDENTIFIER, 'a')]
>>> print(result.error)
Lexer failed at 1:3
Unknown symbol '#'
"""

from dataclasses import dataclass, field
from typing import List, Optional

from kum.errors import LexerError, UnrecognizedSymbolError
from kum.lexer.config import FULL, LexerConfig
from kum.lexer.cursor import Cursor
from kum.lexer.scanners import (
    BREAK,
    SPACE,
    Scanned,
    ScanFailure,
    ScanResult,
    compile_identifier_pattern,
    match_identifier,
    match_line_break,
    match_number,
    match_operator,
    match_string,
)
from kum.lexer.tokens import LineBreakToken, StringToken, Token


# =============================================================================
# Lex Result
# =============================================================================

@dataclass
class LexResult:
    """
    Outcome of a lex call.

    Attributes:
        tokens: Tokens produced, in source order (up to the failure, if any)
        error: The first failure, or None if the whole input was consumed
    """
    tokens: List[Token] = field(default_factory=list)
    error: Optional[LexerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[Token]:
        """
        Return the tokens, or raise the recorded error.

        Raises:
            LexerError: If lexing failed
        """
        if self.error is not None:
            raise self.error
        return self.tokens


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Kum source text.

    A Lexer holds only its configuration and the compiled identifier
    pattern, so one instance can serve any number of concurrent calls.

    Usage:
        lexer = Lexer(REDUCED)
        tokens = lexer.tokenize(source)

    Attributes:
        config: The lexical surface (alphabet, case folding, operators)
    """

    def __init__(self, config: Optional[LexerConfig] = None):
        self.config = config or FULL
        self._identifier_pattern = compile_identifier_pattern(self.config)

    def tokenize(self, source: str) -> List[Token]:
        """
        Tokenize the whole source.

        Raises:
            LexerError: On the first unrecognized or malformed construct
        """
        return self.lex(source).unwrap()

    def lex(self, source: str) -> LexResult:
        """
        Tokenize the whole source, stopping at the first failure.

        Never raises for malformed input; the failure is returned in the
        result together with the tokens produced before it.
        """
        result = LexResult()
        cursor = Cursor()
        pos = 0
        length = len(source)

        while pos < length:
            if source[pos] == SPACE:
                end = pos + 1
                while end < length and source[end] == SPACE:
                    end += 1
                cursor.advance_col(end - pos)
                pos = end
                continue

            scanned = self._scan(source, pos, cursor)

            if scanned is None:
                result.error = UnrecognizedSymbolError(
                    source[pos],
                    cursor.snapshot(),
                    source_line=_line_at(source, pos),
                )
                return result

            if isinstance(scanned, ScanFailure):
                cursor.advance_over(source[pos:scanned.offset])
                result.error = scanned.error_type(
                    cursor.snapshot(),
                    source_line=_line_at(source, scanned.offset),
                )
                return result

            result.tokens.append(scanned.token)
            self._advance(cursor, scanned, source[pos:pos + scanned.length])
            pos += scanned.length

        return result

    def _scan(self, source: str, pos: int, cursor: Cursor) -> ScanResult:
        """Try each scanner in priority order."""
        start = cursor.snapshot()

        scanned = match_identifier(self._identifier_pattern, source, pos, start)
        if scanned is None:
            scanned = match_number(source, pos, start)
        if scanned is None and self.config.operators:
            scanned = match_operator(source, pos, start)
        if scanned is None:
            scanned = match_string(source, pos, start)
        if scanned is None:
            scanned = match_line_break(source, pos, start)
        return scanned

    @staticmethod
    def _advance(cursor: Cursor, scanned: Scanned, lexeme: str) -> None:
        if isinstance(scanned.token, LineBreakToken):
            cursor.advance_row()
        elif isinstance(scanned.token, StringToken):
            # Escaped line breaks let a string span rows
            cursor.advance_over(lexeme)
        else:
            cursor.advance_col(scanned.length)


def _line_at(source: str, index: int) -> str:
    """Return the text of the row containing index, without its terminator."""
    start = source.rfind(BREAK, 0, index) + 1
    end = source.find(BREAK, index)
    if end == -1:
        end = len(source)
    return source[start:end].rstrip("\r")


# =============================================================================
# Module-level Convenience
# =============================================================================

def tokenize(source: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Tokenize source with the given configuration (FULL by default).

    Raises:
        LexerError: On the first unrecognized or malformed construct
    """
    return Lexer(config).tokenize(source)


def lex(source: str, config: Optional[LexerConfig] = None) -> LexResult:
    """Like tokenize, but return failures in the LexResult instead of raising."""
    return Lexer(config).lex(source)
