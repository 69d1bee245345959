"""
Kum Error Hierarchy
===================

This module defines the exception hierarchy for the Kum toolchain.
All exceptions inherit from KumError, allowing callers to catch every
toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
KumError (base)
└── LexerError (tokenization failures)
    ├── UnrecognizedSymbolError - no scanner accepted the character
    ├── UnterminatedStringError - end of input inside a string literal
    └── StringTerminatedByLineBreakError - raw line break inside a string

Error Message Format
--------------------
Every lexer error renders as a two-line diagnostic:

    Lexer failed at 1:5
    Unknown symbol '#'

format_report() adds the offending source line with a caret pointer
and, when available, a hint:

    Lexer failed at 1:5
    Unknown symbol '#'
        x = #
            ^
    hint: ...
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class KumError(Exception):
    """
    Base exception for all Kum errors.

        try:
            tokens = tokenize(line)
        except KumError as e:
            print(e)
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class Position:
    """
    A (row, col) snapshot of the lexer cursor.

    Attributes:
        row: Line number (1-indexed)
        col: Column number (1-indexed)
    """
    row: int = 1
    col: int = 1

    def __str__(self) -> str:
        return f"{self.row}:{self.col}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(KumError):
    """
    Base exception for tokenization failures.

    Attributes:
        message: The error description
        location: Where scanning stopped
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the failing row (optional)
    """

    def __init__(
        self,
        message: str,
        location: Position,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(message)

    @property
    def row(self) -> int:
        return self.location.row

    @property
    def col(self) -> int:
        return self.location.col

    def __str__(self) -> str:
        return f"Lexer failed at {self.location}\n{self.message}"

    def format_report(self) -> str:
        """
        Format the diagnostic with source context and hint.

        Example output:
            Lexer failed at 1:9
            Unknown symbol '#'
                count = #
                        ^
            hint: remove the character or quote it in a string literal
        """
        parts = [str(self)]

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.col - 1)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnrecognizedSymbolError(LexerError):
    """
    No scanner accepted the character at the cursor.

    Example:
        x = 1   # '=' alone is not a Kum operator
    """

    def __init__(
        self,
        symbol: str,
        location: Position,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        super().__init__(
            f"Unknown symbol '{symbol}'",
            location,
            hint="remove the character or quote it in a string literal",
            source_line=source_line,
        )


class UnterminatedStringError(LexerError):
    """
    A string literal was opened but the input ended before a closing quote.

    Example:
        'hello
    """

    def __init__(
        self,
        location: Position,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Quote or line-break not found",
            location,
            hint="add a closing \"'\" to complete the string",
            source_line=source_line,
        )


class StringTerminatedByLineBreakError(LexerError):
    """
    A raw line break appeared inside an open string literal.

    Strings may only continue onto the next line when the line break
    is escaped with a backslash.

    The location is the start of the break: the carriage return of a
    CR LF pair.
    """

    def __init__(
        self,
        location: Position,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "String is terminated by line-break instead of closing quote",
            location,
            hint="close the string before the end of the line",
            source_line=source_line,
        )
