"""
Kum Lexer - Literal Scanners
============================

Each scanner looks at the source at a given index and either:
- returns None: the construct does not start here, try the next scanner
- returns Scanned: the token and how many source characters it consumed
- returns ScanFailure: the construct starts here but is malformed

Scanners never mutate anything and never raise for malformed input; the
driver decides how a failure is reported.

String Literals
---------------
Strings are delimited by single quotes and may not contain a raw line
break. A backslash escapes the following backslash or quote:

| Source        | Token value  |
|---------------|--------------|
| 'abc'         | 'abc'        |
| 'a\\\\b'        | 'a\\b'        |
| 'a\\'b'        | 'a'b'        |
| 'a\\nb'        | 'a\\nb'       |

The value keeps the delimiting quotes. A backslash before a line break
lets the string continue onto the next line.
"""

from dataclasses import dataclass
from typing import Optional, Type, Union
import re

from kum.errors import (
    LexerError,
    Position,
    StringTerminatedByLineBreakError,
    UnterminatedStringError,
)
from kum.lexer.config import LexerConfig
from kum.lexer.tokens import (
    COMPOUND_OPERATORS,
    SIMPLE_OPERATORS,
    IdentifierToken,
    LineBreakToken,
    NumberToken,
    OperatorToken,
    StringToken,
    Token,
)


QUOTE = "'"
BREAK = "\n"
SPACE = " "
BACKSLASH = "\\"

# Only ASCII digits; \d would also accept other Unicode decimals
NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")

_DELIMITER_PATTERN = re.compile(r"['\n]")


# =============================================================================
# Scan Results
# =============================================================================

@dataclass(frozen=True)
class Scanned:
    """A recognized token and the number of source characters it spans."""
    token: Token
    length: int


@dataclass(frozen=True)
class ScanFailure:
    """
    A malformed construct.

    Attributes:
        error_type: The LexerError subclass to report
        offset: Source index the error points at
    """
    error_type: Type[LexerError]
    offset: int


ScanResult = Optional[Union[Scanned, ScanFailure]]


# =============================================================================
# Identifier, Number, Operator
# =============================================================================

def compile_identifier_pattern(config: LexerConfig) -> "re.Pattern[str]":
    """Build the longest-run pattern for the configured identifier alphabet."""
    return re.compile(f"[{config.letter_class()}]+")


def match_identifier(
    pattern: "re.Pattern[str]", source: str, pos: int, start: Position
) -> Optional[Scanned]:
    match = pattern.match(source, pos)
    if match is None:
        return None
    return Scanned(IdentifierToken(match.group(), start), match.end() - pos)


def match_number(source: str, pos: int, start: Position) -> Optional[Scanned]:
    """
    Match digits with an optional fractional part.

    float() always uses '.' as the decimal separator, whatever the locale.
    """
    match = NUMBER_PATTERN.match(source, pos)
    if match is None:
        return None
    return Scanned(NumberToken(float(match.group()), start), match.end() - pos)


def match_operator(source: str, pos: int, start: Position) -> Optional[Scanned]:
    """Match a compound assignment operator, else a single-character one."""
    operator = COMPOUND_OPERATORS.get(source[pos:pos + 2])
    if operator is not None:
        return Scanned(OperatorToken(operator, start), 2)

    operator = SIMPLE_OPERATORS.get(source[pos])
    if operator is not None:
        return Scanned(OperatorToken(operator, start), 1)

    return None


def match_line_break(source: str, pos: int, start: Position) -> Optional[Scanned]:
    if source.startswith(BREAK, pos):
        return Scanned(LineBreakToken(start), 1)
    if source.startswith("\r\n", pos):
        return Scanned(LineBreakToken(start), 2)
    return None


# =============================================================================
# String Literals
# =============================================================================

def match_string(source: str, pos: int, start: Position) -> ScanResult:
    """
    Scan a quoted string literal starting at the opening quote.

    The scan jumps from delimiter to delimiter (quote or line break). The
    parity of the backslash run just before a delimiter decides whether it
    is escaped. Each slice up to and including the delimiter is decoded
    and appended to the value.
    """
    if source[pos] != QUOTE:
        return None

    parts = [QUOTE]
    search = pos + 1

    while True:
        match = _DELIMITER_PATTERN.search(source, search)
        if match is None:
            return ScanFailure(UnterminatedStringError, len(source))

        found = match.start()
        escaped = _count_backslashes(source, search, found) % 2 == 1
        parts.append(decode_escapes(source[search:found + 1]))

        if not escaped:
            if source[found] == BREAK:
                # A \r\n break starts at the \r
                if found > search and source[found - 1] == "\r":
                    found -= 1
                return ScanFailure(StringTerminatedByLineBreakError, found)
            return Scanned(StringToken("".join(parts), start), found + 1 - pos)

        search = found + 1


def _count_backslashes(source: str, floor: int, index: int) -> int:
    """Count consecutive backslashes immediately before index, not below floor."""
    count = 0
    i = index - 1
    while i >= floor and source[i] == BACKSLASH:
        count += 1
        i -= 1
    return count


def decode_escapes(chars: str) -> str:
    """
    Collapse escape sequences in a scanned slice.

    A backslash followed by a backslash or a quote yields that character
    alone. A backslash followed by anything else is kept, together with
    the character.
    """
    out = []
    pending = False
    for char in chars:
        if pending:
            pending = False
            if char == BACKSLASH or char == QUOTE:
                out.append(char)
                continue
            out.append(BACKSLASH)
        if char == BACKSLASH:
            pending = True
        else:
            out.append(char)
    if pending:
        out.append(BACKSLASH)
    return "".join(out)
