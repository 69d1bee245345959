"""
Kum Token Model
===============

Tokens form a closed set of kinds. Each kind is its own frozen dataclass
carrying only the payload it needs, so consumers dispatch on the class
instead of inspecting a loosely typed value:

| Kind        | Class            | Payload                              |
|-------------|------------------|--------------------------------------|
| IDENTIFIER  | IdentifierToken  | name (str)                           |
| NUMBER      | NumberToken      | value (float)                        |
| OPERATOR    | OperatorToken    | operator (Operator)                  |
| STRING      | StringToken      | value (str, quotes included)         |
| LINE_BREAK  | LineBreakToken   | none                                 |

Every token also records where it started. The location is excluded from
equality, so NumberToken(2.5) == NumberToken(2.5, Position(1, 7)).
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Optional, Union

from kum.errors import Position


# =============================================================================
# Token Kinds
# =============================================================================

class TokenKind(Enum):
    """The closed set of token kinds."""

    IDENTIFIER = auto()
    NUMBER = auto()
    OPERATOR = auto()
    STRING = auto()
    LINE_BREAK = auto()


class Operator(Enum):
    """Arithmetic and compound assignment operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    DIV_ASSIGN = "/="

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_assignment(self) -> bool:
        return len(self.value) == 2


# Compound forms are matched before single-character forms
COMPOUND_OPERATORS = {
    op.symbol: op for op in Operator if op.is_assignment
}

SIMPLE_OPERATORS = {
    op.symbol: op for op in Operator if not op.is_assignment
}


# =============================================================================
# Token Variants
# =============================================================================

@dataclass(frozen=True)
class IdentifierToken:
    """A run of alphabet letters, in source spelling."""

    kind: ClassVar[TokenKind] = TokenKind.IDENTIFIER

    name: str
    location: Optional[Position] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.name!r})"


@dataclass(frozen=True)
class NumberToken:
    """A decimal literal parsed as a float."""

    kind: ClassVar[TokenKind] = TokenKind.NUMBER

    value: float
    location: Optional[Position] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r})"


@dataclass(frozen=True)
class OperatorToken:
    kind: ClassVar[TokenKind] = TokenKind.OPERATOR

    operator: Operator
    location: Optional[Position] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.operator.name})"


@dataclass(frozen=True)
class StringToken:
    """
    A quoted string literal.

    The value is the full literal with escapes collapsed, so it keeps
    both delimiting quotes: the source 'a\\'b' yields the value 'a'b'.
    """

    kind: ClassVar[TokenKind] = TokenKind.STRING

    value: str
    location: Optional[Position] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r})"


@dataclass(frozen=True)
class LineBreakToken:
    kind: ClassVar[TokenKind] = TokenKind.LINE_BREAK

    location: Optional[Position] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind.name})"


Token = Union[IdentifierToken, NumberToken, OperatorToken, StringToken, LineBreakToken]
