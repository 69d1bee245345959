"""
Lexer position cursor.

The cursor is a mutable (row, col) tracker owned by a single lex call.
It is only used for diagnostics; it is not an index into the source.
"""

from kum.errors import Position


class Cursor:
    """
    Mutable row/column tracker advanced as characters are consumed.

    Usage:
        cursor = Cursor()
        cursor.advance_col(3)
        cursor.advance_row()
        cursor.snapshot()   # Position(row=2, col=1)
    """

    __slots__ = ("row", "col")

    def __init__(self, row: int = 1, col: int = 1):
        self.row = row
        self.col = col

    def advance_row(self, by: int = 1) -> None:
        """Move down `by` rows and reset the column to 1."""
        self.row += by
        self.col = 1

    def advance_col(self, by: int = 1) -> None:
        self.col += by

    def advance_over(self, text: str) -> None:
        """
        Advance over raw consumed text.

        A newline advances the row; every other character (including a
        carriage return) advances the column.
        """
        last_break = text.rfind("\n")
        if last_break == -1:
            self.col += len(text)
            return
        self.advance_row(text.count("\n"))
        self.col += len(text) - last_break - 1

    def snapshot(self) -> Position:
        return Position(self.row, self.col)

    def __repr__(self) -> str:
        return f"Cursor({self.row}:{self.col})"
