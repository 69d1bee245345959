# =============================================================================
# test_scanners.py - Literal Scanner and Cursor Tests
# =============================================================================
# Tests for the individual scanners and the position cursor, independent
# of the driver loop.
# =============================================================================

import re

import pytest

from kum.errors import (
    Position,
    StringTerminatedByLineBreakError,
    UnterminatedStringError,
)
from kum.lexer.config import FULL, REDUCED
from kum.lexer.cursor import Cursor
from kum.lexer.scanners import (
    Scanned,
    ScanFailure,
    compile_identifier_pattern,
    decode_escapes,
    match_identifier,
    match_line_break,
    match_number,
    match_operator,
    match_string,
)
from kum.lexer.tokens import (
    IdentifierToken,
    LineBreakToken,
    NumberToken,
    Operator,
    OperatorToken,
    StringToken,
)


START = Position(1, 1)


# =============================================================================
# Cursor Tests
# =============================================================================

class TestCursor:
    """Test row/column bookkeeping."""

    def test_starts_at_one_one(self):
        assert Cursor().snapshot() == Position(1, 1)

    def test_advance_col(self):
        cursor = Cursor()
        cursor.advance_col()
        cursor.advance_col(3)
        assert cursor.snapshot() == Position(1, 5)

    def test_advance_row_resets_column(self):
        cursor = Cursor()
        cursor.advance_col(7)
        cursor.advance_row()
        assert cursor.snapshot() == Position(2, 1)

    def test_advance_several_rows(self):
        cursor = Cursor()
        cursor.advance_row(3)
        assert cursor.snapshot() == Position(4, 1)

    def test_advance_over_single_row(self):
        cursor = Cursor()
        cursor.advance_over("abc")
        assert cursor.snapshot() == Position(1, 4)

    def test_advance_over_rows(self):
        cursor = Cursor(1, 5)
        cursor.advance_over("ab\ncd\nefg")
        assert cursor.snapshot() == Position(3, 4)

    def test_advance_over_crlf(self):
        cursor = Cursor()
        cursor.advance_over("x\r\n")
        assert cursor.snapshot() == Position(2, 1)

    def test_snapshot_is_detached(self):
        cursor = Cursor()
        snapshot = cursor.snapshot()
        cursor.advance_col()
        assert snapshot == Position(1, 1)


# =============================================================================
# Identifier and Number Scanner Tests
# =============================================================================

class TestIdentifierScanner:
    """Test the longest-run identifier matcher."""

    def test_longest_run(self):
        pattern = compile_identifier_pattern(FULL)
        scanned = match_identifier(pattern, "abc def", 0, START)
        assert scanned == Scanned(IdentifierToken("abc"), 3)

    def test_matches_from_position(self):
        pattern = compile_identifier_pattern(FULL)
        scanned = match_identifier(pattern, "12ab", 2, START)
        assert scanned.length == 2

    def test_no_match(self):
        pattern = compile_identifier_pattern(FULL)
        assert match_identifier(pattern, "1a", 0, START) is None

    def test_reduced_pattern_is_case_sensitive(self):
        pattern = compile_identifier_pattern(REDUCED)
        assert match_identifier(pattern, "Дом", 0, START) is None
        assert match_identifier(pattern, "дом", 0, START).length == 3

    def test_full_pattern_has_no_case_folding(self):
        pattern = compile_identifier_pattern(FULL)
        assert not pattern.flags & re.IGNORECASE
        assert match_identifier(pattern, "\u212a", 0, START) is None


class TestNumberScanner:
    """Test the decimal number matcher."""

    @pytest.mark.parametrize("source,value,length", [
        ("7", 7.0, 1),
        ("12.5", 12.5, 4),
        ("0.125", 0.125, 5),
        ("3.x", 3.0, 1),
        ("10..5", 10.0, 2),
    ])
    def test_values(self, source, value, length):
        assert match_number(source, 0, START) == Scanned(NumberToken(value), length)

    def test_leading_dot_not_a_number(self):
        assert match_number(".5", 0, START) is None

    def test_non_ascii_digits_rejected(self):
        """Only ASCII digits form numbers."""
        assert match_number("٣", 0, START) is None


# =============================================================================
# Operator Scanner Tests
# =============================================================================

class TestOperatorScanner:
    """Test operator matching priority."""

    def test_compound_before_simple(self):
        assert match_operator("-=1", 0, START) == Scanned(
            OperatorToken(Operator.SUB_ASSIGN), 2
        )

    def test_simple(self):
        assert match_operator("*2", 0, START) == Scanned(OperatorToken(Operator.MUL), 1)

    def test_simple_at_end_of_input(self):
        assert match_operator("a/", 1, START) == Scanned(OperatorToken(Operator.DIV), 1)

    def test_unknown_punctuation_falls_through(self):
        assert match_operator("=", 0, START) is None
        assert match_operator("%", 0, START) is None

    def test_operator_symbols(self):
        assert Operator.ADD_ASSIGN.symbol == "+="
        assert Operator.ADD_ASSIGN.is_assignment
        assert not Operator.DIV.is_assignment


# =============================================================================
# Line Break Scanner Tests
# =============================================================================

class TestLineBreakScanner:

    def test_lf(self):
        assert match_line_break("\nx", 0, START) == Scanned(LineBreakToken(), 1)

    def test_crlf(self):
        assert match_line_break("\r\nx", 0, START) == Scanned(LineBreakToken(), 2)

    def test_lone_cr(self):
        assert match_line_break("\rx", 0, START) is None


# =============================================================================
# String Scanner Tests
# =============================================================================

class TestStringScanner:
    """Test the quoted string matcher."""

    def test_not_a_string(self):
        assert match_string("abc", 0, START) is None

    def test_length_counts_raw_characters(self):
        """The consumed length includes escapes and both quotes."""
        source = "x = 'a\\'b' y"
        scanned = match_string(source, 4, START)
        assert scanned == Scanned(StringToken("'a'b'"), 6)

    def test_unterminated_points_at_end(self):
        source = "'abc"
        assert match_string(source, 0, START) == ScanFailure(
            UnterminatedStringError, len(source)
        )

    def test_line_break_points_at_break(self):
        assert match_string("'ab\ncd'", 0, START) == ScanFailure(
            StringTerminatedByLineBreakError, 3
        )

    def test_crlf_points_at_carriage_return(self):
        assert match_string("'ab\r\ncd'", 0, START) == ScanFailure(
            StringTerminatedByLineBreakError, 3
        )

    def test_escaped_line_break_continues(self):
        scanned = match_string("'a\\\nb'", 0, START)
        assert scanned == Scanned(StringToken("'a\\\nb'"), 6)

    def test_token_keeps_start(self):
        scanned = match_string("'x'", 0, Position(4, 2))
        assert scanned.token.location == Position(4, 2)


class TestEscapeDecoding:
    """Test escape collapsing on scanned slices."""

    @pytest.mark.parametrize("raw,decoded", [
        ("abc'", "abc'"),
        ("a\\\\b'", "a\\b'"),
        ("a\\'", "a'"),
        ("\\n", "\\n"),
        ("\\\\\\'", "\\'"),
        ("a\\", "a\\"),
        ("", ""),
    ])
    def test_decode(self, raw, decoded):
        assert decode_escapes(raw) == decoded

    def test_decoded_text_passes_through(self):
        """Text without backslashes is returned unchanged."""
        assert decode_escapes("plain text'") == "plain text'"
