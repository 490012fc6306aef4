"""Tests for the deck line-reading helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from pydeckcore.core.exceptions import DeckFormatError
from pydeckcore.io.deck_reader import (
    expand_repeats,
    find_unquoted,
    is_comment_line,
    parse_float,
    parse_int,
    read_deck_lines,
    split_fields,
    strip_inline_comment,
)

# ── is_comment_line ─────────────────────────────────────────────────


class TestIsCommentLine:
    def test_dash_comment(self) -> None:
        assert is_comment_line("-- a comment") is True

    def test_indented_comment(self) -> None:
        assert is_comment_line("   -- indented") is True

    def test_blank_line(self) -> None:
        assert is_comment_line("") is True
        assert is_comment_line("   ") is True
        assert is_comment_line("\n") is True

    def test_data_line(self) -> None:
        assert is_comment_line("1 JAN 2000 /") is False

    def test_single_dash_not_comment(self) -> None:
        assert is_comment_line("-1.5 /") is False

    def test_custom_prefix(self) -> None:
        assert is_comment_line("# note", comment_prefix="#") is True


# ── find_unquoted / strip_inline_comment ────────────────────────────


class TestStripInlineComment:
    def test_trailing_comment(self) -> None:
        assert strip_inline_comment("1 2 3 / -- three values") == "1 2 3 /"

    def test_no_comment(self) -> None:
        assert strip_inline_comment("1 2 3 /  ") == "1 2 3 /"

    def test_comment_marker_in_quotes_kept(self) -> None:
        assert strip_inline_comment("'A--B' 1 / -- note") == "'A--B' 1 /"

    def test_find_unquoted_skips_quotes(self) -> None:
        assert find_unquoted("'a/b' /", "/") == 6

    def test_find_unquoted_missing(self) -> None:
        assert find_unquoted("'a/b'", "/") == -1


# ── split_fields ────────────────────────────────────────────────────


class TestSplitFields:
    def test_whitespace(self) -> None:
        assert split_fields("  1   2\t3 ") == ["1", "2", "3"]

    def test_quoted_field(self) -> None:
        assert split_fields("'PROD 1' OPEN") == ["PROD 1", "OPEN"]

    def test_double_quotes(self) -> None:
        assert split_fields('"A B" C') == ["A B", "C"]

    def test_empty_quoted_field(self) -> None:
        assert split_fields("'' X") == ["", "X"]

    def test_time_field(self) -> None:
        assert split_fields("1 JAN 2000 '12:00:00'") == ["1", "JAN", "2000", "12:00:00"]

    def test_empty(self) -> None:
        assert split_fields("   ") == []


# ── number parsing ──────────────────────────────────────────────────


class TestParseNumbers:
    def test_parse_int(self) -> None:
        assert parse_int("42") == 42

    def test_parse_int_error_context(self) -> None:
        with pytest.raises(DeckFormatError, match="DATES day") as exc_info:
            parse_int("x", "DATES day", line_number=7)
        assert exc_info.value.line_number == 7

    def test_parse_float(self) -> None:
        assert parse_float("10.5") == 10.5

    def test_parse_float_fortran_exponent(self) -> None:
        assert parse_float("1.5D+01") == 15.0

    def test_parse_float_error(self) -> None:
        with pytest.raises(DeckFormatError, match="Expected number"):
            parse_float("ten")


# ── expand_repeats ──────────────────────────────────────────────────


class TestExpandRepeats:
    def test_no_repeats(self) -> None:
        assert expand_repeats(["1", "2"]) == ["1", "2"]

    def test_repeat(self) -> None:
        assert expand_repeats(["3*10", "5"]) == ["10", "10", "10", "5"]

    def test_bare_default_untouched(self) -> None:
        assert expand_repeats(["2*"]) == ["2*"]


# ── read_deck_lines ─────────────────────────────────────────────────


class TestReadDeckLines:
    def test_reads_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "deck.data"
        path.write_text("START\n 1 JAN 2000 /\r\n")
        assert read_deck_lines(path) == ["START", " 1 JAN 2000 /"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_deck_lines(tmp_path / "missing.data")
