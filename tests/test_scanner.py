"""Tests for the SongCode line scanner."""

import pytest

from songcode.compiler.models import RawLine
from songcode.compiler.scanner import preprocess, scan_lines


class TestScanLines:
    """Line numbering tests."""

    def test_numbers_start_at_one(self) -> None:
        """First line is line 1."""
        lines = scan_lines("Verse\nC;G")
        assert [line.line_number for line in lines] == [1, 2]
        assert lines[0].text == "Verse"

    def test_blank_lines_preserved(self) -> None:
        """Blank lines keep their place so later numbers stay exact."""
        lines = scan_lines("@bpm 120\n\nVerse")
        assert len(lines) == 3
        assert lines[1].is_blank
        assert lines[2].line_number == 3

    def test_empty_input(self) -> None:
        """Empty input yields one blank line and never raises."""
        lines = scan_lines("")
        assert lines == [RawLine(line_number=1, text="")]

    @pytest.mark.parametrize("text", ["a\r\nb\r\nc", "a\rb\rc", "a\nb\nc"])
    def test_line_endings_normalized(self, text: str) -> None:
        """CRLF and CR are treated like LF."""
        assert [line.text for line in scan_lines(text)] == ["a", "b", "c"]

    def test_bom_stripped(self) -> None:
        """A leading byte order mark is dropped."""
        assert preprocess("\ufeffVerse") == ["Verse"]


class TestRawLine:
    """RawLine helper tests."""

    def test_stripped(self) -> None:
        assert RawLine(1, "  C;G  ").stripped == "C;G"

    def test_whitespace_only_is_blank(self) -> None:
        assert RawLine(1, " \t ").is_blank

    def test_comment_detection(self) -> None:
        assert RawLine(1, "  # intro is optional").is_comment("#")
        assert not RawLine(1, "C#m;G").is_comment("#")
