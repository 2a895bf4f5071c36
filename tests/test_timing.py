"""Tests for lyric timing validation."""

import pytest

from songcode.compiler.models import LyricLine, Measure, Section
from songcode.compiler.timing import validate_timing
from songcode.errors import ErrorCode, SongCodeError


def make_section(measure_count: int, spans: list[int]) -> Section:
    measures = tuple(Measure(chords=(), line_number=2 + i) for i in range(measure_count))
    first_lyric = 3 + measure_count
    lyrics = tuple(
        LyricLine(text=f"line {i}", measure_span=span, line_number=first_lyric + i)
        for i, span in enumerate(spans)
    )
    return Section(name="Verse", measures=measures, lyrics=lyrics, line_number=1)


class TestValidateTiming:
    @pytest.mark.parametrize(
        ("measure_count", "spans"),
        [(1, [1]), (2, [1, 1]), (4, [2, 2]), (4, [1, 3]), (3, [3])],
    )
    def test_matching_spans(self, measure_count: int, spans: list[int]) -> None:
        section = make_section(measure_count, spans)
        assert validate_timing(section) is section

    def test_no_lyrics_always_valid(self) -> None:
        """Instrumental sections carry no timing claim."""
        section = make_section(4, [])
        assert validate_timing(section) is section

    def test_empty_section(self) -> None:
        assert validate_timing(make_section(0, [])).measures == ()

    def test_mismatch(self) -> None:
        section = make_section(2, [2, 3])

        with pytest.raises(SongCodeError) as exc_info:
            validate_timing(section)

        error = exc_info.value
        assert error.code is ErrorCode.LYRIC_TIMING_MISMATCH
        assert error.line == section.lyrics[0].line_number
        assert "claimed 5 measures across lyrics but section has 2 measures" in error.message

    def test_lyrics_on_empty_chord_block(self) -> None:
        with pytest.raises(SongCodeError) as exc_info:
            validate_timing(make_section(0, [1]))
        assert "section has 0 measures" in exc_info.value.message

    def test_too_few_claimed(self) -> None:
        with pytest.raises(SongCodeError):
            validate_timing(make_section(4, [1, 1]))
