"""End-to-end tests for SongCode conversion."""

import json

import pytest

from songcode import (
    ConverterConfig,
    ErrorCode,
    SongCodeConverter,
    SongCodeError,
    convert,
    try_convert,
)

ROAD_SONG = """@bpm 120
@original G

Verse
G;C;D;G
G;C;D;G
--
Walking down the road today _1
Sunshine lights my way _1

Chorus
C;G;D;G
C;G;D;G
--
This is my song _1
Singing all day long _1
"""


@pytest.fixture
def converter() -> SongCodeConverter:
    return SongCodeConverter()


def convert_error(text: str) -> SongCodeError:
    with pytest.raises(SongCodeError) as exc_info:
        convert(text)
    return exc_info.value


class TestScenarios:
    """Reference inputs and their outcomes."""

    def test_single_measure_verse(self, converter: SongCodeConverter) -> None:
        doc = converter.convert("@bpm 120\n\nVerse\nC;G;Am;F\n--\nSinging along _1\n")

        assert doc.to_dict() == {
            "sections": [{"name": "Verse", "measures": [["C", "G", "Am", "F"]]}],
            "prompter": [
                {"type": "tempo", "bpm": 120},
                {"type": "content", "name": "Verse", "chords": [["C", "G", "Am", "F"]]},
            ],
        }
        assert doc.metadata.bpm == 120

    def test_bpm_out_of_range(self) -> None:
        error = convert_error("@bpm 999\nVerse\nC;G;Am;F\n")
        assert error.code is ErrorCode.INVALID_DIRECTIVE_VALUE
        assert error.line == 1

    def test_invalid_chord(self) -> None:
        error = convert_error("Verse\nH;G;Am;F\n")
        assert error.code is ErrorCode.INVALID_CHORD_NOTATION
        assert error.line == 2
        assert "'H'" in error.message

    def test_timing_mismatch(self) -> None:
        error = convert_error("Verse\nC;G;Am;F\nC;G;Am;F\n--\nFirst line _2\nSecond line _3\n")
        assert error.code is ErrorCode.LYRIC_TIMING_MISMATCH
        assert error.line == 5
        assert "claimed 5" in error.message
        assert "has 2 measures" in error.message

    def test_no_sections(self) -> None:
        error = convert_error("@bpm 120\n@time 4/4\n")
        assert error.code is ErrorCode.NO_SECTIONS
        assert error.line is None
        assert "line" not in error.to_dict()


class TestProperties:
    """Invariants over accepted documents."""

    def test_sections_and_content_items_isomorphic(self, converter: SongCodeConverter) -> None:
        doc = converter.convert(ROAD_SONG)
        content = [item for item in doc.prompter if item.type == "content"]

        assert len(content) == len(doc.sections)
        for item, section in zip(content, doc.sections):
            assert item.name == section.name
            assert item.chords == section.measures

    def test_spans_match_measures(self, converter: SongCodeConverter) -> None:
        doc = converter.convert(ROAD_SONG)
        for section in doc.sections:
            assert section.claimed_measures == len(section.measures)

    @pytest.mark.parametrize("bpm", [40, 300])
    def test_bpm_boundaries_accepted(self, bpm: int) -> None:
        doc = convert(f"@bpm {bpm}\nVerse\nC\n")
        assert doc.metadata.bpm == bpm

    @pytest.mark.parametrize("bpm", [39, 301])
    def test_bpm_outside_range_rejected(self, bpm: int) -> None:
        assert convert_error(f"@bpm {bpm}\nVerse\nC\n").code is ErrorCode.INVALID_DIRECTIVE_VALUE

    def test_output_stable(self, converter: SongCodeConverter) -> None:
        first = converter.convert(ROAD_SONG).to_json()
        second = converter.convert(ROAD_SONG).to_json()
        assert first == second
        assert json.dumps(json.loads(first)) == first

    def test_no_partial_output_on_late_error(self) -> None:
        """An error in the last section fails the whole song."""
        result = try_convert(ROAD_SONG + "\nOutro\nG;X\n")
        assert result.success is False
        assert result.data is None
        assert result.error["code"] == "InvalidChordNotation"


class TestConverterApi:
    """Public API behaviour."""

    def test_try_convert_success(self, converter: SongCodeConverter) -> None:
        result = converter.try_convert("@bpm 120\nVerse\nC;G;Am;F")
        assert result.success is True
        assert result.error is None
        assert result.data is not None
        assert result.data["sections"][0]["name"] == "Verse"

    def test_try_convert_failure(self, converter: SongCodeConverter) -> None:
        result = converter.try_convert("@bpm 999\nVerse\nC;G;Am;F")
        assert result.success is False
        assert result.error == {
            "code": "InvalidDirectiveValue",
            "message": "Invalid value for @bpm: '999' (expected an integer between 40 and 300)",
            "line": 1,
        }

    def test_convert_to_dict(self, converter: SongCodeConverter) -> None:
        data = converter.convert_to_dict("Verse\nC\n")
        assert data["prompter"] == [{"type": "content", "name": "Verse", "chords": [["C"]]}]

    def test_include_lyrics(self) -> None:
        converter = SongCodeConverter(ConverterConfig(include_lyrics=True))
        data = converter.convert_to_dict("Verse\nC;G\nF\n--\nHello there _2\n")
        assert data["sections"][0]["lyrics"] == [{"text": "Hello there", "measures": 2}]

    def test_custom_tempo_range(self) -> None:
        doc = convert("@bpm 320\nVerse\nC\n", ConverterConfig(max_bpm=400))
        assert doc.metadata.bpm == 320

    def test_metadata(self, converter: SongCodeConverter) -> None:
        doc = converter.convert("@bpm 140\n@original a\n@time 6/8\n@capo 2\n\nIntro\nA;E\n--\n")
        assert doc.metadata.original_key == "A"
        assert doc.metadata.time_signature == (6, 8)
        assert doc.sections[0].lyrics == ()

    def test_error_str(self) -> None:
        error = convert_error("Verse\nH\n")
        assert str(error).startswith("InvalidChordNotation (line 2):")

    def test_invalid_config(self) -> None:
        with pytest.raises(ValueError, match="Invalid tempo range"):
            ConverterConfig(min_bpm=200, max_bpm=100)
