import pytest

from songcode import Chord
from songcode.notation import from_pychord, pychord_quality_to_harte


class TestQualityMapping:
    def test_pychord_major_to_harte(self):
        assert pychord_quality_to_harte("") == "maj"

    def test_pychord_minor7_to_harte(self):
        assert pychord_quality_to_harte("m7") == "min7"

    def test_pychord_hdim_to_harte(self):
        assert pychord_quality_to_harte("m7-5") == "hdim7"

    def test_unknown_pychord_quality_raises(self):
        with pytest.raises(ValueError, match="Unknown pychord quality"):
            pychord_quality_to_harte("unknown_quality")


class TestFromPychord:
    def test_simple_major(self):
        assert from_pychord("C") == Chord(root="C", quality="maj")

    def test_flat_root(self):
        chord = from_pychord("Bbm7")
        assert chord.root == "Bb"
        assert chord.quality == "min7"

    def test_slash_chord(self):
        assert from_pychord("G/B") == Chord(root="G", quality="maj", bass="B")

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            from_pychord("Hm")
