"""Chord notation helpers backed by pychord.

Chord symbols written in SongCode follow pychord's notation ("Gm7",
"F#dim", "C/E"). This module reads them into :class:`~songcode.models.Chord`
objects and maps quality names to Harte shorthand.
"""

from songcode.models import Chord

# Mapping from pychord quality names to Harte shorthand
PYCHORD_TO_HARTE_QUALITY: dict[str, str] = {
    "": "maj",
    "m": "min",
    "m7": "min7",
    "7": "7",
    "maj7": "maj7",
    "M7": "maj7",
    "dim": "dim",
    "dim7": "dim7",
    "dim6": "dim6",
    "aug": "aug",
    "aug7": "aug7",
    "m7-5": "hdim7",
    "m7b5": "hdim7",
    "sus4": "sus4",
    "sus2": "sus2",
    "7sus4": "7sus4",
    "7sus2": "7sus2",
    "add9": "maj(9)",
    "madd9": "min(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
    "11": "11",
    "m11": "min11",
    "13": "13",
    "m13": "min13",
    "maj13": "maj13",
    "6": "maj6",
    "m6": "min6",
    "mmaj7": "minmaj7",
    "mM7": "minmaj7",
    "5": "5",
}


def pychord_quality_to_harte(pychord_quality: str) -> str:
    """Convert a pychord quality string to Harte shorthand.

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> pychord_quality_to_harte("m7")
    'min7'
    >>> pychord_quality_to_harte("")
    'maj'
    """
    if pychord_quality in PYCHORD_TO_HARTE_QUALITY:
        return PYCHORD_TO_HARTE_QUALITY[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise ValueError(msg)


def from_pychord(chord_str: str) -> Chord:
    """Parse a pychord notation string into a Chord object.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim/A").

    Returns
    -------
    Chord
        Unified chord representation.

    Raises
    ------
    ValueError
        If pychord rejects the symbol or its quality has no Harte mapping.

    Examples
    --------
    >>> chord = from_pychord("Gm7")
    >>> chord.root, chord.quality
    ('G', 'min7')
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    harte_quality = pychord_quality_to_harte(str(pc.quality))

    return Chord(
        root=pc.root,
        quality=harte_quality,
        bass=pc.on or None,
    )
