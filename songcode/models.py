"""Chord model shared by the SongCode compiler.

A :class:`Chord` is the musical reading of one validated chord symbol: its
root, its quality in Harte shorthand and an optional slash bass.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Chord:
    """Unified chord representation.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "C", "F#", "Bb").
    quality : str
        The chord quality in Harte shorthand (e.g., "maj", "min7", "dim").
    bass : str | None
        The bass note if different from root (for slash chords).

    Examples
    --------
    >>> Chord(root="G", quality="min7")
    Chord(root='G', quality='min7', bass=None)
    """

    root: str
    quality: str
    bass: str | None = None
