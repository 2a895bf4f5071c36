"""Chord line lexing and chord notation validation.

A chord line is a ``;``-separated list of chord symbols forming one
measure. Each symbol is checked for notation legality only; harmonic
meaning is not interpreted.
"""

from __future__ import annotations

import re

from songcode.compiler.models import ChordSymbol, Measure, RawLine
from songcode.errors import ErrorCode, SongCodeError
from songcode.models import Chord
from songcode.notation import from_pychord

MAX_CHORD_LENGTH = 15

CHORD_SEPARATOR = ";"

VALID_ROOTS = frozenset("ABCDEFG")

# Regex pattern for chord notation
# Matches: root (A-G), optional accidental (b/#), optional quality, optional slash bass
CHORD_RE = re.compile(
    r"^(?P<root>[A-G][b#]?)"  # Root note with optional accidental
    r"(?P<quality>(?:"
    r"m(?:aj)?(?:7|9|11|13)?|"  # minor variants: m, maj, maj7, m7, m9, etc.
    r"M(?:aj)?(?:7|9|11|13)?|"  # major variants: M7, Maj7, etc.
    r"dim(?:6|7)?|"  # diminished
    r"aug(?:7)?|"  # augmented
    r"sus[24](?:7)?|"  # suspended
    r"add9|"  # added ninth
    r"7|9|11|13|6|"  # extensions
    r"m7-5|m7b5|"  # half-diminished
    r"mM7|mmaj7|"  # minor-major seventh
    r"5"  # power chord
    r")*)"
    r"(?:/(?P<bass>[A-G][b#]?))?$"  # Optional slash bass
)


def _invalid_chord(token: str, reason: str, line_number: int) -> SongCodeError:
    return SongCodeError(
        ErrorCode.INVALID_CHORD_NOTATION,
        f"Invalid chord '{token}': {reason}",
        line=line_number,
    )


def normalize_chord(token: str) -> str:
    """Upper-case the root letter of a chord token.

    Examples
    --------
    >>> normalize_chord("am7")
    'Am7'
    >>> normalize_chord("bb")
    'Bb'
    """
    return token[:1].upper() + token[1:]


def parse_chord(text: str) -> Chord | None:
    """Read a normalized chord symbol with pychord.

    Returns None when pychord cannot interpret the symbol.

    Examples
    --------
    >>> parse_chord("Gm7").quality
    'min7'
    >>> parse_chord("Gxyz") is None
    True
    """
    try:
        return from_pychord(text)
    except ValueError:
        return None


def validate_chord(token: str, line_number: int) -> ChordSymbol:
    """Validate a single chord token.

    Parameters
    ----------
    token : str
        A trimmed, non-empty chord token.
    line_number : int
        Source line, for diagnostics.

    Returns
    -------
    ChordSymbol
        The normalized, validated symbol.

    Raises
    ------
    SongCodeError
        ``InvalidChordNotation`` if the root is not A-G or the suffix is not
        legal chord notation.

    Examples
    --------
    >>> validate_chord("f#m", 2).text
    'F#m'
    """
    text = normalize_chord(token)

    if text[:1] not in VALID_ROOTS:
        raise _invalid_chord(token, "chord root must be a letter A-G", line_number)

    if len(text) > MAX_CHORD_LENGTH or not CHORD_RE.match(text):
        raise _invalid_chord(token, "unrecognized chord notation", line_number)

    chord = parse_chord(text)
    if chord is None:
        raise _invalid_chord(token, "unrecognized chord notation", line_number)

    return ChordSymbol(text=text, chord=chord, line_number=line_number)


def split_chord_line(text: str) -> list[str]:
    """Split a chord line into trimmed tokens, dropping trailing empty tokens.

    Examples
    --------
    >>> split_chord_line(" C ; G;Am;F; ")
    ['C', 'G', 'Am', 'F']
    >>> split_chord_line("C;;G")
    ['C', '', 'G']
    """
    tokens = [token.strip() for token in text.split(CHORD_SEPARATOR)]
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def lex_chord_line(line: RawLine) -> Measure:
    """Lex one chord line into a :class:`Measure`.

    Raises
    ------
    SongCodeError
        ``EmptyMeasureLine`` if the line holds no chords or an empty slot
        between separators, ``InvalidChordNotation`` for an illegal chord.

    Examples
    --------
    >>> lex_chord_line(RawLine(4, "C;G;Am;F")).texts()
    ['C', 'G', 'Am', 'F']
    """
    tokens = split_chord_line(line.text)
    if not tokens:
        raise SongCodeError(
            ErrorCode.EMPTY_MEASURE_LINE,
            f"Chord line contains no chords: '{line.stripped}'",
            line=line.line_number,
        )

    if "" in tokens:
        raise SongCodeError(
            ErrorCode.EMPTY_MEASURE_LINE,
            f"Empty chord between '{CHORD_SEPARATOR}' separators: '{line.stripped}'",
            line=line.line_number,
        )

    chords = tuple(validate_chord(token, line.line_number) for token in tokens)
    return Measure(chords=chords, line_number=line.line_number)
