"""Line scanner for SongCode text.

Splits raw text into numbered lines. Blank and comment lines are kept so
that line numbers in diagnostics match the source exactly.
"""

from songcode.compiler.models import RawLine

BOM = "\ufeff"


def preprocess(text: str) -> list[str]:
    """Normalize line endings and split text into lines.

    Parameters
    ----------
    text : str
        The raw input text.

    Returns
    -------
    list[str]
        Lines without trailing newlines.

    Examples
    --------
    >>> preprocess("Verse\\r\\nC;G")
    ['Verse', 'C;G']
    """
    if text.startswith(BOM):
        text = text[len(BOM) :]

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def scan_lines(text: str) -> list[RawLine]:
    """Split text into :class:`RawLine` objects numbered from 1.

    Never raises; every input produces at least one line.

    Examples
    --------
    >>> [(line.line_number, line.text) for line in scan_lines("@bpm 120\\n\\nVerse")]
    [(1, '@bpm 120'), (2, ''), (3, 'Verse')]
    """
    return [RawLine(line_number=i, text=line) for i, line in enumerate(preprocess(text), start=1)]
