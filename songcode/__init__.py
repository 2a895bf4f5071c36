"""SongCode compiler for live-performance prompters.

This library compiles SongCode, a line-oriented plain-text notation for a
song's tempo, structure, chord progressions and lyric timing, into a
document with a section tree and a flattened prompter timeline.

Examples
--------
>>> from songcode import SongCodeConverter, SongCodeError

>>> song = '''@bpm 120
...
... Verse
... C;G;Am;F
... --
... Singing along _1
... '''
>>> doc = SongCodeConverter().convert(song)
>>> doc.to_dict()["sections"]
[{'name': 'Verse', 'measures': [['C', 'G', 'Am', 'F']]}]

>>> try:
...     SongCodeConverter().convert("Verse\\nH;G;Am;F")
... except SongCodeError as e:
...     print(e.code, e.line)
InvalidChordNotation 2
"""

from songcode.compiler.models import (
    ContentItem,
    LivenotesDocument,
    Metadata,
    Section,
    TempoItem,
)
from songcode.config import DEFAULT_CONFIG, ConverterConfig
from songcode.converter import ConversionResult, SongCodeConverter, convert, try_convert
from songcode.errors import ErrorCode, SongCodeError
from songcode.models import Chord

__all__ = [
    "DEFAULT_CONFIG",
    "Chord",
    "ContentItem",
    "ConversionResult",
    "ConverterConfig",
    "ErrorCode",
    "LivenotesDocument",
    "Metadata",
    "Section",
    "SongCodeConverter",
    "SongCodeError",
    "TempoItem",
    "convert",
    "try_convert",
]
