"""Data models for SongCode compilation.

This module defines the intermediate and output structures of the
compiler: scanned lines, directives, measures, lyric lines, sections and
the final prompter document. Every model is immutable once built.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from songcode.models import Chord


@dataclass(frozen=True)
class RawLine:
    """A source line with its 1-based line number.

    Parameters
    ----------
    line_number : int
        1-based position in the original text.
    text : str
        Line content without the newline.

    Examples
    --------
    >>> line = RawLine(line_number=3, text="  C;G  ")
    >>> line.stripped
    'C;G'
    """

    line_number: int
    text: str

    @property
    def stripped(self) -> str:
        return self.text.strip()

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    def is_comment(self, prefix: str) -> bool:
        """Return True if the line's first non-space text starts with ``prefix``."""
        return self.text.lstrip().startswith(prefix)


@dataclass(frozen=True)
class Directive:
    """A parsed ``@key value`` line.

    ``value`` holds the normalized value for recognized keys (``int`` for
    bpm, ``str`` for original, ``(int, int)`` for time) and the raw text
    for unknown keys.
    """

    key: str
    value: Any
    line_number: int
    known: bool = True


@dataclass(frozen=True)
class Metadata:
    """Document-level settings taken from directives before the first section."""

    bpm: int | None = None
    original_key: str | None = None
    time_signature: tuple[int, int] | None = None


@dataclass(frozen=True)
class ChordSymbol:
    """A validated chord token.

    Parameters
    ----------
    text : str
        Token text with its root letter upper-cased (e.g., "Am", "F#m7").
    chord : Chord
        Musical reading of the symbol.
    line_number : int
        Source line the token came from.
    """

    text: str
    chord: Chord
    line_number: int

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Measure:
    """The chords of one chord line.

    Examples
    --------
    >>> Measure(chords=(), line_number=1).texts()
    []
    """

    chords: tuple[ChordSymbol, ...]
    line_number: int

    def texts(self) -> list[str]:
        return [symbol.text for symbol in self.chords]


@dataclass(frozen=True)
class LyricLine:
    """A lyric line covering ``measure_span`` measures."""

    text: str
    measure_span: int
    line_number: int


@dataclass(frozen=True)
class Section:
    """A named block of a song.

    Parameters
    ----------
    name : str
        Header text, taken verbatim (e.g., "Verse 1", "Chorus").
    measures : tuple[Measure, ...]
        One measure per chord line, in order.
    lyrics : tuple[LyricLine, ...]
        Lyric lines in order; empty for instrumental sections.
    line_number : int
        Line of the section header.
    """

    name: str
    measures: tuple[Measure, ...]
    lyrics: tuple[LyricLine, ...]
    line_number: int

    @property
    def claimed_measures(self) -> int:
        """Sum of the lyric lines' measure spans."""
        return sum(lyric.measure_span for lyric in self.lyrics)

    def chord_grid(self) -> list[list[str]]:
        """Return the measures as nested lists of chord texts."""
        return [measure.texts() for measure in self.measures]

    def to_dict(self, include_lyrics: bool = False) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name, "measures": self.chord_grid()}
        if include_lyrics:
            result["lyrics"] = [
                {"text": lyric.text, "measures": lyric.measure_span} for lyric in self.lyrics
            ]
        return result


@dataclass(frozen=True)
class TempoItem:
    """A tempo change in the prompter timeline."""

    bpm: int
    type: Literal["tempo"] = "tempo"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "bpm": self.bpm}


@dataclass(frozen=True)
class ContentItem:
    """A section's chords in the prompter timeline."""

    name: str
    chords: tuple[Measure, ...]
    type: Literal["content"] = "content"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "chords": [measure.texts() for measure in self.chords],
        }


PrompterItem = TempoItem | ContentItem

# Items produced by the section parser, in source order
BodyEvent = Section | Directive


@dataclass(frozen=True)
class LivenotesDocument:
    """Compiled song.

    Parameters
    ----------
    metadata : Metadata
        Settings from the leading directives.
    sections : tuple[Section, ...]
        Sections in source order.
    prompter : tuple[PrompterItem, ...]
        Flattened timeline of tempo changes and section content.
    include_lyrics : bool
        Whether :meth:`to_dict` emits lyric lines per section.
    """

    metadata: Metadata
    sections: tuple[Section, ...]
    prompter: tuple[PrompterItem, ...]
    include_lyrics: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the document as a JSON-serializable dict."""
        return {
            "sections": [s.to_dict(include_lyrics=self.include_lyrics) for s in self.sections],
            "prompter": [item.to_dict() for item in self.prompter],
        }

    def to_json(self, indent: int | None = None) -> str:
        """Serialize the document to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
