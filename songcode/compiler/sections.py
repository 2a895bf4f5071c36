"""Section parsing for SongCode.

Sections are parsed with a small state machine::

    AwaitingHeader -> InChordBlock -> InLyricBlock -> Done

A section starts with a header line naming it, continues with one chord
line per measure, and may end with a ``--`` delimiter followed by lyric
lines that each end in ``_<N>``. A blank line closes the current section;
only after a blank line can a new header, or a tempo change, appear. A
blank line between two chord lines of one block is an empty measure line.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from songcode.compiler.chords import lex_chord_line
from songcode.compiler.directives import is_directive_line, parse_directive
from songcode.compiler.models import (
    BodyEvent,
    Directive,
    LyricLine,
    Measure,
    RawLine,
    Section,
)
from songcode.compiler.timing import validate_timing
from songcode.config import DEFAULT_CONFIG, ConverterConfig
from songcode.errors import ErrorCode, SongCodeError

logger = logging.getLogger(__name__)

SECTION_DELIMITER = "--"

# Lyric line: text followed by "_<N>" at end of line
LYRIC_SPAN_RE = re.compile(r"^(?P<text>.*?)\s*_(?P<span>\d+)$")

# Characters that never appear in a section header
HEADER_FORBIDDEN_CHARS = frozenset(";@")


class ParserState(str, Enum):
    AWAITING_HEADER = "AwaitingHeader"
    IN_CHORD_BLOCK = "InChordBlock"
    IN_LYRIC_BLOCK = "InLyricBlock"
    DONE = "Done"


@dataclass(frozen=True)
class ParsedSong:
    """Output of the section parser.

    Parameters
    ----------
    preamble : tuple[Directive, ...]
        Directives appearing before the first section.
    events : tuple[BodyEvent, ...]
        Sections and body directives in source order.
    """

    preamble: tuple[Directive, ...]
    events: tuple[BodyEvent, ...]

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(event for event in self.events if isinstance(event, Section))


def is_section_header(text: str, config: ConverterConfig = DEFAULT_CONFIG) -> bool:
    """Check whether a line can name a section.

    A header is a non-empty line of at most ``config.max_header_length``
    characters containing no ``;`` or ``@``, not equal to ``--`` and
    without a trailing lyric span.

    Examples
    --------
    >>> is_section_header("Verse 1")
    True
    >>> is_section_header("C;G;Am;F")
    False
    >>> is_section_header("Hold on _2")
    False
    """
    stripped = text.strip()
    if not stripped or len(stripped) > config.max_header_length:
        return False
    if stripped == SECTION_DELIMITER or stripped.startswith(config.comment_prefix):
        return False
    if any(char in HEADER_FORBIDDEN_CHARS for char in stripped):
        return False
    return LYRIC_SPAN_RE.match(stripped) is None


def parse_lyric_line(line: RawLine) -> LyricLine:
    """Parse a lyric line and its trailing measure span.

    Raises
    ------
    SongCodeError
        ``MissingLyricSpan`` if the line does not end with ``_<N>`` for a
        positive integer N.

    Examples
    --------
    >>> lyric = parse_lyric_line(RawLine(6, "Singing along _2"))
    >>> lyric.text, lyric.measure_span
    ('Singing along', 2)
    """
    match = LYRIC_SPAN_RE.match(line.stripped)
    if match is None:
        raise SongCodeError(
            ErrorCode.MISSING_LYRIC_SPAN,
            f"Lyric line must end with _<measures>: '{line.stripped}'",
            line=line.line_number,
        )

    span = int(match.group("span"))
    if span < 1:
        raise SongCodeError(
            ErrorCode.MISSING_LYRIC_SPAN,
            f"Lyric measure span must be a positive integer, got _{match.group('span')}",
            line=line.line_number,
        )
    return LyricLine(text=match.group("text"), measure_span=span, line_number=line.line_number)


@dataclass
class _OpenSection:
    """A section still being read."""

    name: str
    line_number: int
    measures: list[Measure] = field(default_factory=list)
    lyrics: list[LyricLine] = field(default_factory=list)
    blank_line: RawLine | None = None

    def build(self) -> Section:
        return Section(
            name=self.name,
            measures=tuple(self.measures),
            lyrics=tuple(self.lyrics),
            line_number=self.line_number,
        )


class SectionParser:
    """Single-use parser turning scanned lines into sections and directives.

    Parameters
    ----------
    config : ConverterConfig
        Comment prefix, header length and tempo range.
    """

    def __init__(self, config: ConverterConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.state = ParserState.AWAITING_HEADER
        self.preamble: list[Directive] = []
        self.events: list[BodyEvent] = []
        self.current: _OpenSection | None = None
        self.seen_section = False

    def parse(self, lines: list[RawLine]) -> ParsedSong:
        """Run the state machine over all lines.

        Raises
        ------
        SongCodeError
            On the first violation found, or ``NoSections`` when the text
            contains no section.
        """
        for line in lines:
            if self._is_skipped_comment(line):
                continue

            section = self.current
            if section is None:
                self._await_header(line)
            elif self.state is ParserState.IN_CHORD_BLOCK:
                self._read_chord_block(section, line)
            else:
                self._read_lyric_block(section, line)

        if self.current is not None:
            self._close_section(self.current)
        self.state = ParserState.DONE

        if not self.seen_section:
            raise SongCodeError(ErrorCode.NO_SECTIONS, "No sections found in song")

        return ParsedSong(preamble=tuple(self.preamble), events=tuple(self.events))

    def _is_skipped_comment(self, line: RawLine) -> bool:
        if not line.is_comment(self.config.comment_prefix):
            return False
        # Lyrics may start with the comment prefix ("#1 fan _1")
        in_lyrics = self.state is ParserState.IN_LYRIC_BLOCK
        return not (in_lyrics and LYRIC_SPAN_RE.match(line.stripped))

    def _await_header(self, line: RawLine) -> None:
        if line.is_blank:
            return

        if is_directive_line(line.text):
            self._read_directive(line)
            return

        if not is_section_header(line.text, self.config):
            expected = "a section header" if self.seen_section else "a directive or section header"
            raise SongCodeError(
                ErrorCode.UNEXPECTED_TOKEN,
                f"Unexpected line '{line.stripped}' (expected {expected})",
                line=line.line_number,
            )

        self.current = _OpenSection(name=line.stripped, line_number=line.line_number)
        self.seen_section = True
        self.state = ParserState.IN_CHORD_BLOCK

    def _read_directive(self, line: RawLine) -> None:
        directive = parse_directive(line, self.config)
        if not self.seen_section:
            self.preamble.append(directive)
            return

        if directive.key == "bpm":
            logger.debug("Tempo change to %d on line %d", directive.value, line.line_number)
            self.events.append(directive)
        elif directive.known:
            logger.warning(
                "@%s on line %d appears after the first section and is ignored",
                directive.key,
                line.line_number,
            )

    def _read_chord_block(self, section: _OpenSection, line: RawLine) -> None:
        if line.is_blank:
            if section.blank_line is None:
                section.blank_line = line
            return

        if section.blank_line is not None:
            # Only a new header or a directive may follow a blank line after chords
            starts_next = is_directive_line(line.text) or is_section_header(line.text, self.config)
            if not (section.measures and starts_next):
                raise SongCodeError(
                    ErrorCode.EMPTY_MEASURE_LINE,
                    f"Empty line inside the chord block of section '{section.name}'",
                    line=section.blank_line.line_number,
                )
            self._close_section(section)
            self._await_header(line)
            return

        if line.stripped == SECTION_DELIMITER:
            self.state = ParserState.IN_LYRIC_BLOCK
            return

        section.measures.append(lex_chord_line(line))

    def _read_lyric_block(self, section: _OpenSection, line: RawLine) -> None:
        if line.is_blank:
            self._close_section(section)
            return

        section.lyrics.append(parse_lyric_line(line))

    def _close_section(self, open_section: _OpenSection) -> None:
        section = validate_timing(open_section.build())
        logger.debug(
            "Parsed section '%s': %d measures, %d lyric lines",
            section.name,
            len(section.measures),
            len(section.lyrics),
        )
        self.events.append(section)
        self.current = None
        self.state = ParserState.AWAITING_HEADER


def parse_sections(lines: list[RawLine], config: ConverterConfig = DEFAULT_CONFIG) -> ParsedSong:
    """Parse scanned lines into preamble directives, sections and tempo changes.

    Examples
    --------
    >>> from songcode.compiler.scanner import scan_lines
    >>> song = parse_sections(scan_lines("Verse\\nC;G\\n--\\nHello _1"))
    >>> [s.name for s in song.sections]
    ['Verse']
    """
    return SectionParser(config).parse(lines)
