"""SongCode compiler stages.

This package holds the scanner, directive parser, chord lexer, section
parser, timing validator and document builder used by
:class:`songcode.SongCodeConverter`.
"""

from songcode.compiler.builder import build_document, build_prompter
from songcode.compiler.chords import lex_chord_line, validate_chord
from songcode.compiler.directives import build_metadata, parse_directive
from songcode.compiler.models import (
    BodyEvent,
    ChordSymbol,
    ContentItem,
    Directive,
    LivenotesDocument,
    LyricLine,
    Measure,
    Metadata,
    PrompterItem,
    RawLine,
    Section,
    TempoItem,
)
from songcode.compiler.scanner import scan_lines
from songcode.compiler.sections import ParsedSong, ParserState, parse_sections
from songcode.compiler.timing import validate_timing

__all__ = [
    "BodyEvent",
    "ChordSymbol",
    "ContentItem",
    "Directive",
    "LivenotesDocument",
    "LyricLine",
    "Measure",
    "Metadata",
    "ParsedSong",
    "ParserState",
    "PrompterItem",
    "RawLine",
    "Section",
    "TempoItem",
    "build_document",
    "build_metadata",
    "build_prompter",
    "lex_chord_line",
    "parse_directive",
    "parse_sections",
    "scan_lines",
    "validate_chord",
    "validate_timing",
]
