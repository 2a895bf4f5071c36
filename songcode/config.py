"""Converter configuration."""

from __future__ import annotations

from dataclasses import dataclass

# Accepted tempo range, inclusive
MIN_BPM = 40
MAX_BPM = 300

# Lines whose first non-space character is this prefix are ignored
COMMENT_PREFIX = "#"

# Longest line still recognised as a section header
MAX_HEADER_LENGTH = 60


@dataclass(frozen=True)
class ConverterConfig:
    """Settings for a :class:`~songcode.converter.SongCodeConverter`.

    Parameters
    ----------
    min_bpm : int
        Lowest accepted ``@bpm`` value (inclusive).
    max_bpm : int
        Highest accepted ``@bpm`` value (inclusive).
    comment_prefix : str
        Prefix marking a comment line.
    max_header_length : int
        Maximum length of a section header line.
    include_lyrics : bool
        Emit each section's lyric lines in the serialized output.

    Examples
    --------
    >>> config = ConverterConfig(max_bpm=240)
    >>> config.min_bpm, config.max_bpm
    (40, 240)
    """

    min_bpm: int = MIN_BPM
    max_bpm: int = MAX_BPM
    comment_prefix: str = COMMENT_PREFIX
    max_header_length: int = MAX_HEADER_LENGTH
    include_lyrics: bool = False

    def __post_init__(self) -> None:
        if self.min_bpm < 1 or self.min_bpm > self.max_bpm:
            msg = f"Invalid tempo range: {self.min_bpm}-{self.max_bpm}"
            raise ValueError(msg)
        if not self.comment_prefix or self.comment_prefix.isspace():
            msg = "comment_prefix must be a non-blank string"
            raise ValueError(msg)
        if self.max_header_length < 1:
            msg = f"max_header_length must be positive, got {self.max_header_length}"
            raise ValueError(msg)


DEFAULT_CONFIG = ConverterConfig()
