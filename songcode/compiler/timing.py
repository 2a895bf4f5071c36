"""Lyric timing validation.

A section's lyric lines declare how many measures each one covers. The
declared total must equal the number of measures in the chord block.
"""

from songcode.compiler.models import Section
from songcode.errors import ErrorCode, SongCodeError


def validate_timing(section: Section) -> Section:
    """Check that a section's lyric spans add up to its measure count.

    Sections without lyric lines are instrumental and always pass.

    Parameters
    ----------
    section : Section
        A fully parsed section.

    Returns
    -------
    Section
        The same section, for chaining.

    Raises
    ------
    SongCodeError
        ``LyricTimingMismatch`` at the first lyric line when the totals
        differ.
    """
    if not section.lyrics:
        return section

    claimed = section.claimed_measures
    total = len(section.measures)
    if claimed != total:
        raise SongCodeError(
            ErrorCode.LYRIC_TIMING_MISMATCH,
            f"Section '{section.name}': claimed {claimed} measures across lyrics "
            f"but section has {total} measures",
            line=section.lyrics[0].line_number,
        )
    return section
