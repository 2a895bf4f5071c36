"""Diagnostics for SongCode conversion.

Every failure is reported as a single :class:`SongCodeError` carrying a
closed :class:`ErrorCode`, a human-readable message and, when the problem
originates on one line, the 1-based source line number.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Closed set of diagnostic codes."""

    INVALID_DIRECTIVE_VALUE = "InvalidDirectiveValue"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    INVALID_CHORD_NOTATION = "InvalidChordNotation"
    EMPTY_MEASURE_LINE = "EmptyMeasureLine"
    MISSING_LYRIC_SPAN = "MissingLyricSpan"
    LYRIC_TIMING_MISMATCH = "LyricTimingMismatch"
    NO_SECTIONS = "NoSections"

    def __str__(self) -> str:
        return self.value


class SongCodeError(Exception):
    """A conversion failure.

    Parameters
    ----------
    code : ErrorCode
        Machine-readable error code.
    message : str
        Human-readable description naming the offending value.
    line : int | None
        1-based source line, or None for whole-document errors.

    Examples
    --------
    >>> err = SongCodeError(ErrorCode.INVALID_CHORD_NOTATION, "bad chord 'H'", line=2)
    >>> err.to_dict()
    {'code': 'InvalidChordNotation', 'message': "bad chord 'H'", 'line': 2}
    """

    def __init__(self, code: ErrorCode, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.line = line

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a JSON-serializable dict.

        The ``line`` key is omitted for errors without a source line.
        """
        result: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.line is not None:
            result["line"] = self.line
        return result

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.code.value}: {self.message}"
        return f"{self.code.value} (line {self.line}): {self.message}"

    def __repr__(self) -> str:
        return f"SongCodeError(code={self.code.value!r}, message={self.message!r}, line={self.line!r})"
