"""Directive parsing for SongCode.

Directive lines have the form ``@key value``. Before the first section they
build the document :class:`Metadata`; later ``@bpm`` lines become tempo
changes in the prompter timeline.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any

from songcode.compiler.models import Directive, Metadata, RawLine
from songcode.config import DEFAULT_CONFIG, ConverterConfig
from songcode.errors import ErrorCode, SongCodeError

logger = logging.getLogger(__name__)

# Matches: "@" key, optional whitespace-separated value
DIRECTIVE_RE = re.compile(r"^@(?P<key>[A-Za-z][\w-]*)(?:\s+(?P<value>.*?))?\s*$")

BPM_RE = re.compile(r"^\d+$")
ORIGINAL_KEY_RE = re.compile(r"^(?P<root>[A-Ga-g])(?P<accidental>[#b]?)$")
TIME_SIGNATURE_RE = re.compile(r"^(?P<numerator>\d+)\s*/\s*(?P<denominator>\d+)$")


def _invalid(key: str, value: str, expected: str, line_number: int) -> SongCodeError:
    shown = value if value else "<missing>"
    return SongCodeError(
        ErrorCode.INVALID_DIRECTIVE_VALUE,
        f"Invalid value for @{key}: '{shown}' (expected {expected})",
        line=line_number,
    )


def check_bpm(value: str, line_number: int, config: ConverterConfig) -> int:
    """Validate a tempo value.

    Examples
    --------
    >>> check_bpm("120", 1, DEFAULT_CONFIG)
    120
    """
    expected = f"an integer between {config.min_bpm} and {config.max_bpm}"
    if not BPM_RE.match(value):
        raise _invalid("bpm", value, expected, line_number)

    bpm = int(value)
    if not config.min_bpm <= bpm <= config.max_bpm:
        raise _invalid("bpm", value, expected, line_number)
    return bpm


def check_original_key(value: str, line_number: int, config: ConverterConfig) -> str:
    """Validate an original key: a root letter A-G with optional ``#`` or ``b``.

    Examples
    --------
    >>> check_original_key("f#", 1, DEFAULT_CONFIG)
    'F#'
    """
    match = ORIGINAL_KEY_RE.match(value)
    if match is None:
        raise _invalid("original", value, "a note A-G with optional # or b", line_number)
    return match.group("root").upper() + match.group("accidental")


def check_time_signature(value: str, line_number: int, config: ConverterConfig) -> tuple[int, int]:
    """Validate a time signature of the form ``N/M``.

    Examples
    --------
    >>> check_time_signature("6/8", 1, DEFAULT_CONFIG)
    (6, 8)
    """
    expected = "N/M with two positive integers"
    match = TIME_SIGNATURE_RE.match(value)
    if match is None:
        raise _invalid("time", value, expected, line_number)

    numerator = int(match.group("numerator"))
    denominator = int(match.group("denominator"))
    if numerator < 1 or denominator < 1:
        raise _invalid("time", value, expected, line_number)
    return numerator, denominator


DirectiveCheck = Callable[[str, int, ConverterConfig], Any]

DIRECTIVE_CHECKS: dict[str, DirectiveCheck] = {
    "bpm": check_bpm,
    "original": check_original_key,
    "time": check_time_signature,
}


def is_directive_line(text: str) -> bool:
    """Check whether a line is written as a directive (starts with ``@``)."""
    return text.lstrip().startswith("@")


def parse_directive(line: RawLine, config: ConverterConfig = DEFAULT_CONFIG) -> Directive:
    """Parse and validate a directive line.

    Parameters
    ----------
    line : RawLine
        A line starting with ``@``.
    config : ConverterConfig
        Supplies the accepted tempo range.

    Returns
    -------
    Directive
        The directive with its normalized value. Unknown keys are returned
        with ``known=False`` and their raw value.

    Raises
    ------
    SongCodeError
        ``UnexpectedToken`` if the line has no key, ``InvalidDirectiveValue``
        if a recognized key has an unacceptable value.

    Examples
    --------
    >>> parse_directive(RawLine(1, "@bpm 96")).value
    96
    >>> parse_directive(RawLine(1, "@capo 2")).known
    False
    """
    match = DIRECTIVE_RE.match(line.stripped)
    if match is None:
        raise SongCodeError(
            ErrorCode.UNEXPECTED_TOKEN,
            f"Malformed directive: '{line.stripped}' (expected @key value)",
            line=line.line_number,
        )

    key = match.group("key").lower()
    raw_value = match.group("value") or ""

    check = DIRECTIVE_CHECKS.get(key)
    if check is None:
        logger.debug("Ignoring unknown directive @%s on line %d", key, line.line_number)
        return Directive(key=key, value=raw_value, line_number=line.line_number, known=False)

    value = check(raw_value, line.line_number, config)
    return Directive(key=key, value=value, line_number=line.line_number)


def build_metadata(directives: Iterable[Directive]) -> Metadata:
    """Fold leading directives into a :class:`Metadata` record.

    Later occurrences of a key override earlier ones.

    Examples
    --------
    >>> build_metadata([Directive("bpm", 120, 1), Directive("time", (3, 4), 2)])
    Metadata(bpm=120, original_key=None, time_signature=(3, 4))
    """
    fields: dict[str, Any] = {}
    field_names = {"bpm": "bpm", "original": "original_key", "time": "time_signature"}

    for directive in directives:
        if not directive.known:
            continue
        name = field_names[directive.key]
        if name in fields:
            logger.warning(
                "@%s on line %d overrides an earlier value",
                directive.key,
                directive.line_number,
            )
        fields[name] = directive.value

    return Metadata(**fields)
