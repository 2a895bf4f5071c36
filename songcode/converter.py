"""SongCode to Livenotes conversion.

This module ties the compiler stages together::

    scan -> sections/directives -> chord + timing validation -> document

Conversion is fail-fast: the first problem found raises a single
:class:`~songcode.errors.SongCodeError` and no partial document is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from songcode.compiler.builder import build_document
from songcode.compiler.directives import build_metadata
from songcode.compiler.models import LivenotesDocument
from songcode.compiler.scanner import scan_lines
from songcode.compiler.sections import parse_sections
from songcode.config import DEFAULT_CONFIG, ConverterConfig
from songcode.errors import SongCodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of :meth:`SongCodeConverter.try_convert`.

    Exactly one of ``data`` and ``error`` is set.
    """

    success: bool
    data: dict[str, Any] | None
    error: dict[str, Any] | None


class SongCodeConverter:
    """Compiles SongCode text into :class:`LivenotesDocument` objects.

    The converter keeps no state between calls and may be shared across
    threads.

    Parameters
    ----------
    config : ConverterConfig | None
        Conversion settings; defaults to :data:`DEFAULT_CONFIG`.

    Examples
    --------
    >>> converter = SongCodeConverter()
    >>> doc = converter.convert("@bpm 120\\n\\nVerse\\nC;G;Am;F\\n--\\nSinging along _1\\n")
    >>> doc.to_dict()["prompter"][0]
    {'type': 'tempo', 'bpm': 120}
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG

    def convert(self, text: str) -> LivenotesDocument:
        """Convert SongCode text.

        Raises
        ------
        SongCodeError
            On the first violation found.
        """
        lines = scan_lines(text)
        song = parse_sections(lines, self.config)
        metadata = build_metadata(song.preamble)
        document = build_document(metadata, song.events, self.config)

        logger.debug(
            "Converted song: %d sections, %d prompter items",
            len(document.sections),
            len(document.prompter),
        )
        return document

    def convert_to_dict(self, text: str) -> dict[str, Any]:
        """Convert SongCode text straight to its JSON-serializable dict."""
        return self.convert(text).to_dict()

    def try_convert(self, text: str) -> ConversionResult:
        """Convert SongCode text, reporting failure as data instead of raising.

        Only :class:`SongCodeError` is captured; any other exception
        propagates.

        Examples
        --------
        >>> result = SongCodeConverter().try_convert("@bpm 999\\nVerse\\nC;G;Am;F")
        >>> result.success, result.error["code"], result.error["line"]
        (False, 'InvalidDirectiveValue', 1)
        """
        try:
            document = self.convert(text)
        except SongCodeError as e:
            logger.info("SongCode conversion failed: %s", e)
            return ConversionResult(success=False, data=None, error=e.to_dict())
        return ConversionResult(success=True, data=document.to_dict(), error=None)


def convert(text: str, config: ConverterConfig | None = None) -> LivenotesDocument:
    """Convert SongCode text with a one-off converter."""
    return SongCodeConverter(config).convert(text)


def try_convert(text: str, config: ConverterConfig | None = None) -> ConversionResult:
    """Convert SongCode text, returning a :class:`ConversionResult`."""
    return SongCodeConverter(config).try_convert(text)
