"""Assembly of the compiled document.

Builds both views of a song from the parsed events: the section list and
the flattened prompter timeline.
"""

from __future__ import annotations

from collections.abc import Iterable

from songcode.compiler.models import (
    BodyEvent,
    ContentItem,
    LivenotesDocument,
    Metadata,
    PrompterItem,
    Section,
    TempoItem,
)
from songcode.config import DEFAULT_CONFIG, ConverterConfig


def build_prompter(metadata: Metadata, events: Iterable[BodyEvent]) -> list[PrompterItem]:
    """Flatten metadata tempo, tempo changes and sections into a timeline.

    Examples
    --------
    >>> build_prompter(Metadata(bpm=120), [])
    [TempoItem(bpm=120, type='tempo')]
    """
    prompter: list[PrompterItem] = []
    if metadata.bpm is not None:
        prompter.append(TempoItem(bpm=metadata.bpm))

    for event in events:
        if isinstance(event, Section):
            prompter.append(ContentItem(name=event.name, chords=event.measures))
        else:
            prompter.append(TempoItem(bpm=event.value))

    return prompter


def build_document(
    metadata: Metadata,
    events: Iterable[BodyEvent],
    config: ConverterConfig = DEFAULT_CONFIG,
) -> LivenotesDocument:
    """Assemble a :class:`LivenotesDocument` from validated parts.

    Parameters
    ----------
    metadata : Metadata
        Settings from the leading directives.
    events : Iterable[BodyEvent]
        Sections and ``@bpm`` directives in source order.
    config : ConverterConfig
        Output options.

    Returns
    -------
    LivenotesDocument
        The compiled document.
    """
    events = list(events)
    sections = tuple(event for event in events if isinstance(event, Section))

    return LivenotesDocument(
        metadata=metadata,
        sections=sections,
        prompter=tuple(build_prompter(metadata, events)),
        include_lyrics=config.include_lyrics,
    )
