"""Greek word parsing codes.

Entry point for decoding a full parsing code such as ``V-AIA-3S``. The
first segment selects the grammar, the rest is handed to it unchanged.

Format: ``Part of Speech - Tense, Mood, Voice - Case, Person, Gender, Number``
(see the grammars in ``parsings`` for the per-part-of-speech layouts).
"""
from __future__ import annotations

from typing import Iterable, Union

from core.errors import AppError, Ok, Result, collect_results
from core.logging import parsing_logger
from .components import PartOfSpeech
from .parsings import (
    MARKERS,
    PARSINGS,
    AdjectiveParsing,
    AdverbParsing,
    AramaicWordParsing,
    ArticleParsing,
    ConjunctionParsing,
    DemonstrativePronounParsing,
    HebrewWordParsing,
    Indeclinable,
    IntensiveParticle,
    InterjectionParsing,
    InterrogativeIndefinitePronounParsing,
    NounParsing,
    ParticleParsing,
    PersonalPossessivePronounParsing,
    PrepositionParsing,
    ReciprocalPronounParsing,
    ReflexivePronounParsing,
    RelativePronounParsing,
    VerbParsing,
)

log = parsing_logger()

GreekWordParsing = Union[
    AdjectiveParsing,
    AdverbParsing,
    AramaicWordParsing,
    ArticleParsing,
    ConjunctionParsing,
    DemonstrativePronounParsing,
    HebrewWordParsing,
    Indeclinable,
    IntensiveParticle,
    InterjectionParsing,
    InterrogativeIndefinitePronounParsing,
    NounParsing,
    ParticleParsing,
    PersonalPossessivePronounParsing,
    PrepositionParsing,
    ReciprocalPronounParsing,
    ReflexivePronounParsing,
    RelativePronounParsing,
    VerbParsing,
]


def parse(code: str) -> Result[GreekWordParsing, AppError]:
    """Decode a parsing code into its part-of-speech record.

    ``Indec`` and ``IntPrtcl`` are matched exactly and return their markers.
    Any other first segment must be a part-of-speech code (any letter case).
    Failures are returned as ``Err``; nothing is retried against another
    part of speech.
    """
    head, *segments = code.split("-")

    marker = MARKERS.get(head)
    if marker is not None:
        return Ok(marker())

    result = PartOfSpeech.parse(head).and_then(
        lambda part_of_speech: PARSINGS[part_of_speech].parse_segments(segments)
    )
    if result.is_err():
        log.debug(
            "parsing_code_rejected",
            code=code,
            category=result.error.metadata.get("category"),
            input=result.error.metadata.get("input"),
        )
    return result


def parse_many(codes: Iterable[str]) -> Result[list[GreekWordParsing], list[AppError]]:
    """Decode every code, collecting all failures rather than stopping at the first."""
    return collect_results([parse(code) for code in codes])
