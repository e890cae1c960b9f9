"""Part-of-speech grammars for Greek parsing codes.

Every grammar is a frozen record declaring which categories appear in which
segment and whether they are mandatory. Decoding is shared: the layout is
handed to ``read_segments`` once and the decoded members become the record's
fields.

Categories a grammar never decodes read as ``None``, so every parsing can be
queried the same way (``parsing.case``, ``parsing.tense``, ...).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence

from core.errors import AppError, Ok, Result
from .components import (
    COMPONENTS,
    Case,
    Comparison,
    ComponentCode,
    Gender,
    Mood,
    Number,
    PartOfSpeech,
    Person,
    Tense,
    Voice,
)
from .segments import Field, Segment, read_segments

# Categories grouped the way glosses are written: verbal, then nominal
_VERBAL = ("tense", "mood", "voice")
_NOMINAL = ("case", "person", "gender", "number")

_CASE_GENDER_NUMBER = (Field(Case), Field(Gender), Field(Number))


class PartOfSpeechParsing:
    """Uniform accessor surface shared by every decoded parsing code."""

    __slots__ = ()

    part_of_speech: ClassVar[PartOfSpeech | None] = None
    layout: ClassVar[tuple[Segment, ...]] = ()

    case: Case | None = None
    comparison: Comparison | None = None
    gender: Gender | None = None
    mood: Mood | None = None
    number: Number | None = None
    person: Person | None = None
    tense: Tense | None = None
    voice: Voice | None = None

    @classmethod
    def parse_segments(cls, segments: Sequence[str]) -> Result[PartOfSpeechParsing, AppError]:
        """Decode the segments that follow the part-of-speech tag."""
        if not cls.layout:
            return Ok(cls())
        label = cls.part_of_speech.label if cls.part_of_speech else cls.__name__
        return read_segments(segments, cls.layout, label).map(lambda values: cls(**values))

    @property
    def label(self) -> str:
        return self.part_of_speech.label if self.part_of_speech else type(self).__name__

    def components(self) -> Iterator[tuple[str, ComponentCode]]:
        """Populated ``(category, member)`` pairs in canonical order."""
        for component in COMPONENTS[1:]:
            value = getattr(self, component.category().lower())
            if value is not None:
                yield component.category(), value

    def to_dict(self) -> dict:
        data = {"part_of_speech": self.part_of_speech.code if self.part_of_speech else None}
        for component in COMPONENTS[1:]:
            key = component.category().lower()
            value = getattr(self, key)
            data[key] = value.code if value is not None else None
        return data

    def describe(self) -> str:
        """Human-readable gloss, e.g. ``Verb - Aorist Indicative Active - 3rd Person Singular``."""
        groups = [
            " ".join(getattr(self, key).label for key in keys if getattr(self, key) is not None)
            for keys in (_VERBAL, _NOMINAL, ("comparison",))
        ]
        return " - ".join([self.label, *(group for group in groups if group)])


# =============================================================================
# Parts of speech without components
# =============================================================================

@dataclass(frozen=True, slots=True)
class ConjunctionParsing(PartOfSpeechParsing):
    """- ``Conj``: No components"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.CONJUNCTION


@dataclass(frozen=True, slots=True)
class PrepositionParsing(PartOfSpeechParsing):
    """- ``Prep``: No components"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.PREPOSITION


@dataclass(frozen=True, slots=True)
class InterjectionParsing(PartOfSpeechParsing):
    """- ``I``: No components"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.INTERJECTION


@dataclass(frozen=True, slots=True)
class ParticleParsing(PartOfSpeechParsing):
    """- ``Prtcl``: No components"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.PARTICLE


@dataclass(frozen=True, slots=True)
class HebrewWordParsing(PartOfSpeechParsing):
    """- ``Heb``: No components"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.HEBREW_WORD


@dataclass(frozen=True, slots=True)
class AramaicWordParsing(PartOfSpeechParsing):
    """- ``Aram``: No components"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.ARAMAIC_WORD


# =============================================================================
# Nominals
# =============================================================================

@dataclass(frozen=True, slots=True, kw_only=True)
class NounParsing(PartOfSpeechParsing):
    """
    - ``N``: No components
    - ``N-AFP``: Case, Gender, Number (all three, or no segment at all)
    """
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.NOUN
    layout: ClassVar[tuple[Segment, ...]] = (
        Segment(_CASE_GENDER_NUMBER, required=False),
    )

    case: Case | None = None
    gender: Gender | None = None
    number: Number | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AdjectiveParsing(PartOfSpeechParsing):
    """
    - ``Adj``: No components
    - ``Adj-AFP``: Case, Gender, Number
    - ``Adj-AFP-C``: Case, Gender, Number, Comparison
    """
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.ADJECTIVE
    layout: ClassVar[tuple[Segment, ...]] = (
        Segment(_CASE_GENDER_NUMBER, required=False),
        Segment((Field(Comparison, greedy=True),), required=False),
    )

    case: Case | None = None
    gender: Gender | None = None
    number: Number | None = None
    comparison: Comparison | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AdverbParsing(PartOfSpeechParsing):
    """
    - ``Adv``: No components
    - ``Adv-C``: Comparison
    - ``Adv-``: No components
    """
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.ADVERB
    layout: ClassVar[tuple[Segment, ...]] = (
        Segment((Field(Comparison),), required=False, allow_empty=True),
    )

    comparison: Comparison | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ArticleParsing(PartOfSpeechParsing):
    """- ``Art-AFP``: Case, Gender, Number"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.ARTICLE
    layout: ClassVar[tuple[Segment, ...]] = (Segment(_CASE_GENDER_NUMBER),)

    case: Case
    gender: Gender
    number: Number


@dataclass(frozen=True, slots=True, kw_only=True)
class DemonstrativePronounParsing(PartOfSpeechParsing):
    """- ``DPro-AFP``: Case, Gender, Number"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.DEMONSTRATIVE_PRONOUN
    layout: ClassVar[tuple[Segment, ...]] = (Segment(_CASE_GENDER_NUMBER),)

    case: Case
    gender: Gender
    number: Number


@dataclass(frozen=True, slots=True, kw_only=True)
class InterrogativeIndefinitePronounParsing(PartOfSpeechParsing):
    """- ``IPro-AFP``: Case, Gender, Number"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.INTERROGATIVE_INDEFINITE_PRONOUN
    layout: ClassVar[tuple[Segment, ...]] = (Segment(_CASE_GENDER_NUMBER),)

    case: Case
    gender: Gender
    number: Number


@dataclass(frozen=True, slots=True, kw_only=True)
class RelativePronounParsing(PartOfSpeechParsing):
    """- ``RelPro-AFP``: Case, Gender, Number"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.RELATIVE_PRONOUN
    layout: ClassVar[tuple[Segment, ...]] = (Segment(_CASE_GENDER_NUMBER),)

    case: Case
    gender: Gender
    number: Number


@dataclass(frozen=True, slots=True, kw_only=True)
class ReciprocalPronounParsing(PartOfSpeechParsing):
    """- ``RecPro-AMP``: Case, Gender, Number"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.RECIPROCAL_PRONOUN
    layout: ClassVar[tuple[Segment, ...]] = (Segment(_CASE_GENDER_NUMBER),)

    case: Case
    gender: Gender
    number: Number


@dataclass(frozen=True, slots=True, kw_only=True)
class PersonalPossessivePronounParsing(PartOfSpeechParsing):
    """
    - ``PPro-A1P``: Case, Person, Number
    - ``PPro-AF1P``: Case, Gender, Person, Number
    - ``PPro-NFS``: Case, Gender, Number
    """
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.PERSONAL_POSSESSIVE_PRONOUN
    layout: ClassVar[tuple[Segment, ...]] = (
        Segment((
            Field(Case),
            Field(Gender, required=False),
            Field(Person, required=False),
            Field(Number),
        )),
    )

    case: Case
    gender: Gender | None = None
    person: Person | None = None
    number: Number


@dataclass(frozen=True, slots=True, kw_only=True)
class ReflexivePronounParsing(PartOfSpeechParsing):
    """- ``RefPro-AF3P``: Case, Gender, Person, Number"""
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.REFLEXIVE_PRONOUN
    layout: ClassVar[tuple[Segment, ...]] = (
        Segment((Field(Case), Field(Gender), Field(Person), Field(Number))),
    )

    case: Case
    gender: Gender
    person: Person
    number: Number


# =============================================================================
# Verbs
# =============================================================================

@dataclass(frozen=True, slots=True, kw_only=True)
class VerbParsing(PartOfSpeechParsing):
    """
    - ``V-PI-3S``: Tense, Mood - Person, Number
    - ``V-M-2P``: Mood - Person, Number
    - ``V-ANM/P``: Tense, Mood, Voice
    - ``V-APA-AFP``: Tense, Mood, Voice - Case, Gender, Number

    Finite forms carry Person and Number, participles Case, Gender and
    Number. The second segment is read field by field without checking
    that combination against the mood.
    """
    part_of_speech: ClassVar[PartOfSpeech] = PartOfSpeech.VERB
    layout: ClassVar[tuple[Segment, ...]] = (
        Segment((
            Field(Tense, required=False),
            Field(Mood),
            Field(Voice, required=False, greedy=True),  # M/P runs to the end
        )),
        Segment((
            Field(Case, required=False),
            Field(Person, required=False),
            Field(Gender, required=False),
            Field(Number, required=False),
        ), required=False),
    )

    tense: Tense | None = None
    mood: Mood
    voice: Voice | None = None

    case: Case | None = None
    person: Person | None = None
    gender: Gender | None = None
    number: Number | None = None

    @property
    def is_participle(self) -> bool:
        return self.mood is Mood.PARTICIPLE


# =============================================================================
# Whole-code markers
# =============================================================================

@dataclass(frozen=True, slots=True)
class Indeclinable(PartOfSpeechParsing):
    """``Indec``: an indeclinable word. Carries no components."""
    marker: ClassVar[str] = "Indec"

    @property
    def label(self) -> str:
        return "Indeclinable"


@dataclass(frozen=True, slots=True)
class IntensiveParticle(PartOfSpeechParsing):
    """``IntPrtcl``: an intensive particle. Carries no components."""
    marker: ClassVar[str] = "IntPrtcl"

    @property
    def label(self) -> str:
        return "Intensive Particle"


PARSINGS: dict[PartOfSpeech, type[PartOfSpeechParsing]] = {
    parsing.part_of_speech: parsing
    for parsing in (
        VerbParsing,
        NounParsing,
        AdverbParsing,
        AdjectiveParsing,
        ArticleParsing,
        DemonstrativePronounParsing,
        InterrogativeIndefinitePronounParsing,
        PersonalPossessivePronounParsing,
        ReciprocalPronounParsing,
        RelativePronounParsing,
        ReflexivePronounParsing,
        PrepositionParsing,
        ConjunctionParsing,
        InterjectionParsing,
        ParticleParsing,
        HebrewWordParsing,
        AramaicWordParsing,
    )
}

MARKERS: dict[str, type[PartOfSpeechParsing]] = {
    marker.marker: marker for marker in (Indeclinable, IntensiveParticle)
}
