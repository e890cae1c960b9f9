"""Koine Greek parsing-code decoder."""
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
from .parsings import (
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
    PartOfSpeechParsing,
    PersonalPossessivePronounParsing,
    PrepositionParsing,
    ReciprocalPronounParsing,
    ReflexivePronounParsing,
    RelativePronounParsing,
    VerbParsing,
)
from .word import GreekWordParsing, parse, parse_many
from .schema import ParsingResponse
from .module import GreekModule

__all__ = [
    "COMPONENTS",
    "Case",
    "Comparison",
    "ComponentCode",
    "Gender",
    "Mood",
    "Number",
    "PartOfSpeech",
    "Person",
    "Tense",
    "Voice",
    "PARSINGS",
    "AdjectiveParsing",
    "AdverbParsing",
    "AramaicWordParsing",
    "ArticleParsing",
    "ConjunctionParsing",
    "DemonstrativePronounParsing",
    "HebrewWordParsing",
    "Indeclinable",
    "IntensiveParticle",
    "InterjectionParsing",
    "InterrogativeIndefinitePronounParsing",
    "NounParsing",
    "ParticleParsing",
    "PartOfSpeechParsing",
    "PersonalPossessivePronounParsing",
    "PrepositionParsing",
    "ReciprocalPronounParsing",
    "ReflexivePronounParsing",
    "RelativePronounParsing",
    "VerbParsing",
    "GreekWordParsing",
    "parse",
    "parse_many",
    "ParsingResponse",
    "GreekModule",
]
