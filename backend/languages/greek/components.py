"""Greek grammatical category codes.

Each category is a closed enumeration whose members pair a short code with a
display label. Codes are written case-sensitively (``M/P``, ``DPro``) but
looked up case-insensitively, since source tables are not consistent.
"""
from __future__ import annotations

from enum import Enum
from functools import total_ordering

from core.errors import AppError, Ok, Result, invalid_code


@total_ordering
class ComponentCode(Enum):
    """Base for category enumerations whose values are ``(code, label)`` pairs."""

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    @classmethod
    def category(cls) -> str:
        return cls.__name__

    @classmethod
    def lookup(cls, code: str):
        """Member for ``code`` (any letter case), or None."""
        folded = code.lower()
        for member in cls:
            if member.code.lower() == folded:
                return member
        return None

    @classmethod
    def parse(cls, code: str, *, part_of_speech: str | None = None) -> Result[ComponentCode, AppError]:
        member = cls.lookup(code)
        if member is None:
            return invalid_code(
                cls.category(), code, part_of_speech=part_of_speech, origin="greek.components"
            )
        return Ok(member)

    @property
    def _position(self) -> int:
        return type(self)._member_names_.index(self.name)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._position < other._position

    def __str__(self) -> str:
        return self.code


class Case(ComponentCode):
    NOMINATIVE = ("N", "Nominative")
    VOCATIVE = ("V", "Vocative")
    ACCUSATIVE = ("A", "Accusative")
    GENITIVE = ("G", "Genitive")
    DATIVE = ("D", "Dative")


class Number(ComponentCode):
    SINGULAR = ("S", "Singular")
    PLURAL = ("P", "Plural")


class Gender(ComponentCode):
    MASCULINE = ("M", "Masculine")
    FEMININE = ("F", "Feminine")
    NEUTER = ("N", "Neuter")


class Person(ComponentCode):
    FIRST = ("1", "1st Person")
    SECOND = ("2", "2nd Person")
    THIRD = ("3", "3rd Person")


class Tense(ComponentCode):
    PRESENT = ("P", "Present")
    IMPERFECT = ("I", "Imperfect")
    FUTURE = ("F", "Future")
    AORIST = ("A", "Aorist")
    PERFECT = ("R", "Perfect")
    PLUPERFECT = ("L", "Pluperfect")


class Voice(ComponentCode):
    ACTIVE = ("A", "Active")
    MIDDLE = ("M", "Middle")
    PASSIVE = ("P", "Passive")
    MIDDLE_PASSIVE = ("M/P", "Middle or Passive")


class Mood(ComponentCode):
    INDICATIVE = ("I", "Indicative")
    IMPERATIVE = ("M", "Imperative")
    SUBJUNCTIVE = ("S", "Subjunctive")
    OPTATIVE = ("O", "Optative")
    INFINITIVE = ("N", "Infinitive")
    PARTICIPLE = ("P", "Participle")


class Comparison(ComponentCode):
    COMPARATIVE = ("C", "Comparative")
    SUPERLATIVE = ("S", "Superlative")


class PartOfSpeech(ComponentCode):
    VERB = ("V", "Verb")
    NOUN = ("N", "Noun")
    ADVERB = ("Adv", "Adverb")
    ADJECTIVE = ("Adj", "Adjective")
    ARTICLE = ("Art", "Article")
    DEMONSTRATIVE_PRONOUN = ("DPro", "Demonstrative Pronoun")
    INTERROGATIVE_INDEFINITE_PRONOUN = ("IPro", "Interrogative / Indefinite Pronoun")
    PERSONAL_POSSESSIVE_PRONOUN = ("PPro", "Personal / Possessive Pronoun")
    RECIPROCAL_PRONOUN = ("RecPro", "Reciprocal Pronoun")
    RELATIVE_PRONOUN = ("RelPro", "Relative Pronoun")
    REFLEXIVE_PRONOUN = ("RefPro", "Reflexive Pronoun")
    PREPOSITION = ("Prep", "Preposition")
    CONJUNCTION = ("Conj", "Conjunction")
    INTERJECTION = ("I", "Interjection")
    PARTICLE = ("Prtcl", "Particle")
    HEBREW_WORD = ("Heb", "Hebrew Word")
    ARAMAIC_WORD = ("Aram", "Aramaic Word")


# Order in which categories are reported by accessors and serializers
COMPONENTS: tuple[type[ComponentCode], ...] = (
    PartOfSpeech,
    Tense,
    Mood,
    Voice,
    Case,
    Person,
    Gender,
    Number,
    Comparison,
)
