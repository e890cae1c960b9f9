"""Serializable view of a decoded parsing code."""
from pydantic import BaseModel

from .parsings import PartOfSpeechParsing


class ParsingResponse(BaseModel):
    code: str
    part_of_speech: str | None = None
    tense: str | None = None
    mood: str | None = None
    voice: str | None = None
    case: str | None = None
    person: str | None = None
    gender: str | None = None
    number: str | None = None
    comparison: str | None = None
    description: str

    @classmethod
    def from_parsing(cls, code: str, parsing: PartOfSpeechParsing) -> "ParsingResponse":
        return cls(code=code, description=parsing.describe(), **parsing.to_dict())
