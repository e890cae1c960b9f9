"""Segment reader shared by every part-of-speech grammar.

Parsing codes omit categories without leaving a placeholder, so a field's
presence is only known by trying it: the next character is looked up in the
field's alphabet and consumed on a match, otherwise the input is left
untouched for the next field.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.errors import AppError, Err, Ok, Result, invalid_code, missing_code
from .components import ComponentCode

_ORIGIN = "greek.segments"


@dataclass(frozen=True, slots=True)
class Field:
    """One category slot inside a segment."""
    component: type[ComponentCode]
    required: bool = True
    greedy: bool = False  # consume the rest of the segment (voice ``M/P``)

    @property
    def key(self) -> str:
        return self.component.category().lower()


@dataclass(frozen=True, slots=True)
class Segment:
    """Layout of one ``-``-delimited segment."""
    fields: tuple[Field, ...]
    required: bool = True
    allow_empty: bool = False  # a present but empty segment reads as absent


class SegmentCursor:
    """Left-to-right position within a single segment."""

    __slots__ = ("_text", "_position")

    def __init__(self, text: str):
        self._text = text
        self._position = 0

    def peek(self) -> str:
        return self._text[self._position:self._position + 1]

    def remainder(self) -> str:
        return self._text[self._position:]

    def advance(self, count: int) -> None:
        self._position += count


def read_segment(
    text: str,
    fields: Sequence[Field],
    part_of_speech: str | None = None,
) -> Result[dict[str, ComponentCode], AppError]:
    """Read ``fields`` from one segment, in order.

    Optional fields that do not match are recorded as absent. A required
    field that does not match fails the whole segment. Characters left over
    once every field has been tried are ignored.
    """
    cursor = SegmentCursor(text)
    values: dict[str, ComponentCode] = {}

    for field in fields:
        candidate = cursor.remainder() if field.greedy else cursor.peek()
        member = field.component.lookup(candidate) if candidate else None

        if member is not None:
            cursor.advance(len(candidate))
            values[field.key] = member
        elif not field.required:
            continue
        elif candidate:
            return invalid_code(
                field.component.category(), candidate,
                part_of_speech=part_of_speech, origin=_ORIGIN,
            )
        else:
            return missing_code(
                field.component.category(),
                part_of_speech=part_of_speech, origin=_ORIGIN,
            )

    return Ok(values)


def read_segments(
    segments: Sequence[str],
    layout: Sequence[Segment],
    part_of_speech: str | None = None,
) -> Result[dict[str, ComponentCode], AppError]:
    """Apply a grammar's segment layout to the tail of a parsing code.

    Segments beyond the layout are ignored. A missing optional segment
    leaves its fields absent. A present segment is read even when empty,
    so its first required field fails, unless the layout allows it empty.
    """
    values: dict[str, ComponentCode] = {}

    for index, segment in enumerate(layout):
        text = segments[index] if index < len(segments) else None

        if text is None:
            if segment.required:
                first = next(f for f in segment.fields if f.required)
                return missing_code(
                    first.component.category(),
                    part_of_speech=part_of_speech, origin=_ORIGIN,
                )
            continue
        if text == "" and segment.allow_empty:
            continue

        match read_segment(text, segment.fields, part_of_speech):
            case Ok(fields):
                values.update(fields)
            case Err(_) as failure:
                return failure

    return Ok(values)
