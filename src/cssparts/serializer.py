"""Serializer: rebuild CSS text from a segment sequence."""

from __future__ import annotations

from typing import Sequence, Union

from cssparts.model.part import Part, PartKind, Property, Segment


def part_to_css(part: Part) -> str:
    """Return the CSS source text *part* stands for."""
    if part.kind is PartKind.VARIABLE:
        return f"var(--{part.value})"
    if part.kind is PartKind.PROPERTY:
        prop = part.value
        if not isinstance(prop, Property):
            raise TypeError(f"property part value must be a Property, got {type(prop).__name__}")
        return f"--{prop.name}: {prop.value}"
    return str(part.value)


def to_css(parsed: Union[str, Sequence[Segment]]) -> str:
    """Convert parsed segments back to CSS without further processing.

    A plain string is returned unchanged.  Properties are written as
    ``--name: value``, so a declaration spaced differently in the source comes
    back normalized.
    """
    if isinstance(parsed, str):
        return parsed
    return "".join(
        segment if isinstance(segment, str) else part_to_css(segment)
        for segment in parsed
    )
