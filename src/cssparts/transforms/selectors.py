"""Selector scoping transform."""

from __future__ import annotations

from dataclasses import replace

from cssparts.model.part import Part, PartKind, Segment


class SelectorPrefixTransform:
    """Scope every selector under *prefix*: ``a`` becomes ``.theme a``."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix.strip()

    def apply(self, segments: list[Segment]) -> list[Segment]:
        if not self.prefix:
            return list(segments)
        return [
            replace(s, value=f"{self.prefix} {s.value}")
            if isinstance(s, Part) and s.kind is PartKind.SELECTOR
            else s
            for s in segments
        ]
