"""Base protocol for segment transforms."""

from __future__ import annotations

from typing import Iterable, Protocol

from cssparts.model.part import Segment


class Transform(Protocol):
    """A segment-sequence-to-segment-sequence rewriting step."""

    def apply(self, segments: list[Segment]) -> list[Segment]: ...


def merge_literals(segments: Iterable[Segment]) -> list[Segment]:
    """Join adjacent literal strings and drop empty ones."""
    merged: list[Segment] = []
    for segment in segments:
        if isinstance(segment, str):
            if not segment:
                continue
            if merged and isinstance(merged[-1], str):
                merged[-1] = merged[-1] + segment
                continue
        merged.append(segment)
    return merged
