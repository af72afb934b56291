"""Url rewrite transform."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from cssparts.model.part import Part, PartKind, Segment


class UrlRewriteTransform:
    """Pass every url part's text through *rewrite*, e.g. to add a CDN prefix."""

    def __init__(self, rewrite: Callable[[str], str]) -> None:
        self.rewrite = rewrite

    def apply(self, segments: list[Segment]) -> list[Segment]:
        return [
            replace(s, value=self.rewrite(str(s.value)))
            if isinstance(s, Part) and s.kind is PartKind.URL
            else s
            for s in segments
        ]
