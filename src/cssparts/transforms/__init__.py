from __future__ import annotations

from typing import Iterable

from cssparts.model.part import Segment
from cssparts.transforms.base import Transform, merge_literals
from cssparts.transforms.selectors import SelectorPrefixTransform
from cssparts.transforms.urls import UrlRewriteTransform
from cssparts.transforms.variables import VariableSubstitutionTransform

__all__ = [
    "SelectorPrefixTransform",
    "Transform",
    "UrlRewriteTransform",
    "VariableSubstitutionTransform",
    "apply_transforms",
    "merge_literals",
]


def apply_transforms(
    segments: list[Segment], transforms: Iterable[Transform]
) -> list[Segment]:
    """Run *transforms* over *segments* in order."""
    for t in transforms:
        segments = t.apply(segments)
    return segments
