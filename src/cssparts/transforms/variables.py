"""Variable substitution transform: inlines custom-property values."""

from __future__ import annotations

from urllib.parse import quote

from cssparts.model.part import Part, PartKind, Property, Segment
from cssparts.transforms.base import merge_literals


class VariableSubstitutionTransform:
    """Replace ``var(--name)`` parts with literal values.

    Values come from *values* and, when *use_declarations* is set, from the
    ``:root`` declarations found in the same sequence.  Explicit *values* win.
    Variables flagged for escaping are percent-encoded, since they sit inside an
    attribute value or a quoted string.  Unknown names are left as parts.
    """

    def __init__(
        self, values: dict[str, str] | None = None, *, use_declarations: bool = True
    ) -> None:
        self.values = dict(values or {})
        self.use_declarations = use_declarations

    def apply(self, segments: list[Segment]) -> list[Segment]:
        lookup: dict[str, str] = {}
        if self.use_declarations:
            for segment in segments:
                if isinstance(segment, Part) and isinstance(segment.value, Property):
                    lookup[segment.value.name] = segment.value.value
        lookup.update(self.values)

        result: list[Segment] = []
        for segment in segments:
            if (
                isinstance(segment, Part)
                and segment.kind is PartKind.VARIABLE
                and segment.value in lookup
            ):
                value = lookup[str(segment.value)]
                result.append(quote(value, safe="") if segment.escape else value)
            else:
                result.append(segment)
        return merge_literals(result)
