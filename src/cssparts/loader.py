"""Module renderer: embeds a tokenized stylesheet in a JavaScript module."""

from __future__ import annotations

import json
from typing import Any, Sequence

from cssparts.config import ParserConfig
from cssparts.model.part import Part, Property, Segment
from cssparts.parser import parse


def part_to_json(part: Part) -> dict[str, Any]:
    """Return the JSON-compatible form of *part*.

    Parts render as ``{"type": <code>, "value": ...}`` where ``type`` is the
    :class:`PartKind` integer code.  Escaped variables also carry
    ``"encode": true``.
    """
    value: Any = part.value
    if isinstance(value, Property):
        value = {"name": value.name, "value": value.value}
    data: dict[str, Any] = {"type": part.kind.value, "value": value}
    if part.escape:
        data["encode"] = True
    return data


def to_json(segments: Sequence[Segment]) -> list[Any]:
    return [s if isinstance(s, str) else part_to_json(s) for s in segments]


def render_module(css_text: str, *, config: ParserConfig | None = None) -> str:
    """Tokenize *css_text* and render it as ``module.exports = <json>``."""
    segments = parse(css_text, config=config)
    payload = json.dumps(to_json(segments), separators=(",", ":"))
    return f"module.exports = {payload}"
