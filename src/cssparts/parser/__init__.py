"""CSS tokenizer entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from cssparts.config import DEFAULT_CONFIG, ParserConfig
from cssparts.model.diagnostic import Diagnostic
from cssparts.model.part import PartKind, Segment
from cssparts.parser.assembler import assemble
from cssparts.parser.collector import collect_matches
from cssparts.parser.errors import EngineFault, InputTooLarge

__all__ = [
    "EngineFault",
    "InputTooLarge",
    "ParseResult",
    "parse",
    "parse_with_diagnostics",
]


@dataclass(frozen=True)
class ParseResult:
    """Segments plus the non-fatal findings gathered while producing them."""

    segments: list[Segment]
    diagnostics: list[Diagnostic] = field(default_factory=list)


def parse_with_diagnostics(
    css_text: str,
    enabled_kinds: Iterable[PartKind] | None = None,
    *,
    config: ParserConfig | None = None,
) -> ParseResult:
    """Tokenize *css_text* and report skipped declarations and dropped overlaps.

    *enabled_kinds* restricts which matchers run; when omitted the config's
    ``enabled_kinds`` is used.  Raises :class:`InputTooLarge` when the input is
    longer than ``config.max_input_length``.
    """
    config = config or DEFAULT_CONFIG
    if len(css_text) > config.max_input_length:
        raise InputTooLarge(len(css_text), config.max_input_length)

    kinds = config.enabled_kinds if enabled_kinds is None else enabled_kinds
    records, diagnostics = collect_matches(css_text, kinds)
    segments, assembly_diagnostics = assemble(
        css_text, records, drop_blank_literals=config.drop_blank_literals
    )
    return ParseResult(segments=segments, diagnostics=diagnostics + assembly_diagnostics)


def parse(
    css_text: str,
    enabled_kinds: Iterable[PartKind] | None = None,
    *,
    config: ParserConfig | None = None,
) -> list[Segment]:
    """Tokenize *css_text* into literal strings interleaved with :class:`Part` s.

    Never fails on malformed CSS: text no matcher recognizes stays literal.
    Input with no recognizable construct comes back as ``[css_text]``.
    """
    return parse_with_diagnostics(css_text, enabled_kinds, config=config).segments
