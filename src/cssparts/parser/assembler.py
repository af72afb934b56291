"""Segment assembler: linearizes match records into a segment sequence."""

from __future__ import annotations

import logging

from cssparts.model.diagnostic import Diagnostic, Severity
from cssparts.model.part import MatchRecord, Segment

logger = logging.getLogger("cssparts")


def assemble(
    source: str,
    records: list[MatchRecord],
    *,
    drop_blank_literals: bool = False,
) -> tuple[list[Segment], list[Diagnostic]]:
    """Slice *source* into literals and parts at the positions in *records*.

    Records are stable-sorted by offset.  When two records overlap, the one
    that starts first wins and the other is dropped with a warning.
    """
    if not records:
        return [source], []

    segments: list[Segment] = []
    diagnostics: list[Diagnostic] = []
    cursor = 0
    for record in sorted(records, key=lambda r: r.offset):
        if record.offset < cursor:
            logger.debug(
                "dropping %s record at %d overlapping text up to %d",
                record.kind.name,
                record.offset,
                cursor,
            )
            diagnostics.append(
                Diagnostic(
                    rule="overlap",
                    severity=Severity.WARNING,
                    message=(
                        f"{record.kind.name.lower()} {record.value!r} overlaps "
                        f"an earlier part and was dropped"
                    ),
                    offset=record.offset,
                    kind=record.kind,
                )
            )
            continue
        segments.append(source[cursor:record.offset])
        segments.append(record.to_part())
        cursor = record.end

    if cursor < len(source):
        segments.append(source[cursor:])

    return [s for s in segments if not _is_empty_literal(s, drop_blank_literals)], diagnostics


def _is_empty_literal(segment: Segment, blank: bool) -> bool:
    if not isinstance(segment, str):
        return False
    if blank:
        return not segment.strip()
    return not segment
