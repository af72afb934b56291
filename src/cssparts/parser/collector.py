"""Match collector: runs the enabled matchers and gathers their records."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from cssparts.model.diagnostic import Diagnostic
from cssparts.model.part import MatchRecord, PartKind
from cssparts.parser.errors import EngineFault
from cssparts.parser.matchers import matchers_for

logger = logging.getLogger("cssparts")


def collect_matches(
    source: str, kinds: Iterable[PartKind] | None = None
) -> tuple[list[MatchRecord], list[Diagnostic]]:
    """Run each enabled matcher over the whole of *source*.

    Records are returned unsorted, matcher by matcher.  No overlap detection
    happens here.
    """
    records: list[MatchRecord] = []
    diagnostics: list[Diagnostic] = []
    for matcher in matchers_for(kinds):
        found = 0
        try:
            for match in matcher.scan(source):
                new_records, new_diagnostics = matcher.handler(match)
                records.extend(new_records)
                diagnostics.extend(new_diagnostics)
                found += len(new_records)
        except (re.error, RecursionError) as exc:
            raise EngineFault(
                f"{matcher.kind.name.lower()} matcher failed: {exc}", kind=matcher.kind
            ) from exc
        logger.debug("matcher %s produced %d record(s)", matcher.kind.name, found)
    return records, diagnostics
