"""Matcher registry: one pattern + handler pair per part kind.

Each matcher is run over the whole input independently.  Handlers are pure
functions of a single ``re.Match`` and return the records it produced along with
any diagnostics about text they had to skip.

Registry order is Selector, Variable, Property, Url.  It only matters when two
records share an offset, in which case the stable sort in the assembler keeps
registry order.

Every scan is linear in the input length: no pattern can re-read text that an
earlier starting position already scanned.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from cssparts.model.diagnostic import Diagnostic, Severity
from cssparts.model.part import MatchRecord, PartKind, Property

__all__ = ["Matcher", "MATCHERS", "matchers_for"]

HandlerResult = tuple[list[MatchRecord], list[Diagnostic]]
Handler = Callable[["re.Match[str]"], HandlerResult]
Finder = Callable[["re.Pattern[str]", str], Iterable["re.Match[str]"]]

# Selector list entries that are not real selectors.
_IGNORED_SELECTORS = frozenset({":root", "from", "to"})

# Characters a selector list may contain.  "{", "}" and ";" end a list.
_SELECTOR_CHARS = frozenset(string.ascii_letters + string.digits + " =_,+^*$\"'>\t\r\n[]():-.#")

_BRACE_RE = re.compile(r"\{")

# var(--name) with an alphanumeric name
_VARIABLE_RE = re.compile(r"var\(--(?P<name>[a-z0-9]+)\)", re.IGNORECASE)

# A declaration block, matched at the brace of the first :root rule.
_ROOT_RE = re.compile(r":root", re.IGNORECASE)
_ROOT_BLOCK_RE = re.compile(r"\{(?P<body>[^}]*)\}")

# url(...) after a colon on the same line, optionally quoted.  The url text
# holds no parentheses, so url(var(--x)) is left to the variable matcher.
_URL_RE = re.compile(
    r"""
    (?P<before>:[^:\n]*?url\s*\(\s*['"]?)
    (?P<url>[^()'"\n]+)
    (?P<after>['"]?\s*\))
    """,
    re.VERBOSE | re.IGNORECASE,
)


@dataclass(frozen=True)
class Matcher:
    """Recognizes one part kind.

    ``finder`` replaces ``pattern.finditer`` for matchers that locate their
    matches some other way.
    """

    kind: PartKind
    pattern: re.Pattern[str]
    handler: Handler
    finder: Finder | None = None

    def scan(self, source: str) -> Iterable[re.Match[str]]:
        if self.finder is not None:
            return self.finder(self.pattern, source)
        return self.pattern.finditer(source)


def _leading_ws(text: str) -> int:
    return len(text) - len(text.lstrip())


def _selector_list_start(source: str, brace: int) -> int | None:
    """Return where the selector list ending at *brace* starts, if it has one.

    The list must follow the start of input, a newline, or a closing brace.
    """
    start = brace
    while start > 0 and source[start - 1] in _SELECTOR_CHARS:
        start -= 1
    if start == brace:
        return None
    if start == 0 or source[start - 1] == "}":
        return start
    newline = source.find("\n", start, brace)
    if newline < 0 or newline + 1 == brace:
        return None
    return newline + 1


def _selector_handler(match: re.Match[str]) -> HandlerResult:
    source = match.string
    brace = match.start()
    base = _selector_list_start(source, brace)
    if base is None:
        return [], []
    records: list[MatchRecord] = []
    acc = 0
    for entry in source[base:brace].split(","):
        selector = entry.strip()
        if selector and selector not in _IGNORED_SELECTORS:
            records.append(
                MatchRecord(
                    kind=PartKind.SELECTOR,
                    value=selector,
                    offset=base + acc + _leading_ws(entry),
                    length=len(selector),
                )
            )
        acc += len(entry) + len(",")
    return records, []


def _variable_handler(match: re.Match[str]) -> HandlerResult:
    source = match.string
    start, end = match.span()
    # "=" two characters back means attr='var(--x)'; a trailing quote means 'var(--x)'
    before = source[start - 2] if start >= 2 else ""
    after = source[end:end + 1]
    record = MatchRecord(
        kind=PartKind.VARIABLE,
        value=match.group("name"),
        offset=start,
        length=end - start,
        escape=before == "=" or after == "'",
    )
    return [record], []


def _find_root_block(pattern: re.Pattern[str], source: str) -> Iterator[re.Match[str]]:
    """Yield the declaration block of the first ``:root`` rule, if any.

    The rule's brace is the first ``{`` after ``:root`` on the same line.
    """
    segment_start = 0
    brace = source.find("{")
    while brace >= 0:
        newline = source.rfind("\n", segment_start, brace)
        if newline >= 0:
            segment_start = newline + 1
        if _ROOT_RE.search(source, segment_start, brace):
            match = pattern.match(source, brace)
            if match is not None:
                yield match
            return
        segment_start = brace + 1
        brace = source.find("{", segment_start)


def _property_handler(match: re.Match[str]) -> HandlerResult:
    base = match.start("body")
    records: list[MatchRecord] = []
    diagnostics: list[Diagnostic] = []
    acc = 0
    for pair in match.group("body").split(";"):
        name, sep, value = pair.partition(":")
        name = name.strip()
        value = value.strip()
        if not sep or not name or not value:
            if pair.strip():
                diagnostics.append(
                    Diagnostic(
                        rule="incomplete_declaration",
                        severity=Severity.INFO,
                        message=f"Skipped declaration without name or value: {pair.strip()!r}",
                        offset=base + acc + _leading_ws(pair),
                        kind=PartKind.PROPERTY,
                    )
                )
            acc += len(pair) + len(";")
            continue

        if name.startswith("--"):
            name = name[2:]
        records.append(
            MatchRecord(
                kind=PartKind.PROPERTY,
                value=Property(name=name, value=value),
                offset=base + acc + _leading_ws(pair),
                length=len(pair.strip()),
            )
        )
        acc += len(pair) + len(";")
    return records, diagnostics


def _url_handler(match: re.Match[str]) -> HandlerResult:
    url = match.group("url")
    record = MatchRecord(
        kind=PartKind.URL,
        value=url,
        offset=match.start("url"),
        length=len(url),
    )
    return [record], []


MATCHERS: tuple[Matcher, ...] = (
    Matcher(PartKind.SELECTOR, _BRACE_RE, _selector_handler),
    Matcher(PartKind.VARIABLE, _VARIABLE_RE, _variable_handler),
    Matcher(PartKind.PROPERTY, _ROOT_BLOCK_RE, _property_handler, _find_root_block),
    Matcher(PartKind.URL, _URL_RE, _url_handler),
)


def matchers_for(kinds: Iterable[PartKind] | None = None) -> list[Matcher]:
    """Return the registered matchers for *kinds*, in registry order.

    ``None`` enables every matcher.
    """
    if kinds is None:
        return list(MATCHERS)
    enabled = frozenset(kinds)
    return [m for m in MATCHERS if m.kind in enabled]
