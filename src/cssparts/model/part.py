"""Part model: PartKind, Property, Part, and the internal MatchRecord."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class PartKind(Enum):
    """The kinds of CSS construct the tokenizer recognizes.

    Values are the integer type codes used in rendered modules.
    """

    SELECTOR = 1
    VARIABLE = 2
    PROPERTY = 3
    URL = 4


ALL_KINDS: frozenset[PartKind] = frozenset(PartKind)


@dataclass(frozen=True)
class Property:
    """A custom-property declaration from a ``:root`` block."""

    name: str  # without the leading "--"
    value: str


@dataclass(frozen=True)
class Part:
    """A typed, position-free token extracted from CSS text.

    ``value`` is a :class:`Property` for ``PROPERTY`` parts and a plain string
    otherwise.  ``escape`` is only set on ``VARIABLE`` parts that sit inside an
    attribute value or a single-quoted string.
    """

    kind: PartKind
    value: Union[str, Property]
    escape: bool = False


@dataclass(frozen=True)
class MatchRecord:
    """A position-bearing candidate produced by a matcher."""

    kind: PartKind
    value: Union[str, Property]
    offset: int
    length: int
    escape: bool = False

    @property
    def end(self) -> int:
        return self.offset + self.length

    def to_part(self) -> Part:
        """Drop the coordinates and return the output :class:`Part`."""
        return Part(kind=self.kind, value=self.value, escape=self.escape)


Segment = Union[str, Part]
