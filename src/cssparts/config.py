from __future__ import annotations

from dataclasses import dataclass

from cssparts.model.part import ALL_KINDS, PartKind


@dataclass(frozen=True)
class ParserConfig:
    max_input_length: int = 1_000_000  # characters; larger inputs raise InputTooLarge
    drop_blank_literals: bool = False  # also drop whitespace-only literals
    enabled_kinds: frozenset[PartKind] = ALL_KINDS


DEFAULT_CONFIG = ParserConfig()
