"""Tokenizer error types."""

from __future__ import annotations

from cssparts.model.part import PartKind


class EngineFault(Exception):
    """Raised when the pattern engine cannot complete a scan."""

    def __init__(self, message: str, kind: PartKind | None = None):
        self.kind = kind
        super().__init__(message)


class InputTooLarge(EngineFault):
    """Raised when the input exceeds the configured size ceiling."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input of {length} characters exceeds the limit of {limit} characters"
        )
