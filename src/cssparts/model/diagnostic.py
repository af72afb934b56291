"""Diagnostic model: non-fatal findings reported while tokenizing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cssparts.model.part import PartKind


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the input that did not stop tokenization.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description.
        offset: Character offset into the input, if applicable.
        kind: The part kind involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    offset: int | None = None
    kind: PartKind | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.offset is not None:
            location = f" [offset={self.offset}]"
        return f"{self.severity.value}{location}: {self.message}"
