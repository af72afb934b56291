from cssparts.model.diagnostic import Diagnostic, Severity
from cssparts.model.part import ALL_KINDS, MatchRecord, Part, PartKind, Property, Segment

__all__ = [
    "ALL_KINDS",
    "Diagnostic",
    "MatchRecord",
    "Part",
    "PartKind",
    "Property",
    "Segment",
    "Severity",
]
