"""cssparts - split CSS text into literals and typed parts."""

from cssparts.config import ParserConfig
from cssparts.model import Diagnostic, Part, PartKind, Property, Segment, Severity
from cssparts.parser import EngineFault, InputTooLarge, ParseResult, parse, parse_with_diagnostics
from cssparts.serializer import to_css

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "EngineFault",
    "InputTooLarge",
    "ParseResult",
    "ParserConfig",
    "Part",
    "PartKind",
    "Property",
    "Segment",
    "Severity",
    "parse",
    "parse_with_diagnostics",
    "to_css",
]
