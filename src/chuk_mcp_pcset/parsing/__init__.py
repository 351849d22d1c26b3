"""
Text parsing for pitch-class input.

Turns user text into a cleaned pitch-class set and reports every
offending token through a small error taxonomy.
"""

from chuk_mcp_pcset.parsing.errors import (
    InvalidCharacterError,
    MalformedTokenError,
    OutOfRangePitchClassError,
    ParseIssue,
    PitchClassParseError,
)
from chuk_mcp_pcset.parsing.parser import parse_pitch_classes

__all__ = [
    "InvalidCharacterError",
    "MalformedTokenError",
    "OutOfRangePitchClassError",
    "ParseIssue",
    "PitchClassParseError",
    "parse_pitch_classes",
]
