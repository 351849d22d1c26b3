"""
Pitch-class parser - free text to a cleaned pitch-class set.

Accepts digits, 't' (10) and 'e' (11), case-insensitive, separated by
spaces or commas. A hyphen stays with its token (so "-3" is negative):

    "0, 4, 7"   -> (0, 4, 7)
    "0 4 t e"   -> (0, 4, 10, 11)
    "7 0 4 0"   -> (0, 4, 7)
"""

from __future__ import annotations

import re

from chuk_mcp_pcset.constants import (
    ACCEPTED_CHARACTERS,
    ELEVEN_TOKEN,
    PC_MODULUS,
    TEN_TOKEN,
    ErrorMessages,
    ParseIssueCode,
)
from chuk_mcp_pcset.core.pcset import PcSet

from .errors import ParseIssue, error_for

_INVALID_CHARACTER = re.compile(rf"[^{ACCEPTED_CHARACTERS}]")
_TOKEN_SEPARATOR = re.compile(rf"[^0-9{TEN_TOKEN}{ELEVEN_TOKEN}-]+")

_NAMED_TOKENS: dict[str, int] = {TEN_TOKEN: 10, ELEVEN_TOKEN: 11}


def _check_alphabet(text: str, lowered: str) -> None:
    """Raise if any character falls outside the accepted alphabet."""
    bad_chars = list(dict.fromkeys(_INVALID_CHARACTER.findall(lowered)))
    if not bad_chars:
        return

    chars = ", ".join(f"'{c}'" for c in bad_chars)
    message = ErrorMessages.INVALID_CHARACTERS.format(text=text, chars=chars)
    raise error_for(
        [ParseIssue(ParseIssueCode.INVALID_CHARACTER, "".join(bad_chars), message)]
    )


def _parse_token(token: str) -> int | ParseIssue:
    """Parse one token to a pitch class, or describe why it can't be."""
    if token in _NAMED_TOKENS:
        return _NAMED_TOKENS[token]

    try:
        value = int(token)
    except ValueError:
        return ParseIssue(
            ParseIssueCode.MALFORMED_TOKEN,
            token,
            ErrorMessages.MALFORMED_TOKEN.format(token=token),
        )

    if not 0 <= value < PC_MODULUS:
        return ParseIssue(
            ParseIssueCode.OUT_OF_RANGE,
            token,
            ErrorMessages.OUT_OF_RANGE.format(token=token),
        )
    return value


def parse_pitch_classes(text: str | None) -> PcSet:
    """
    Parse free text into a sorted, duplicate-free pitch-class set.

    Blank input gives an empty set; deciding whether that is an error
    is left to the caller.

    Args:
        text: Pitch classes like "0 4 7" or "0,t,e"

    Returns:
        Sorted tuple of unique pitch classes in 0-11

    Raises:
        InvalidCharacterError: characters outside digits, t, e, commas,
            whitespace and hyphens
        OutOfRangePitchClassError: every bad token was a number outside 0-11
        MalformedTokenError: every bad token was unparseable
        PitchClassParseError: a mix of the two token problems above
    """
    if text is None or not text.strip():
        return ()

    lowered = text.lower()
    _check_alphabet(text, lowered)

    values: list[int] = []
    issues: list[ParseIssue] = []
    for token in _TOKEN_SEPARATOR.split(lowered):
        if not token or token == "-":
            continue
        parsed = _parse_token(token)
        if isinstance(parsed, ParseIssue):
            issues.append(parsed)
        else:
            values.append(parsed)

    if issues:
        raise error_for(issues)

    return tuple(sorted(set(values)))
