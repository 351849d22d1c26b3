"""
Parse errors - everything the parser can reject.

Problems are collected as ParseIssue records and raised together, so the
user sees every bad token at once instead of only the first.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_pcset.constants import ParseIssueCode


@dataclass(frozen=True)
class ParseIssue:
    """A single problem found in the input text."""

    code: ParseIssueCode
    token: str
    message: str

    def __str__(self) -> str:
        return f"[{self.code.value.upper()}] {self.message}"


class PitchClassParseError(ValueError):
    """
    Input text could not be turned into pitch classes.

    Raised directly when the issues are of mixed kinds; otherwise one of
    the subclasses below is raised.
    """

    def __init__(self, issues: list[ParseIssue]) -> None:
        self.issues = list(issues)
        super().__init__("\n".join(issue.message for issue in self.issues))

    @property
    def tokens(self) -> list[str]:
        """The offending tokens, in input order."""
        return [issue.token for issue in self.issues]

    def to_dict(self) -> list[dict[str, str]]:
        """Issues as plain dicts for JSON responses."""
        return [
            {"code": issue.code.value, "token": issue.token, "message": issue.message}
            for issue in self.issues
        ]


class InvalidCharacterError(PitchClassParseError):
    """Input contains characters outside the accepted alphabet."""


class OutOfRangePitchClassError(PitchClassParseError):
    """A numeric token falls outside 0-11."""


class MalformedTokenError(PitchClassParseError):
    """A token is made of accepted characters but is not a number, 't' or 'e'."""


_ERROR_FOR_CODE: dict[ParseIssueCode, type[PitchClassParseError]] = {
    ParseIssueCode.INVALID_CHARACTER: InvalidCharacterError,
    ParseIssueCode.OUT_OF_RANGE: OutOfRangePitchClassError,
    ParseIssueCode.MALFORMED_TOKEN: MalformedTokenError,
}


def error_for(issues: list[ParseIssue]) -> PitchClassParseError:
    """Pick the most specific error class that covers every issue."""
    codes = {issue.code for issue in issues}
    if len(codes) == 1:
        return _ERROR_FOR_CODE[codes.pop()](issues)
    return PitchClassParseError(issues)
