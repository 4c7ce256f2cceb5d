"""Parse-time error hierarchy.

Every error names the offending token and the 1-based input line it came
from. They subclass ``ValueError`` so callers that only care about "bad
input" can catch that.
"""

from __future__ import annotations


class InputParseError(ValueError):
    """Base class for all input parsing failures."""

    kind = "invalid input"

    def __init__(self, token: str, line_number: int | None, detail: str = "") -> None:
        self.token = token
        self.line_number = line_number
        self.detail = detail
        where = f"line {line_number}" if line_number is not None else "input"
        message = f"{self.kind} at {where}: {token!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MalformedGridLine(InputParseError):
    """Grid line is missing, has the wrong token count or a non-integer value."""

    kind = "malformed grid line"


class MalformedRobotBlock(InputParseError):
    """Robot block is missing a line or its start line is badly shaped."""

    kind = "malformed robot block"


class InvalidOrientation(InputParseError):
    """Orientation token is not one of N/E/S/W."""

    kind = "invalid orientation"


class InvalidInstruction(InputParseError):
    """Instruction character is not one of L/R/F."""

    kind = "invalid instruction"
