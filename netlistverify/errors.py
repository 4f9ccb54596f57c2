"""
Base error hierarchy for netlist extraction and verification.

Every structural input error aborts the extraction that raised it. Callers
can catch ``NetlistVerifyError`` to handle all of them at once.
"""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "NetlistVerifyError",
    "UpstreamParseError",
    "MalformedAttributeError",
    "MalformedCadStarLineError",
]


class NetlistVerifyError(Exception):
    """Base class for all netlist verification errors."""


class UpstreamParseError(NetlistVerifyError):
    """Raised when the external Gerber parser fails. The original error is the ``__cause__``."""


class MalformedAttributeError(NetlistVerifyError):
    """Raised when a pin attribute does not carry both a reference designator and a pin."""

    def __init__(self, name: str, values: Sequence[str]):
        self.name = name
        self.values = tuple(values)
        super().__init__(
            f"Attribute {name} needs at least 2 values (ref des, pin), got {len(self.values)}: {list(self.values)}"
        )


class MalformedCadStarLineError(NetlistVerifyError):
    """Raised when a CadStar terminal line lacks its expected fields."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line!r}")
