"""
Defines the outcome of comparing two netlist sets.

A mismatch is a normal result, not an exception: the comparator always
returns one of ``Match``, ``SizeMismatch`` or ``ContentMismatch``.
"""

from dataclasses import dataclass

from .terminal import NetTerminal

__all__ = ["ComparisonResult", "Match", "SizeMismatch", "ContentMismatch"]


@dataclass(slots=True, frozen=True)
class Match:
    """
    Every terminal matched.

    :param count: Number of terminals compared.
    """

    count: int

    @property
    def ok(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"All {self.count} net terminals compared successfully."


@dataclass(slots=True, frozen=True)
class SizeMismatch:
    """
    The two sets hold a different number of terminals.

    :param actual: Terminal count of the Gerber-derived set.
    :param expected: Terminal count of the reference set.
    """

    actual: int
    expected: int

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return (
            "The Gerber net list is not the same size as the expected net list "
            f"({self.actual} != {self.expected})."
        )


@dataclass(slots=True, frozen=True)
class ContentMismatch:
    """
    The sets have equal size but differ at ``index``.

    :param index: Zero-based position of the first difference.
    :param actual: Terminal from the Gerber-derived set at that position.
    :param expected: Terminal from the reference set at that position.
    """

    index: int
    actual: NetTerminal
    expected: NetTerminal

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"Net list miscompare: {self.actual}  <->  {self.expected}"


ComparisonResult = Match | SizeMismatch | ContentMismatch
