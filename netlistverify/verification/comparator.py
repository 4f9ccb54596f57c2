"""
Compares two canonical netlist sets.

Both inputs must already be in canonical order; the comparison walks them
in lockstep and stops at the first difference.
"""

import logging

from netlistverify.models.comparison import ComparisonResult, ContentMismatch, Match, SizeMismatch
from netlistverify.models.terminal import NetlistSet

__all__ = ["compare"]

logger = logging.getLogger(__name__)


def compare(actual: NetlistSet, expected: NetlistSet) -> ComparisonResult:
    """
    Compares the Gerber-derived netlist against the reference netlist.

    :param actual: Netlist extracted from the Gerber file.
    :param expected: Netlist from the reference export.
    :return: Match, SizeMismatch or ContentMismatch.
    """
    if len(actual) != len(expected):
        result = SizeMismatch(actual=len(actual), expected=len(expected))
        logger.debug(result.message)
        return result

    for index, (actual_terminal, expected_terminal) in enumerate(zip(actual, expected)):
        if actual_terminal.key != expected_terminal.key:
            result = ContentMismatch(index=index, actual=actual_terminal, expected=expected_terminal)
            logger.debug("%s (index %d)", result.message, index)
            return result

    return Match(count=len(actual))
