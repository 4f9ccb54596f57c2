"""
Orchestration layer for verifying a Gerber netlist against an export.

The Gerber side is extracted on a worker pool while the CadStar export is
read on the calling thread. The caller then blocks on the pending result,
so a failed Gerber parse is surfaced before any comparison takes place.
"""

import logging
from dataclasses import dataclass
from multiprocessing.pool import ThreadPool
from pathlib import Path
from typing import Iterable

from netlistverify.graph_analysis.terminal_graph import NetDiff, diff_nets
from netlistverify.ingestor.cadstar import read_cadstar_netlist
from netlistverify.ingestor.gerber import GerberNetlistExtractor, iter_source_objects
from netlistverify.models.comparison import ComparisonResult
from netlistverify.models.gerber import GerberSource, GraphicalObject
from netlistverify.models.terminal import NetlistSet
from netlistverify.verification.comparator import compare

__all__ = ["VerificationReport", "NetlistVerifier", "IterableGerberSource", "verify_netlists"]

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class VerificationReport:
    """
    Encapsulates the result of one verification run.

    :param actual: Netlist extracted from the Gerber file.
    :param expected: Netlist read from the reference export.
    :param result: Outcome of the comparison.
    """

    actual: NetlistSet
    expected: NetlistSet
    result: ComparisonResult

    @property
    def ok(self) -> bool:
        return self.result.ok

    def net_diff(self) -> NetDiff:
        """
        Net-level differences, for diagnosing a failed comparison.

        :return: NetDiff between actual and expected.
        """
        return diff_nets(self.actual, self.expected)


class NetlistVerifier:
    """
    Composes the following pipeline:
    1. Extract the Gerber netlist in the background (GerberNetlistExtractor)
    2. Read the expected netlist (CadStarLineParser)
    3. Wait for the Gerber side, then compare (compare)
    """

    def __init__(self, extractor: GerberNetlistExtractor | None = None, num_workers: int = 1):
        """
        :param extractor: Gerber extractor to use (default: standard X2 attributes).
        :param num_workers: Size of the background pool.
        """
        self.extractor = extractor or GerberNetlistExtractor()
        self.num_workers = num_workers

    def extract_gerber(self, gerber_source: GerberSource) -> NetlistSet:
        """
        Extracts the Gerber netlist on the calling thread.

        :param gerber_source: External Gerber parser.
        :return: Canonical NetlistSet.
        :raises UpstreamParseError: If the Gerber parser fails.
        :raises MalformedAttributeError: On a pin attribute with fewer than 2 values.
        """
        return self.extractor.extract(iter_source_objects(gerber_source))

    def verify(
        self,
        gerber_source: GerberSource,
        cadstar_path: str | Path,
        timeout: float | None = None,
    ) -> VerificationReport:
        """
        Extracts both netlists and compares them.

        :param gerber_source: External Gerber parser for the copper layer.
        :param cadstar_path: Path to the CadStar export.
        :param timeout: Optional seconds to wait for the Gerber side.
        :return: VerificationReport holding both sets and the result.
        :raises UpstreamParseError: If the Gerber parser fails.
        :raises MalformedAttributeError: On a malformed pin attribute.
        :raises MalformedCadStarLineError: On a malformed export line.
        """
        with ThreadPool(processes=self.num_workers) as pool:
            logger.info("Parsing of Gerber file started...")
            pending = pool.apply_async(self.extract_gerber, (gerber_source,))

            logger.info("Reading expected net list...")
            expected = read_cadstar_netlist(cadstar_path)
            logger.info("Reading of expected net list completed (%d terminals).", len(expected))

            actual = pending.get(timeout)
        logger.info("Extraction of Gerber net list completed (%d terminals).", len(actual))

        logger.info("Comparing Gerber net list with expected net list...")
        result = compare(actual, expected)
        if result.ok:
            logger.info(result.message)
        else:
            logger.error(result.message)
        return VerificationReport(actual=actual, expected=expected, result=result)


def verify_netlists(
    gerber_source: GerberSource,
    cadstar_path: str | Path,
    timeout: float | None = None,
) -> VerificationReport:
    """
    Verify a Gerber copper layer against a CadStar export with default settings.

    :param gerber_source: External Gerber parser for the copper layer.
    :param cadstar_path: Path to the CadStar export.
    :param timeout: Optional seconds to wait for the Gerber side.
    :return: VerificationReport.
    """
    return NetlistVerifier().verify(gerber_source, cadstar_path, timeout=timeout)


class IterableGerberSource:
    """GerberSource over objects that were already parsed."""

    def __init__(self, objects: Iterable[GraphicalObject]):
        self._objects = objects

    def objects(self) -> Iterable[GraphicalObject]:
        return self._objects
