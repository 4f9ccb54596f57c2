"""
Factory functions for building netlist sets from any supported source.

Wires a NetlistFormat to the matching extractor so callers can treat both
sides of a comparison uniformly.
"""

from pathlib import Path
from typing import Any

from netlistverify.ingestor.cadstar import parse_cadstar_netlist, read_cadstar_netlist
from netlistverify.ingestor.gerber import GerberNetlistExtractor, iter_source_objects
from netlistverify.models import NetlistFormat, NetlistSet

__all__ = ["get_netlist_set"]


def get_netlist_set(source: Any, netlist_format: NetlistFormat) -> NetlistSet:
    """
    Builds the canonical NetlistSet for a source.

    GERBER sources are GerberSource parsers or plain iterables of graphical
    objects. CADSTAR sources are file paths or iterables of lines.

    :param source: Format-specific source.
    :param netlist_format: Format of the source.
    :return: Canonical NetlistSet.
    :raises ValueError: If format is unsupported.
    """
    match netlist_format:
        case NetlistFormat.GERBER:
            if hasattr(source, "objects"):
                source = iter_source_objects(source)
            return GerberNetlistExtractor().extract(source)
        case NetlistFormat.CADSTAR:
            if isinstance(source, (str, Path)):
                return read_cadstar_netlist(source)
            return parse_cadstar_netlist(source)
        case _:
            raise ValueError(f"Unsupported netlist format: {netlist_format}")
