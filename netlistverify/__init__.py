"""
NetlistVerify: Gerber netlist verification.

Extracts the netlist carried by Gerber X2 object attributes, reads the
reference netlist from a CadStar export and compares the two.
"""

from netlistverify.errors import (
    MalformedAttributeError,
    MalformedCadStarLineError,
    NetlistVerifyError,
    UpstreamParseError,
)
from netlistverify.ingestor.cadstar import parse_cadstar_netlist, read_cadstar_netlist
from netlistverify.ingestor.factory import get_netlist_set
from netlistverify.ingestor.gerber import GerberNetlistExtractor, extract_gerber_netlist
from netlistverify.ingestor.reader import NetlistVerifier, VerificationReport, verify_netlists
from netlistverify.models import NetlistFormat, NetlistSet, NetTerminal
from netlistverify.verification import compare

__all__ = [
    "GerberNetlistExtractor",
    "MalformedAttributeError",
    "MalformedCadStarLineError",
    "NetTerminal",
    "NetlistFormat",
    "NetlistSet",
    "NetlistVerifier",
    "NetlistVerifyError",
    "UpstreamParseError",
    "VerificationReport",
    "compare",
    "extract_gerber_netlist",
    "get_netlist_set",
    "parse_cadstar_netlist",
    "read_cadstar_netlist",
    "verify_netlists",
]
