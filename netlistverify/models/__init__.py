"""Data structures shared by every netlist source."""

from .comparison import ComparisonResult, ContentMismatch, Match, SizeMismatch
from .format import NetlistFormat
from .gerber import (
    NET_ATTRIBUTE,
    NO_CONNECT,
    PIN_ATTRIBUTE,
    Attribute,
    AttributeDictionary,
    AttributedObject,
    GerberSource,
    GraphicalObject,
)
from .terminal import NetlistSet, NetTerminal, strip_net_braces

__all__ = [
    "Attribute",
    "AttributeDictionary",
    "AttributedObject",
    "ComparisonResult",
    "ContentMismatch",
    "GerberSource",
    "GraphicalObject",
    "Match",
    "NET_ATTRIBUTE",
    "NO_CONNECT",
    "NetTerminal",
    "NetlistFormat",
    "NetlistSet",
    "PIN_ATTRIBUTE",
    "SizeMismatch",
    "strip_net_braces",
]
