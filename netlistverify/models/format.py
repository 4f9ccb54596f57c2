"""Defines supported netlist source types."""

from enum import Enum, auto

__all__ = ["NetlistFormat"]


class NetlistFormat(Enum):
    """
    Enumeration of supported netlist sources.

    GERBER: Attributed graphical objects from a Gerber X2 copper layer.
    CADSTAR: CadStar netlist export (.ADD_TER/.TER directives).
    """

    GERBER = auto()
    CADSTAR = auto()
