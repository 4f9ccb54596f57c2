"""
Extracts a netlist from attributed Gerber objects.

Every pad on a copper layer written by a Gerber X2 exporter carries a
``.P`` (pin) object attribute and, when connected, a ``.N`` (net)
attribute. Collecting those pairs yields the board netlist as the
fabricator sees it.
"""

import logging
from collections import Counter
from typing import Iterable, Iterator

from netlistverify.errors import MalformedAttributeError, UpstreamParseError
from netlistverify.models.gerber import (
    NET_ATTRIBUTE,
    NO_CONNECT,
    PIN_ATTRIBUTE,
    GerberSource,
    GraphicalObject,
)
from netlistverify.models.terminal import NetlistSet, NetTerminal

__all__ = ["GerberNetlistExtractor", "extract_gerber_netlist", "iter_source_objects"]

logger = logging.getLogger(__name__)


class GerberNetlistExtractor:
    """
    Turns a graphical object stream into a canonical NetlistSet.

    The same pad is often drawn by several overlapping primitives, so
    terminals are deduplicated before nets are counted. Nets left with a
    single terminal are dropped because netlist exports omit them.
    """

    def __init__(
        self,
        pin_key: str = PIN_ATTRIBUTE,
        net_key: str = NET_ATTRIBUTE,
        no_connect: str = NO_CONNECT,
        drop_single_pin_nets: bool = True,
    ):
        """
        :param pin_key: Attribute holding (ref des, pin).
        :param net_key: Attribute holding the net name.
        :param no_connect: Net value marking an unconnected pad.
        :param drop_single_pin_nets: Remove nets with exactly one terminal.
        """
        self.pin_key = pin_key
        self.net_key = net_key
        self.no_connect = no_connect
        self.drop_single_pin_nets = drop_single_pin_nets

    def terminal_for(self, graphical_object: GraphicalObject) -> NetTerminal | None:
        """
        Builds the terminal for one object.

        :param graphical_object: Object from the Gerber parser.
        :return: NetTerminal, or None if the object is not a connected pad.
        :raises MalformedAttributeError: If the pin attribute has fewer than 2 values.
        """
        attributes = graphical_object.attributes
        pin_attribute = attributes.get_attribute(self.pin_key)
        if pin_attribute is None:
            return None

        net_attribute = attributes.get_attribute(self.net_key)
        if net_attribute is None or net_attribute.first is None or net_attribute.first == self.no_connect:
            return None

        if len(pin_attribute.values) < 2:
            raise MalformedAttributeError(pin_attribute.name, pin_attribute.values)

        ref_des, pin = pin_attribute.values[0], pin_attribute.values[1]
        return NetTerminal(net_name=net_attribute.first, ref_des=ref_des, pin=pin)

    def extract(self, objects: Iterable[GraphicalObject]) -> NetlistSet:
        """
        Extracts the netlist from a finite object stream.

        :param objects: Read-once iterable of graphical objects.
        :return: Sorted, deduplicated NetlistSet without single-pin nets.
        :raises MalformedAttributeError: On a pin attribute with fewer than 2 values.
        """
        unique: dict[str, NetTerminal] = {}
        pin_counts: Counter[str] = Counter()
        skipped = duplicates = 0

        for graphical_object in objects:
            terminal = self.terminal_for(graphical_object)
            if terminal is None:
                skipped += 1
                continue
            if terminal.key in unique:
                duplicates += 1
                continue
            unique[terminal.key] = terminal
            pin_counts[terminal.net_name] += 1

        netlist = NetlistSet.from_terminals(unique.values())
        logger.debug(
            "Collected %d unique terminals (%d objects skipped, %d duplicates)", len(netlist), skipped, duplicates
        )

        if not self.drop_single_pin_nets:
            return netlist

        single_pin_nets = {name for name, count in pin_counts.items() if count == 1}
        if single_pin_nets:
            logger.debug("Dropping %d single-pin nets", len(single_pin_nets))
        return NetlistSet(terminals=tuple(t for t in netlist if t.net_name not in single_pin_nets))


def iter_source_objects(gerber_source: GerberSource) -> Iterator[GraphicalObject]:
    """
    Iterates a Gerber source, re-raising its failures as UpstreamParseError.

    Errors raised while consuming the objects happen outside this
    generator's frame and pass through untouched.

    :param gerber_source: External Gerber parser.
    :return: Iterator over the parser's graphical objects.
    """
    try:
        objects = iter(gerber_source.objects())
    except Exception as exc:
        raise UpstreamParseError(f"Gerber parsing failed: {exc}") from exc
    while True:
        try:
            graphical_object = next(objects)
        except StopIteration:
            return
        except Exception as exc:
            raise UpstreamParseError(f"Gerber parsing failed: {exc}") from exc
        yield graphical_object


def extract_gerber_netlist(objects: Iterable[GraphicalObject]) -> NetlistSet:
    """
    Extracts a netlist with the standard X2 attribute names.

    :param objects: Read-once iterable of graphical objects.
    :return: Canonical NetlistSet.
    """
    return GerberNetlistExtractor().extract(objects)
