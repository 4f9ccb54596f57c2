import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, TextIO, Tuple

import networkx as nx

from netlistverify.models.terminal import NetlistSet

logger = logging.getLogger(__name__)

Pin = Tuple[str, str]


@dataclass(frozen=True)
class GraphStatistics:
    """Fanout counts distinct components per net."""

    net_count: int
    component_count: int
    average_fanout: float
    highest_fanout_net: str | None
    highest_fanout: int


@dataclass(frozen=True)
class NetDiff:
    """Net-level differences between two netlists, keyed by net name."""

    only_in_actual: tuple[str, ...] = ()
    only_in_expected: tuple[str, ...] = ()
    changed: Dict[str, tuple[tuple[Pin, ...], tuple[Pin, ...]]] = field(default_factory=dict)

    @property
    def empty(self) -> bool:
        return not (self.only_in_actual or self.only_in_expected or self.changed)


class TerminalGraph:
    def __init__(self):
        self.nets: Dict[str, List[Pin]] = {}

    @classmethod
    def from_netlist_set(cls, netlist: NetlistSet) -> "TerminalGraph":
        graph = cls()
        for terminal in netlist:
            graph.add_connection(terminal.net_name, (terminal.ref_des, terminal.pin))
        return graph

    def add_connection(self, net_name: str, pin: Pin) -> None:
        self.nets.setdefault(net_name, []).append(pin)

    def statistics(self) -> GraphStatistics:
        graph = self._build_nx_graph()
        degrees = self._get_net_degrees(graph)
        components = [n for n, attr in graph.nodes(data=True) if attr.get("type") == "component"]
        if not degrees:
            return GraphStatistics(0, len(components), 0.0, None, 0)
        max_net = max(degrees, key=degrees.get)
        return GraphStatistics(
            net_count=len(degrees),
            component_count=len(components),
            average_fanout=sum(degrees.values()) / len(degrees),
            highest_fanout_net=max_net,
            highest_fanout=degrees[max_net],
        )

    def analyze_connectivity(self) -> GraphStatistics:
        stats = self.statistics()
        logger.info("Total Nets: %d", stats.net_count)
        if not stats.net_count:
            logger.info("Graph is empty.")
            return stats
        logger.info("Average Fanout: %.2f", stats.average_fanout)
        logger.info("Highest Fanout Net: %s (%d connections)", stats.highest_fanout_net, stats.highest_fanout)
        return stats

    def pin_partition(self) -> Set[frozenset]:
        """Groups of (ref des, pin) pairs that are electrically connected, independent of net names."""
        graph = nx.Graph()
        for net_name, pins in self.nets.items():
            graph.add_node(("net", net_name))
            for pin in pins:
                graph.add_edge(("net", net_name), ("pin", pin))
        return {
            frozenset(name for kind, name in component if kind == "pin")
            for component in nx.connected_components(graph)
        }

    def _build_nx_graph(self) -> nx.Graph:
        graph = nx.Graph()
        self._populate_nx_graph(graph)
        return graph

    def _populate_nx_graph(self, graph: nx.Graph) -> None:
        processed_components: Set[str] = set()
        for net_name, pins in self.nets.items():
            graph.add_node(self._net_node(net_name), type="net", xlabel=net_name)
            for ref_des, _ in pins:
                if ref_des not in processed_components:
                    processed_components.add(ref_des)
                    graph.add_node(self._component_node(ref_des), type="component", label=ref_des)
                # Parallel pins of one component on one net collapse into a single edge
                graph.add_edge(self._net_node(net_name), self._component_node(ref_des))

    def _get_net_degrees(self, graph: nx.Graph) -> Dict[str, int]:
        nodes = [n for n, attr in graph.nodes(data=True) if attr.get("type") == "net"]
        return {graph.nodes[n]["xlabel"]: degree for n, degree in graph.degree(nodes)}

    @staticmethod
    def _net_node(net_name: str) -> str:
        return f"net:{net_name}"

    @staticmethod
    def _component_node(ref_des: str) -> str:
        return f"ref:{ref_des}"

    def write_dot(self, f: TextIO) -> None:
        graph = self._build_nx_graph()
        f.write("graph Netlist {\n")
        f.write('  overlap="false";\n')
        f.write('  splines="true";\n')
        for node, attrs in graph.nodes(data=True):
            f.write(f'  "{node}" [{self._format_dot_attrs(attrs)}];\n')
        for u, v in graph.edges():
            f.write(f'  "{u}" -- "{v}";\n')
        f.write("}\n")

    def _format_dot_attrs(self, attrs: Dict[str, Any]) -> str:
        return ", ".join([f'{k}="{v}"' for k, v in attrs.items()])


def connectivity_equivalent(actual: NetlistSet, expected: NetlistSet) -> bool:
    """True when both netlists connect the same pins together, whatever the nets are called."""
    return TerminalGraph.from_netlist_set(actual).pin_partition() == TerminalGraph.from_netlist_set(expected).pin_partition()


def diff_nets(actual: NetlistSet, expected: NetlistSet) -> NetDiff:
    actual_nets = TerminalGraph.from_netlist_set(actual).nets
    expected_nets = TerminalGraph.from_netlist_set(expected).nets
    changed = {
        name: (tuple(actual_nets[name]), tuple(expected_nets[name]))
        for name in sorted(actual_nets.keys() & expected_nets.keys())
        if sorted(actual_nets[name]) != sorted(expected_nets[name])
    }
    return NetDiff(
        only_in_actual=tuple(sorted(actual_nets.keys() - expected_nets.keys())),
        only_in_expected=tuple(sorted(expected_nets.keys() - actual_nets.keys())),
        changed=changed,
    )
