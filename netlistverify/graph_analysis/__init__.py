from .terminal_graph import GraphStatistics, NetDiff, TerminalGraph, connectivity_equivalent, diff_nets

__all__ = ["GraphStatistics", "NetDiff", "TerminalGraph", "connectivity_equivalent", "diff_nets"]
