"""Defines the canonical net terminal records shared by every netlist source.

A net terminal is one (net, reference designator, pin) membership. Both
extraction paths reduce their input to a sorted ``NetlistSet`` so that two
sets can be compared element by element.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, TextIO, overload

__all__ = ["NetTerminal", "NetlistSet", "strip_net_braces"]

_NET_BRACES = str.maketrans("", "", "{}")
KEY_SEPARATOR = ","


def strip_net_braces(net_name: str) -> str:
    """
    Removes every curly brace from a net name.

    KiCad writes inverted signals as ``~{NAME}`` in Gerber attributes but as
    ``~NAME`` everywhere else.

    :param net_name: Raw net name.
    :return: Net name without ``{`` and ``}``.
    """
    return net_name.translate(_NET_BRACES)


@dataclass(slots=True, frozen=True)
class NetTerminal:
    """
    One pin's membership in one electrical net.

    :param net_name: Net name, braces stripped on construction.
    :param ref_des: Component reference designator (e.g. 'U3').
    :param pin: Component-local pin identifier (e.g. '14').
    """

    net_name: str
    ref_des: str
    pin: str

    def __post_init__(self):
        object.__setattr__(self, "net_name", strip_net_braces(self.net_name))

    @property
    def key(self) -> str:
        """
        The serialized form used for deduplication and ordering.

        :return: ``"net_name,ref_des,pin"``.
        """
        return KEY_SEPARATOR.join((self.net_name, self.ref_des, self.pin))

    def __str__(self) -> str:
        return self.key

    def __lt__(self, other: "NetTerminal") -> bool:
        if not isinstance(other, NetTerminal):
            return NotImplemented
        return self.key < other.key


@dataclass(slots=True, frozen=True)
class NetlistSet:
    """
    An immutable, sorted sequence of net terminals.

    Use ``from_terminals`` to build one; it sorts by the canonical key but
    leaves deduplication to the producing extractor.

    :param terminals: Terminals in canonical order.
    """

    terminals: tuple[NetTerminal, ...] = field(default_factory=tuple)

    @classmethod
    def from_terminals(cls, terminals: Iterable[NetTerminal]) -> "NetlistSet":
        """
        Sorts terminals into canonical order.

        :param terminals: Terminals in any order.
        :return: New NetlistSet.
        """
        return cls(terminals=tuple(sorted(terminals, key=lambda terminal: terminal.key)))

    def __len__(self) -> int:
        return len(self.terminals)

    def __iter__(self) -> Iterator[NetTerminal]:
        return iter(self.terminals)

    @overload
    def __getitem__(self, index: int) -> NetTerminal: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[NetTerminal, ...]: ...

    def __getitem__(self, index):
        return self.terminals[index]

    def keys(self) -> tuple[str, ...]:
        """Serialized terminals in canonical order."""
        return tuple(terminal.key for terminal in self.terminals)

    def nets(self) -> dict[str, tuple[NetTerminal, ...]]:
        """
        Groups terminals by net name.

        :return: Mapping of net name to its terminals, in canonical order.
        """
        grouped: dict[str, list[NetTerminal]] = {}
        for terminal in self.terminals:
            grouped.setdefault(terminal.net_name, []).append(terminal)
        return {name: tuple(members) for name, members in grouped.items()}

    def write(self, stream: TextIO) -> None:
        """Write one serialized terminal per line."""
        for terminal in self.terminals:
            stream.write(f"{terminal.key}\n")
