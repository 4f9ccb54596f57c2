"""
Defines CadStar netlist export parsing.

Only the terminal directives matter for connectivity::

    .ADD_TER U1 1 "Net-(U1-Pad1)"
    .TER     R1 2
             C3 1

``.ADD_TER`` opens a net with its first terminal, ``.TER`` adds a terminal
to the open net, and the lines directly following a ``.TER`` line list
further terminals until a blank line or another directive.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Iterable

from netlistverify.errors import MalformedCadStarLineError
from netlistverify.ingestor.common import open_text
from netlistverify.models.terminal import NetlistSet, NetTerminal

__all__ = [
    "CadStarState",
    "CadStarContext",
    "CadStarLineParser",
    "parse_cadstar_netlist",
    "read_cadstar_netlist",
]

logger = logging.getLogger(__name__)

ADD_TERMINAL = ".ADD_TER"
TERMINAL = ".TER"
DIRECTIVE_PREFIX = "."
NET_NAME_QUOTE = '"'


class CadStarState(Enum):
    """
    States of the terminal-list state machine.

    IDLE: No net opened yet.
    IN_NET: A net is open; bare lines are ignored.
    MAYBE_CONTINUATION: Last line was .TER or a continuation; bare lines are terminals.
    """

    IDLE = auto()
    IN_NET = auto()
    MAYBE_CONTINUATION = auto()


@dataclass(slots=True)
class CadStarContext:
    """
    Maintains state for the CadStar parser finite state machine.

    :param state: Current state.
    :param net_name: Name of the most recently opened net.
    :param line_number: 1-indexed number of the line being processed.
    :param terminals: Terminals emitted so far, in file order.
    """

    state: CadStarState = CadStarState.IDLE
    net_name: str | None = None
    line_number: int = 0
    terminals: list[NetTerminal] = field(default_factory=list)


class CadStarLineParser:
    """
    Line-by-line parser for CadStar netlist exports.

    Feed lines in file order with ``feed`` and collect the result with
    ``result``, or call ``parse`` for a whole stream.
    """

    def __init__(self):
        self.context = CadStarContext()

    def feed(self, raw_line: str) -> NetTerminal | None:
        """
        Processes one physical line.

        :param raw_line: Line with or without its line terminator.
        :return: The terminal emitted by this line, if any.
        :raises MalformedCadStarLineError: If a terminal line lacks its fields.
        """
        self.context.line_number += 1
        line = raw_line.strip()

        if not line:
            self._close_continuation()
            return None
        if line.startswith(ADD_TERMINAL):
            return self._handle_add_terminal(line)
        if line.startswith(TERMINAL):
            return self._handle_terminal(line)
        if line.startswith(DIRECTIVE_PREFIX):
            self._close_continuation()
            return None
        if self.context.state is CadStarState.MAYBE_CONTINUATION:
            return self._emit(*self._split_ref_des_pin(line, line))
        return None

    def result(self) -> NetlistSet:
        """
        Terminals seen so far in canonical order.

        :return: Sorted NetlistSet (not deduplicated).
        """
        return NetlistSet.from_terminals(self.context.terminals)

    def parse(self, lines: Iterable[str]) -> NetlistSet:
        """
        Parses a complete CadStar export.

        :param lines: Lines of the export, in file order.
        :return: Sorted NetlistSet.
        :raises MalformedCadStarLineError: On the first malformed terminal line.
        """
        for line in lines:
            self.feed(line)
        netlist = self.result()
        logger.debug("Parsed %d terminals from %d lines", len(netlist), self.context.line_number)
        return netlist

    def _handle_add_terminal(self, line: str) -> NetTerminal:
        fields = line[len(ADD_TERMINAL):].split(maxsplit=2)
        if len(fields) != 3:
            raise self._malformed(line, f"{ADD_TERMINAL} needs a ref des, a pin and a quoted net name")
        ref_des, pin, quoted_name = fields
        quoted_name = quoted_name.strip()
        if len(quoted_name) < 2 or not (quoted_name.startswith(NET_NAME_QUOTE) and quoted_name.endswith(NET_NAME_QUOTE)):
            raise self._malformed(line, "net name must be enclosed in double quotes")

        self.context.net_name = quoted_name[1:-1]
        self.context.state = CadStarState.IN_NET
        return self._emit(ref_des, pin)

    def _handle_terminal(self, line: str) -> NetTerminal:
        if self.context.net_name is None:
            raise self._malformed(line, f"{TERMINAL} before any {ADD_TERMINAL}")
        ref_des, pin = self._split_ref_des_pin(line[len(TERMINAL):], line)
        self.context.state = CadStarState.MAYBE_CONTINUATION
        return self._emit(ref_des, pin)

    def _split_ref_des_pin(self, fields_text: str, line: str) -> tuple[str, str]:
        fields = fields_text.split(maxsplit=1)
        if len(fields) != 2:
            raise self._malformed(line, "expected a ref des and a pin")
        return fields[0], fields[1].strip()

    def _emit(self, ref_des: str, pin: str) -> NetTerminal:
        terminal = NetTerminal(net_name=self.context.net_name, ref_des=ref_des, pin=pin)
        self.context.terminals.append(terminal)
        return terminal

    def _close_continuation(self) -> None:
        if self.context.state is CadStarState.MAYBE_CONTINUATION:
            self.context.state = CadStarState.IN_NET

    def _malformed(self, line: str, reason: str) -> MalformedCadStarLineError:
        return MalformedCadStarLineError(self.context.line_number, line, reason)


def parse_cadstar_netlist(lines: Iterable[str]) -> NetlistSet:
    """
    Parses CadStar export lines into a canonical NetlistSet.

    :param lines: Lines of the export, in file order.
    :return: Sorted NetlistSet.
    """
    return CadStarLineParser().parse(lines)


def read_cadstar_netlist(filepath: str | Path) -> NetlistSet:
    """
    Reads a CadStar export from disk (plain text or gzip).

    :param filepath: Path to the export (e.g. 'board.frp' or 'board.frp.gz').
    :return: Sorted NetlistSet.
    """
    with open_text(filepath) as stream:
        return parse_cadstar_netlist(stream)
