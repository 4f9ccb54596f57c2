"""
Hypothesis property-based tests for cross-format netlist equivalence.

The core property: rendering the same board connectivity as Gerber pad
objects (with duplicate primitives, braced names, unconnected pads and
single-pin nets) and as a CadStar export must yield identical canonical
netlist sets.
"""
from __future__ import annotations

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from conftest import make_object
from netlistverify.ingestor.cadstar import parse_cadstar_netlist
from netlistverify.ingestor.gerber import extract_gerber_netlist
from netlistverify.models import Match
from netlistverify.verification import compare


# ------------------------------------------------------------------
# Strategies
# ------------------------------------------------------------------

# Net names: no whitespace, braces, quotes or commas
_NET_CHARS = st.sampled_from(string.ascii_uppercase + string.digits + "_-+~/()")
_net_name = st.text(_NET_CHARS, min_size=1, max_size=10).filter(lambda s: s != "N/C")

_ref_des = st.builds(lambda prefix, n: f"{prefix}{n}", st.sampled_from("RCLUJQD"), st.integers(1, 40))
_pin = st.integers(1, 48).map(str)


@st.composite
def board(draw: st.DrawFn) -> dict[str, list[tuple[str, str]]]:
    """Net name -> pins, every net with at least two pins, every pin on one net."""
    names = draw(st.lists(_net_name, min_size=1, max_size=6, unique=True))
    nets: dict[str, list[tuple[str, str]]] = {}
    used: set[tuple[str, str]] = set()
    for name in names:
        pins = draw(st.lists(st.tuples(_ref_des, _pin), min_size=2, max_size=6, unique=True))
        pins = [p for p in pins if p not in used]
        if len(pins) < 2:
            continue
        used.update(pins)
        nets[name] = pins
    return nets


def render_cadstar(nets: dict[str, list[tuple[str, str]]]) -> list[str]:
    lines = [".HEA", '.APP "Eeschema"', ""]
    for name, pins in nets.items():
        (ref_des, pin), *rest = pins
        lines.append(f'.ADD_TER {ref_des} {pin} "{name}"')
        if rest:
            (ref_des, pin), *continuation = rest
            lines.append(f".TER     {ref_des} {pin}")
            lines.extend(f"         {r} {p}" for r, p in continuation)
        lines.append("")
    lines.append(".END")
    return lines


@st.composite
def gerber_objects(draw: st.DrawFn, nets: dict[str, list[tuple[str, str]]]) -> list:
    objects = [make_object(net=["GND"], kind="region"), make_object(pin=["TP1", "1"], net=["N/C"])]
    objects.append(make_object(pin=["TP2", "1"], net=["lonely"]))
    for name, pins in nets.items():
        for ref_des, pin in pins:
            net_value = f"{{{name}}}" if draw(st.booleans()) else name
            copies = draw(st.integers(1, 3))
            objects.extend(make_object(pin=[ref_des, pin], net=[net_value]) for _ in range(copies))
    return draw(st.permutations(objects))


@st.composite
def board_pair(draw: st.DrawFn):
    nets = draw(board())
    return nets, draw(gerber_objects(nets))


# ------------------------------------------------------------------
# Properties
# ------------------------------------------------------------------


class TestCrossFormatEquivalence:
    @given(pair=board_pair())
    @settings(max_examples=150)
    def test_both_sources_agree(self, pair):
        nets, objects = pair
        actual = extract_gerber_netlist(objects)
        expected = parse_cadstar_netlist(render_cadstar(nets))
        assert actual == expected
        assert compare(actual, expected) == Match(count=sum(len(p) for p in nets.values()))

    @given(pair=board_pair())
    @settings(max_examples=100)
    def test_output_is_sorted_and_unique(self, pair):
        _, objects = pair
        keys = extract_gerber_netlist(objects).keys()
        assert list(keys) == sorted(set(keys))

    @given(pair=board_pair())
    @settings(max_examples=100)
    def test_no_single_pin_nets(self, pair):
        _, objects = pair
        nets = extract_gerber_netlist(objects).nets()
        assert all(len(members) >= 2 for members in nets.values())
        assert "lonely" not in nets

    @given(pair=board_pair(), data=st.data())
    @settings(max_examples=100)
    def test_object_order_irrelevant(self, pair, data):
        _, objects = pair
        shuffled = data.draw(st.permutations(objects))
        assert extract_gerber_netlist(shuffled) == extract_gerber_netlist(objects)

    @given(nets=board())
    @settings(max_examples=100)
    def test_cadstar_parse_is_deterministic(self, nets):
        lines = render_cadstar(nets)
        assert parse_cadstar_netlist(lines) == parse_cadstar_netlist(lines)
