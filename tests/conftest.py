from pathlib import Path

import pytest

from netlistverify.models import AttributeDictionary, AttributedObject

DATA_DIR = Path(__file__).parent / "data"

BOARD_KEYS = (
    "+5V,C1,1",
    "+5V,R1,1",
    "+5V,U1,8",
    "GND,C1,2",
    "GND,U1,4",
    "~RESET,R1,2",
    "~RESET,R2,1",
    "~RESET,U1,2",
    "~RESET,U1,3",
)


def make_object(pin=None, net=None, kind="flash"):
    """Build an AttributedObject; ``pin``/``net`` are value lists or None for 'absent'."""
    values = {}
    if pin is not None:
        values[".P"] = pin
    if net is not None:
        values[".N"] = net
    return AttributedObject(attributes=AttributeDictionary.of(values), kind=kind)


@pytest.fixture
def obj():
    return make_object


@pytest.fixture
def board_frp() -> Path:
    return DATA_DIR / "board.frp"


@pytest.fixture
def board_keys() -> tuple[str, ...]:
    return BOARD_KEYS


@pytest.fixture
def board_objects():
    """Top copper objects of the board described by data/board.frp."""
    return [
        # copper fill and a plain track: no pin attribute
        make_object(net=["GND"], kind="region"),
        make_object(net=["+5V"], kind="draw"),
        make_object(pin=["U1", "8", "V+"], net=["+5V"]),
        make_object(pin=["C1", "1"], net=["+5V"]),
        make_object(pin=["R1", "1"], net=["+5V"]),
        make_object(pin=["U1", "4", "V-"], net=["GND"]),
        make_object(pin=["C1", "2"], net=["GND"]),
        # the same pad emitted twice (aperture flash plus region)
        make_object(pin=["C1", "2"], net=["GND"], kind="region"),
        make_object(pin=["U1", "2", "-"], net=["~{RESET}"]),
        make_object(pin=["U1", "3", "+"], net=["~{RESET}"]),
        make_object(pin=["R1", "2"], net=["~{RESET}"]),
        make_object(pin=["R2", "1"], net=["~{RESET}"]),
        # unconnected pads
        make_object(pin=["U1", "5"], net=["N/C"]),
        make_object(pin=["U1", "6"], net=[]),
        make_object(pin=["U1", "7"]),
        # single-pin net not present in the export
        make_object(pin=["R2", "2"], net=["Net-(R2-Pad2)"]),
    ]
