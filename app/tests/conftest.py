"""
Shared test fixtures for the Circuit Lab test suite.

All fixtures build pure-Python model objects (no UI dependencies).
"""

import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, simulation, grading, controllers)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

import pytest
from models.component import create_component
from models.wire import TerminalRef, WireData


def make_component(component_type, component_id, x=0, y=0, state=None):
    """Helper to create a grid-snapped ComponentData with minimal boilerplate."""
    return create_component(component_type, x, y, component_id, state)


def make_wire(wire_id, start_id, start_term, end_id, end_term):
    """Helper to create a WireData."""
    return WireData(
        wire_id=wire_id,
        start=TerminalRef(start_id, start_term),
        end=TerminalRef(end_id, end_term),
    )


def make_series_loop(*components):
    """
    Wire components in series: battery pos -> first -> ... -> last -> battery neg.

    The first component must be the battery; the rest are two-terminal devices.
    """
    battery, *devices = components
    wires = []
    prev = (battery.component_id, "pos")
    for device in devices:
        wires.append(make_wire(len(wires) + 1, prev[0], prev[1], device.component_id, "left"))
        prev = (device.component_id, "right")
    wires.append(make_wire(len(wires) + 1, prev[0], prev[1], battery.component_id, "neg"))
    return wires


@pytest.fixture
def bulb_loop():
    """
    Battery(1) pos -> Bulb(2) left, Bulb(2) right -> Battery(1) neg
    """
    components = [
        make_component("battery", 1, 0, 0),
        make_component("bulb", 2, 120, 0),
    ]
    wires = [
        make_wire(1, 1, "pos", 2, "left"),
        make_wire(2, 2, "right", 1, "neg"),
    ]
    return components, wires


@pytest.fixture
def switched_bulb_loop():
    """
    Battery(1) -> Switch(2, open) -> Bulb(3) -> Battery(1)
    """
    components = [
        make_component("battery", 1, 0, 0),
        make_component("switch", 2, 120, 0, False),
        make_component("bulb", 3, 240, 0),
    ]
    wires = [
        make_wire(1, 1, "pos", 2, "left"),
        make_wire(2, 2, "right", 3, "left"),
        make_wire(3, 3, "right", 1, "neg"),
    ]
    return components, wires


@pytest.fixture
def orchestra_loop():
    """
    Battery(1) -> Bulb(2) -> Motor(3) -> Buzzer(4) -> Battery(1)
    """
    components = [
        make_component("battery", 1, 0, 0),
        make_component("bulb", 2, 120, 0),
        make_component("motor", 3, 240, 0),
        make_component("buzzer", 4, 360, 0),
    ]
    return components, make_series_loop(*components)
