"""
Pure Python data models for Circuit Lab.

This package contains UI-free data classes that represent circuit elements.
"""

from .circuit import CircuitModel, IdAllocator, remove_component
from .component import (
    COMPONENT_DEFS,
    TERMINAL_LAYOUT,
    ComponentData,
    ComponentDef,
    ComponentType,
    create_component,
    find_component,
    get_terminal_names,
    index_components,
    toggle_switch,
)
from .grid import COMPONENT_HEIGHT, COMPONENT_WIDTH, GRID_SIZE, TERMINAL_HIT_RADIUS, snap, snap_point
from .wire import TerminalRef, WireData, connect_wire, is_duplicate_wire

__all__ = [
    "CircuitModel",
    "IdAllocator",
    "remove_component",
    "ComponentData",
    "ComponentDef",
    "ComponentType",
    "COMPONENT_DEFS",
    "TERMINAL_LAYOUT",
    "create_component",
    "find_component",
    "get_terminal_names",
    "index_components",
    "toggle_switch",
    "GRID_SIZE",
    "COMPONENT_WIDTH",
    "COMPONENT_HEIGHT",
    "TERMINAL_HIT_RADIUS",
    "snap",
    "snap_point",
    "TerminalRef",
    "WireData",
    "connect_wire",
    "is_duplicate_wire",
]
