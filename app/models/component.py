"""
ComponentData - Pure Python data model for circuit components.

This module contains no UI dependencies. All positions are represented as
(x, y) tuples of grid-aligned integers.

Component types are a closed set (ComponentType). Each type has an entry in
COMPONENT_DEFS giving its ordered terminal names and behaviour flags, and an
entry in TERMINAL_LAYOUT giving where each terminal sits on the component's
bounding box.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .grid import COMPONENT_HEIGHT, COMPONENT_WIDTH, snap


class ComponentType(Enum):
    """Kinds of component that can be placed on the board."""

    BATTERY = "battery"
    BULB = "bulb"
    SWITCH = "switch"
    MOTOR = "motor"
    BUZZER = "buzzer"
    WIRE_NODE = "wire_node"

    @classmethod
    def parse(cls, value) -> "ComponentType":
        """
        Convert a serialized type name (or an existing member) to a ComponentType.

        Raises:
            ValueError: If the name is not a known component type.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown component type {value!r}. Valid types: {valid}") from None


@dataclass(frozen=True)
class ComponentDef:
    """Static definition of a component type."""

    label: str
    terminals: tuple[str, ...]
    has_state: bool = False
    is_node: bool = False


COMPONENT_DEFS = {
    ComponentType.BATTERY: ComponentDef("Battery", ("pos", "neg")),
    ComponentType.BULB: ComponentDef("Bulb", ("left", "right")),
    ComponentType.SWITCH: ComponentDef("Switch", ("left", "right"), has_state=True),
    ComponentType.MOTOR: ComponentDef("Motor", ("left", "right")),
    ComponentType.BUZZER: ComponentDef("Buzzer", ("left", "right")),
    ComponentType.WIRE_NODE: ComponentDef("Wire", ("a", "b", "c", "d"), is_node=True),
}

# Terminal positions as fractions of the bounding box (width, height),
# measured from the component's top-left corner.
_LEFT_MID = (0.0, 0.5)
_RIGHT_MID = (1.0, 0.5)
_TOP_MID = (0.5, 0.0)
_BOTTOM_MID = (0.5, 1.0)

TERMINAL_LAYOUT = {
    ComponentType.BATTERY: {"pos": _RIGHT_MID, "neg": _LEFT_MID},
    ComponentType.BULB: {"left": _LEFT_MID, "right": _RIGHT_MID},
    ComponentType.SWITCH: {"left": _LEFT_MID, "right": _RIGHT_MID},
    ComponentType.MOTOR: {"left": _LEFT_MID, "right": _RIGHT_MID},
    ComponentType.BUZZER: {"left": _LEFT_MID, "right": _RIGHT_MID},
    ComponentType.WIRE_NODE: {"a": _TOP_MID, "b": _RIGHT_MID, "c": _BOTTOM_MID, "d": _LEFT_MID},
}

# Every type must be fully described; catches a new ComponentType member
# that was added without its definition or layout.
for _ctype in ComponentType:
    if _ctype not in COMPONENT_DEFS or _ctype not in TERMINAL_LAYOUT:
        raise RuntimeError(f"Component type {_ctype.value!r} has no definition or terminal layout")
    if set(TERMINAL_LAYOUT[_ctype]) != set(COMPONENT_DEFS[_ctype].terminals):
        raise RuntimeError(f"Terminal layout for {_ctype.value!r} does not match its terminal names")
del _ctype


def get_terminal_names(component_type: ComponentType) -> tuple[str, ...]:
    """Return the ordered terminal names for a component type."""
    return COMPONENT_DEFS[component_type].terminals


@dataclass
class ComponentData:
    """
    Pure Python data class representing a placed component.

    Terminals are never stored; their positions are derived from the
    component's type and location on demand. ``state`` is only meaningful
    for switches (True = closed/conducting) and is None for every other type.
    """

    component_id: int
    component_type: ComponentType
    x: int
    y: int
    state: Optional[bool] = None

    def __post_init__(self):
        """Normalize the type and default the switch state to open."""
        self.component_type = ComponentType.parse(self.component_type)
        if self.definition.has_state:
            self.state = bool(self.state)
        else:
            self.state = None

    @property
    def definition(self) -> ComponentDef:
        return COMPONENT_DEFS[self.component_type]

    @property
    def terminal_names(self) -> tuple[str, ...]:
        return self.definition.terminals

    @property
    def is_closed(self) -> bool:
        """Return True for a switch in the closed (conducting) position."""
        return self.definition.has_state and bool(self.state)

    def get_terminal_positions(self) -> dict[str, tuple[float, float]]:
        """
        Calculate terminal positions for this component.

        Returns:
            Dict of terminal name -> (x, y), in the type's terminal order.
        """
        layout = TERMINAL_LAYOUT[self.component_type]
        positions = {}
        for name in self.terminal_names:
            fx, fy = layout[name]
            positions[name] = (self.x + fx * COMPONENT_WIDTH, self.y + fy * COMPONENT_HEIGHT)
        return positions

    def get_terminal_position(self, terminal: str) -> Optional[tuple[float, float]]:
        """Return one terminal's position, or None for an unknown terminal name."""
        return self.get_terminal_positions().get(terminal)

    def has_terminal(self, terminal: str) -> bool:
        return terminal in self.terminal_names

    def move_to(self, x: float, y: float) -> None:
        """Move the component, snapping the new position to the grid."""
        self.x = snap(x)
        self.y = snap(y)

    def to_dict(self) -> dict:
        """Serialize component to a plain dictionary."""
        data = {
            "id": self.component_id,
            "type": self.component_type.value,
            "x": self.x,
            "y": self.y,
        }
        if self.definition.has_state:
            data["state"] = self.state
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentData":
        """
        Deserialize component from a plain dictionary.

        Positions are re-snapped so loaded components always sit on the grid.
        """
        return cls(
            component_id=data["id"],
            component_type=ComponentType.parse(data["type"]),
            x=snap(data["x"]),
            y=snap(data["y"]),
            state=data.get("state"),
        )

    def __repr__(self) -> str:
        state = "" if self.state is None else f", state={self.state}"
        return (
            f"ComponentData(id={self.component_id!r}, type={self.component_type.value!r}, "
            f"pos=({self.x}, {self.y}){state})"
        )


def create_component(component_type, x: float, y: float, component_id: int,
                     state: Optional[bool] = None) -> ComponentData:
    """
    Create a component snapped to the grid.

    The id is supplied by the caller's allocator. Switches default to open.
    """
    return ComponentData(
        component_id=component_id,
        component_type=ComponentType.parse(component_type),
        x=snap(x),
        y=snap(y),
        state=state,
    )


def toggle_switch(component: ComponentData) -> bool:
    """
    Flip a switch between open and closed.

    Returns:
        True if the component is a switch and was toggled, False otherwise.
    """
    if not component.definition.has_state:
        return False
    component.state = not component.state
    return True


def index_components(components) -> dict:
    """Return an id-keyed dict for either an id-keyed dict or an iterable roster."""
    if isinstance(components, dict):
        return components
    return {c.component_id: c for c in components}


def find_component(components, component_id) -> Optional[ComponentData]:
    """Look up a component by id. A value that cannot be an id finds nothing."""
    if not isinstance(component_id, Hashable):
        return None
    return index_components(components).get(component_id)
