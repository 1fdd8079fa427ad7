"""
CircuitModel - Central data store for circuit state.

This module contains no UI dependencies. It holds the component roster
(indexed by id, kept in placement order), the wire list, and the id
allocators scoped to this circuit.
"""

from dataclasses import dataclass, field
from typing import Optional

from .component import ComponentData, create_component
from .wire import TerminalRef, WireData, connect_wire


class IdAllocator:
    """Hands out increasing integer ids for one circuit."""

    def __init__(self, start: int = 1):
        self._start = start
        self._next = start

    def next_id(self) -> int:
        """Return a fresh id and advance the counter."""
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """Return the id the next call to next_id() will hand out."""
        return self._next

    def reserve(self, used_id: int) -> None:
        """Make sure an id that is already in use is never handed out again."""
        if used_id >= self._next:
            self._next = used_id + 1

    def reset(self) -> None:
        self._next = self._start

    def __repr__(self) -> str:
        return f"IdAllocator(next={self._next})"


@dataclass
class CircuitModel:
    """
    Central data store holding all circuit state.

    Wires refer to components by id only. Removing a component through
    remove_component() also removes every wire that references it.
    """

    components: dict[int, ComponentData] = field(default_factory=dict)
    wires: list[WireData] = field(default_factory=list)
    component_ids: IdAllocator = field(default_factory=IdAllocator)
    wire_ids: IdAllocator = field(default_factory=IdAllocator)

    # --- Component operations ---

    def add_component(self, component: ComponentData) -> None:
        """Add an already constructed component to the circuit."""
        self.components[component.component_id] = component
        self.component_ids.reserve(component.component_id)

    def place_component(self, component_type, x: float, y: float,
                        state: Optional[bool] = None) -> ComponentData:
        """Create a component with a fresh id, snapped to the grid, and add it."""
        component = create_component(component_type, x, y, self.component_ids.next_id(), state)
        self.add_component(component)
        return component

    def get_component(self, component_id: int) -> Optional[ComponentData]:
        return self.components.get(component_id)

    def remove_component(self, component_id: int) -> list[int]:
        """
        Remove a component and every wire attached to it.

        Returns:
            Ids of the wires that were removed along with the component.
        """
        if component_id not in self.components:
            return []

        removed = [w.wire_id for w in self.wires if w.connects_component(component_id)]
        self.wires[:] = [w for w in self.wires if not w.connects_component(component_id)]
        del self.components[component_id]
        return removed

    def get_terminal_position(self, ref: TerminalRef) -> Optional[tuple[float, float]]:
        """Return a terminal's position, or None for an unknown component or terminal."""
        component = self.components.get(ref[0])
        if component is None:
            return None
        return component.get_terminal_position(ref[1])

    # --- Wire operations ---

    def add_wire(self, wire: WireData) -> None:
        """Append a wire as-is. Duplicates and self-loops are not checked here."""
        self.wires.append(wire)
        self.wire_ids.reserve(wire.wire_id)

    def connect(self, start: TerminalRef, end: TerminalRef) -> Optional[WireData]:
        """
        Wire two terminals together with a fresh wire id.

        Returns:
            The new WireData, or None if the two terminals were already wired.
        """
        wire = connect_wire(self.wires, TerminalRef(*start), TerminalRef(*end), self.wire_ids.peek())
        if wire is not None:
            self.wire_ids.next_id()
        return wire

    def get_wire(self, wire_id: int) -> Optional[WireData]:
        for wire in self.wires:
            if wire.wire_id == wire_id:
                return wire
        return None

    def remove_wire(self, wire_id: int) -> bool:
        """Remove a wire by id. Returns True if a wire was removed."""
        for i, wire in enumerate(self.wires):
            if wire.wire_id == wire_id:
                del self.wires[i]
                return True
        return False

    def wires_at(self, ref: TerminalRef) -> list[WireData]:
        """Return every wire attached to a terminal."""
        ref = TerminalRef(*ref)
        return [w for w in self.wires if w.connects_terminal(ref)]

    # --- Circuit operations ---

    def clear(self) -> None:
        """Clear all circuit data."""
        self.components.clear()
        self.wires.clear()
        self.component_ids.reset()
        self.wire_ids.reset()

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize circuit to a plain dictionary."""
        return {
            "components": [c.to_dict() for c in self.components.values()],
            "wires": [w.to_dict() for w in self.wires],
            "counters": {
                "components": self.component_ids.peek() - 1,
                "wires": self.wire_ids.peek() - 1,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CircuitModel":
        """
        Deserialize circuit from a plain dictionary.

        Id allocators resume after the saved counters, or after the largest
        id present when no counters were saved.
        """
        model = cls()
        for comp_data in data.get("components", []):
            model.add_component(ComponentData.from_dict(comp_data))
        for wire_data in data.get("wires", []):
            model.add_wire(WireData.from_dict(wire_data))

        counters = data.get("counters", {})
        if "components" in counters:
            model.component_ids.reserve(counters["components"])
        if "wires" in counters:
            model.wire_ids.reserve(counters["wires"])
        return model


def remove_component(components: list, wires: list, component_id: int) -> tuple[list, list]:
    """
    Remove a component from plain roster/wire lists, cascading to its wires.

    Returns:
        (remaining_components, remaining_wires) as new lists.
    """
    remaining_components = [c for c in components if c.component_id != component_id]
    remaining_wires = [w for w in wires if not w.connects_component(component_id)]
    return remaining_components, remaining_wires
