"""
CircuitController - Orchestrates component and wire operations.

This module contains no UI dependencies. It manages the CircuitModel,
recomputes which components are powered after every change, and notifies
views of changes through an observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from grading.challenges import ChallengeResult, evaluate_challenges
from models.circuit import CircuitModel
from models.component import ComponentData, toggle_switch
from models.wire import TerminalRef, WireData
from simulation.hit_test import hit_terminal
from simulation.power_propagation import check_powered

logger = logging.getLogger(__name__)


class CircuitController:
    """
    Controller for the placement and wiring workflow.

    Manages the CircuitModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.

    Observer events:
        component_added (ComponentData) - A new component was placed
        component_moved (ComponentData) - A component was moved
        switch_toggled (ComponentData) - A switch was opened or closed
        component_removed (int) - A component was removed (by ID)
        wire_added (WireData) - A new wire was added
        wire_removed (int) - A wire was removed (by ID)
        circuit_cleared (None) - The entire circuit was cleared
        power_changed (set[int]) - Powered set after a change
    """

    def __init__(self, model: Optional[CircuitModel] = None):
        self.model = model or CircuitModel()
        self._observers: list[Callable[[str, Any], None]] = []
        self._powered: set[int] = check_powered(self.model.components, self.model.wires)

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- Power ---

    @property
    def powered(self) -> set[int]:
        """Ids of the components powered after the last change."""
        return set(self._powered)

    def is_powered(self, component_id: int) -> bool:
        return component_id in self._powered

    def refresh_power(self) -> set[int]:
        """Recompute the powered set and notify observers."""
        self._powered = check_powered(self.model.components, self.model.wires)
        self._notify('power_changed', self.powered)
        return self.powered

    def evaluate_challenges(self, challenges=None) -> list[ChallengeResult]:
        """Evaluate challenges against the current circuit."""
        return evaluate_challenges(self.model.components, self.model.wires, challenges)

    # --- Component operations ---

    def add_component(self, component_type, x: float, y: float,
                      state: Optional[bool] = None) -> ComponentData:
        """
        Create and place a new component, snapped to the grid.

        The id comes from the circuit's own allocator.

        Returns:
            The newly created ComponentData.
        """
        component = self.model.place_component(component_type, x, y, state)
        self._notify('component_added', component)
        self.refresh_power()
        return component

    def move_component(self, component_id: int, x: float, y: float) -> None:
        """Move a component, re-snapping it to the grid."""
        component = self.model.components.get(component_id)
        if component is None:
            return
        component.move_to(x, y)
        self._notify('component_moved', component)
        self.refresh_power()

    def toggle_switch(self, component_id: int) -> bool:
        """
        Open or close a switch.

        Returns:
            True if the switch was toggled; False for unknown ids and non-switches.
        """
        component = self.model.components.get(component_id)
        if component is None or not toggle_switch(component):
            logger.debug("Ignoring toggle of non-switch %s", component_id)
            return False
        self._notify('switch_toggled', component)
        self.refresh_power()
        return True

    def remove_component(self, component_id: int) -> None:
        """Remove a component and every wire attached to it."""
        if component_id not in self.model.components:
            return
        for wire_id in self.model.remove_component(component_id):
            self._notify('wire_removed', wire_id)
        self._notify('component_removed', component_id)
        self.refresh_power()

    # --- Wire operations ---

    def find_terminal(self, x: float, y: float) -> Optional[TerminalRef]:
        """Return the terminal under the point (x, y), if any."""
        return hit_terminal(self.model.components.values(), x, y)

    def connect_terminals(self, start: TerminalRef, end: TerminalRef) -> Optional[WireData]:
        """
        Wire two terminals together.

        A terminal cannot be wired to itself, and a connection that already
        exists (in either direction) is not added twice.

        Returns:
            The newly created WireData, or None if nothing was added.
        """
        start, end = TerminalRef(*start), TerminalRef(*end)
        if start == end:
            logger.debug("Ignoring wire from %s to itself", start)
            return None
        wire = self.model.connect(start, end)
        if wire is None:
            logger.debug("Ignoring duplicate wire %s -> %s", start, end)
            return None
        self._notify('wire_added', wire)
        self.refresh_power()
        return wire

    def connect_at(self, x1: float, y1: float, x2: float, y2: float) -> Optional[WireData]:
        """Wire the terminal under (x1, y1) to the terminal under (x2, y2)."""
        start = self.find_terminal(x1, y1)
        end = self.find_terminal(x2, y2)
        if start is None or end is None:
            return None
        return self.connect_terminals(start, end)

    def remove_wire(self, wire_id: int) -> None:
        """Remove a wire by ID."""
        if self.model.remove_wire(wire_id):
            self._notify('wire_removed', wire_id)
            self.refresh_power()

    # --- Circuit operations ---

    def clear_circuit(self) -> None:
        """Clear the entire circuit."""
        self.model.clear()
        self._notify('circuit_cleared', None)
        self.refresh_power()
