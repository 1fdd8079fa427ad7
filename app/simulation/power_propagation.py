"""
simulation/power_propagation.py

Decides which components receive power.

The circuit is treated as a graph of terminals. Wires link their two
endpoints; inside a component, terminals are linked according to its type:

- wire nodes link every pair of terminals
- bulbs, motors and buzzers link left <-> right (ideal conductors)
- switches link left <-> right only while closed
- batteries have no internal link; a battery is never crossed

Each battery runs its own breadth-first search from its ``pos`` terminal.
The search succeeds when it reaches the same battery's ``neg`` terminal
from a terminal that was discovered after crossing at least one component.
A wire straight from ``pos`` to ``neg`` is a short and does not count.

The search always runs to exhaustion. On success, every component with a
terminal discovered by that search is credited as powered, including
branches that never close back to the battery. This is a deliberate
simplification; callers rely on it.
"""

import logging
from collections import deque
from typing import Optional

from models.component import ComponentData, ComponentType, find_component, index_components
from models.wire import TerminalRef

logger = logging.getLogger(__name__)


def get_internal_connections(component: ComponentData, from_terminal: str) -> list[str]:
    """
    Return the terminals reachable inside a component's body from ``from_terminal``.

    Batteries and open switches conduct nothing internally. An unknown
    terminal name conducts nothing.
    """
    if component.component_type == ComponentType.BATTERY:
        return []
    if component.component_type == ComponentType.SWITCH and not component.is_closed:
        return []
    if not component.has_terminal(from_terminal):
        return []
    return [t for t in component.terminal_names if t != from_terminal]


def _endpoint_is_valid(lookup: dict, ref: TerminalRef) -> bool:
    component = find_component(lookup, ref.component_id)
    return component is not None and component.has_terminal(ref.terminal)


def build_adjacency(components, wires) -> dict[TerminalRef, list[TerminalRef]]:
    """
    Build the wire adjacency between terminals.

    Wires with an endpoint on a missing component or an unknown terminal
    are skipped (they lead nowhere).
    """
    lookup = index_components(components)
    adjacency: dict[TerminalRef, list[TerminalRef]] = {}
    for wire in wires:
        start, end = TerminalRef(*wire.start), TerminalRef(*wire.end)
        if not (_endpoint_is_valid(lookup, start) and _endpoint_is_valid(lookup, end)):
            logger.debug("Skipping dangling wire %r", wire)
            continue
        adjacency.setdefault(start, []).append(end)
        adjacency.setdefault(end, []).append(start)
    return adjacency


def find_closed_loop(components, wires, battery: ComponentData,
                     adjacency: Optional[dict] = None) -> Optional[set[int]]:
    """
    Search for a closed loop from ``battery``'s pos terminal back to its neg terminal.

    Args:
        components: id-keyed dict or iterable of ComponentData
        wires: iterable of WireData
        battery: the battery whose loop is searched
        adjacency: prebuilt result of build_adjacency(), to share across batteries

    Returns:
        Ids of every component touched by the search (battery included) when a
        loop exists, or None when it does not.
    """
    lookup = index_components(components)
    if adjacency is None:
        adjacency = build_adjacency(lookup, wires)

    start = TerminalRef(battery.component_id, "pos")
    target = TerminalRef(battery.component_id, "neg")

    seen = {start}
    touched = {battery.component_id}
    closed = False
    # depth = number of component bodies crossed to reach the terminal
    queue = deque([(start, 0)])

    while queue:
        ref, depth = queue.popleft()
        for nxt in adjacency.get(ref, ()):
            if nxt == target:
                if depth > 0:
                    closed = True
                continue
            if nxt in seen:
                continue
            seen.add(nxt)
            touched.add(nxt.component_id)
            queue.append((nxt, depth))

            component = lookup[nxt.component_id]
            for other in get_internal_connections(component, nxt.terminal):
                inner = TerminalRef(nxt.component_id, other)
                if inner not in seen:
                    seen.add(inner)
                    queue.append((inner, depth + 1))

    return touched if closed else None


def check_powered(components, wires) -> set[int]:
    """
    Return the ids of all powered components.

    The result is the union over every battery of the components touched by
    that battery's successful loop search. Batteries are searched
    independently; a failed search contributes nothing.
    """
    lookup = index_components(components)
    adjacency = build_adjacency(lookup, wires)

    powered: set[int] = set()
    for component in lookup.values():
        if component.component_type != ComponentType.BATTERY:
            continue
        touched = find_closed_loop(lookup, wires, component, adjacency)
        if touched is None:
            logger.debug("Battery %s has no closed loop", component.component_id)
            continue
        logger.debug("Battery %s powers %s", component.component_id, sorted(touched))
        powered.update(touched)
    return powered
