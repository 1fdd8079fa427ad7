"""
simulation/circuit_validator.py

Connectivity checks for a circuit, with no UI dependencies.

Nothing here blocks power propagation; the engine copes with every problem
reported below. The results are for showing hints to the user.
"""

from models.component import ComponentType, find_component


def validate_circuit(components, wires):
    """
    Validate circuit connectivity.

    Args:
        components: Dict[int, ComponentData] keyed by component ID, or a roster list
        wires: List[WireData]

    Returns:
        (is_valid, errors, warnings) where:
            is_valid: bool - False if any errors found
            errors: list[str] - wires that point at nothing
            warnings: list[str] - suspicious but harmless wiring
    """
    if not isinstance(components, dict):
        components = {c.component_id: c for c in components}

    errors = []
    warnings = []

    # 1. Every wire endpoint must reference a real component and terminal
    connected_terminals = set()
    seen_pairs = set()
    for wire in wires:
        wire_ok = True
        for ref in (wire.start, wire.end):
            comp = find_component(components, ref.component_id)
            if comp is None:
                wire_ok = False
                errors.append(f"Wire {wire.wire_id} references unknown component {ref.component_id}.")
            elif not comp.has_terminal(ref.terminal):
                wire_ok = False
                errors.append(
                    f"Wire {wire.wire_id} references unknown terminal '{ref.terminal}' "
                    f"on {comp.component_type.value} {ref.component_id}."
                )
            else:
                connected_terminals.add(ref)
        if not wire_ok:
            continue

        # 2. Self-loops and duplicates are tolerated but pointless
        if wire.is_self_loop():
            warnings.append(f"Wire {wire.wire_id} connects a terminal to itself.")
        pair = frozenset((wire.start, wire.end))
        if pair in seen_pairs:
            warnings.append(f"Wire {wire.wire_id} duplicates an existing connection.")
        seen_pairs.add(pair)

    # 3. Unconnected terminals
    for comp in components.values():
        names = comp.terminal_names
        unconnected = [t for t in names if (comp.component_id, t) not in connected_terminals]
        if len(unconnected) == len(names):
            warnings.append(
                f"{comp.definition.label} {comp.component_id} has no connections."
            )
        elif unconnected and comp.component_type != ComponentType.WIRE_NODE:
            warnings.append(
                f"{comp.definition.label} {comp.component_id} has unconnected "
                f"terminal(s): {unconnected}."
            )

    # 4. Nothing can light up without a battery
    if components and not any(c.component_type == ComponentType.BATTERY for c in components.values()):
        warnings.append("Circuit has no battery. Nothing can be powered.")

    is_valid = len(errors) == 0
    return is_valid, errors, warnings
