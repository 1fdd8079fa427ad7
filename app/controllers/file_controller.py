"""
FileController - Reads and writes the plain-dict form of a circuit.

Only the (components, wires) structures are stored; there is no autosave
or session tracking. File dialog interaction is the responsibility of the
view layer.
"""

import json
from pathlib import Path

from models.circuit import CircuitModel
from models.component import COMPONENT_DEFS, ComponentType


def _is_id(value) -> bool:
    """Ids are plain integers; JSON true/false must not pass as 0/1."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_circuit_data(data) -> None:
    """
    Validate JSON structure before loading.

    Raises ValueError with a descriptive message if anything is wrong.
    Wires may reference components that are missing; the engine treats
    such wires as dead ends, so they are accepted here.
    """
    if not isinstance(data, dict):
        raise ValueError("File does not contain a valid circuit object.")

    if "components" not in data or not isinstance(data["components"], list):
        raise ValueError("Missing or invalid 'components' list.")
    if "wires" not in data or not isinstance(data["wires"], list):
        raise ValueError("Missing or invalid 'wires' list.")

    comp_ids = set()
    for i, comp in enumerate(data["components"]):
        if not isinstance(comp, dict):
            raise ValueError(f"Component #{i + 1} must be a JSON object.")
        for key in ("id", "type", "x", "y"):
            if key not in comp:
                raise ValueError(f"Component #{i + 1} is missing required field '{key}'.")
        if not _is_id(comp["id"]):
            raise ValueError(f"Component #{i + 1} id must be an integer.")
        if not isinstance(comp["x"], (int, float)) or not isinstance(comp["y"], (int, float)):
            raise ValueError(f"Component '{comp['id']}' position values must be numeric.")
        ctype = ComponentType.parse(comp["type"])
        if "state" in comp and comp["state"] is not None:
            if not COMPONENT_DEFS[ctype].has_state:
                raise ValueError(f"Component '{comp['id']}' of type '{ctype.value}' cannot have a state.")
            if not isinstance(comp["state"], bool):
                raise ValueError(f"Component '{comp['id']}' state must be true or false.")
        if comp["id"] in comp_ids:
            raise ValueError(f"Duplicate component id '{comp['id']}'.")
        comp_ids.add(comp["id"])

    wire_ids = set()
    for i, wire in enumerate(data["wires"]):
        if not isinstance(wire, dict):
            raise ValueError(f"Wire #{i + 1} must be a JSON object.")
        for key in ("id", "from", "to"):
            if key not in wire:
                raise ValueError(f"Wire #{i + 1} is missing required field '{key}'.")
        if not _is_id(wire["id"]):
            raise ValueError(f"Wire #{i + 1} id must be an integer.")
        for end in ("from", "to"):
            ref = wire[end]
            if not isinstance(ref, dict) or "compId" not in ref or "terminal" not in ref:
                raise ValueError(f"Wire #{i + 1} has an invalid '{end}' endpoint.")
            if not _is_id(ref["compId"]) or not isinstance(ref["terminal"], str):
                raise ValueError(
                    f"Wire #{i + 1} '{end}' endpoint needs an integer compId and a terminal name."
                )
        if wire["id"] in wire_ids:
            raise ValueError(f"Duplicate wire id '{wire['id']}'.")
        wire_ids.add(wire["id"])


def load_circuit(filepath) -> CircuitModel:
    """
    Load and validate a circuit JSON file.

    Raises:
        json.JSONDecodeError: If file is not valid JSON.
        ValueError: If the circuit structure is invalid.
        OSError: If the file cannot be read.
    """
    filepath = Path(filepath)
    with open(filepath, "r") as f:
        data = json.load(f)
    validate_circuit_data(data)
    return CircuitModel.from_dict(data)


def save_circuit(model: CircuitModel, filepath) -> None:
    """Save a circuit to a JSON file."""
    filepath = Path(filepath)
    with open(filepath, "w") as f:
        json.dump(model.to_dict(), f, indent=2)
