"""
WireData - Pure Python data model for circuit wires.

This module contains no UI dependencies. A wire stores only the ids and
terminal names of its endpoints; it never owns the components it connects.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional


class TerminalRef(NamedTuple):
    """Identifies a terminal as (component id, terminal name)."""

    component_id: int
    terminal: str

    def to_dict(self) -> dict:
        return {"compId": self.component_id, "terminal": self.terminal}

    @classmethod
    def from_dict(cls, data: dict) -> "TerminalRef":
        return cls(data["compId"], data["terminal"])


@dataclass
class WireData:
    """
    Pure Python data class representing an undirected wire between two terminals.

    (a, b) and (b, a) describe the same connection; ``start``/``end`` only
    record the order in which the user drew it.
    """

    wire_id: int
    start: TerminalRef
    end: TerminalRef

    def __post_init__(self):
        self.start = TerminalRef(*self.start)
        self.end = TerminalRef(*self.end)

    def get_terminals(self) -> list[TerminalRef]:
        """Get both terminal references for this wire."""
        return [self.start, self.end]

    def connects_component(self, component_id: int) -> bool:
        """Check if this wire connects to the given component."""
        return self.start.component_id == component_id or self.end.component_id == component_id

    def connects_terminal(self, ref: TerminalRef) -> bool:
        """Check if this wire connects to the given terminal."""
        return self.start == ref or self.end == ref

    def other_end(self, ref: TerminalRef) -> Optional[TerminalRef]:
        """Return the terminal at the opposite end from ``ref``, or None if not attached."""
        if self.start == ref:
            return self.end
        if self.end == ref:
            return self.start
        return None

    def same_connection(self, a: TerminalRef, b: TerminalRef) -> bool:
        """Check whether this wire joins the unordered pair {a, b}."""
        return (self.start == a and self.end == b) or (self.start == b and self.end == a)

    def is_self_loop(self) -> bool:
        """Check whether both ends sit on the same terminal."""
        return self.start == self.end

    def to_dict(self) -> dict:
        """Serialize wire to a plain dictionary."""
        return {
            "id": self.wire_id,
            "from": self.start.to_dict(),
            "to": self.end.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WireData":
        """Deserialize wire from a plain dictionary."""
        return cls(
            wire_id=data["id"],
            start=TerminalRef.from_dict(data["from"]),
            end=TerminalRef.from_dict(data["to"]),
        )

    def __repr__(self) -> str:
        return (
            f"WireData({self.wire_id}: {self.start.component_id}[{self.start.terminal}] -> "
            f"{self.end.component_id}[{self.end.terminal}])"
        )


def is_duplicate_wire(wires, a: TerminalRef, b: TerminalRef) -> bool:
    """Return True if an existing wire already joins a and b, in either orientation."""
    a = TerminalRef(*a)
    b = TerminalRef(*b)
    return any(w.same_connection(a, b) for w in wires)


def connect_wire(wires: list, start: TerminalRef, end: TerminalRef, wire_id: int) -> Optional[WireData]:
    """
    Append a new wire to ``wires`` unless it duplicates an existing one.

    Self-loops (start == end) are not rejected here; preventing them is up
    to the caller.

    Returns:
        The new WireData, or None if the connection already existed.
    """
    if is_duplicate_wire(wires, start, end):
        return None
    wire = WireData(wire_id=wire_id, start=start, end=end)
    wires.append(wire)
    return wire
