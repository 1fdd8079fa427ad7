"""Challenge definitions for the circuit lab.

A challenge is a named pass/fail predicate over a circuit's components and
wires. Predicates hold no state, so they can be re-evaluated after every
edit. Which challenge is active, and in what order they unlock, is up to
the caller.

No UI dependencies; pure Python module.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from models.component import ComponentType, index_components
from simulation.power_propagation import check_powered


def powered_types(components, wires, powered: Optional[set] = None) -> list[ComponentType]:
    """Return the type of every powered component (one entry per component)."""
    lookup = index_components(components)
    if powered is None:
        powered = check_powered(lookup, wires)
    return [lookup[cid].component_type for cid in powered if cid in lookup]


def count_powered(components, wires, component_type, powered: Optional[set] = None) -> int:
    """Count powered components of one type."""
    component_type = ComponentType.parse(component_type)
    return sum(1 for t in powered_types(components, wires, powered) if t == component_type)


def has_powered(components, wires, *component_types, powered: Optional[set] = None) -> bool:
    """Check that at least one component of every given type is powered."""
    present = set(powered_types(components, wires, powered))
    return all(ComponentType.parse(t) in present for t in component_types)


def _has_type(components, component_type: ComponentType) -> bool:
    return any(c.component_type == component_type for c in index_components(components).values())


@dataclass(frozen=True)
class Challenge:
    """A single challenge: what to build, and how to tell it was built.

    ``require(components, wires, powered=None)`` returns True when the
    circuit meets the goal. When ``powered`` is given it is used instead of
    recomputing the powered set.
    """

    challenge_id: int
    title: str
    description: str
    require: Callable[..., bool]


@dataclass
class ChallengeResult:
    """Outcome of evaluating one challenge."""

    challenge_id: int
    title: str
    passed: bool

    def to_dict(self) -> dict:
        return {"id": self.challenge_id, "title": self.title, "passed": self.passed}


def _light_the_bulb(components, wires, powered=None) -> bool:
    return (
        _has_type(components, ComponentType.BATTERY)
        and _has_type(components, ComponentType.BULB)
        and has_powered(components, wires, ComponentType.BULB, powered=powered)
    )


def _two_bulbs(components, wires, powered=None) -> bool:
    return count_powered(components, wires, ComponentType.BULB, powered=powered) >= 2


def _full_orchestra(components, wires, powered=None) -> bool:
    return has_powered(
        components, wires,
        ComponentType.BULB, ComponentType.MOTOR, ComponentType.BUZZER,
        powered=powered,
    )


CHALLENGES = [
    Challenge(1, "Light the Bulb", "Connect a battery to a bulb to make it glow!", _light_the_bulb),
    Challenge(5, "Two Bulbs", "Light up TWO bulbs with one battery!", _two_bulbs),
    Challenge(8, "Full Orchestra", "Power a bulb, motor, AND buzzer all at once!", _full_orchestra),
]


def get_challenge(challenge_id: int) -> Challenge:
    """Look up a built-in challenge by id.

    Raises:
        KeyError: If no challenge has that id.
    """
    for challenge in CHALLENGES:
        if challenge.challenge_id == challenge_id:
            return challenge
    raise KeyError(challenge_id)


def evaluate_challenges(components, wires, challenges=None) -> list[ChallengeResult]:
    """Evaluate challenges against a circuit, computing the powered set only once."""
    if challenges is None:
        challenges = CHALLENGES
    lookup = index_components(components)
    powered = check_powered(lookup, wires)
    return [
        ChallengeResult(
            challenge_id=c.challenge_id,
            title=c.title,
            passed=bool(c.require(lookup, wires, powered=powered)),
        )
        for c in challenges
    ]
