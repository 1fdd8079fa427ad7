"""Tests for CircuitModel, IdAllocator and cascading removal."""

from models.circuit import CircuitModel, IdAllocator, remove_component
from models.component import ComponentType
from models.wire import TerminalRef
from tests.conftest import make_component, make_wire


class TestIdAllocator:
    def test_ids_increase(self):
        ids = IdAllocator()
        assert [ids.next_id(), ids.next_id(), ids.next_id()] == [1, 2, 3]

    def test_peek_does_not_advance(self):
        ids = IdAllocator()
        assert ids.peek() == 1
        assert ids.next_id() == 1

    def test_reserve_skips_used_ids(self):
        ids = IdAllocator()
        ids.reserve(7)
        assert ids.next_id() == 8

    def test_reserve_lower_id_is_noop(self):
        ids = IdAllocator()
        ids.reserve(5)
        ids.reserve(2)
        assert ids.next_id() == 6

    def test_reset(self):
        ids = IdAllocator()
        ids.next_id()
        ids.reset()
        assert ids.next_id() == 1

    def test_allocators_are_per_circuit(self):
        a, b = CircuitModel(), CircuitModel()
        a.place_component("bulb", 0, 0)
        a.place_component("bulb", 0, 0)
        assert b.place_component("bulb", 0, 0).component_id == 1


class TestComponentOperations:
    def test_place_component_assigns_ids(self):
        model = CircuitModel()
        c1 = model.place_component("battery", 100, 100)
        c2 = model.place_component("bulb", 200, 100)
        assert (c1.component_id, c2.component_id) == (1, 2)
        assert list(model.components) == [1, 2]

    def test_place_component_snaps(self):
        model = CircuitModel()
        comp = model.place_component(ComponentType.MOTOR, 95, 31)
        assert (comp.x, comp.y) == (120, 60)

    def test_add_component_reserves_id(self):
        model = CircuitModel()
        model.add_component(make_component("bulb", 10))
        assert model.place_component("bulb", 0, 0).component_id == 11

    def test_remove_component(self):
        model = CircuitModel()
        model.place_component("battery", 0, 0)
        model.place_component("bulb", 120, 0)
        model.remove_component(1)
        assert list(model.components) == [2]

    def test_remove_component_cascades_wires(self):
        model = CircuitModel()
        for comp in (make_component("battery", 1), make_component("bulb", 2), make_component("bulb", 3)):
            model.add_component(comp)
        model.add_wire(make_wire(1, 1, "pos", 2, "left"))
        model.add_wire(make_wire(2, 2, "right", 1, "neg"))
        model.add_wire(make_wire(3, 2, "left", 3, "right"))

        removed = model.remove_component(1)

        assert removed == [1, 2]
        assert [w.wire_id for w in model.wires] == [3]

    def test_remove_unknown_component(self):
        model = CircuitModel()
        assert model.remove_component(42) == []

    def test_get_terminal_position(self):
        model = CircuitModel()
        model.place_component("battery", 0, 0)
        assert model.get_terminal_position(TerminalRef(1, "pos")) == (120, 30)
        assert model.get_terminal_position(TerminalRef(1, "left")) is None
        assert model.get_terminal_position(TerminalRef(9, "pos")) is None


class TestWireOperations:
    def test_connect_allocates_wire_ids(self):
        model = CircuitModel()
        w1 = model.connect(TerminalRef(1, "pos"), TerminalRef(2, "left"))
        w2 = model.connect(TerminalRef(2, "right"), TerminalRef(1, "neg"))
        assert (w1.wire_id, w2.wire_id) == (1, 2)

    def test_connect_refuses_duplicate_without_burning_id(self):
        model = CircuitModel()
        model.connect(TerminalRef(1, "pos"), TerminalRef(2, "left"))
        assert model.connect(TerminalRef(2, "left"), TerminalRef(1, "pos")) is None
        assert model.connect(TerminalRef(2, "right"), TerminalRef(1, "neg")).wire_id == 2

    def test_remove_wire_by_id(self):
        model = CircuitModel()
        model.connect(TerminalRef(1, "pos"), TerminalRef(2, "left"))
        model.connect(TerminalRef(2, "right"), TerminalRef(1, "neg"))
        assert model.remove_wire(1) is True
        assert [w.wire_id for w in model.wires] == [2]
        assert model.remove_wire(1) is False

    def test_get_wire(self):
        model = CircuitModel()
        wire = model.connect(TerminalRef(1, "pos"), TerminalRef(2, "left"))
        assert model.get_wire(wire.wire_id) is wire
        assert model.get_wire(99) is None

    def test_wires_at(self):
        model = CircuitModel()
        model.connect(TerminalRef(1, "pos"), TerminalRef(2, "left"))
        model.connect(TerminalRef(3, "a"), TerminalRef(1, "pos"))
        model.connect(TerminalRef(2, "right"), TerminalRef(1, "neg"))
        assert [w.wire_id for w in model.wires_at((1, "pos"))] == [1, 2]


class TestClear:
    def test_clear_removes_everything_and_resets_ids(self):
        model = CircuitModel()
        model.place_component("battery", 0, 0)
        model.place_component("bulb", 120, 0)
        model.connect(TerminalRef(1, "pos"), TerminalRef(2, "left"))

        model.clear()

        assert model.components == {}
        assert model.wires == []
        assert model.place_component("bulb", 0, 0).component_id == 1


class TestSerialization:
    def test_round_trip(self):
        model = CircuitModel()
        model.place_component("battery", 0, 0)
        model.place_component("switch", 120, 0, True)
        model.connect(TerminalRef(1, "pos"), TerminalRef(2, "left"))

        restored = CircuitModel.from_dict(model.to_dict())

        assert restored.components == model.components
        assert restored.wires == model.wires
        assert restored.component_ids.peek() == 3
        assert restored.wire_ids.peek() == 2

    def test_counters_survive_deleted_components(self):
        model = CircuitModel()
        model.place_component("battery", 0, 0)
        model.place_component("bulb", 120, 0)
        model.remove_component(2)

        restored = CircuitModel.from_dict(model.to_dict())

        assert restored.place_component("bulb", 0, 0).component_id == 3

    def test_missing_counters_resume_after_largest_id(self):
        data = {
            "components": [{"id": 4, "type": "bulb", "x": 0, "y": 0}],
            "wires": [{"id": 9, "from": {"compId": 4, "terminal": "left"},
                       "to": {"compId": 4, "terminal": "right"}}],
        }
        model = CircuitModel.from_dict(data)
        assert model.component_ids.peek() == 5
        assert model.wire_ids.peek() == 10


class TestRemoveComponentFunction:
    def test_cascades_on_plain_lists(self):
        components = [make_component("battery", 1), make_component("bulb", 2)]
        wires = [
            make_wire(1, 1, "pos", 2, "left"),
            make_wire(2, 2, "right", 1, "neg"),
            make_wire(3, 2, "left", 3, "right"),
        ]
        new_components, new_wires = remove_component(components, wires, 1)
        assert [c.component_id for c in new_components] == [2]
        assert [w.wire_id for w in new_wires] == [3]
        # originals untouched
        assert len(components) == 2
        assert len(wires) == 3
