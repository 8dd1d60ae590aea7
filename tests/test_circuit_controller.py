import unittest

from core import transitions
from core.catalog import COMPONENT_DEFINITIONS, catalog_types, lookup
from core.circuit_controller import CircuitController
from core.geometry import Point
from core.interaction import (
    ComponentSelected, EditorState, Idle, PlacementPending, WireSelected, Wiring
)


class TestComponentOperations(unittest.TestCase):
    """Tests for placing, moving and removing components."""

    def setUp(self):
        self.controller = CircuitController()

    def test_add_every_catalog_type(self):
        """Each new component mirrors its catalog entry's pins and defaults."""
        for type_tag in catalog_types():
            with self.subTest(type=type_tag):
                component_id = self.controller.add_component(type_tag, 10, 20)
                component = self.controller.circuit.find_component(component_id)
                definition = lookup(type_tag)
                self.assertEqual(len(component.pins), len(definition.pins))
                self.assertEqual(component.properties, definition.default_properties)
                self.assertTrue(all(not p.connected and not p.value for p in component.pins))

    def test_add_resistor_scenario(self):
        component_id = self.controller.add_component("resistor", 300, 250)
        resistor = self.controller.circuit.find_component(component_id)
        self.assertEqual(resistor.position, Point(300, 250))
        self.assertEqual([p.name for p in resistor.pins], ["A", "B"])
        self.assertEqual([p.position for p in resistor.pins], [Point(0, 0), Point(60, 0)])
        self.assertEqual(resistor.properties, {"value": "1k", "tolerance": "5%"})

    def test_add_unknown_type_is_noop(self):
        notified = []
        self.controller.subscribe(notified.append)
        before = self.controller.circuit
        self.assertIsNone(self.controller.add_component("flux_capacitor", 0, 0))
        self.assertIs(self.controller.circuit, before)
        self.assertEqual(notified, [])

    def test_ids_are_unique_for_rapid_placement(self):
        ids = {self.controller.add_component("led", 0, 0) for _ in range(50)}
        self.assertEqual(len(ids), 50)

    def test_catalog_and_snapshots_are_read_only(self):
        component_id = self.controller.add_component("resistor", 0, 0)
        component = self.controller.circuit.find_component(component_id)
        with self.assertRaises(TypeError):
            lookup("resistor").default_properties["value"] = "10k"
        with self.assertRaises(TypeError):
            del COMPONENT_DEFINITIONS["probe"]
        with self.assertRaises(TypeError):
            component.properties["value"] = "10k"

        self.assertIsNotNone(self.controller.add_component("probe", 0, 0))
        again = self.controller.circuit.find_component(self.controller.add_component("resistor", 5, 5))
        self.assertEqual(again.properties["value"], "1k")

    def test_moved_snapshot_does_not_share_properties(self):
        component_id = self.controller.add_component("led", 0, 0)
        before = self.controller.circuit.find_component(component_id)
        self.controller.move_component(component_id, 10, 10)
        after = self.controller.circuit.find_component(component_id)
        self.assertEqual(after.properties, before.properties)
        self.assertIsNot(after.properties, before.properties)

    def test_move_component(self):
        a = self.controller.add_component("resistor", 0, 0)
        b = self.controller.add_component("led", 100, 100)
        self.controller.move_component(a, 40, 60)
        self.assertEqual(self.controller.circuit.find_component(a).position, Point(40, 60))
        self.assertEqual(self.controller.circuit.find_component(b).position, Point(100, 100))

    def test_remove_missing_component_is_noop(self):
        self.controller.add_component("resistor", 0, 0)
        before = self.controller.circuit
        self.controller.remove_component("resistor-999")
        self.assertIs(self.controller.circuit, before)

    def test_remove_clears_selection(self):
        component_id = self.controller.add_component("probe", 0, 0)
        self.controller.select_component(component_id)
        self.controller.remove_component(component_id)
        self.assertIsInstance(self.controller.state.interaction, Idle)
        self.assertEqual(self.controller.circuit.components, ())


class TestSelection(unittest.TestCase):
    """Tests for the mutually exclusive interaction modes."""

    def setUp(self):
        self.controller = CircuitController()

    def test_select_does_not_validate(self):
        self.controller.select_component("ghost")
        self.assertEqual(self.controller.state.selected_component_id, "ghost")
        self.assertIsNone(self.controller.circuit.find_component("ghost"))

    def test_selecting_type_replaces_component_selection(self):
        self.controller.select_component("r")
        self.controller.select_component_type("led")
        self.assertEqual(self.controller.state.interaction, PlacementPending("led"))
        self.assertIsNone(self.controller.state.selected_component_id)

    def test_clearing_selection_keeps_wiring(self):
        self.controller.start_wiring("x-pin-0")
        self.controller.select_component(None)
        self.assertTrue(self.controller.state.is_wiring)

    def test_clearing_type_only_affects_pending_placement(self):
        self.controller.select_component("r")
        self.controller.select_component_type(None)
        self.assertEqual(self.controller.state.interaction, ComponentSelected("r"))
        self.controller.select_component_type("vcc")
        self.controller.select_component_type(None)
        self.assertEqual(self.controller.state.interaction, Idle())


class TestWiring(unittest.TestCase):
    """Tests for the Idle / Awaiting-Second-Pin wiring machine."""

    def setUp(self):
        self.controller = CircuitController()
        self.r1 = self.controller.add_component("resistor", 300, 250)
        self.l1 = self.controller.add_component("led", 200, 150)
        circuit = self.controller.circuit
        self.r1_a, self.r1_b = circuit.find_component(self.r1).pin_ids()
        self.l1_anode = circuit.find_component(self.l1).pin_ids()[0]

    def test_start_wiring_clears_selection(self):
        self.controller.select_component(self.r1)
        self.controller.start_wiring(self.r1_a)
        self.assertEqual(self.controller.state.interaction, Wiring(self.r1_a))
        self.assertIsNone(self.controller.state.selected_component_id)

    def test_connect_pins_on_different_components(self):
        self.controller.handle_pin_click(self.r1_a)
        wire_id = self.controller.handle_pin_click(self.l1_anode)

        circuit = self.controller.circuit
        self.assertEqual(len(circuit.wires), 1)
        wire = circuit.wires[0]
        self.assertEqual(wire.id, wire_id)
        self.assertEqual((wire.from_pin, wire.to_pin), (self.r1_a, self.l1_anode))
        self.assertTrue(circuit.find_pin(self.r1_a)[1].connected)
        self.assertTrue(circuit.find_pin(self.l1_anode)[1].connected)
        self.assertFalse(circuit.find_pin(self.r1_b)[1].connected)
        self.assertFalse(self.controller.state.is_wiring)

    def test_same_component_is_rejected(self):
        self.controller.handle_pin_click(self.r1_a)
        self.assertIsNone(self.controller.handle_pin_click(self.r1_b))
        self.assertEqual(self.controller.circuit.wires, ())
        self.assertIsInstance(self.controller.state.interaction, Idle)

    def test_same_pin_twice_cancels(self):
        self.controller.handle_pin_click(self.r1_a)
        self.controller.handle_pin_click(self.r1_a)
        self.assertEqual(self.controller.circuit.wires, ())
        self.assertIsNone(self.controller.state.first_pin_id)
        self.assertFalse(self.controller.state.is_wiring)

    def test_unresolvable_pin_aborts(self):
        before = self.controller.circuit
        self.controller.start_wiring(self.r1_a)
        self.assertIsNone(self.controller.complete_wiring("nowhere-pin-3"))
        self.assertIs(self.controller.circuit, before)
        self.assertFalse(self.controller.state.is_wiring)

    def test_complete_without_start_is_noop(self):
        self.assertIsNone(self.controller.complete_wiring(self.r1_a))
        self.assertEqual(self.controller.circuit.wires, ())

    def test_cancel_while_idle_is_idempotent(self):
        notified = []
        self.controller.subscribe(notified.append)
        self.controller.cancel_wiring()
        self.controller.cancel_wiring()
        self.assertFalse(self.controller.state.is_wiring)
        self.assertIsNone(self.controller.state.first_pin_id)
        self.assertEqual(notified, [])

    def test_cancel_discards_first_pin(self):
        self.controller.start_wiring(self.r1_a)
        self.controller.cancel_wiring()
        self.assertEqual(self.controller.state.interaction, Idle())

    def test_removing_either_endpoint_removes_wire(self):
        for owner in (self.r1, self.l1):
            with self.subTest(removed=owner):
                controller = CircuitController(self.controller.circuit)
                controller.start_wiring(self.r1_a)
                controller.complete_wiring(self.l1_anode)
                controller.remove_component(owner)
                self.assertEqual(controller.circuit.wires, ())
                survivor = self.l1 if owner == self.r1 else self.r1
                component = controller.circuit.find_component(survivor)
                self.assertFalse(any(p.connected for p in component.pins))

    def test_remove_wire(self):
        self.controller.start_wiring(self.r1_a)
        wire_id = self.controller.complete_wiring(self.l1_anode)
        self.controller.remove_wire(wire_id)
        self.assertEqual(self.controller.circuit.wires, ())
        self.assertFalse(self.controller.circuit.find_pin(self.r1_a)[1].connected)

    def test_removing_first_pin_owner_ends_wiring(self):
        self.controller.start_wiring(self.r1_a)
        self.controller.remove_component(self.r1)
        self.assertFalse(self.controller.state.is_wiring)

    def test_wire_tracks_moved_component(self):
        self.controller.start_wiring(self.r1_a)
        self.controller.complete_wiring(self.l1_anode)
        self.controller.move_component(self.r1, 0, 0)
        circuit = self.controller.circuit
        start, end = circuit.wire_endpoints(circuit.wires[0])
        self.assertEqual(start, Point(0, 0))
        self.assertEqual(end, Point(200, 150))

    def test_select_wire_replaces_component_selection(self):
        self.controller.select_component(self.r1)
        self.controller.select_wire("wire-1")
        self.assertEqual(self.controller.state.interaction, WireSelected("wire-1"))
        self.assertIsNone(self.controller.state.selected_component_id)

    def test_clearing_wire_selection_keeps_other_modes(self):
        self.controller.select_component(self.r1)
        self.controller.select_wire(None)
        self.assertEqual(self.controller.state.interaction, ComponentSelected(self.r1))
        self.controller.select_wire("wire-1")
        self.controller.select_wire(None)
        self.assertEqual(self.controller.state.interaction, Idle())

    def test_removing_selected_wire_clears_selection(self):
        self.controller.start_wiring(self.r1_a)
        wire_id = self.controller.complete_wiring(self.l1_anode)
        self.controller.select_wire(wire_id)
        self.controller.remove_wire(wire_id)
        self.assertEqual(self.controller.state.interaction, Idle())

    def test_cascaded_removal_clears_wire_selection(self):
        self.controller.start_wiring(self.r1_a)
        wire_id = self.controller.complete_wiring(self.l1_anode)
        self.controller.select_wire(wire_id)
        self.controller.remove_component(self.l1)
        self.assertEqual(self.controller.circuit.wires, ())
        self.assertIsNone(self.controller.state.selected_wire_id)


class TestViewTransformState(unittest.TestCase):

    def setUp(self):
        self.controller = CircuitController()

    def test_set_view_transform_clamps_scale(self):
        self.controller.set_view_transform(12, Point(5, 6))
        self.assertEqual(self.controller.circuit.view.scale, 3.0)
        self.assertEqual(self.controller.circuit.view.offset, Point(5, 6))
        self.controller.set_view_transform(0, Point(0, 0))
        self.assertEqual(self.controller.circuit.view.scale, 0.1)

    def test_zoom_and_pan(self):
        self.controller.zoom_at(Point(100, 100), zoom_in=True)
        self.assertAlmostEqual(self.controller.circuit.view.scale, 1.1)
        self.controller.pan_by(10, -10)
        offset = self.controller.circuit.view.offset
        self.assertAlmostEqual(offset.x, -10 + 10)
        self.assertAlmostEqual(offset.y, -10 - 10)


class TestPureTransitions(unittest.TestCase):
    """The transitions are pure: the input snapshot is never modified."""

    def test_add_component_leaves_input_untouched(self):
        state = EditorState()
        after = transitions.add_component(state, "ground", 1, 2, "g-1")
        self.assertEqual(state.circuit.components, ())
        self.assertEqual(len(after.circuit.components), 1)
        self.assertEqual(after.circuit.components[0].pins[0].id, "g-1-pin-0")

    def test_restore_drops_stale_selection(self):
        state = transitions.add_component(EditorState(), "probe", 0, 0, "p-1")
        state = transitions.select_component(state, "p-1")
        restored = transitions.restore_circuit(state, EditorState().circuit)
        self.assertEqual(restored.interaction, Idle())

    def test_restore_keeps_camera(self):
        state = transitions.set_view_transform(EditorState(), 2, Point(7, 7))
        restored = transitions.restore_circuit(state, EditorState().circuit)
        self.assertEqual(restored.circuit.view.scale, 2)

    def test_restore_drops_stale_wire_selection(self):
        state = transitions.add_component(EditorState(), "probe", 0, 0, "p-1")
        state = transitions.select_wire(state, "wire-9")
        restored = transitions.restore_circuit(state, state.circuit)
        self.assertEqual(restored.interaction, Idle())


if __name__ == "__main__":
    unittest.main()
