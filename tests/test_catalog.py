import unittest

from core.catalog import COMPONENT_DEFINITIONS, catalog_types, lookup
from core.geometry import Point
from core.pin import PinRole


class TestComponentCatalog(unittest.TestCase):
    """Tests for the fixed registry of placeable component types."""

    def test_known_types(self):
        self.assertEqual(
            catalog_types(),
            ["resistor", "led", "capacitor", "pic16", "ground", "vcc", "probe"],
        )

    def test_unknown_type_is_absent(self):
        self.assertIsNone(lookup("inductor"))
        self.assertIsNone(lookup(""))

    def test_resistor_definition(self):
        resistor = lookup("resistor")
        self.assertEqual([p.name for p in resistor.pins], ["A", "B"])
        self.assertEqual([p.position for p in resistor.pins], [Point(0, 0), Point(60, 0)])
        self.assertEqual(resistor.default_properties, {"value": "1k", "tolerance": "5%"})
        self.assertEqual(resistor.bounds(), (0, -10, 60, 20))

    def test_pic16_pinout(self):
        """The DIP-18 package has nine pins per side, with supply pins typed."""
        pic = lookup("pic16")
        self.assertEqual(len(pic.pins), 18)
        self.assertEqual(sum(1 for p in pic.pins if p.position.x == 0), 9)
        roles = {p.name: p.role for p in pic.pins}
        self.assertEqual(roles["VSS"], PinRole.GROUND)
        self.assertEqual(roles["VDD"], PinRole.POWER)
        self.assertEqual(roles["OSC2"], PinRole.OUTPUT)

    def test_pins_lie_inside_footprint(self):
        """Every pin sits on or inside its component's bounding box."""
        for type_tag, definition in COMPONENT_DEFINITIONS.items():
            x, y, w, h = definition.bounds()
            for pin in definition.pins:
                with self.subTest(type=type_tag, pin=pin.name):
                    self.assertTrue(x <= pin.position.x <= x + w)
                    self.assertTrue(y <= pin.position.y <= y + h)

    def test_ground_has_no_properties(self):
        self.assertEqual(lookup("ground").default_properties, {})


if __name__ == "__main__":
    unittest.main()
