#!/usr/bin/env python3
"""
End-to-end wiring scenarios: the switch pair and the generator-switch-light
chain.
"""

import unittest
import os
import sys

# Add the parent directory to the path to import polewire
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from polewire import Switch, Light, Generator, Circuit


class TestSwitchPair(unittest.TestCase):
    """Two switches wired A2 -> A1."""

    def test_disconnecting_another_pole_keeps_link(self):
        sw = Switch()
        sw2 = Switch()

        sw.connect("A2", sw2, "A1")
        self.assertTrue(sw.is_connected_to(sw2))

        # A1 was never linked, so the A2 link survives
        self.assertFalse(sw.disconnect("A1"))
        self.assertTrue(sw.is_connected_to(sw2))
        self.assertTrue(sw2.is_connected_to(sw))


class TestGeneratorChain(unittest.TestCase):
    """Generator [phase] - switch - light, then light back to the generator."""

    def setUp(self):
        self.generator = Generator("generator")
        self.sw1 = Switch("sw1")
        self.lamp = Light("lamp")

        self.assertTrue(self.generator.connect("A1", self.sw1, "A2"))
        self.assertTrue(self.sw1.connect("A1", self.lamp, "A2"))

    def test_return_wire_with_equal_names_is_refused(self):
        """lamp.A2 -> generator.A2 uses the same name on both sides and fails."""
        def state(device):
            return [(p.name, p.linked_device, p.linked_pole_name) for p in device.get_poles()]

        before = (state(self.lamp), state(self.generator))
        self.assertFalse(self.lamp.connect("A2", self.generator, "A2"))
        self.assertEqual((state(self.lamp), state(self.generator)), before)

        self.assertTrue(self.lamp.l2.points_to(self.sw1, "A1"))
        self.assertFalse(self.lamp.l1.is_linked)
        self.assertFalse(self.generator.a2.is_linked)
        self.assertFalse(self.generator.a3.is_linked)
        self.assertFalse(self.lamp.is_connected_to(self.generator))
        self.assertFalse(self.generator.is_connected_to(self.lamp))

    def test_chain_wiring(self):
        self.lamp.connect("A2", self.generator, "A2")

        self.assertTrue(self.sw1.is_connected_to(self.lamp))
        self.assertTrue(self.lamp.is_connected_to(self.sw1))
        self.assertTrue(self.generator.is_connected_to(self.sw1))
        self.assertTrue(self.sw1.is_connected_to(self.generator))

        circuit = Circuit("chain")
        circuit.add_devices(self.generator, self.sw1, self.lamp)
        self.assertEqual(circuit.stale_links(), [])
        self.assertEqual(len(circuit.links()), 2)

    def test_generator_disconnect_is_local(self):
        self.lamp.connect("A2", self.generator, "A2")
        self.assertTrue(self.generator.disconnect("A1"))

        self.assertFalse(self.generator.is_connected_to(self.sw1))
        self.assertFalse(self.sw1.is_connected_to(self.generator))
        self.assertTrue(self.sw1.is_connected_to(self.lamp))
        self.assertTrue(self.lamp.is_connected_to(self.sw1))

    def test_chain_reachability(self):
        circuit = Circuit("chain")
        circuit.add_devices(self.generator, self.sw1, self.lamp)

        self.assertFalse(self.generator.is_connected_to(self.lamp))
        self.assertTrue(circuit.is_reachable(self.generator, self.lamp))

        self.generator.disconnect("A1")
        self.assertEqual(circuit.stale_links(), [])
        self.assertFalse(circuit.is_reachable(self.generator, self.sw1))
        self.assertFalse(circuit.is_reachable(self.generator, self.lamp))
        self.assertTrue(circuit.is_reachable(self.sw1, self.lamp))


if __name__ == '__main__':
    unittest.main()
