"""
Circuit class for inspecting the wiring between a set of devices as a graph.
"""

import logging

import networkx as nx

from .devices import Device

logger = logging.getLogger(__name__)


class Circuit:
    """
    A caller-owned collection of devices.

    The circuit does not own or create devices and does not change their
    wiring; it only reads the links stored on their poles.
    """

    def __init__(self, name="Untitled Circuit"):
        self.name = name
        self.devices = []

    def add_device(self, device):
        """Add a device to the circuit."""
        if not isinstance(device, Device):
            raise TypeError(f"device must be a Device, got {type(device)}")
        if not self._contains(device):
            self.devices.append(device)

    def add_devices(self, *devices):
        for device in devices:
            self.add_device(device)

    def remove_device(self, device):
        """Remove a device from the circuit. Its links are left untouched."""
        self.devices = [d for d in self.devices if d is not device]

    def _contains(self, device):
        return any(d is device for d in self.devices)

    def links(self):
        """
        Get every symmetric link that touches a registered device.

        Returns:
            list: (device_a, pole_a, device_b, pole_b) tuples, each link once.
        """
        seen = set()
        result = []
        for device in self.devices:
            for pole in device.get_poles():
                partner = pole.linked_device
                if partner is None:
                    continue
                partner_pole = partner.get_pole(pole.linked_pole_name)
                if partner_pole is None or not partner_pole.points_to(device, pole.name):
                    continue
                key = frozenset([(id(device), pole.name), (id(partner), partner_pole.name)])
                if key in seen:
                    continue
                seen.add(key)
                result.append((device, pole.name, partner, partner_pole.name))
        return result

    def stale_links(self):
        """
        Get one-sided links: poles whose partner does not point back.

        Returns:
            list: (device, pole_name, linked_device, linked_pole_name) tuples.
        """
        result = []
        for device in self.devices:
            for pole in device.get_poles():
                partner = pole.linked_device
                if partner is None:
                    continue
                partner_pole = partner.get_pole(pole.linked_pole_name)
                if partner_pole is None or not partner_pole.points_to(device, pole.name):
                    result.append((device, pole.name, partner, pole.linked_pole_name))
        if result:
            logger.warning(f"Circuit '{self.name}' has {len(result)} stale link(s)")
        return result

    def to_graph(self):
        """
        Build a networkx graph of the wiring.

        Nodes are devices, edges are links. Each edge carries `pole_a` and
        `pole_b` in the order returned by links(). Self-links become
        self-loops.

        Returns:
            networkx.MultiGraph
        """
        graph = nx.MultiGraph(name=self.name)
        for device in self.devices:
            graph.add_node(device)
        for device_a, pole_a, device_b, pole_b in self.links():
            graph.add_edge(device_a, device_b, pole_a=pole_a, pole_b=pole_b)
        return graph

    def is_reachable(self, device_a, device_b):
        """
        Check whether two devices are connected through any chain of links,
        including through other devices.
        """
        graph = self.to_graph()
        if device_a not in graph or device_b not in graph:
            return False
        return nx.has_path(graph, device_a, device_b)

    def connected_groups(self):
        """Get the sets of devices that are wired together."""
        return [set(group) for group in nx.connected_components(self.to_graph())]

    def __repr__(self):
        return f"Circuit('{self.name}', {len(self.devices)} devices, {len(self.links())} links)"
