"""
polewire: devices, poles and the wires between them.

Devices expose named poles; any two poles can be linked or unlinked, and the
resulting topology can be queried directly or as a graph.
"""

from .poles import Pole
from .devices import Device, Switch, Light, Generator
from .circuit import Circuit
from .exceptions import PolewireError, PoleNotFoundError
from .config import settings, configure
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Core classes
    "Pole", "Device",
    # Device variants
    "Switch", "Light", "Generator",
    # Topology
    "Circuit",
    # Errors
    "PolewireError", "PoleNotFoundError",
    # Configuration and logging
    "settings", "configure", "setup_logging",
]
