"""
Device classes: electrical devices with a fixed set of named poles.
"""

import logging
import threading
from contextlib import ExitStack, contextmanager

from . import config
from .exceptions import PoleNotFoundError
from .poles import Pole

logger = logging.getLogger(__name__)


@contextmanager
def _locked(*devices):
    """Hold the locks of all given devices, acquired in a fixed order."""
    unique = {id(device): device for device in devices if device is not None}
    with ExitStack() as stack:
        for key in sorted(unique):
            stack.enter_context(unique[key]._lock)
        yield


@contextmanager
def _locked_with_partners(devices, poles):
    """
    Hold the locks of `devices` and of every device the given poles are
    linked to. Retries if a link changes while the locks are being taken.
    """
    while True:
        partners = [pole.linked_device for pole in poles]
        with _locked(*devices, *partners):
            if all(pole.linked_device is partner for pole, partner in zip(poles, partners)):
                yield
                return


class Device:
    """
    Base class for all devices.

    Subclasses declare their default pole names in POLE_NAMES, create the
    poles in __init__ and return them from get_poles(). Everything else
    (lookup, connect, disconnect, connectivity queries) lives here.
    """

    POLE_NAMES = ()

    def __init__(self, name=" "):
        self.name = name
        self._lock = threading.RLock()

    def get_poles(self):
        """Get the list of poles of this device, in index order."""
        raise NotImplementedError("Subclasses must implement get_poles()")

    def get_pole_count(self):
        """Number of poles on this device."""
        return len(self.get_poles())

    def poles(self):
        """Iterate over the poles of this device."""
        for pole in self.get_poles():
            yield pole

    def pole_names(self):
        return [pole.name for pole in self.get_poles()]

    def get_pole(self, key):
        """
        Look up a pole by name or by 1-based index.

        Args:
            key: Pole name (str) or index from 1 to get_pole_count()

        Returns:
            Pole: The matching pole, or None if there is no such pole.
        """
        poles = self.get_poles()
        if isinstance(key, int) and not isinstance(key, bool):
            if 1 <= key <= len(poles):
                return poles[key - 1]
            return None

        for pole in poles:
            if pole.name == key:
                return pole
        return None

    def require_pole(self, key):
        """Like get_pole(), but raises PoleNotFoundError instead of returning None."""
        pole = self.get_pole(key)
        if pole is None:
            raise PoleNotFoundError(self.name, key, self.pole_names())
        return pole

    def rename(self, new_name):
        """Change the display name of this device."""
        self.name = new_name

    def rename_pole(self, old_name, new_name):
        """
        Rename one of this device's poles.

        Unlike assigning Pole.name directly, this refuses duplicate names and
        updates the partner pole so an existing link stays intact.

        Raises:
            PoleNotFoundError: If no pole is named `old_name`.
            ValueError: If another pole is already named `new_name`.
            TypeError: If `new_name` is not a str.
        """
        pole = self.require_pole(old_name)
        if not isinstance(new_name, str):
            raise TypeError(f"new_name must be a str, got {type(new_name)}")
        if new_name == pole.name:
            return pole
        if self.get_pole(new_name) is not None:
            raise ValueError(f"Device '{self.name}' already has a pole named '{new_name}'")

        with _locked_with_partners([self], [pole]):
            partner = pole.linked_device
            if partner is not None:
                partner_pole = partner.get_pole(pole.linked_pole_name)
                if partner_pole is not None and partner_pole.points_to(self, pole.name):
                    partner_pole.linked_pole_name = new_name
            pole.name = new_name
        return pole

    def connect(self, pole_name, other, other_pole_name, strict=None):
        """
        Connect one of this device's poles to a pole of another device.

        Any link already on either pole is replaced. In the default mode the
        previous partners are not told about it and keep a one-sided link to
        the pole; in strict mode both poles are disconnected first.

        Args:
            pole_name: Name of the pole on this device
            other: Device to connect to (may be this same device)
            other_pole_name: Name of the pole on `other`
            strict: Disconnect existing links first. None uses
                config.settings.strict_reconnect.

        Returns:
            bool: True on success, False if the two pole names are equal.

        Raises:
            TypeError: If `other` is not a Device.
            PoleNotFoundError: If either pole does not exist.
        """
        if not isinstance(other, Device):
            raise TypeError(f"other must be a Device, got {type(other)}")

        # Equal names are refused even across two different devices
        if isinstance(pole_name, str) and pole_name == other_pole_name:
            return self._refuse_equal_names(pole_name, other)

        pole = self.require_pole(pole_name)
        other_pole = other.require_pole(other_pole_name)
        # Poles may be given by index; links always store the resolved names
        pole_name, other_pole_name = pole.name, other_pole.name
        if pole_name == other_pole_name:
            return self._refuse_equal_names(pole_name, other)

        if strict is None:
            strict = config.settings.strict_reconnect

        with _locked_with_partners([self, other], [pole, other_pole]):
            if strict:
                self._release(pole)
                other._release(other_pole)
            else:
                self._warn_if_overwriting(pole, other, other_pole_name)
                other._warn_if_overwriting(other_pole, self, pole_name)

            pole.link(other, other_pole_name)
            other_pole.link(self, pole_name)

        logger.debug(f"Connected {self.name}.{pole_name} <-> {other.name}.{other_pole_name}")
        return True

    def disconnect(self, pole_name):
        """
        Remove the link on one of this device's poles.

        Both sides are cleared; the far side is looked up on the device the
        pole is actually linked to.

        Returns:
            bool: True if a link was removed, False if the pole was unlinked.

        Raises:
            PoleNotFoundError: If the pole does not exist.
        """
        pole = self.require_pole(pole_name)
        with _locked_with_partners([self], [pole]):
            if pole.linked_device is None:
                return False
            self._release(pole)

        logger.debug(f"Disconnected {self.name}.{pole.name}")
        return True

    def is_connected_to(self, other):
        """
        Check whether this device is linked directly to `other` through any
        pair of poles. Links through a third device do not count.
        """
        for pole in self.get_poles():
            for other_pole in other.get_poles():
                if pole.linked_pole_name == other_pole.name and pole.linked_device is other:
                    return True
        return False

    def linked_devices(self):
        """Devices directly linked to any pole of this one, without duplicates."""
        found = []
        for pole in self.get_poles():
            device = pole.linked_device
            if device is not None and not any(device is d for d in found):
                found.append(device)
        return found

    def _release(self, pole):
        """Clear `pole` and, if it still points back, its partner. Caller holds the locks."""
        partner = pole.linked_device
        if partner is None:
            return
        partner_pole = partner.get_pole(pole.linked_pole_name)
        if partner_pole is not None and partner_pole.points_to(self, pole.name):
            partner_pole.unlink()
        else:
            logger.warning(
                f"{self.name}.{pole.name} had a one-sided link to "
                f"{partner.name}.{pole.linked_pole_name}; clearing local side only"
            )
        pole.unlink()

    def _refuse_equal_names(self, pole_name, other):
        logger.debug(
            f"Refusing to connect {self.name}.{pole_name} to "
            f"{other.name}.{pole_name}: pole names are equal"
        )
        return False

    def _warn_if_overwriting(self, pole, new_device, new_pole_name):
        old_device = pole.linked_device
        if old_device is None or pole.points_to(new_device, new_pole_name):
            return
        logger.warning(
            f"Overwriting link {self.name}.{pole.name} -> "
            f"{old_device.name}.{pole.linked_pole_name}; the old partner keeps a stale link"
        )

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r}, poles={self.pole_names()})"


class Switch(Device):
    """Simple switch with two poles."""

    POLE_NAMES = ("A1", "A2")

    def __init__(self, name=" "):
        super().__init__(name)
        self.a1, self.a2 = (Pole(self, pole_name) for pole_name in self.POLE_NAMES)

    def get_poles(self):
        return [self.a1, self.a2]


class Light(Device):
    """Light fixture with two poles."""

    POLE_NAMES = ("A1", "A2")

    def __init__(self, name=" "):
        super().__init__(name)
        self.l1, self.l2 = (Pole(self, pole_name) for pole_name in self.POLE_NAMES)

    def get_poles(self):
        return [self.l1, self.l2]


class Generator(Device):
    """Generator with three poles: phase, neutral and ground (by name only)."""

    POLE_NAMES = ("A1", "A2", "A3")

    def __init__(self, name=" "):
        super().__init__(name)
        self.a1, self.a2, self.a3 = (Pole(self, pole_name) for pole_name in self.POLE_NAMES)

    def get_poles(self):
        return [self.a1, self.a2, self.a3]
