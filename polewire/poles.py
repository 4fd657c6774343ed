"""
Pole: a named connection point on a device.
"""

import weakref


class Pole:
    """
    Represents a connection point (pole) of a device.

    A pole can be linked to exactly one other pole, either on another device
    or on the device that owns it. Both the owner and the linked device are
    held through weak references, so a pole never keeps a device alive.
    """

    def __init__(self, owner=None, name=None):
        self._owner_ref = weakref.ref(owner) if owner is not None else None
        self.name = name
        self._linked_ref = None
        self.linked_pole_name = ""

    @property
    def owner(self):
        """Device this pole belongs to, or None if it is gone."""
        if self._owner_ref is None:
            return None
        return self._owner_ref()

    @property
    def linked_device(self):
        """Device on the other end of the link, or None when unlinked."""
        if self._linked_ref is None:
            return None
        return self._linked_ref()

    @property
    def linked_pole_name(self):
        """Name of the pole on the other end, or "" when unlinked."""
        # A collected partner reads as unlinked
        if self.linked_device is None:
            return ""
        return self._linked_pole_name

    @linked_pole_name.setter
    def linked_pole_name(self, value):
        self._linked_pole_name = value

    @property
    def is_linked(self):
        return self.linked_device is not None

    def link(self, device, pole_name):
        """Point this pole at `pole_name` on `device`. One side only."""
        self._linked_ref = weakref.ref(device)
        self.linked_pole_name = pole_name

    def unlink(self):
        """Clear this side of the link."""
        self._linked_ref = None
        self.linked_pole_name = ""

    def points_to(self, device, pole_name):
        """True if this pole is linked to `pole_name` on exactly `device`."""
        return self.linked_device is device and self.linked_pole_name == pole_name

    def __str__(self):
        owner = self.owner
        if owner is not None:
            return f"{owner.name}.{self.name}"
        return str(self.name)

    def __repr__(self):
        if self.is_linked:
            return f"Pole({self} -> {self.linked_device.name}.{self.linked_pole_name})"
        return f"Pole({self})"
