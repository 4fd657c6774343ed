"""Custom exceptions for polewire."""


class PolewireError(Exception):
    """Base class for all errors raised by polewire."""

    pass


class PoleNotFoundError(PolewireError, LookupError):
    """Raised when a referenced pole does not exist on a device."""

    def __init__(self, device_name: str, pole_name, available_poles: list):
        self.device_name = device_name
        self.pole_name = pole_name
        self.available_poles = available_poles
        super().__init__(
            f"Pole '{pole_name}' not found on device '{device_name}'. "
            f"Available poles: {available_poles}"
        )
