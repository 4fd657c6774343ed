"""
Package-wide settings.

Settings are plain attributes on a module-level object and are changed in
code only, either directly or through configure():

    >>> from polewire import config
    >>> config.configure(strict_reconnect=True)
"""


class Settings:
    """Mutable settings shared by all devices."""

    def __init__(self, strict_reconnect: bool = False):
        # When True, connect() tears down existing links on both poles first
        self.strict_reconnect = strict_reconnect

    def as_dict(self) -> dict:
        return {"strict_reconnect": self.strict_reconnect}

    def __repr__(self):
        return f"Settings(strict_reconnect={self.strict_reconnect})"


settings = Settings()


def configure(**overrides) -> Settings:
    """
    Update the global settings.

    Args:
        **overrides: Setting names and their new values.

    Returns:
        Settings: The updated settings object.

    Raises:
        ValueError: If an unknown setting name is given.
    """
    known = settings.as_dict()
    unknown = sorted(set(overrides) - set(known))
    if unknown:
        raise ValueError(f"Unknown settings: {unknown}. Known settings: {sorted(known)}")

    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


def reset() -> Settings:
    """Restore default settings."""
    return configure(**Settings().as_dict())
