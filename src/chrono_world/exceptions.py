"""Chrono World exception hierarchy.

Configuration problems surface from setup calls before the simulation loop
starts. Per-tick problems are recovered inside the tick and only logged.
"""


class ChronoWorldError(Exception):
    """Root of all Chrono World exceptions."""


class ConfigurationError(ChronoWorldError):
    """Invalid static configuration (pacing, hours, unknown keys)."""


class MissingTargetError(ChronoWorldError):
    """A scheduled entry's scene object is absent or destroyed."""

    def __init__(self, entry_name: str):
        super().__init__(f"Target object '{entry_name}' is missing from the scene")
        self.entry_name = entry_name
