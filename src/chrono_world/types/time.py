"""Time-of-day constants and helpers."""

from __future__ import annotations

from chrono_world.exceptions import ConfigurationError

HOURS_PER_DAY = 24
MIN_HOUR = 0
MAX_HOUR = HOURS_PER_DAY - 1


def clamp_hour(hour: int) -> int:
    """Clamp an hour into 0-23."""
    return max(MIN_HOUR, min(MAX_HOUR, int(hour)))


def validate_hour(hour: int, field_name: str = "hour") -> int:
    """Check that a configured hour lies in 0-23.

    Args:
        hour: The configured value.
        field_name: Name used in the error message.

    Returns:
        The hour as an int.

    Raises:
        ConfigurationError: If the hour is out of range or not an integer.
    """
    if isinstance(hour, bool) or not isinstance(hour, int):
        raise ConfigurationError(f"{field_name} must be an integer, got {hour!r}")
    if not MIN_HOUR <= hour <= MAX_HOUR:
        raise ConfigurationError(
            f"{field_name} must be between {MIN_HOUR} and {MAX_HOUR}, got {hour}"
        )
    return hour


def format_hour(hour: int) -> str:
    """Format an hour as a clock string, e.g. ``07:00``."""
    return f"{hour:02d}:00"
