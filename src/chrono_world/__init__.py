"""Chrono World: accelerated day/night cycle with hour-scheduled scene objects."""

__version__ = "0.1.0"
