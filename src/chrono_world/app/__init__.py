"""Main application package."""

from __future__ import annotations

from .game_loop import GameLoop

__all__ = [
    "GameLoop",
]
