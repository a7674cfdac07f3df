"""Shared render and gameplay settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MenuState(IntEnum):
    """States the game window can be in."""

    MENU = 0
    PLAYING = 1
    PAUSE = 2
    SETTINGS = 3
    EXIT = 4


class WeaponType(IntEnum):
    """Weapons available to the player."""

    LASER = 0


@dataclass
class GameSettings:
    """Render dimensions and the game's speed multiplier."""

    render_width: int = 1600
    render_height: int = 1000
    multiplier: float = 2.0
    aspect_ratio: float = 1.0

    def set_render_dimensions(self, width: int = 1600, height: int = 1000) -> None:
        """Set new window dimensions and announce them."""
        self.render_width = width
        self.render_height = height
        self.aspect_ratio = float(width // height)
        print(f"New window dimensions: {width}x{height}")

    def set_multiplier(self, multiplier: float = 2.0) -> None:
        """Set a new game multiplier and announce it."""
        self.multiplier = multiplier
        print(f"New multiplier: {multiplier:g}")


_instance: GameSettings | None = None


def get_settings() -> GameSettings:
    """Return the shared settings, creating them on first use."""
    global _instance
    if _instance is None:
        _instance = GameSettings()
    return _instance


def reset_settings() -> None:
    """Discard the shared settings; the next lookup creates fresh ones."""
    global _instance
    _instance = None