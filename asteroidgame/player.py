"""The player's ship and the controls that steer it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import pygame

from .entities import DEG2RAD, RED, WHITE, Entity
from .factory import ProjectileFactory
from .settings import get_settings


@dataclass(frozen=True)
class Controls:
    """Input state for one frame."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False
    pause: bool = False
    quit: bool = False
    resume: bool = False


def _heading(rotation: float) -> tuple[float, float]:
    angle = (rotation - 90) * DEG2RAD
    return math.cos(angle), math.sin(angle)


class Player(Entity):
    """The ship controlled by the player."""

    def __init__(
        self,
        name: str,
        level: int,
        lives: int,
        rotation: int,
        position: Iterable[float],
        radius: float,
        sides: int,
    ) -> None:
        super().__init__(position, rotation, sides, radius)
        self.name = name
        self.level = level
        self.lives = lives

    def update(self, controls: Controls, entities: list[Entity]) -> None:
        """Move, steer and fire according to the controls."""
        settings = get_settings()
        multiplier = settings.multiplier
        dx, dy = _heading(self.rotation)
        turn = 4 * multiplier
        rotated = False

        if controls.forward:
            self.position.x += dx * 5 * multiplier
            self.position.y += dy * 5 * multiplier
        if controls.backward:
            self.position.x -= dx * 5 * multiplier
            self.position.y -= dy * 5 * multiplier
            # Reversing swaps the steering direction.
            if controls.right:
                self.rotation = int(self.rotation - turn)
                rotated = True
            if controls.left:
                self.rotation = int(self.rotation + turn)
                rotated = True

        if not rotated:
            if controls.right:
                self.rotation = int(self.rotation + turn)
            if controls.left:
                self.rotation = int(self.rotation - turn)

        if self.rotation >= 180:
            self.rotation -= 360
        if self.rotation <= -180:
            self.rotation += 360

        half = self.radius / 2
        self.position.x = min(max(self.position.x, half), settings.render_width - half)
        self.position.y = min(max(self.position.y, half), settings.render_height - half)

        if controls.fire:
            entities.append(
                ProjectileFactory().create_with(
                    1, self.position, self.rotation, self.radius / 2, 1
                )
            )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ship as a triangle with a line showing its heading."""
        if self.sides != 3:
            return
        pygame.draw.polygon(surface, RED, self._outline(self.sides, self.rotation + 30), 3)
        length = get_settings().render_width // 50
        dx, dy = _heading(self.rotation)
        start = (self.position.x, self.position.y)
        end = (self.position.x + length * dx, self.position.y + length * dy)
        pygame.draw.line(surface, WHITE, start, end)