"""Moving game objects: the entity base, enemies and projectiles."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator

import pygame

from .settings import get_settings

DEG2RAD = math.pi / 180.0
WHITE = (255, 255, 255)
RED = (230, 41, 55)


@dataclass
class Vector2:
    """A 2D point or displacement."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def _heading(rotation: float) -> tuple[float, float]:
    """Unit vector for a rotation in degrees, 0 pointing up."""
    angle = (rotation - 90) * DEG2RAD
    return math.cos(angle), math.sin(angle)


class Entity(ABC):
    """Something with a position, rotation, outline and collision radius."""

    created: ClassVar[int] = 0

    def __init__(
        self,
        position: Iterable[float],
        rotation: int,
        sides: int,
        radius: float = 0.0,
    ) -> None:
        self.position = Vector2(*position)
        self.rotation = rotation
        self.sides = sides
        self.radius = radius
        Entity.created += 1

    @abstractmethod
    def update(self) -> None:
        """Advance the entity by one frame."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the entity onto a surface."""

    def _outline(self, sides: int, rotation: float) -> list[tuple[float, float]]:
        """Vertices of a regular polygon around the entity's position."""
        sides = max(3, sides)
        step = 360.0 / sides
        return [
            (
                self.position.x + math.cos((rotation + k * step) * DEG2RAD) * self.radius,
                self.position.y + math.sin((rotation + k * step) * DEG2RAD) * self.radius,
            )
            for k in range(sides)
        ]


class Enemy(Entity):
    """An asteroid-like enemy drifting in the direction it faces."""

    def __init__(
        self,
        position: Iterable[float],
        rotation: int,
        sides: int,
        radius: float,
        level: int,
        health_points: int,
    ) -> None:
        super().__init__(position, rotation, sides, radius)
        self.level = level
        self.health_points = health_points

    def update(self) -> None:
        dx, dy = _heading(self.rotation)
        multiplier = get_settings().multiplier
        self.position.x += dx * multiplier
        self.position.y += dy * multiplier

    def draw(self, surface: pygame.Surface) -> None:
        sides = (3 * random.randrange(1 << 15)) % 8
        pygame.draw.polygon(surface, WHITE, self._outline(sides, self.rotation), 3)


class Projectile(Entity):
    """A laser shot flying straight ahead."""

    def __init__(
        self,
        damage: int = 1,
        position: Iterable[float] | None = None,
        rotation: int = 0,
        radius: float = 1.0,
        sides: int = 1,
    ) -> None:
        if position is None:
            settings = get_settings()
            position = (float(settings.render_width), float(settings.render_height))
        super().__init__(position, rotation, sides, radius)
        self.damage = damage

    def _step(self) -> tuple[float, float]:
        dx, dy = _heading(self.rotation)
        length = get_settings().render_width / 30
        return dx * length, dy * length

    def update(self) -> None:
        dx, dy = self._step()
        self.position.x += dx
        self.position.y += dy

    def draw(self, surface: pygame.Surface) -> None:
        dx, dy = self._step()
        start = (self.position.x, self.position.y)
        end = (self.position.x + dx, self.position.y + dy)
        pygame.draw.line(surface, WHITE, start, end, 5)


def still_in_window(entity: Entity) -> bool:
    """Whether the entity's position lies inside the render window."""
    settings = get_settings()
    x, y = entity.position
    distances = (
        int(y),
        int(settings.render_height - y),
        int(x),
        int(settings.render_width - x),
    )
    return all(d >= 0 for d in distances)