"""Factories producing enemies and projectiles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from .entities import Enemy, Entity, Projectile
from .settings import get_settings


def _window_centre() -> tuple[float, float]:
    settings = get_settings()
    return settings.render_width / 2, settings.render_height / 2


class EntityFactory(ABC):
    """Creates entities, either with defaults or with given attributes."""

    @abstractmethod
    def create(self) -> Entity:
        """Create an entity with the factory's defaults."""

    @abstractmethod
    def create_with(
        self,
        damage: int,
        position: Iterable[float],
        rotation: int,
        radius: float,
        sides: int,
    ) -> Entity:
        """Create an entity with the given attributes."""

    def describe(self) -> str:
        """Create a default entity and report what kind it is."""
        entity = self.create()
        kind = "Projectile" if isinstance(entity, Projectile) else "Enemy"
        return f"Created: {kind} {type(entity).__name__}"


class ProjectileFactory(EntityFactory):
    """Creates projectiles."""

    def create(self) -> Projectile:
        return Projectile(10, _window_centre(), 0, 30.0, 1)

    def create_with(self, damage, position, rotation, radius, sides) -> Projectile:
        return Projectile(damage, position, rotation, radius, sides)


class EnemyFactory(EntityFactory):
    """Creates level-one enemies with ten health points."""

    def create(self) -> Enemy:
        radius = float(get_settings().render_width // 50)
        return Enemy(_window_centre(), 0, 3, radius, 1, 10)

    def create_with(self, damage, position, rotation, radius, sides) -> Enemy:
        return Enemy(position, rotation, sides, radius, 1, 10)