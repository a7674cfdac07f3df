import pytest

from asteroidgame.entities import Enemy, Projectile, Vector2
from asteroidgame.factory import EnemyFactory, EntityFactory, ProjectileFactory
from asteroidgame.settings import get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_entity_factory_is_abstract():
    with pytest.raises(TypeError):
        EntityFactory()


def test_projectile_factory_default():
    settings = get_settings()
    shot = ProjectileFactory().create()
    assert isinstance(shot, Projectile)
    assert shot.damage == 10
    assert shot.radius == 30
    assert tuple(shot.position) == (settings.render_width / 2, settings.render_height / 2)


def test_projectile_factory_with_values():
    shot = ProjectileFactory().create_with(3, Vector2(5.0, 6.0), 45, 2.0, 1)
    assert (shot.damage, shot.rotation, shot.radius, shot.sides) == (3, 45, 2.0, 1)
    assert tuple(shot.position) == (5.0, 6.0)


def test_enemy_factory_default():
    settings = get_settings()
    settings.set_render_dimensions(1600, 1000)
    enemy = EnemyFactory().create()
    assert isinstance(enemy, Enemy)
    assert enemy.radius == 1600 // 50
    assert (enemy.level, enemy.health_points, enemy.sides) == (1, 10, 3)
    assert tuple(enemy.position) == (800.0, 500.0)


def test_enemy_factory_with_values_ignores_damage():
    enemy = EnemyFactory().create_with(99, (1.0, 2.0), 30, 7.0, 5)
    assert (enemy.level, enemy.health_points) == (1, 10)
    assert (enemy.rotation, enemy.radius, enemy.sides) == (30, 7.0, 5)
    assert not hasattr(enemy, "damage")


def test_describe_projectile():
    assert ProjectileFactory().describe().startswith("Created: Projectile")


def test_describe_enemy():
    assert EnemyFactory().describe().startswith("Created: Enemy")


def test_factories_produce_independent_entities():
    factory = EnemyFactory()
    a, b = factory.create(), factory.create()
    a.update()
    assert tuple(b.position) != tuple(a.position)