import pygame
import pytest

from asteroidgame.entities import Enemy, Projectile
from asteroidgame.menu import Menu, read_controls
from asteroidgame.player import Controls, Player
from asteroidgame.settings import MenuState, get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.display.set_mode((10, 10))
    pygame.event.clear()
    yield
    pygame.display.quit()


def make_player():
    return Player("Gigel", 1, 5, 0, (800.0, 500.0), 26.0, 3)


def test_constructor_announces_state(capsys):
    menu = Menu(MenuState.PLAYING)
    assert menu.state == MenuState.PLAYING
    assert "S-a creat meniul 1" in capsys.readouterr().out


def test_update_state_announces(capsys):
    menu = Menu(MenuState.PLAYING)
    capsys.readouterr()
    menu.update_state(MenuState.PAUSE)
    assert menu.state == MenuState.PAUSE
    assert capsys.readouterr().out == "New state: 2\n"


def test_str_names_state():
    assert str(Menu(MenuState.PAUSE)) == "State: PAUSE"


def test_context_exit_says_goodbye(capsys):
    with Menu(MenuState.PLAYING):
        pass
    assert "la culcare" in capsys.readouterr().out


def test_pause_control_pauses_and_freezes_entities():
    menu = Menu(MenuState.PLAYING)
    enemy = Enemy((800.0, 500.0), 0, 3, 30.0, 1, 10)
    entities = [enemy]
    state = menu.advance(Controls(pause=True), make_player(), entities, 1.0)
    assert state == MenuState.PAUSE
    assert tuple(enemy.position) == (800.0, 500.0)


def test_quit_from_pause_exits():
    menu = Menu(MenuState.PAUSE)
    assert menu.advance(Controls(quit=True), make_player(), [], 1.0) == MenuState.EXIT


def test_resume_from_pause_plays():
    menu = Menu(MenuState.PAUSE)
    assert menu.advance(Controls(resume=True), make_player(), [], 1.0) == MenuState.PLAYING


def test_playing_moves_enemies_and_projectiles():
    menu = Menu(MenuState.PLAYING)
    enemy = Enemy((800.0, 500.0), 0, 3, 30.0, 1, 10)
    shot = Projectile(1, (400.0, 500.0), 0, 5.0, 1)
    entities = [enemy, shot]
    menu.advance(Controls(), make_player(), entities, 1.0)
    assert entities == [enemy, shot]
    assert enemy.position.y < 500.0
    assert shot.position.y < 500.0
    assert shot.position.y < enemy.position.y


def test_entities_leaving_window_are_removed():
    menu = Menu(MenuState.PLAYING)
    inside = Enemy((800.0, 500.0), 0, 3, 30.0, 1, 10)
    outside = Enemy((-20.0, 500.0), 0, 3, 30.0, 1, 10)
    entities = [outside, inside]
    menu.advance(Controls(), make_player(), entities, 1.0)
    assert entities == [inside]


def test_fire_adds_projectile_through_player():
    menu = Menu(MenuState.PLAYING)
    entities = []
    menu.advance(Controls(fire=True), make_player(), entities, 1.0)
    assert len(entities) == 1
    assert isinstance(entities[0], Projectile)


def test_no_spawn_as_time_moves_forward():
    menu = Menu(MenuState.PLAYING)
    entities = [Enemy((800.0, 500.0), 0, 3, 30.0, 1, 10)]
    menu.advance(Controls(), make_player(), entities, 100.0)
    assert len(entities) == 1


def test_player_is_updated_while_playing():
    menu = Menu(MenuState.PLAYING)
    player = make_player()
    menu.advance(Controls(forward=True), player, [], 1.0)
    assert player.position.y < 500.0
    assert get_settings().multiplier > 0


def test_read_controls_reports_fire(display):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    controls = read_controls()
    assert controls.fire is True
    assert controls.quit is False


def test_read_controls_window_close_pauses(display):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert read_controls().pause is True