"""The game window and its main loop."""

from __future__ import annotations

import time

import pygame

from .entities import Enemy, Entity, Projectile, still_in_window
from .factory import EnemyFactory
from .player import Controls, Player
from .settings import MenuState, get_settings

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
SPAWN_INTERVAL = 3.0
EXIT_MESSAGE = (
    "      What do you want to do?",
    "[ Q (quit game) / E (keep playing) ]",
)


def read_controls() -> Controls:
    """Collect this frame's input from pygame's event queue and keyboard."""
    pressed: set[int] = set()
    clicked = False
    closing = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            closing = True
        elif event.type == pygame.KEYDOWN:
            pressed.add(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            clicked = True
    held = pygame.key.get_pressed()

    def down(*keys: int) -> bool:
        return any(key in pressed or held[key] for key in keys)

    return Controls(
        forward=down(pygame.K_UP, pygame.K_a),
        backward=down(pygame.K_DOWN, pygame.K_s),
        left=down(pygame.K_LEFT, pygame.K_a),
        right=down(pygame.K_RIGHT, pygame.K_d),
        fire=pygame.K_SPACE in pressed or clicked,
        pause=closing or pygame.K_ESCAPE in pressed,
        quit=pygame.K_q in pressed,
        resume=pygame.K_e in pressed,
    )


class Menu:
    """The game window: tracks the app state and drives each frame."""

    def __init__(self, state: MenuState = MenuState.MENU) -> None:
        self.state = MenuState(state)
        self._spawn_clock = 0.0
        self._enemy_factory = EnemyFactory()
        print(f"S-a creat meniul {int(self.state)}")

    def __str__(self) -> str:
        return f"State: {self.state.name}"

    def __enter__(self) -> Menu:
        return self

    def __exit__(self, *exc_info) -> None:
        print("Gata cu fotosinteza, la culcare toate lumea")

    def update_state(self, state: MenuState) -> None:
        """Switch to a new state and announce it."""
        self.state = MenuState(state)
        print(f"New state: {int(self.state)}")

    def advance(
        self,
        controls: Controls,
        player: Player,
        entities: list[Entity],
        now: float,
    ) -> MenuState:
        """Run the game logic for one frame and return the resulting state."""
        if controls.pause:
            self.update_state(MenuState.PAUSE)

        if self.state == MenuState.PAUSE:
            if controls.quit:
                self.update_state(MenuState.EXIT)
            elif controls.resume:
                self.update_state(MenuState.PLAYING)
            return self.state

        player.update(controls, entities)

        kept: list[Entity] = []
        spawned: list[Entity] = []
        for entity in entities:
            moving = isinstance(entity, (Enemy, Projectile))
            if moving:
                entity.update()
            if self._spawn_clock - now >= SPAWN_INTERVAL:
                spawned.append(self._enemy_factory.create())
                self._spawn_clock = now
            if moving and not still_in_window(entity):
                continue
            kept.append(entity)
        entities[:] = kept + spawned
        return self.state

    def _draw_pause(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        settings = get_settings()
        width, height = settings.render_width, settings.render_height
        top = height * 2 // 5
        pygame.draw.rect(surface, WHITE, pygame.Rect(0, top, width, height // 6))
        rendered = [font.render(line, True, BLACK) for line in EXIT_MESSAGE]
        left = width // 2 - max(text.get_width() for text in rendered) // 2
        for text in rendered:
            surface.blit(text, (left, top))
            top += text.get_height()

    @staticmethod
    def _draw_game(surface: pygame.Surface, player: Player, entities: list[Entity]) -> None:
        player.draw(surface)
        for entity in entities:
            if isinstance(entity, (Enemy, Projectile)):
                entity.draw(surface)

    def run_app(self, player: Player, entities: list[Entity]) -> None:
        """Open the window and run the game until the player quits."""
        settings = get_settings()
        pygame.init()
        try:
            surface = pygame.display.set_mode((settings.render_width, settings.render_height))
            pygame.display.set_caption("Project Asteroid")
            font = pygame.font.Font(None, max(1, settings.render_width // 40))
            clock = pygame.time.Clock()
            self._spawn_clock = time.monotonic()
            while self.state != MenuState.EXIT:
                state = self.advance(read_controls(), player, entities, time.monotonic())
                if state == MenuState.EXIT:
                    break
                surface.fill(BLACK)
                if state == MenuState.PAUSE:
                    self._draw_pause(surface, font)
                else:
                    self._draw_game(surface, player, entities)
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()