"""Command-line entry point: ask for the configuration and start the game."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, TextIO

from .errors import (
    InvalidMultiplierError,
    NonLandscapeDimensionsError,
    NullNegativeDimensionsError,
)
from .menu import Menu
from .player import Player
from .settings import MenuState, get_settings, reset_settings


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def prompt_configuration(
    read: Callable[[], str], write: Callable[[str], object]
) -> tuple[int, int, float]:
    """Ask for render dimensions and multiplier until all are valid.

    ``read`` returns the next whitespace-separated token and raises EOFError
    when input runs out.
    """
    width = height = 0
    multiplier = 0.0
    while True:
        try:
            if not width:
                write("Render width: ")
                width = _parse_int(read())
                if width <= 0:
                    raise NullNegativeDimensionsError()
            if not height:
                write("Render height: ")
                height = _parse_int(read())
                if height <= 0:
                    raise NullNegativeDimensionsError()
            if width <= height:
                raise NonLandscapeDimensionsError()
            if not multiplier:
                write("Game multiplier [2 - 2.5]:")
                multiplier = _parse_float(read())
                if multiplier < 2 or multiplier > 2.5:
                    raise InvalidMultiplierError()
        except (NullNegativeDimensionsError, NonLandscapeDimensionsError) as err:
            write(err.message)
            width = height = 0
            continue
        except InvalidMultiplierError as err:
            multiplier = 0.0
            write(err.message)
            continue
        return width, height, multiplier


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _reader(stream: TextIO) -> Callable[[], str]:
    tokens = _tokens(stream)

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("no more input") from None

    return read


def _writer(stream: TextIO) -> Callable[[str], None]:
    def write(text: str) -> None:
        stream.write(text)
        stream.flush()

    return write


def main(argv: list[str] | None = None) -> int:
    """Configure the game interactively and run it."""
    parser = argparse.ArgumentParser(
        prog="asteroidgame", description="Fly a ship and shoot asteroids."
    )
    parser.parse_args(argv)

    try:
        width, height, multiplier = prompt_configuration(
            _reader(sys.stdin), _writer(sys.stdout)
        )
    except EOFError:
        sys.stdout.write("\n")
        return 1

    settings = get_settings()
    settings.set_render_dimensions(width, height)
    settings.set_multiplier(multiplier)

    player = Player(
        "Gigel",
        1,
        5,
        0,
        (settings.render_width / 2, settings.render_height / 2),
        float(settings.render_width // 60),
        3,
    )
    try:
        with Menu(MenuState.PLAYING) as menu:
            menu.run_app(player, [])
    finally:
        reset_settings()
    return 0


if __name__ == "__main__":
    sys.exit(main())