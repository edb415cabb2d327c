"""Start screen: choose a game mode, load a saved game or quit."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from hexagon_game import palette
from hexagon_game.game import FPS, Game
from hexagon_game.menu import Menu
from hexagon_game.serialization import SAVE_FILE

WINDOW_SIZE = (1280, 720)
DEFAULT_FONT = "assets/JetBrainsMono-SemiBold.ttf"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hexagon", description="Hexagon board game.")
    fonts = parser.add_mutually_exclusive_group()
    fonts.add_argument("--font", default=DEFAULT_FONT, help="TrueType font to use")
    fonts.add_argument(
        "--default-font", action="store_true", help="use pygame's built-in font"
    )
    parser.add_argument("--save-file", default=SAVE_FILE, help="where games are saved")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    font = None if args.default_font else args.font
    if font is not None and not Path(font).is_file():
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Hexagon")
        start_menu = Menu(
            font,
            WINDOW_SIZE,
            [palette.SKY, palette.GREEN, palette.YELLOW, palette.RED],
            [
                " Player\n   vs\nComputer",
                "Player\n  vs\nPlayer",
                "Load\nGame",
                "Exit",
            ],
            "Hexagon",
            palette.SKY,
        )
        clock = pygame.time.Clock()
        running = True
        while running:
            dt = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                start_menu.handle_event(event)
            if not running:
                break

            start_menu.update(dt)
            start_menu.draw(screen)
            pygame.display.flip()

            choice = start_menu.selected
            if choice is None:
                continue
            start_menu.reset_selected()
            if choice == 3:
                running = False
                continue
            game = Game(screen, choice == 0, font)
            game.save_path = args.save_file
            game.run(choice == 2)
            if game.closed:
                running = False
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())