"""A single match: board, score display, pause menu and results screen."""

from __future__ import annotations

import math
import os

import pygame

from hexagon_game import palette
from hexagon_game.board import Board
from hexagon_game.menu import Menu
from hexagon_game.palette import Color, lerp_color
from hexagon_game.serialization import SAVE_FILE, load, save
from hexagon_game.state import CellState

FPS = 60
SCORE_FONT_SIZE = 56
RESULTS_DELAY = 1.5

GREEN_SELECTED_COLOR: Color = (70, 87, 79)
RED_SELECTED_COLOR: Color = (113, 50, 60)

_SCORE_ANIMATION_DURATION = 0.2
_SCORE_HEX_RADIUS = 80
_SCORE_OUTLINE = 3
_GREEN_HEX_CENTER = (200, 360)
_RED_HEX_CENTER = (1280 - 200, 360)

FontSource = str | os.PathLike[str] | None


def _hexagon(cx: float, cy: float, radius: float) -> list[tuple[float, float]]:
    return [
        (cx + radius * math.cos(i * math.pi / 3), cy + radius * math.sin(i * math.pi / 3))
        for i in range(6)
    ]


class Score:
    """Two hexagons with each player's cell count; the one to move is lit up."""

    def __init__(self, font: FontSource) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(font, SCORE_FONT_SIZE)
        self.green = 3
        self.red = 3
        self.is_green_selected = True
        self.animation_time = 1.0
        self.green_fill: Color = GREEN_SELECTED_COLOR
        self.red_fill: Color = palette.BACKGROUND
        self._green_points = _hexagon(*_GREEN_HEX_CENTER, _SCORE_HEX_RADIUS)
        self._red_points = _hexagon(*_RED_HEX_CENTER, _SCORE_HEX_RADIUS)
        self._render()

    def _render(self) -> None:
        self._green_text = self._font.render(str(self.green), True, palette.P1_COLOR)
        self._red_text = self._font.render(str(self.red), True, palette.P2_COLOR)

    def set_score(self, green: int, red: int) -> None:
        if (green, red) != (self.green, self.red):
            self.green = green
            self.red = red
            self._render()

    def draw(self, surface: pygame.Surface) -> None:
        for points, fill, outline in (
            (self._red_points, self.red_fill, palette.P2_COLOR),
            (self._green_points, self.green_fill, palette.P1_COLOR),
        ):
            pygame.draw.polygon(surface, fill, points)
            pygame.draw.polygon(surface, outline, points, _SCORE_OUTLINE)
        for text, (cx, cy) in (
            (self._red_text, _RED_HEX_CENTER),
            (self._green_text, _GREEN_HEX_CENTER),
        ):
            surface.blit(text, (cx - text.get_width() / 2, cy - text.get_height() / 2))

    def change(self) -> None:
        """Pass the highlight to the other player."""
        self.is_green_selected = not self.is_green_selected
        self.animation_time = 0.0

    def update(self, dt: float) -> None:
        self.animation_time += dt
        t = min(self.animation_time / _SCORE_ANIMATION_DURATION, 1.0)
        if self.is_green_selected:
            green_old, green_target = palette.BACKGROUND, GREEN_SELECTED_COLOR
            red_old, red_target = RED_SELECTED_COLOR, palette.BACKGROUND
        else:
            green_old, green_target = RED_SELECTED_COLOR, palette.BACKGROUND
            red_old, red_target = palette.BACKGROUND, RED_SELECTED_COLOR
        self.green_fill = lerp_color(green_old, green_target, t)
        self.red_fill = lerp_color(red_old, red_target, t)


class Game:
    """Runs one match on ``screen`` until the player leaves or the window closes."""

    def __init__(self, screen: pygame.Surface, single_game: bool, font: FontSource) -> None:
        self.screen = screen
        self.size = screen.get_size()
        self.single_game = single_game
        self.font = font
        self.save_path: str | os.PathLike[str] = SAVE_FILE
        self.closed = False

        self.score = Score(font)
        self.esc_menu = Menu(
            font,
            self.size,
            [palette.GREEN, palette.SKY, palette.YELLOW],
            ["Save\nGame", "Load\nGame", "Exit\n To \nMenu"],
            "Hexagon",
            palette.YELLOW,
        )
        self.esc_menu_active = False
        self.result_menu: Menu | None = None
        self.board = Board(self.size, single_game)
        self.is_player1_turn = True
        self.old_is_player1_turn = True
        self._results_delay = 0.0

    def process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
            elif (
                event.type == pygame.KEYDOWN
                and event.key == pygame.K_ESCAPE
                and not self.board.is_game_over
            ):
                self.screen.fill(palette.BACKGROUND)
                self.esc_menu_active = not self.esc_menu_active

            if self.esc_menu_active:
                self.esc_menu.handle_event(event)
            elif not self.board.is_game_over:
                self.board.handle_event(event)
            elif self.result_menu is not None:
                self.result_menu.handle_event(event)

    def run(self, load_game: bool = False) -> None:
        """Play until the player exits to the menu or closes the window."""
        if load_game:
            self.load_game()
        self._results_delay = 0.0
        self.screen.fill(palette.BACKGROUND)
        self.score.draw(self.screen)

        clock = pygame.time.Clock()
        while not self.closed:
            dt = clock.tick(FPS) / 1000.0
            self.process_events()
            if self.closed:
                break
            if self._frame(dt):
                return
            pygame.display.flip()

    def _frame(self, dt: float) -> bool:
        """Advance one frame; True means the player chose to leave."""
        if self.esc_menu_active:
            return self._esc_menu_frame(dt)
        if not self.board.is_game_over:
            self._play_frame(dt)
            return False
        if self._results_delay > RESULTS_DELAY:
            return self._results_frame(dt)
        self._results_delay += dt
        self.board.update(dt)
        self.board.draw(self.screen)
        return False

    def _esc_menu_frame(self, dt: float) -> bool:
        self.esc_menu.update(dt)
        self.esc_menu.draw(self.screen)
        choice = self.esc_menu.selected
        if choice is None:
            return False
        self.esc_menu.reset_selected()
        if choice == 0:
            save(self.board, self.save_path)
            self.esc_menu_active = False
            self.screen.fill(palette.BACKGROUND)
        elif choice == 1:
            self.load_game()
        elif choice == 2:
            return True
        return False

    def _play_frame(self, dt: float) -> None:
        self.board.update(dt)
        self.board.draw(self.screen)
        if self.old_is_player1_turn != self.board.is_player1_turn:
            self.score.change()
            self.old_is_player1_turn = self.board.is_player1_turn
        self.score.update(dt)
        self._refresh_score()
        self.score.draw(self.screen)

    def _results_frame(self, dt: float) -> bool:
        if self.result_menu is None:
            self.result_menu = self._make_result_menu(self.board.is_player1_win)
        self.result_menu.update(dt)
        self.result_menu.draw(self.screen)
        choice = self.result_menu.selected
        if choice is None:
            return False
        self.result_menu.reset_selected()
        if choice == 0:
            self._restart()
        elif choice == 1:
            self.load_game()
        elif choice == 2:
            return True
        return False

    def _make_result_menu(self, player1_won: bool) -> Menu:
        return Menu(
            self.font,
            self.size,
            [palette.RED, palette.SKY, palette.YELLOW],
            ["Reload", "Load\nGame", "Exit\n To \nMenu"],
            "Green Wins!" if player1_won else "Red Wins!",
            palette.GREEN if player1_won else palette.RED,
        )

    def _restart(self) -> None:
        self.score = Score(self.font)
        self.screen.fill(palette.BACKGROUND)
        self.board = Board(self.size, self.single_game)
        self.is_player1_turn = True
        self.old_is_player1_turn = True
        self.result_menu = None
        self.score.draw(self.screen)
        self.board.update(10)
        self.board.draw(self.screen)
        self.esc_menu_active = False
        self._results_delay = 0.0

    def _refresh_score(self) -> None:
        self.score.set_score(
            len(self.board.cells_with_state(CellState.PLAYER1)),
            len(self.board.cells_with_state(CellState.PLAYER2)),
        )

    def load_game(self) -> None:
        """Replace the current match with the one in the save file."""
        self.score = Score(self.font)
        self.screen.fill(palette.BACKGROUND)
        self.board = load(self.size, self.save_path)
        self.is_player1_turn = self.board.is_player1_turn
        self.old_is_player1_turn = self.is_player1_turn
        self.result_menu = None
        self.esc_menu_active = False
        self._refresh_score()
        if not self.board.is_player1_turn:
            self.score.change()
        self.score.draw(self.screen)