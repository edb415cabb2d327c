"""Menus made of hexagonal buttons under a large title."""

from __future__ import annotations

import math
import os

import pygame

from hexagon_game import palette
from hexagon_game.palette import Color, lerp_color

BUTTON_SIZE = 90
BUTTON_FONT_SIZE = 24
BUTTON_OFFSET = 35
BUTTON_ROW_Y = 400
TITLE_FONT_SIZE = 120

_ANIMATION_DURATION = 0.2
_OUTLINE_THICKNESS = 3
_TEXT_COLOR: Color = (255, 255, 255)


def _render_lines(font: pygame.font.Font, text: str, color: Color) -> list[pygame.Surface]:
    return [font.render(line, True, color) for line in text.split("\n")]


def _block_size(lines: list[pygame.Surface]) -> tuple[int, int]:
    width = max((line.get_width() for line in lines), default=0)
    height = sum(line.get_height() for line in lines)
    return width, height


def _blit_lines(surface: pygame.Surface, lines: list[pygame.Surface], pos: tuple[float, float]) -> None:
    x, y = pos
    for line in lines:
        surface.blit(line, (x, y))
        y += line.get_height()


class HexButton:
    """A hexagonal button that fades to a hover colour under the pointer."""

    def __init__(
        self,
        x: float,
        y: float,
        size: float,
        font: pygame.font.Font,
        label: str,
        outline_color: Color,
    ) -> None:
        self.x = x
        self.y = y
        self.size = size
        self.label = label
        self.outline_color = outline_color
        self.points = [
            (x + size * math.cos(i * math.pi / 3), y + size * math.sin(i * math.pi / 3))
            for i in range(6)
        ]

        xs = [px for px, _ in self.points]
        ys = [py for _, py in self.points]
        left = min(xs) - _OUTLINE_THICKNESS
        top = min(ys) - _OUTLINE_THICKNESS
        self.bounds = (
            left,
            top,
            max(xs) + _OUTLINE_THICKNESS - left,
            max(ys) + _OUTLINE_THICKNESS - top,
        )

        self.hover_color: Color = palette.SURFACE1
        self.normal_color: Color = palette.SURFACE0
        self.current_color: Color = self.normal_color
        self.old_color: Color = self.normal_color
        self.target_color: Color = self.normal_color
        self.hovered = False
        self.animation_time = 0.0

        self._lines = _render_lines(font, label, _TEXT_COLOR)
        width, height = _block_size(self._lines)
        self.text_pos = (x - width / 2, y - height / 2 - 5)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.polygon(surface, self.current_color, self.points)
        pygame.draw.polygon(surface, self.outline_color, self.points, _OUTLINE_THICKNESS)
        _blit_lines(surface, self._lines, self.text_pos)

    def on_mouse_move(self, pos: tuple[float, float]) -> None:
        """Start a colour fade when the pointer enters or leaves the button."""
        hovered = self.is_hovered(pos)
        if hovered != self.hovered:
            self.old_color = self.current_color
            self.animation_time = 0.0
            self.target_color = self.hover_color if hovered else self.normal_color
            self.hovered = hovered

    def update_color(self, dt: float) -> None:
        self.animation_time += dt
        t = min(self.animation_time / _ANIMATION_DURATION, 1.0)
        self.current_color = lerp_color(self.old_color, self.target_color, t)

    def is_hovered(self, pos: tuple[float, float]) -> bool:
        """Whether ``pos`` lies within the button's bounding box."""
        left, top, width, height = self.bounds
        px, py = pos
        return left <= px < left + width and top <= py < top + height


class Menu:
    """A title above a centred row of buttons; ``selected`` holds the clicked index."""

    def __init__(
        self,
        font: str | os.PathLike[str] | None,
        size: tuple[int, int],
        colors: list[Color],
        labels: list[str],
        title_label: str,
        title_color: Color,
    ) -> None:
        if len(colors) < len(labels):
            raise ValueError("every button needs an outline colour")
        if not pygame.font.get_init():
            pygame.font.init()

        width, height = size
        self.size = size
        self.selected: int | None = None

        title_font = pygame.font.Font(font, TITLE_FONT_SIZE)
        self._title = _render_lines(title_font, title_label, title_color)
        title_width, title_height = _block_size(self._title)
        self.title_pos = ((width - title_width) / 2, (height - title_height) / 2 - 200)

        button_font = pygame.font.Font(font, BUTTON_FONT_SIZE)
        step = BUTTON_SIZE * 2 + BUTTON_OFFSET
        start_x = width / 2.0 - step * (len(labels) - 1) / 2.0
        self.buttons = [
            HexButton(start_x + i * step, BUTTON_ROW_Y, BUTTON_SIZE, button_font, label, color)
            for i, (label, color) in enumerate(zip(labels, colors))
        ]

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            for button in self.buttons:
                button.on_mouse_move(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for index, button in enumerate(self.buttons):
                if button.is_hovered(event.pos):
                    self.selected = index

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the whole menu over ``surface``; the caller flips the display."""
        surface.fill(palette.BACKGROUND)
        _blit_lines(surface, self._title, self.title_pos)
        for button in self.buttons:
            button.draw(surface)

    def update(self, dt: float) -> None:
        for button in self.buttons:
            button.update_color(dt)

    def reset_selected(self) -> None:
        self.selected = None