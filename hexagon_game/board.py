"""Interactive hexagonal board: cells with hover and grow animations, plus turn handling."""

from __future__ import annotations

import math

import pygame

from hexagon_game import palette
from hexagon_game.ai import Move, MoveType, best_move
from hexagon_game.palette import Color, lerp_color
from hexagon_game.state import (
    BOARD_SIZE,
    BoardState,
    CellState,
    HighlightState,
    jump_positions,
    neighbour_positions,
)

_OUTLINE_THICKNESS = 3
_ANIMATION_DURATION = 0.2
_BACKGROUND_RADIUS = 35
_AI_DELAY = 0.85

_CELL_COLORS: dict[CellState, tuple[Color, Color]] = {
    CellState.EMPTY: (palette.EMPTY_COLOR, palette.EMPTY_HOVER_COLOR),
    CellState.PLAYER1: (palette.P1_COLOR, palette.P1_HOVER_COLOR),
    CellState.PLAYER2: (palette.P2_COLOR, palette.P2_HOVER_COLOR),
    CellState.BLOCKED: (palette.BACKGROUND, palette.BACKGROUND),
}

_HIGHLIGHT_COLORS: dict[HighlightState, Color] = {
    HighlightState.SELECTED: palette.SELECTED_CELL,
    HighlightState.AVAILABLE_FOR_CLONING: palette.SKY,
    HighlightState.AVAILABLE_FOR_MOVING: palette.GREEN,
}

_PLAYER_COLORS: dict[CellState, Color] = {
    CellState.PLAYER1: palette.P1_COLOR,
    CellState.PLAYER2: palette.P2_COLOR,
}


def _hexagon(cx: float, cy: float, radius: float) -> list[tuple[float, float]]:
    return [
        (cx + radius * math.cos(i * math.pi / 3), cy + radius * math.sin(i * math.pi / 3))
        for i in range(6)
    ]


class Cell:
    """One hexagon of the board, with its colours and animations."""

    def __init__(self, row: int, col: int, state: CellState = CellState.EMPTY) -> None:
        self.row = row
        self.col = col
        self.state = CellState(state)
        self.x = 0
        self.y = 0
        self.hexagon_size = 35
        self.indents = 5

        self.hovered = False
        self.animation_time = 0.0
        self.highlight = HighlightState.NONE

        self.is_animating = False
        self.grow_time = 0.0
        self.target_indent = self.indents
        self.target_size = self.hexagon_size
        self.old_indent = self.indents
        self.old_size = self.hexagon_size

        self.set_colors(self.state)

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, col={self.col}, state={self.state.name})"

    def place(self, x: int, y: int) -> None:
        """Put the cell's centre at screen position (x, y)."""
        self.x = x
        self.y = y
        self.set_colors(self.state)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.polygon(
            surface, palette.SURFACE0, _hexagon(self.x, self.y, _BACKGROUND_RADIUS)
        )
        if self.hexagon_size > 0:
            pygame.draw.polygon(
                surface, self.outer_color, _hexagon(self.x, self.y, self.hexagon_size)
            )
        inner = self.hexagon_size - self.indents
        if inner > 0:
            pygame.draw.polygon(surface, self.inner_color, _hexagon(self.x, self.y, inner))

    def on_mouse_move(self, pos: tuple[float, float]) -> None:
        """Start a colour fade when the pointer enters or leaves the cell."""
        hovered = self.is_hovered(pos)
        if hovered != self.hovered:
            self.old_color = self.current_color
            self.animation_time = 0.0
            self.target_color = self.hover_color if hovered else self.normal_color
            self.hovered = hovered

    def update(self, dt: float) -> None:
        self.animation_time += dt
        t = self.animation_time / _ANIMATION_DURATION
        if t > 1.0:
            t = 1.0
            target, outer = self.target_color, self.outer_color
            self.set_colors(self.state)
            self.target_color, self.outer_color = target, outer

        self.current_color = lerp_color(self.old_color, self.target_color, t)
        if self.highlight is HighlightState.NONE:
            self.outer_color = self.current_color
        self.inner_color = self.current_color

        if self.is_animating:
            self.grow_time += dt
            t = self.grow_time / _ANIMATION_DURATION
            if t > 1.0:
                t = 1.0
                self.is_animating = False
            elif t < 0.0:
                t = 0.0
            indents = int((1 - t) * self.old_indent + t * self.target_indent)
            size = int((1 - t) * self.old_size + t * self.target_size)
            self.set_indents_and_size(indents, size)

    def is_hovered(self, pos: tuple[float, float]) -> bool:
        return math.hypot(pos[0] - self.x, pos[1] - self.y) < self.hexagon_size

    def set_highlight(self, highlight: HighlightState) -> None:
        self.outer_color = _HIGHLIGHT_COLORS.get(highlight, self.normal_color)
        self.highlight = highlight

    def set_colors(self, state: CellState) -> None:
        """Reset every colour to the resting colours of ``state``."""
        self.normal_color, self.hover_color = _CELL_COLORS[state]
        self.current_color = self.normal_color
        self.old_color = self.normal_color
        self.target_color = self.normal_color
        self.outer_color = self.normal_color
        self.inner_color = self.normal_color

    def start_animation(self, target_indent: int, target_size: int) -> None:
        """Grow the cell from its current size towards the given one."""
        self.target_indent = target_indent
        self.target_size = target_size
        self.grow_time = 0.0
        self.is_animating = True
        self.old_indent = self.indents
        self.old_size = self.hexagon_size

    def set_indents_and_size(self, indents: int, size: int) -> None:
        self.indents = indents
        self.hexagon_size = size
        self.set_colors(self.state)


class Board:
    """The playing field: selection, highlighting, moves and turn order."""

    def __init__(self, size: tuple[int, int] = (1280, 720), single_game: bool = False) -> None:
        self.single_game = single_game
        self.is_player1_turn = True
        self.is_game_over = False
        self.is_player1_win = False
        self.sleep_time = 0.0

        self._selected: Cell | None = None
        self._clone_cells: list[Cell] = []
        self._move_cells: list[Cell] = []

        layout = BoardState.initial().cells
        self.cells: list[list[Cell]] = [
            [Cell(row, col, layout[row][col]) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]
        self._layout(size)

    def _layout(self, size: tuple[int, int]) -> None:
        width, height = size
        hexagon_size = 35 + _OUTLINE_THICKNESS * 2
        hex_width = hexagon_size * 2.0
        hex_height = hexagon_size * math.sqrt(3)
        start_x = int((width - hexagon_size * 9) // 2 - (hexagon_size * 9 // 2) * 0.25)
        start_y = int((height - hex_height * 9) / 2 + 37)

        for row in self.cells:
            for cell in row:
                x = int(start_x + cell.col * hex_width)
                y = int(start_y + cell.row * hex_height)
                if cell.col % 2 == 1:
                    y = int(y + hex_height / 2)
                    x = int(x - hex_width * 0.25)
                x = int(x - hex_width / 2 * (cell.col // 2))
                cell.place(x, y)

    def _all_cells(self):
        for row in self.cells:
            yield from row

    def draw(self, surface: pygame.Surface) -> None:
        for cell in self._all_cells():
            cell.draw(surface)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            for cell in self._all_cells():
                cell.on_mouse_move(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            cell = next((c for c in self._all_cells() if c.is_hovered(event.pos)), None)
            if cell is not None:
                self._click(cell)

    def _click(self, cell: Cell) -> None:
        highlight = cell.highlight
        if highlight is HighlightState.NONE:
            self._select(cell)
            if self._selected is not None:
                self._highlight_targets()
        elif highlight is HighlightState.SELECTED:
            cell.set_highlight(HighlightState.NONE)
            self._clear_highlights()
        else:
            if highlight is HighlightState.AVAILABLE_FOR_CLONING:
                self._clone_to(cell)
            else:
                self._move_to(cell)
            self.is_player1_turn = not self.is_player1_turn
            if self.single_game:
                self.sleep_time = 0.0
            else:
                self.check_game_over()

    def update(self, dt: float) -> None:
        for cell in self._all_cells():
            cell.update(dt)

        if not self.is_player1_turn and self.single_game:
            if self.sleep_time > _AI_DELAY:
                self.play_best_move()
                self.is_player1_turn = not self.is_player1_turn
                self.check_game_over()
                self.sleep_time = 0.0
            else:
                self.sleep_time += dt

    def _current_player(self) -> CellState:
        return CellState.PLAYER1 if self.is_player1_turn else CellState.PLAYER2

    def _drop_selection_marks(self) -> None:
        if self._selected is not None:
            self._selected.set_highlight(HighlightState.NONE)
        for cell in self._clone_cells + self._move_cells:
            cell.set_highlight(HighlightState.NONE)
        self._clone_cells = []
        self._move_cells = []

    def _select(self, cell: Cell) -> None:
        if cell.state is self._current_player():
            cell.set_highlight(HighlightState.SELECTED)
            self._drop_selection_marks()
            cell.set_highlight(HighlightState.SELECTED)
            self._selected = cell
        else:
            self._drop_selection_marks()
            self._selected = None

    def _empty_cells(self, positions) -> list[Cell]:
        found = (self.cells[r][c] for r, c in positions)
        return [cell for cell in found if cell.state is CellState.EMPTY]

    def _highlight_targets(self) -> None:
        selected = self._selected
        if selected is None:
            return
        self._clone_cells = self._empty_cells(neighbour_positions(selected.row, selected.col))
        for cell in self._clone_cells:
            cell.set_highlight(HighlightState.AVAILABLE_FOR_CLONING)
        self._move_cells = self._empty_cells(jump_positions(selected.row, selected.col))
        for cell in self._move_cells:
            cell.set_highlight(HighlightState.AVAILABLE_FOR_MOVING)

    def _clear_highlights(self) -> None:
        for cell in self._clone_cells + self._move_cells:
            cell.set_highlight(HighlightState.NONE)
        self._clone_cells = []
        self._move_cells = []
        self._selected = None

    def _settle(self, cell: Cell, owner: CellState) -> None:
        cell.state = owner
        cell.set_colors(owner)

    def _clone_to(self, cell: Cell) -> None:
        source = self._selected
        if source is None or cell.state is not CellState.EMPTY:
            return
        self._settle(cell, source.state)
        source.set_highlight(HighlightState.NONE)
        self._clear_highlights()
        self._capture(cell)
        cell.set_indents_and_size(0, 0)
        cell.start_animation(5, 35)

    def _move_to(self, cell: Cell) -> None:
        source = self._selected
        if source is None or cell.state is not CellState.EMPTY:
            return
        self._settle(cell, source.state)
        self._settle(source, CellState.EMPTY)
        source.set_highlight(HighlightState.NONE)
        self._clear_highlights()
        self._capture(cell)
        cell.set_indents_and_size(0, 0)
        cell.start_animation(5, 35)

    def _capture(self, cell: Cell) -> list[Cell]:
        owner = cell.state
        if not owner.is_player:
            return []
        enemy = owner.opponent
        captured = [
            self.cells[r][c]
            for r, c in neighbour_positions(cell.row, cell.col)
            if self.cells[r][c].state is enemy
        ]
        for other in captured:
            other.old_color = other.current_color
            other.animation_time = 0.0
            other.target_color = _PLAYER_COLORS[owner]
            other.state = owner
        return captured

    def cells_with_state(self, state: CellState) -> list[Cell]:
        """All cells holding ``state``, in row-major order."""
        return [cell for cell in self._all_cells() if cell.state is state]

    def clone_from_to(self, source: Cell, target: Cell) -> int:
        """Clone ``source`` into ``target``; return how many cells the owner gained."""
        before = len(self.cells_with_state(source.state))
        self._selected = source
        self._clone_to(target)
        return len(self.cells_with_state(target.state)) - before

    def move_from_to(self, source: Cell, target: Cell) -> int:
        """Jump ``source`` to ``target``; return how many cells the owner gained."""
        before = len(self.cells_with_state(source.state))
        self._selected = source
        self._move_to(target)
        self._capture(target)
        return len(self.cells_with_state(target.state)) - before

    def to_state(self) -> BoardState:
        """A plain snapshot of the cell states."""
        return BoardState([[cell.state for cell in row] for row in self.cells])

    def play_best_move(self) -> Move | None:
        """Let the computer make its move for the second player."""
        move = best_move(self.to_state())
        if move is None:
            return None
        source = self.cells[move.from_row][move.from_col]
        target = self.cells[move.to_row][move.to_col]
        if move.kind is MoveType.CLONE:
            self.clone_from_to(source, target)
        else:
            self.move_from_to(source, target)
        return move

    def check_game_over(self) -> bool:
        """End the game once a side or the free space has run out."""
        p1 = len(self.cells_with_state(CellState.PLAYER1))
        p2 = len(self.cells_with_state(CellState.PLAYER2))
        empty = len(self.cells_with_state(CellState.EMPTY))
        if p1 == 0 or p2 == 0 or empty == 0:
            self.is_player1_win = p1 > p2
            self.is_game_over = True
        return self.is_game_over