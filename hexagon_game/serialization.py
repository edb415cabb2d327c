"""Saving and loading a game in progress as a plain list of integers."""

from __future__ import annotations

import os
from pathlib import Path

from hexagon_game.board import Board
from hexagon_game.state import BOARD_SIZE, CellState

SAVE_FILE = "board_save.sv"
DEFAULT_SIZE = (1280, 720)

_HEADER_LENGTH = 2
_CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def serialize(board: Board) -> list[int]:
    """Game mode, whose turn it is, then every cell state in row-major order."""
    values = [int(board.single_game), int(board.is_player1_turn)]
    values.extend(int(cell.state) for row in board.cells for cell in row)
    return values


def deserialize(values: list[int], size: tuple[int, int] = DEFAULT_SIZE) -> Board:
    """Build a board from the values written by :func:`serialize`.

    Cells not covered by ``values`` keep their starting state.
    """
    if len(values) < _HEADER_LENGTH:
        raise ValueError("saved game is missing its header")
    cell_values = values[_HEADER_LENGTH:]
    if len(cell_values) > _CELL_COUNT:
        raise ValueError(
            f"saved game holds {len(cell_values)} cells, at most {_CELL_COUNT} expected"
        )

    board = Board(size, bool(values[0]))
    board.is_player1_turn = bool(values[1])
    for index, value in enumerate(cell_values):
        state = CellState(value)
        cell = board.cells[index // BOARD_SIZE][index % BOARD_SIZE]
        cell.state = state
        cell.set_colors(state)
    return board


def save(board: Board, path: str | os.PathLike[str] = SAVE_FILE) -> None:
    """Write the board to ``path``, one integer per line."""
    with open(path, "w", encoding="ascii") as file:
        file.writelines(f"{value}\n" for value in serialize(board))


def load(
    size: tuple[int, int] = DEFAULT_SIZE, path: str | os.PathLike[str] = SAVE_FILE
) -> Board:
    """Read a saved board, or start a new game against the computer if none exists."""
    save_path = Path(path)
    if not save_path.exists():
        return Board(size, True)
    lines = save_path.read_text(encoding="ascii").splitlines()
    return deserialize([int(line) for line in lines], size)