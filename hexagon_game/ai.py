"""Greedy computer opponent playing the second player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hexagon_game.state import BoardState, CellState


class MoveType(Enum):
    CLONE = "clone"
    MOVE = "move"


@dataclass(frozen=True)
class Move:
    from_row: int
    from_col: int
    to_row: int
    to_col: int
    kind: MoveType


def best_move(state: BoardState) -> Move | None:
    """The move for the second player that gains the most cells.

    Ties go to the first move found; returns None when no move exists.
    The given state is left untouched.
    """
    best: Move | None = None
    best_score = -1
    for row, col in state.cells_with_state(CellState.PLAYER2):
        options = [(MoveType.CLONE, target) for target in state.clone_targets(row, col)]
        options += [(MoveType.MOVE, target) for target in state.move_targets(row, col)]
        for kind, (to_row, to_col) in options:
            trial = state.copy()
            apply = trial.clone if kind is MoveType.CLONE else trial.move
            score = apply(row, col, to_row, to_col)
            if score > best_score:
                best_score = score
                best = Move(row, col, to_row, to_col, kind)
    return best