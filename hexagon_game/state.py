"""Board model: cell states, hex adjacency and the rules of a move."""

from __future__ import annotations

from enum import Enum, IntEnum

BOARD_SIZE = 9

# 0 - empty, 1 - player 1, 2 - player 2, 3 - blocked
_INITIAL_LAYOUT = (
    (3, 3, 3, 0, 2, 0, 3, 3, 3),
    (3, 0, 0, 0, 0, 0, 0, 0, 3),
    (1, 0, 0, 0, 0, 0, 0, 0, 1),
    (0, 0, 0, 0, 3, 0, 0, 0, 0),
    (0, 0, 0, 3, 0, 3, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0),
    (2, 0, 0, 0, 0, 0, 0, 0, 2),
    (3, 3, 0, 0, 0, 0, 0, 3, 3),
    (3, 3, 3, 3, 1, 3, 3, 3, 3),
)

Position = tuple[int, int]


class CellState(IntEnum):
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2
    BLOCKED = 3

    @property
    def is_player(self) -> bool:
        return self in (CellState.PLAYER1, CellState.PLAYER2)

    @property
    def opponent(self) -> CellState:
        if not self.is_player:
            raise ValueError(f"{self.name} has no opponent")
        return CellState.PLAYER2 if self is CellState.PLAYER1 else CellState.PLAYER1


class HighlightState(Enum):
    NONE = "none"
    SELECTED = "selected"
    AVAILABLE_FOR_CLONING = "available_for_cloning"
    AVAILABLE_FOR_MOVING = "available_for_moving"


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def neighbour_positions(row: int, col: int) -> list[Position]:
    """Positions adjacent to (row, col), in the order the game checks them."""
    dy = -1 if col % 2 == 0 else 1
    candidates = [
        (row - 1, col),
        (row + 1, col),
        (row, col + 1),
        (row, col - 1),
        (row + dy, col - 1),
        (row + dy, col + 1),
    ]
    return [pos for pos in candidates if _on_board(*pos)]


def jump_positions(row: int, col: int) -> list[Position]:
    """Positions two steps away from (row, col), reachable by a move."""
    candidates: list[Position] = []
    for x in (col - 1, col, col + 1):
        down = 1 if col % 2 == 0 and x % 2 == 1 else 0
        up = 1 if col % 2 == 1 and x % 2 == 0 else 0
        candidates.append((row + 2 - down, x))
        candidates.append((row - 2 + up, x))
    for y in (row - 1, row, row + 1):
        candidates.append((y, col + 2))
        candidates.append((y, col - 2))
    return [pos for pos in candidates if _on_board(*pos)]


class BoardState:
    """A 9x9 grid of cell states, without any drawing concerns."""

    def __init__(self, cells) -> None:
        grid = [[CellState(value) for value in row] for row in cells]
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        self.cells: list[list[CellState]] = grid

    @classmethod
    def initial(cls) -> BoardState:
        """The starting position of a new game."""
        return cls(_INITIAL_LAYOUT)

    def copy(self) -> BoardState:
        return BoardState(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        rows = "/".join("".join(str(int(s)) for s in row) for row in self.cells)
        return f"BoardState({rows!r})"

    def cells_with_state(self, state: CellState) -> list[Position]:
        """All (row, col) positions holding ``state``, in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell is state
        ]

    def _empty_among(self, positions: list[Position]) -> list[Position]:
        return [(r, c) for r, c in positions if self.cells[r][c] is CellState.EMPTY]

    def clone_targets(self, row: int, col: int) -> list[Position]:
        """Empty cells a piece at (row, col) can clone into."""
        return self._empty_among(neighbour_positions(row, col))

    def move_targets(self, row: int, col: int) -> list[Position]:
        """Empty cells a piece at (row, col) can jump to."""
        return self._empty_among(jump_positions(row, col))

    def _place(self, from_row: int, from_col: int, to_row: int, to_col: int) -> CellState:
        owner = self.cells[from_row][from_col]
        if not owner.is_player:
            raise ValueError(f"no piece at ({from_row}, {from_col})")
        if self.cells[to_row][to_col] is not CellState.EMPTY:
            raise ValueError(f"cell ({to_row}, {to_col}) is not empty")
        self.cells[to_row][to_col] = owner
        return owner

    def clone(self, from_row: int, from_col: int, to_row: int, to_col: int) -> int:
        """Copy a piece into an empty cell; return how many cells its owner gained."""
        owner = self._place(from_row, from_col, to_row, to_col)
        before = len(self.cells_with_state(owner)) - 1
        self.capture(to_row, to_col)
        return len(self.cells_with_state(owner)) - before

    def move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> int:
        """Jump a piece into an empty cell; return how many cells its owner gained."""
        owner = self._place(from_row, from_col, to_row, to_col)
        self.cells[from_row][from_col] = CellState.EMPTY
        before = len(self.cells_with_state(owner))
        self.capture(to_row, to_col)
        return len(self.cells_with_state(owner)) - before

    def capture(self, row: int, col: int) -> list[Position]:
        """Turn opposing pieces around (row, col) to its owner; return them."""
        owner = self.cells[row][col]
        if not owner.is_player:
            raise ValueError(f"no piece at ({row}, {col})")
        enemy = owner.opponent
        captured = [
            (r, c) for r, c in neighbour_positions(row, col) if self.cells[r][c] is enemy
        ]
        for r, c in captured:
            self.cells[r][c] = owner
        return captured