import pytest

from hexagon_game.state import (
    BOARD_SIZE,
    BoardState,
    CellState,
    jump_positions,
    neighbour_positions,
)

ALL_POSITIONS = [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


def empty_board():
    return BoardState([[CellState.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)])


def test_initial_layout_pieces():
    state = BoardState.initial()
    assert state.cells_with_state(CellState.PLAYER1) == [(2, 0), (2, 8), (8, 4)]
    assert state.cells_with_state(CellState.PLAYER2) == [(0, 4), (6, 0), (6, 8)]
    assert state.cells[4][4] is CellState.EMPTY
    assert state.cells[3][4] is CellState.BLOCKED


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        BoardState([[0] * 9 for _ in range(8)])


def test_invalid_cell_value_rejected():
    with pytest.raises(ValueError):
        BoardState([[7] * 9 for _ in range(9)])


def test_neighbours_are_symmetric():
    for pos in ALL_POSITIONS:
        for other in neighbour_positions(*pos):
            assert pos in neighbour_positions(*other)


def test_interior_cell_has_six_distinct_neighbours():
    neighbours = neighbour_positions(4, 4)
    assert len(set(neighbours)) == 6
    assert (4, 4) not in neighbours


def test_corner_neighbours_stay_on_board():
    for pos in [(0, 0), (0, 8), (8, 0), (8, 8)]:
        for r, c in neighbour_positions(*pos):
            assert 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def test_jumps_are_symmetric():
    for pos in ALL_POSITIONS:
        for other in jump_positions(*pos):
            assert pos in jump_positions(*other)


@pytest.mark.parametrize("pos", [(4, 4), (4, 3), (5, 5)])
def test_jumps_form_second_ring(pos):
    jumps = jump_positions(*pos)
    neighbours = neighbour_positions(*pos)
    assert len(set(jumps)) == 12
    assert pos not in jumps
    assert not set(jumps) & set(neighbours)
    second = {p for n in neighbours for p in neighbour_positions(*n)}
    assert set(jumps) <= second


def test_targets_are_empty_cells():
    state = BoardState.initial()
    for row, col in state.cells_with_state(CellState.PLAYER2):
        for r, c in state.clone_targets(row, col) + state.move_targets(row, col):
            assert state.cells[r][c] is CellState.EMPTY


def test_copy_is_independent():
    state = BoardState.initial()
    copied = state.copy()
    assert copied == state
    copied.cells[4][4] = CellState.PLAYER1
    assert state.cells[4][4] is CellState.EMPTY
    assert copied != state


def test_clone_captures_neighbours():
    state = empty_board()
    state.cells[4][4] = CellState.PLAYER2
    target = neighbour_positions(4, 4)[0]
    enemy = next(p for p in neighbour_positions(*target) if p != (4, 4))
    state.cells[enemy[0]][enemy[1]] = CellState.PLAYER1

    gained = state.clone(4, 4, *target)

    assert state.cells[4][4] is CellState.PLAYER2
    assert state.cells[target[0]][target[1]] is CellState.PLAYER2
    assert state.cells[enemy[0]][enemy[1]] is CellState.PLAYER2
    assert state.cells_with_state(CellState.PLAYER1) == []
    assert gained == len(state.cells_with_state(CellState.PLAYER2)) - 1


def test_move_vacates_source():
    state = empty_board()
    state.cells[4][4] = CellState.PLAYER1
    target = jump_positions(4, 4)[0]

    gained = state.move(4, 4, *target)

    assert state.cells[4][4] is CellState.EMPTY
    assert state.cells_with_state(CellState.PLAYER1) == [target]
    assert gained == 0


def test_move_gain_counts_captures():
    state = empty_board()
    state.cells[4][4] = CellState.PLAYER1
    target = jump_positions(4, 4)[0]
    enemies = [p for p in neighbour_positions(*target) if p != (4, 4)][:2]
    for r, c in enemies:
        state.cells[r][c] = CellState.PLAYER2

    gained = state.move(4, 4, *target)

    assert gained == len(enemies)
    assert state.cells_with_state(CellState.PLAYER2) == []


def test_capture_returns_captured_positions():
    state = empty_board()
    state.cells[4][4] = CellState.PLAYER1
    around = neighbour_positions(4, 4)
    for r, c in around:
        state.cells[r][c] = CellState.PLAYER2
    captured = state.capture(4, 4)
    assert sorted(captured) == sorted(around)
    assert state.cells_with_state(CellState.PLAYER2) == []


def test_capture_leaves_blocked_cells():
    state = empty_board()
    state.cells[4][4] = CellState.PLAYER2
    r, c = neighbour_positions(4, 4)[0]
    state.cells[r][c] = CellState.BLOCKED
    assert state.capture(4, 4) == []
    assert state.cells[r][c] is CellState.BLOCKED


def test_capture_on_empty_cell_raises():
    with pytest.raises(ValueError):
        empty_board().capture(4, 4)


def test_clone_from_empty_raises():
    with pytest.raises(ValueError):
        empty_board().clone(4, 4, 4, 5)


def test_clone_to_occupied_raises():
    state = BoardState.initial()
    with pytest.raises(ValueError):
        state.move(2, 0, 3, 4)


def test_opponent_of_blocked_raises():
    state = BoardState.initial()
    row, col = state.cells_with_state(CellState.PLAYER1)[0]
    assert state.cells[row][col].opponent is CellState.PLAYER2
    blocked_row, blocked_col = state.cells_with_state(CellState.BLOCKED)[0]
    with pytest.raises(ValueError):
        state.cells[blocked_row][blocked_col].opponent