from hexagon_game.ai import Move, MoveType, best_move
from hexagon_game.state import (
    BOARD_SIZE,
    BoardState,
    CellState,
    jump_positions,
    neighbour_positions,
)


def empty_board():
    return BoardState([[CellState.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)])


def _score(state, move):
    trial = state.copy()
    apply = trial.clone if move.kind is MoveType.CLONE else trial.move
    return apply(move.from_row, move.from_col, move.to_row, move.to_col)


def _all_moves(state):
    for row, col in state.cells_with_state(CellState.PLAYER2):
        for r, c in state.clone_targets(row, col):
            yield Move(row, col, r, c, MoveType.CLONE)
        for r, c in state.move_targets(row, col):
            yield Move(row, col, r, c, MoveType.MOVE)


def test_initial_board_first_clone_wins_tie():
    state = BoardState.initial()
    move = best_move(state)
    assert move == Move(0, 4, 1, 4, MoveType.CLONE)


def test_best_move_does_not_change_state():
    state = BoardState.initial()
    before = state.copy()
    best_move(state)
    assert state == before


def test_no_pieces_means_no_move():
    assert best_move(empty_board()) is None


def test_boxed_in_piece_has_no_move():
    state = BoardState([[CellState.BLOCKED] * BOARD_SIZE for _ in range(BOARD_SIZE)])
    state.cells[4][4] = CellState.PLAYER2
    assert best_move(state) is None


def test_prefers_capturing_jump():
    state = empty_board()
    state.cells[4][4] = CellState.PLAYER2
    target = jump_positions(4, 4)[3]
    for r, c in neighbour_positions(*target):
        if (r, c) not in neighbour_positions(4, 4) and (r, c) != (4, 4):
            state.cells[r][c] = CellState.PLAYER1
    move = best_move(state)
    assert (move.to_row, move.to_col) == target
    assert _score(state, move) > 1


def test_chosen_move_has_maximal_score():
    state = BoardState.initial()
    state.cells[5][1] = CellState.PLAYER1
    state.cells[5][7] = CellState.PLAYER1
    state.cells[4][6] = CellState.PLAYER1
    move = best_move(state)
    scores = [_score(state, m) for m in _all_moves(state)]
    assert _score(state, move) == max(scores)


def test_ignores_first_player_pieces():
    state = empty_board()
    state.cells[4][4] = CellState.PLAYER1
    assert best_move(state) is None
    state.cells[0][0] = CellState.PLAYER2
    move = best_move(state)
    assert (move.from_row, move.from_col) == (0, 0)