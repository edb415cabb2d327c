# hexagon_game

A two-sided strategy game on a hexagonal board of 9 × 9 cells, drawn
with pygame. Green plays against Red, either two people at the same
computer or one person against a computer opponent.

## Rules

On your turn you click one of your own cells, then one of the
highlighted empty cells:

- **Clone** into an adjacent cell (highlighted in blue): your cell stays
  and a new one appears.
- **Jump** two cells away (highlighted in green): your cell moves there
  and leaves its old place empty.

Either way, opposing cells next to the cell you land on become yours.
Clicking the selected cell again deselects it.

The game ends when one side has no cells left or when no empty cell is
left. Green wins if it holds more cells than Red; otherwise Red wins.

## Installation

```
pip install .
```

## Playing

```
hexagon
```

The command looks for the font `assets/JetBrainsMono-SemiBold.ttf`
relative to the current directory. No font is installed with the
package; if that file is missing the command exits with status 1
without opening a window. Options:

- `--font PATH`: use another TrueType font.
- `--default-font`: use pygame's built-in font instead of a file.
- `--save-file PATH`: where games are saved and loaded
  (default `board_save.sv` in the current directory).

The start menu offers:

- **Player vs Computer**: you play Green. Red is played by a greedy
  opponent that, after a short pause, takes the move gaining it the
  most cells.
- **Player vs Player**: two players take turns at the same computer.
- **Load Game**: carries on from the saved game. If no save file exists,
  a new game against the computer starts.
- **Exit**

During play, two hexagons at the sides show each player's cell count;
the one whose turn it is is lit up. Press **Escape** to open the in-game
menu, from which you can save the game, load the saved game, or return
to the start menu. When the game is over a results screen offers to
restart, load the saved game, or return to the start menu.

A save file is plain text, one integer per line: whether the game is
against the computer (0 or 1), whether it is Green's turn (0 or 1), then
the 81 cell states in row order (0 empty, 1 Green, 2 Red, 3 blocked).

## Using the game logic directly

The rules live in `hexagon_game.state` and `hexagon_game.ai` and need
no display:

```python
from hexagon_game.state import BoardState, CellState
from hexagon_game.ai import best_move

state = BoardState.initial()
print(len(state.cells_with_state(CellState.PLAYER1)))  # 3

print(state.clone_targets(2, 0))  # empty cells a piece can clone into
print(state.move_targets(2, 0))   # empty cells a piece can jump to

move = best_move(state)           # a Move for Red, or None
if move is not None:
    state.clone(move.from_row, move.from_col, move.to_row, move.to_col) \
        if move.kind.value == "clone" else \
        state.move(move.from_row, move.from_col, move.to_row, move.to_col)
```

`BoardState.clone` and `BoardState.move` return how many cells the
moving side gained, and raise `ValueError` when the source holds no
piece or the target is not empty. `hexagon_game.serialization` offers
`serialize`, `deserialize`, `save` and `load` for the save format above;
these build `hexagon_game.board.Board` objects and so need pygame.

## Running the tests

```
pip install .[test]
pytest
```