# cubefour

A console game of four-in-a-row on a 4 × 4 × 4 cube. It has a computer
opponent that searches with alpha-beta pruning and tunes its own evaluation
weights from finished games. The console text is in Japanese.

## The game

The cube has 16 columns in a 4 × 4 grid. Each column holds up to four balls.
Players take turns dropping a ball into a column, and the ball lands on the
lowest free level. The first player to own four balls in a straight line wins.
A line may run along any axis, along a diagonal of any plane, or along one of
the four space diagonals of the cube, which makes 76 lines in all. If all 64
cells fill up and nobody has a line, the game is a draw.

You enter a move as a two-digit number. The first digit is the row (1–4) and
the second is the column (1–4), so `23` means row 2, column 3. If the number
names no column, the game prints 「存在しない手です」. If the column is full,
it prints 「その手は指せません」. In both cases you are asked again.

## Installation

```
pip install .
```

Only the standard library is needed. To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with:

```
cubefour
```

On start-up the weights file `data/line.dat` is read. If the file is missing,
it is first created with default weights. The menu then offers:

1. Play against the computer. You choose to move first (`1`), move second
   (`2`), or let a random draw decide (`3`).
2. Watch the computer play against itself.
3. Two human players at the same console.
4. Let the computer learn. It plays itself as many times as you ask, learns
   after each game, prints each game's record, and at the end prints all 76
   weights.
0. Quit. You are asked whether to save the current weights to `data/line.dat`.

Any other menu input prints 「無効な入力」. When input ends, the program exits
without saving.

Before each move the board is printed one level at a time, starting with the
top level. `1` marks the first player's balls and `2` marks the second
player's. The current evaluation is printed below the board. Positive values
favour the first player and negative values favour the second. When a game
ends, the winner (or a draw) and the move record are shown. Answer `y` to let
the computer learn from that game.

If the command is given any arguments, it only creates the weights file when
missing, reads it, and exits without showing the menu.

## How the computer thinks

Each of the 76 lines has a weight. A line whose balls all belong to one player
counts for that player: its weight times the number of balls on it. A won
position scores ±10000. The search depth depends on how far the game has gone:

| Moves played | First player | Second player |
|--------------|--------------|---------------|
| under 16     | 6            | 5             |
| under 44     | 8            | 7             |
| under 54     | 10           | 9             |
| 54 or more   | to the end   | to the end    |

After a finished game, each weight `w` is changed by `d · f / T`:

- `d` is the winner's balls minus the loser's balls on the line.
- `T` is the number of moves in the game.
- `f` is `exp(4 − w)` when `d > 0` and `exp(w − 2)` otherwise.

So lines where the winner had more balls get heavier, lines where the loser had
more get lighter, and lines where both had the same number stay as they are.
Learning from a game that is neither won nor drawn raises
`GameNotFinishedError`.

In the learning step, the first 48 weights are matched against the 16 vertical
lines three times over. Scoring matches them against the three axis families.
The remaining 28 weights are matched the same way in both.

## Weights file

The weights are kept in `data/line.dat`, relative to the working directory.
The file holds 76 little-endian double-precision numbers, 608 bytes in all.
A new file has every weight set to 3. A shorter file is rejected with
`ValueError`.

## Library use

The pieces can also be used on their own:

- `cubefour.board.Board` holds a position. It can start empty or from a
  4 × 4 × 4 grid of `0`, `1` and `2` values indexed `[height][row][col]`.
  - It provides `move(row, col)`, which returns the landing height, and
    `can_move`, `current_player`, `winner`, `copy` and `render`.
  - It has the `turn` and `squares` properties, and indexing by
    `(height, row, col)`.
  - Playing outside the grid or into a full column raises `IllegalMoveError`.
- `cubefour.board.LINES` lists the 76 lines in weight-table order.
- `cubefour.lines` provides two functions:
  - `static_score(board, weights)` is the line-based evaluation without
    search.
  - `improve_weights(board, weights, raise_center=4.0, lower_center=2.0)`
    returns the learned weights.
- `cubefour.improvers.template_improve(board, weights)` is the same learning
  rule with both centres set to 3.
- `cubefour.evaluator.Evaluator` combines the scoring with the alpha-beta
  search.
  - It provides `evaluate`, `next_best_move`, `static_evaluation`,
    `set_weights` and `improve_parameters`.
  - It has the `weights`, `evaluation`, `analyzed_board` and `best_moves`
    properties.
  - Moves are column indices `row * 4 + col`, and `-1` means no move.
- `cubefour.storage` provides `init_weights(path, overwrite=False)`,
  `load_weights(path)` and `save_weights(path, weights)`.
- `cubefour.cli` provides `play_game`, `learn`, `exit_prompt`,
  `format_record` and `main`. These take the input and output streams as
  arguments.

## Limitations

- The weights file path is fixed to `data/line.dat` for the command. Command-line
  arguments select no other file or mode.
- Game records are only printed. They are not saved.