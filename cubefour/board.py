"""Board state and rules for four-in-a-row on a 4x4x4 cube.

Cells are addressed as ``(height, row, col)``. A move drops a ball into the
``(row, col)`` column, where it lands on the lowest free height.
"""

from __future__ import annotations

from collections.abc import Sequence

SIZE = 4
EMPTY = 0
FIRST = 1
SECOND = 2

Cell = tuple[int, int, int]
Line = tuple[Cell, Cell, Cell, Cell]


def _build_lines() -> tuple[Line, ...]:
    r = range(SIZE)
    top = SIZE - 1
    lines: list[Line] = []
    lines += [tuple((h, a, b) for h in r) for a in r for b in r]
    lines += [tuple((a, i, b) for i in r) for a in r for b in r]
    lines += [tuple((a, b, i) for i in r) for a in r for b in r]
    for col in r:
        lines.append(tuple((i, i, col) for i in r))
        lines.append(tuple((i, top - i, col) for i in r))
    for height in r:
        lines.append(tuple((height, i, i) for i in r))
        lines.append(tuple((height, i, top - i) for i in r))
    for row in r:
        lines.append(tuple((i, row, i) for i in r))
        lines.append(tuple((i, row, top - i) for i in r))
    lines.append(tuple((i, i, i) for i in r))
    lines.append(tuple((i, i, top - i) for i in r))
    lines.append(tuple((i, top - i, i) for i in r))
    lines.append(tuple((i, top - i, top - i) for i in r))
    return tuple(lines)


LINES: tuple[Line, ...] = _build_lines()
"""All 76 winning lines, in the order the weight table uses them."""


class IllegalMoveError(ValueError):
    """Raised when a ball cannot be dropped into the requested column."""


def _validated(squares: Sequence[Sequence[Sequence[int]]]) -> list[list[list[int]]]:
    cells = [[list(row) for row in layer] for layer in squares]
    if len(cells) != SIZE or any(
        len(layer) != SIZE or any(len(row) != SIZE for row in layer) for layer in cells
    ):
        raise ValueError("squares must be a 4x4x4 grid")
    if any(v not in (EMPTY, FIRST, SECOND) for layer in cells for row in layer for v in row):
        raise ValueError("square values must be 0, 1 or 2")
    return cells


class Board:
    """A 4x4x4 board together with the number of moves played."""

    __slots__ = ("_cells", "_turn")

    def __init__(self, squares: Sequence[Sequence[Sequence[int]]] | None = None) -> None:
        if squares is None:
            self._cells = [[[EMPTY] * SIZE for _ in range(SIZE)] for _ in range(SIZE)]
        else:
            self._cells = _validated(squares)
        self._turn = sum(v != EMPTY for layer in self._cells for row in layer for v in row)

    def copy(self) -> Board:
        """Return an independent copy of this board."""
        clone = Board.__new__(Board)
        clone._cells = [[row[:] for row in layer] for layer in self._cells]
        clone._turn = self._turn
        return clone

    @property
    def turn(self) -> int:
        """Number of moves played so far."""
        return self._turn

    @property
    def squares(self) -> list[list[list[int]]]:
        """A copy of the cells, indexed ``[height][row][col]``."""
        return [[row[:] for row in layer] for layer in self._cells]

    def __getitem__(self, cell: Cell) -> int:
        height, row, col = cell
        return self._cells[height][row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._turn == other._turn and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(turn={self._turn}, squares={self._cells!r})"

    def can_move(self, row: int, col: int) -> bool:
        """Whether the ``(row, col)`` column exists and still has room."""
        return 0 <= row < SIZE and 0 <= col < SIZE and self._cells[SIZE - 1][row][col] == EMPTY

    def move(self, row: int, col: int) -> int:
        """Drop the current player's ball into a column; return the height it landed on."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IllegalMoveError(f"no column at ({row}, {col})")
        if self._cells[SIZE - 1][row][col] != EMPTY:
            raise IllegalMoveError(f"column ({row}, {col}) is full")
        player = self.current_player()
        height = next(h for h in range(SIZE) if self._cells[h][row][col] == EMPTY)
        self._cells[height][row][col] = player
        self._turn += 1
        return height

    def current_player(self) -> int:
        """The player to move: 1 for the first player, 2 for the second."""
        return self._turn % 2 + 1

    def winner(self) -> int:
        """The player owning a complete line, or 0 if there is none."""
        for line in LINES:
            owner = self[line[0]]
            if owner != EMPTY and all(self[cell] == owner for cell in line[1:]):
                return owner
        return EMPTY

    def render(self) -> str:
        """Text picture of the board, top layer first."""
        out: list[str] = []
        for i in range(SIZE):
            out.append(f"{SIZE - i}段目\n")
            for row in self._cells[SIZE - 1 - i]:
                out.append("｜" + "".join(f"{v} " for v in row) + "\n")
        return "".join(out)