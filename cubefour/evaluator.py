"""Alpha-beta search over positions scored by weighted lines."""

from __future__ import annotations

from collections.abc import Sequence

from .board import FIRST, SECOND, SIZE, Board
from .lines import WIN_SCORE, improve_weights, static_score
from .storage import DEFAULT_WEIGHT, LINE_COUNT

CELLS = SIZE**3
COLUMNS = SIZE * SIZE
NO_MOVE = -1
_BOUND = float(2**31 - 1)


def _checked(weights: Sequence[float]) -> list[float]:
    values = [float(w) for w in weights]
    if len(values) != LINE_COUNT:
        raise ValueError(f"expected {LINE_COUNT} weights, got {len(values)}")
    return values


def _search_depth(turn: int, player: int) -> int:
    """How many plies to look ahead from a position."""
    if turn < 16:
        return 6 if player == FIRST else 5
    if turn < 44:
        return 8 if player == FIRST else 7
    if turn < 54:
        return 10 if player == FIRST else 9
    return CELLS - turn


class Evaluator:
    """Scores positions and picks moves using a table of line weights.

    Moves are column indices ``row * 4 + col``; ``-1`` marks no move.
    """

    def __init__(self, weights: Sequence[float] | None = None) -> None:
        if weights is None:
            self._weights = [DEFAULT_WEIGHT] * LINE_COUNT
        else:
            self._weights = _checked(weights)
        self._best = [NO_MOVE] * CELLS
        self._evaluation = 0.0
        self._analyzed = Board()

    @property
    def weights(self) -> list[float]:
        """A copy of the current line weights."""
        return list(self._weights)

    @property
    def evaluation(self) -> float:
        """Result of the latest call to :meth:`evaluate`."""
        return self._evaluation

    @property
    def analyzed_board(self) -> Board:
        """A copy of the board last passed to :meth:`evaluate`."""
        return self._analyzed.copy()

    @property
    def best_moves(self) -> tuple[int, ...]:
        """Best move recorded at each search depth of the latest evaluation."""
        return tuple(self._best)

    def set_weights(self, weights: Sequence[float]) -> None:
        """Replace the line weights."""
        self._weights = _checked(weights)

    def static_evaluation(self, board: Board) -> float:
        """Score a position without looking ahead."""
        return static_score(board, self._weights)

    def evaluate(self, board: Board) -> float:
        """Search from ``board`` and return its value; positive favours the first player."""
        self._analyzed = board.copy()
        self._best = [NO_MOVE] * CELLS
        depth_max = _search_depth(board.turn, board.current_player())
        self._evaluation = self._search(board, -_BOUND, _BOUND, 0, depth_max)
        return self._evaluation

    def next_best_move(self) -> int:
        """The move chosen at the root of the latest search, or -1."""
        return self._best[0]

    def improve_parameters(self, board: Board) -> None:
        """Learn from a finished game.

        Raises GameNotFinishedError when the game is still in progress.
        """
        self._weights = improve_weights(board, self._weights)

    def _search(
        self, board: Board, alpha: float, beta: float, depth: int, depth_max: int
    ) -> float:
        winner = board.winner()
        if winner == FIRST:
            return WIN_SCORE
        if winner == SECOND:
            return -WIN_SCORE
        if board.turn == CELLS:
            return 0.0
        if depth == depth_max:
            return static_score(board, self._weights)

        player = board.current_player()
        for index in range(COLUMNS):
            row, col = divmod(index, SIZE)
            if not board.can_move(row, col):
                continue
            child = board.copy()
            child.move(row, col)
            score = self._search(child, alpha, beta, depth + 1, depth_max)
            if player == FIRST:
                if beta <= score:
                    return score
                if alpha < score:
                    alpha = score
                    self._best[depth] = index
            else:
                if alpha >= score:
                    return score
                if beta > score:
                    beta = score
                    self._best[depth] = index
        return alpha if player == FIRST else beta