"""Line-based scoring of a position and learning of the line weights."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .board import EMPTY, FIRST, LINES, SECOND, SIZE, Board, Line

WIN_SCORE = 10000.0
"""Score of a position the first player has won; its negation for the second."""

# The learning step reads the first 48 weights against the vertical lines
# three times over, while scoring reads them against the three axis families.
# Both orders are kept as they are, so existing weight tables stay valid.
_IMPROVE_LINES: tuple[Line, ...] = LINES[:16] * 3 + LINES[48:]


class GameNotFinishedError(ValueError):
    """Raised when weights are to be learned from a game still in progress."""


def _checked(weights: Sequence[float]) -> list[float]:
    values = [float(w) for w in weights]
    if len(values) != len(LINES):
        raise ValueError(f"expected {len(LINES)} weights, got {len(values)}")
    return values


def _line_owner(board: Board, line: Line) -> tuple[int, int] | None:
    """The sole owner of a line's balls and how many there are, or None if mixed."""
    owner = EMPTY
    count = 0
    for cell in line:
        value = board[cell]
        if value == EMPTY:
            continue
        if owner == EMPTY:
            owner = value
        elif owner != value:
            return None
        count += 1
    return owner, count


def static_score(board: Board, weights: Sequence[float]) -> float:
    """Score a position without search; positive favours the first player."""
    values = _checked(weights)
    winner = board.winner()
    if winner == FIRST:
        return WIN_SCORE
    if winner == SECOND:
        return -WIN_SCORE

    score = 0.0
    for line, weight in zip(LINES, values):
        owned = _line_owner(board, line)
        if owned is None:
            continue
        owner, count = owned
        if owner == FIRST:
            score += weight * count
        else:
            score -= weight * count
    return score


def improve_weights(
    board: Board,
    weights: Sequence[float],
    raise_center: float = 4.0,
    lower_center: float = 2.0,
) -> list[float]:
    """Return weights adjusted from a finished game.

    A line where the winner holds more balls than the loser gains weight,
    scaled by ``exp(raise_center - w)``; otherwise it moves by a step scaled
    by ``exp(w - lower_center)``. Each step is divided by the game length.
    """
    values = _checked(weights)
    winner = board.winner()
    total = board.turn
    if winner == EMPTY and total < SIZE**3:
        raise GameNotFinishedError("the game has no winner and the board is not full")
    loser = winner % 2 + 1

    result: list[float] = []
    for line, weight in zip(_IMPROVE_LINES, values):
        owners = [board[cell] for cell in line]
        diff = owners.count(winner) - owners.count(loser)
        if diff > 0:
            factor = math.exp(raise_center - weight)
        else:
            factor = math.exp(weight - lower_center)
        result.append(weight + diff * factor / total)
    return result