"""Alternative learning rules for the line weights."""

from __future__ import annotations

from collections.abc import Sequence

from .board import Board
from .lines import improve_weights

TEMPLATE_CENTER = 3.0
"""Weight at which the template rule takes a unit step in either direction."""


def template_improve(board: Board, weights: Sequence[float]) -> list[float]:
    """Return weights adjusted from a finished game, with both steps centred on 3.

    A line where the winner holds more balls than the loser gains
    ``diff * exp(3 - w) / turns``. Any other line changes by
    ``diff * exp(w - 3) / turns``. Raises GameNotFinishedError when the game
    has no winner and the board is not full.
    """
    return improve_weights(
        board,
        weights,
        raise_center=TEMPLATE_CENTER,
        lower_center=TEMPLATE_CENTER,
    )