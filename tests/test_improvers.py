import pytest

from cubefour.board import Board
from cubefour.improvers import template_improve
from cubefour.lines import GameNotFinishedError, improve_weights
from cubefour.storage import DEFAULT_WEIGHT, LINE_COUNT


def _first_player_wins_vertically() -> Board:
    board = Board()
    for _ in range(3):
        board.move(0, 0)
        board.move(0, 1)
    board.move(0, 0)
    return board


def test_won_board_fixture_is_finished():
    board = _first_player_wins_vertically()
    assert board.winner() == 1
    assert board.turn == 7


def test_unfinished_game_raises():
    board = Board()
    board.move(1, 1)
    with pytest.raises(GameNotFinishedError):
        template_improve(board, [DEFAULT_WEIGHT] * LINE_COUNT)


def test_empty_board_raises():
    with pytest.raises(GameNotFinishedError):
        template_improve(Board(), [DEFAULT_WEIGHT] * LINE_COUNT)


def test_wrong_weight_count_raises():
    board = _first_player_wins_vertically()
    with pytest.raises(ValueError):
        template_improve(board, [DEFAULT_WEIGHT] * (LINE_COUNT - 1))


def test_result_has_one_weight_per_line():
    board = _first_player_wins_vertically()
    result = template_improve(board, [DEFAULT_WEIGHT] * LINE_COUNT)
    assert len(result) == LINE_COUNT


def test_input_weights_are_not_mutated():
    board = _first_player_wins_vertically()
    weights = [DEFAULT_WEIGHT] * LINE_COUNT
    template_improve(board, weights)
    assert weights == [DEFAULT_WEIGHT] * LINE_COUNT


def test_winning_column_gains_unit_step_at_center():
    board = _first_player_wins_vertically()
    result = template_improve(board, [DEFAULT_WEIGHT] * LINE_COUNT)
    assert result[0] == pytest.approx(3 + 4 / 7)


def test_losing_column_loses_weight():
    board = _first_player_wins_vertically()
    result = template_improve(board, [DEFAULT_WEIGHT] * LINE_COUNT)
    assert result[1] < DEFAULT_WEIGHT


def test_untouched_lines_keep_weight():
    board = _first_player_wins_vertically()
    result = template_improve(board, [DEFAULT_WEIGHT] * LINE_COUNT)
    # Column (3, 3) holds no balls at all.
    assert result[15] == DEFAULT_WEIGHT


def test_first_three_blocks_follow_vertical_lines():
    board = _first_player_wins_vertically()
    result = template_improve(board, [DEFAULT_WEIGHT] * LINE_COUNT)
    assert result[0:16] == result[16:32] == result[32:48]


def test_matches_general_rule_with_centres_at_three():
    board = _first_player_wins_vertically()
    weights = [1.0 + 0.05 * i for i in range(LINE_COUNT)]
    expected = improve_weights(board, weights, raise_center=3.0, lower_center=3.0)
    assert template_improve(board, weights) == pytest.approx(expected)


def test_differs_from_default_centres_off_center():
    board = _first_player_wins_vertically()
    weights = [2.5] * LINE_COUNT
    template = template_improve(board, weights)
    default = improve_weights(board, weights)
    assert template[0] < default[0]


def test_gain_shrinks_as_weight_grows():
    board = _first_player_wins_vertically()
    low = template_improve(board, [2.0] * LINE_COUNT)
    high = template_improve(board, [4.0] * LINE_COUNT)
    assert low[0] - 2.0 > high[0] - 4.0 > 0