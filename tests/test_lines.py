import pytest

from cubefour.board import LINES, Board
from cubefour.lines import WIN_SCORE, GameNotFinishedError, improve_weights, static_score


def _only(index, value=5.0):
    weights = [0.0] * len(LINES)
    weights[index] = value
    return weights


def _first_wins_in_corner():
    board = Board()
    for _ in range(3):
        board.move(0, 0)
        board.move(1, 1)
    board.move(0, 0)
    return board


def test_empty_board_scores_zero():
    assert static_score(Board(), [3.0] * len(LINES)) == 0.0


def test_single_first_ball_counts_its_line_weight():
    board = Board()
    board.move(0, 0)
    assert static_score(board, _only(0)) == 5.0


def test_second_player_ball_counts_negative():
    board = Board()
    board.move(3, 3)
    board.move(0, 0)
    assert static_score(board, _only(0)) == -5.0


def test_weight_scales_with_ball_count():
    board = Board()
    board.move(0, 0)
    board.move(3, 3)
    board.move(0, 0)
    # column (0, 0) now holds 1, 1 from the first player? No: heights 0 and 1.
    assert board[(0, 0, 0)] == 1 and board[(1, 0, 0)] == 1
    assert static_score(board, _only(0)) == 10.0


def test_mixed_line_scores_nothing():
    board = Board()
    board.move(0, 0)
    board.move(0, 0)
    assert static_score(board, _only(0)) == 0.0


def test_won_positions_score_fixed_values():
    board = _first_wins_in_corner()
    assert static_score(board, [3.0] * len(LINES)) == WIN_SCORE

    squares = [[[0] * 4 for _ in range(4)] for _ in range(4)]
    for h in range(4):
        squares[h][2][2] = 2
    squares[0][0][0] = 1
    squares[0][0][1] = 1
    squares[0][0][3] = 1
    squares[0][3][3] = 1
    assert static_score(Board(squares), [3.0] * len(LINES)) == -WIN_SCORE


def test_score_rejects_wrong_weight_count():
    with pytest.raises(ValueError):
        static_score(Board(), [3.0] * 10)


def test_improve_rejects_unfinished_game():
    board = Board()
    board.move(0, 0)
    with pytest.raises(GameNotFinishedError):
        improve_weights(board, [3.0] * len(LINES))


def test_improve_raises_winning_line_and_lowers_losing_line():
    board = _first_wins_in_corner()
    result = improve_weights(board, [3.0] * len(LINES))
    assert len(result) == len(LINES)
    assert result[0] > 3.0
    assert result[5] < 3.0
    assert result[10] == 3.0


def test_improve_reads_first_families_as_vertical_lines():
    board = _first_wins_in_corner()
    result = improve_weights(board, [3.0] * len(LINES))
    for k in range(16):
        assert result[16 + k] == result[k]
        assert result[32 + k] == result[k]


def test_improve_centres_change_step_size():
    board = _first_wins_in_corner()
    result = improve_weights(board, [3.0] * len(LINES), 3.0, 3.0)
    assert result[0] == pytest.approx(3.0 + 4 / 7)


def test_improve_leaves_input_untouched():
    board = _first_wins_in_corner()
    weights = [3.0] * len(LINES)
    improve_weights(board, weights)
    assert weights == [3.0] * len(LINES)


def test_improve_rejects_wrong_weight_count():
    with pytest.raises(ValueError):
        improve_weights(_first_wins_in_corner(), [3.0] * 75)