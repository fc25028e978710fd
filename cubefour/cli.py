"""Interactive console front end: play games, train the evaluator, save weights."""

from __future__ import annotations

import os
import random
import re
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .board import FIRST, SECOND, SIZE, Board
from .evaluator import Evaluator
from .storage import DEFAULT_PATH, init_weights, load_weights, save_weights

CELLS = SIZE**3
PLAYER_NAMES = {FIRST: "先手", SECOND: "後手"}

MENU = (
    "【MENU】\n"
    "1. CPUと対戦\n"
    "2. CPU同士で対戦\n"
    "3. プレイヤー同士で対戦\n"
    "4. AIに学習させる\n"
    "0. 終了\n"
)
USER_PROMPT = "user > "
CONFIRM_PROMPT = "user >"

_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _prompt(infile: TextIO, outfile: TextIO, prompt: str) -> str:
    """Write a prompt and read one line; raise EOFError when input ends."""
    outfile.write(prompt)
    outfile.flush()
    line = infile.readline()
    if not line:
        raise EOFError("input ended")
    return line.rstrip("\r\n")


def _read_int(text: str) -> int | None:
    """The integer at the start of ``text``, or None if there is none."""
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else None


def _confirmed(answer: str) -> bool:
    return answer[:1] in ("y", "Y")


def _move_code(index: int) -> int:
    """Two-digit move notation: row then column, both counted from 1."""
    row, col = divmod(index, SIZE)
    return (row + 1) * 10 + (col + 1)


def _parse_move(value: int | None) -> int | None:
    """Column index for a two-digit move code, or None if it names no column."""
    if value is None:
        return None
    row, col = value // 10, value % 10
    if 1 <= row <= SIZE and 1 <= col <= SIZE:
        return (row - 1) * SIZE + (col - 1)
    return None


def format_record(moves: Iterable[int]) -> str:
    """Game record with one pair of moves per line, first player's move first."""
    parts = []
    for number, index in enumerate(moves):
        first = number % 2 == 0
        name = PLAYER_NAMES[FIRST] if first else PLAYER_NAMES[SECOND]
        parts.append(f"{name}{_move_code(index)}{' ' if first else chr(10)}")
    return "".join(parts)


def _choose_side(infile: TextIO, outfile: TextIO, rng: random.Random) -> dict[int, bool]:
    """Ask which side the human takes; return which players the AI controls."""
    while True:
        outfile.write("プレイヤーが先手なら1, 後手なら2, ランダムなら3を入力\n")
        choice = _read_int(_prompt(infile, outfile, USER_PROMPT))
        if choice == 1:
            return {FIRST: False, SECOND: True}
        if choice == 2:
            return {FIRST: True, SECOND: False}
        if choice == 3:
            human_first = rng.randint(1, 2) == 1
            side = PLAYER_NAMES[FIRST] if human_first else PLAYER_NAMES[SECOND]
            outfile.write(f"あなたは{side}です\n")
            return {FIRST: not human_first, SECOND: human_first}


def play_game(
    evaluator: Evaluator,
    mode: int,
    infile: TextIO,
    outfile: TextIO,
    rng: random.Random | None = None,
) -> Board:
    """Play one game and return the final board.

    ``mode`` 1 is human against the AI, 2 is AI against AI and 3 is two humans.
    """
    if mode == 1:
        ai = _choose_side(infile, outfile, rng if rng is not None else random.Random())
    elif mode == 2:
        ai = {FIRST: True, SECOND: True}
    elif mode == 3:
        ai = {FIRST: False, SECOND: False}
    else:
        raise ValueError(f"unknown game mode {mode}")

    board = Board()
    moves: list[int] = []
    while True:
        outfile.write(board.render())
        value = evaluator.evaluate(board)
        outfile.write(f"評価値 : {value:g}\n")
        player = board.current_player()
        outfile.write(f"{board.turn + 1}ターン目:{PLAYER_NAMES[player]}のターンです\n")
        outfile.write("次の手を入力してください\n")
        if ai[player]:
            outfile.write("AI > ")
            index = evaluator.next_best_move()
            outfile.write(f"{_move_code(index)}\n")
            if not board.can_move(*divmod(index, SIZE)):
                raise RuntimeError(f"the AI chose an unplayable move {index}")
        else:
            parsed = _parse_move(_read_int(_prompt(infile, outfile, USER_PROMPT)))
            if parsed is None:
                outfile.write("存在しない手です\n")
                continue
            index = parsed
        row, col = divmod(index, SIZE)
        if not board.can_move(row, col):
            outfile.write("その手は指せません\n")
            continue
        board.move(row, col)
        moves.append(index)
        if board.winner() or board.turn == CELLS:
            break

    outfile.write(board.render())
    winner = board.winner()
    if winner:
        outfile.write(f"{PLAYER_NAMES[winner]}の勝利です\n")
    else:
        outfile.write("引き分け\n")

    outfile.write("\n今ゲームの棋譜\n")
    outfile.write(format_record(moves))
    outfile.write("\n学習させますか？[y/n]\n")
    if _confirmed(_prompt(infile, outfile, CONFIRM_PROMPT)):
        evaluator.improve_parameters(board)
    return board


def learn(evaluator: Evaluator, infile: TextIO, outfile: TextIO) -> list[int]:
    """Let the AI play itself a requested number of times, learning after each game.

    Returns the reported outcome of each game: the winner, or 0 for a draw.
    """
    outfile.write("\n何回学習させますか？\n")
    times = _read_int(_prompt(infile, outfile, USER_PROMPT))
    if times is None:
        outfile.write("無効な入力\n")
        return []

    outfile.write("開始します。\n")
    results: list[int] = []
    for number in range(1, times + 1):
        outfile.write(f"\n{number}回目の対局\n")
        board = Board()
        moves: list[int] = []
        while board.winner() == 0 and board.turn < CELLS:
            evaluator.evaluate(board)
            index = evaluator.next_best_move()
            moves.append(index)
            board.move(*divmod(index, SIZE))

        if board.turn == CELLS:
            outcome = 0
            outfile.write("引き分け\n")
        else:
            outcome = board.winner()
            outfile.write(f"{PLAYER_NAMES[outcome]}の勝利\n")
        results.append(outcome)

        evaluator.improve_parameters(board)
        outfile.write("\n今ゲームの棋譜\n")
        outfile.write(format_record(moves))

    outfile.write("\n今回のデータ\n")
    outfile.write("".join(f"{weight:g}\n" for weight in evaluator.weights))
    return results


def exit_prompt(
    evaluator: Evaluator,
    infile: TextIO,
    outfile: TextIO,
    path: str | os.PathLike[str] = DEFAULT_PATH,
) -> bool:
    """Ask whether to save the weights; return True when they were saved."""
    outfile.write("\n保存しますか？[y/n]\n")
    if _confirmed(_prompt(infile, outfile, CONFIRM_PROMPT)):
        save_weights(path, evaluator.weights)
        return True
    return False


def _menu(
    evaluator: Evaluator,
    infile: TextIO,
    outfile: TextIO,
    path: str | os.PathLike[str],
) -> None:
    while True:
        outfile.write(MENU)
        choice = _read_int(_prompt(infile, outfile, USER_PROMPT))
        if choice in (1, 2, 3):
            play_game(evaluator, choice, infile, outfile)
        elif choice == 4:
            learn(evaluator, infile, outfile)
        elif choice == 0:
            exit_prompt(evaluator, infile, outfile, path)
            return
        else:
            outfile.write("無効な入力\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the weight table, creating it if needed, and run the menu."""
    args = list(sys.argv[1:] if argv is None else argv)
    init_weights(DEFAULT_PATH)
    evaluator = Evaluator(load_weights(DEFAULT_PATH))
    if args:
        return 0
    try:
        _menu(evaluator, sys.stdin, sys.stdout, DEFAULT_PATH)
    except EOFError:
        sys.stdout.write("\n")
    return 0