from collections import Counter
from unittest.mock import patch

import numpy as np
import pytest

from board import PLAYER_ONE, Board
from random_player import RANDOM_RANGE, RandomPlayer


def test_choice_is_a_held_legal_move() -> None:
    board = Board()
    board.legal_moves(PLAYER_ONE)

    assert RandomPlayer(seed=1).choose(board) in board.moves


def test_choice_indexes_moves_by_draw_modulo_count() -> None:
    board = Board()
    board.legal_moves(PLAYER_ONE)
    player = RandomPlayer()

    with patch.object(player._rng, "randint", return_value=6) as randint:
        move = player.choose(board)

    randint.assert_called_once_with(0, RANDOM_RANGE)
    assert move == (4, 5)


def test_choice_does_not_mutate_board() -> None:
    board = Board()
    board.legal_moves(PLAYER_ONE)
    before = board.to_array()
    moves = board.moves

    RandomPlayer(seed=3).choose(board)

    assert np.array_equal(board.to_array(), before)
    assert board.moves == moves


def test_same_seed_gives_same_choices() -> None:
    board = Board()
    board.legal_moves(PLAYER_ONE)
    first = RandomPlayer(seed=2024)
    second = RandomPlayer(seed=2024)

    assert [first.choose(board) for _ in range(20)] == [
        second.choose(board) for _ in range(20)
    ]


def test_empty_move_set_raises() -> None:
    with pytest.raises(ValueError, match="no legal moves"):
        RandomPlayer(seed=0).choose(Board())


def test_choices_are_roughly_uniform() -> None:
    board = Board()
    count = board.legal_moves(PLAYER_ONE)
    player = RandomPlayer(seed=123)
    trials = 40_000

    counts = Counter(player.choose(board) for _ in range(trials))

    assert set(counts) == set(board.moves)
    for move in board.moves:
        assert counts[move] / trials == pytest.approx(1 / count, abs=0.02)
