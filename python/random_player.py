"""Automated player that picks a uniformly random legal move."""

from __future__ import annotations

import random

from board import Board, Coord


RANDOM_RANGE = 10_000_000


class RandomPlayer:
    """Select moves from a board's current legal-move set."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def choose(self, board: Board) -> Coord:
        """Return one of ``board.moves``; the board is not modified.

        The caller must have called ``board.legal_moves`` for the player to
        move and checked that it returned a non-zero count.
        """
        moves = board.moves
        if not moves:
            raise ValueError("board has no legal moves to choose from")

        index = self._rng.randint(0, RANDOM_RANGE) % len(moves)
        return moves[index]
