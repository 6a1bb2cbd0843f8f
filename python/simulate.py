"""CLI entry point for random-vs-random Othello games."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import sys
from typing import Callable

from board import EMPTY, PLAYER_ONE, PLAYER_TWO, Board, Coord
from display import render
from random_player import RandomPlayer


MoveCallback = Callable[[Board, int, Coord], None]


@dataclass
class GameResult:
    winner: int
    counts: tuple[int, int]
    moves_played: int
    board: Board


def _other(player: int) -> int:
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


def play_game(
    rows: int = 8,
    cols: int = 8,
    seed: int | None = None,
    on_move: MoveCallback | None = None,
) -> GameResult:
    """Play one game between two random players until both sides pass."""
    board = Board(rows, cols)
    # Offset the second seed so the two sides do not mirror each other.
    players = {
        PLAYER_ONE: RandomPlayer(seed),
        PLAYER_TWO: RandomPlayer(None if seed is None else seed + 1),
    }
    player = PLAYER_ONE
    consecutive_passes = 0
    moves_played = 0

    while consecutive_passes < 2:
        if board.legal_moves(player) == 0:
            consecutive_passes += 1
            player = _other(player)
            continue

        consecutive_passes = 0
        move = players[player].choose(board)
        if not board.place(player, *move):
            raise RuntimeError(f"selected illegal move: {move}")
        moves_played += 1
        if on_move is not None:
            on_move(board, player, move)
        player = _other(player)

    return GameResult(
        winner=board.winner(),
        counts=(board.count(PLAYER_ONE), board.count(PLAYER_TWO)),
        moves_played=moves_played,
        board=board,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line interface for game simulation."""
    parser = argparse.ArgumentParser(description="Play random Othello games.")
    parser.add_argument("--rows", type=int, default=8, help="Board rows.")
    parser.add_argument("--cols", type=int, default=8, help="Board columns.")
    parser.add_argument("--games", type=int, default=1, help="Number of games.")
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducible games.",
    )
    parser.add_argument(
        "--show", action="store_true", help="Print the final board of each game."
    )
    parser.add_argument(
        "--no-color",
        action="store_false",
        dest="color",
        help="Disable ANSI colours when printing boards.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Execute CLI workflow and print per-game results and a tally."""
    try:
        args = build_parser().parse_args(argv)
        if args.games < 0:
            raise ValueError(f"games must be >= 0, got {args.games}")

        tally = {EMPTY: 0, PLAYER_ONE: 0, PLAYER_TWO: 0}
        for game in range(args.games):
            result = play_game(args.rows, args.cols, seed=args.seed + 2 * game)
            if args.show:
                print(render(result.board, color=args.color))
            first, second = result.counts
            print(
                f"Game {game + 1}: winner={result.winner} "
                f"score={first}-{second} moves={result.moves_played}"
            )
            # winner() hands ties to player 1; the tally reports them as draws.
            outcome = EMPTY if first == second else result.winner
            tally[outcome] += 1

        print(
            f"Player 1 wins: {tally[PLAYER_ONE]}, "
            f"Player 2 wins: {tally[PLAYER_TWO]}, draws: {tally[EMPTY]}"
        )
        return 0
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
