"""Othello board engine on a rectangular grid."""

from __future__ import annotations

import numpy as np


EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2
MAX_PLAYER = 254
MIN_SIZE = 2

Coord = tuple[int, int]

DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def _check_player(player: int) -> None:
    if not EMPTY < player <= MAX_PLAYER:
        raise ValueError(f"player must be in [1, {MAX_PLAYER}], got {player}")


class Board:
    """Grid of occupants plus the legal-move set last computed for a player.

    Cells hold ``EMPTY`` or a player identifier. The legal-move set is only
    valid until the next successful ``place`` or ``legal_moves`` call.
    """

    def __init__(self, rows: int = 8, cols: int = 8) -> None:
        if not isinstance(rows, int):
            raise ValueError(f"rows must be an integer, got {rows!r}")
        if not isinstance(cols, int):
            raise ValueError(f"cols must be an integer, got {cols!r}")
        if rows < MIN_SIZE:
            raise ValueError(f"rows must be >= {MIN_SIZE}, got {rows}")
        if cols < MIN_SIZE:
            raise ValueError(f"cols must be >= {MIN_SIZE}, got {cols}")

        self._rows = rows
        self._cols = cols
        self._grid = np.zeros((rows, cols), dtype=np.uint8)

        mid_r, mid_c = rows // 2, cols // 2
        self._grid[mid_r - 1, mid_c - 1] = PLAYER_TWO
        self._grid[mid_r, mid_c - 1] = PLAYER_ONE
        self._grid[mid_r - 1, mid_c] = PLAYER_ONE
        self._grid[mid_r, mid_c] = PLAYER_TWO

        self._moves: tuple[Coord, ...] = ()
        self._moves_player = EMPTY
        self._last_player = EMPTY

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def moves(self) -> tuple[Coord, ...]:
        """Legal moves from the latest ``legal_moves`` call, row-major."""
        return self._moves

    @property
    def last_player(self) -> int:
        return self._last_player

    def on_board(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell(self, row: int, col: int) -> int:
        if not self.on_board(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self._rows}x{self._cols} board")
        return int(self._grid[row, col])

    def _collect_flips(self, row: int, col: int, player: int) -> list[Coord]:
        """Return the opponent cells captured by ``player`` at ``(row, col)``."""
        flips: list[Coord] = []

        for dr, dc in DIRECTIONS:
            r = row + dr
            c = col + dc
            line: list[Coord] = []

            while self.on_board(r, c):
                occupant = self._grid[r, c]
                if occupant == EMPTY:
                    break
                if occupant == player:
                    flips.extend(line)
                    break
                line.append((r, c))
                r += dr
                c += dc

        return flips

    def flips(self, player: int, row: int, col: int) -> list[Coord]:
        """Cells that ``place(player, row, col)`` would flip, without moving."""
        _check_player(player)
        if not self.on_board(row, col) or self._grid[row, col] != EMPTY:
            return []
        return self._collect_flips(row, col, player)

    def legal_moves(self, player: int) -> int:
        """Recompute the legal-move set for ``player`` and return its size."""
        _check_player(player)
        moves: list[Coord] = []

        for row in range(self._rows):
            for col in range(self._cols):
                if self._grid[row, col] != EMPTY:
                    continue
                if self._collect_flips(row, col, player):
                    moves.append((row, col))

        self._moves = tuple(moves)
        self._moves_player = player
        return len(self._moves)

    def place(self, player: int, row: int, col: int) -> bool:
        """Play ``player`` at ``(row, col)``; ``False`` leaves the board untouched.

        The move must be in the set computed by the last ``legal_moves``
        call for the same player.
        """
        _check_player(player)
        if not self.on_board(row, col):
            return False
        if self._grid[row, col] != EMPTY:
            return False
        if player != self._moves_player or (row, col) not in self._moves:
            return False

        flips = self._collect_flips(row, col, player)
        if not flips:
            return False

        for r, c in flips:
            self._grid[r, c] = player
        self._grid[row, col] = player
        self._last_player = player

        self._moves = ()
        self._moves_player = EMPTY
        return True

    def winner(self) -> int:
        """Player with the most pieces; ties go to the lower identifier."""
        counts = np.bincount(self._grid.ravel(), minlength=MAX_PLAYER + 1)
        pieces = counts[PLAYER_ONE:]
        if pieces.max() == 0:
            return EMPTY
        # argmax returns the first maximum, so ties favour the lower id.
        return int(np.argmax(pieces)) + PLAYER_ONE

    def count(self, player: int) -> int:
        return int(np.count_nonzero(self._grid == player))

    def empty_count(self) -> int:
        return self.count(EMPTY)

    def to_array(self) -> np.ndarray:
        return self._grid.copy()

    def copy(self) -> Board:
        clone = Board(self._rows, self._cols)
        clone._grid = self._grid.copy()
        clone._moves = self._moves
        clone._moves_player = self._moves_player
        clone._last_player = self._last_player
        return clone
