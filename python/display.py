"""Text rendering of a board for terminals."""

from __future__ import annotations

from dataclasses import dataclass
import enum

from board import EMPTY, PLAYER_ONE, PLAYER_TWO, Board


RED = "\x1b[31m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"
RESET = "\x1b[0m"


class Annotation(enum.Enum):
    """Display-only cell markers, kept apart from board occupants."""

    LEGAL_MOVE = "legal_move"


LEGAL_MOVE = Annotation.LEGAL_MOVE


@dataclass(frozen=True)
class Glyph:
    char: str
    style: str = ""


def glyph_for(cell: int | Annotation) -> Glyph:
    """Map an occupant or annotation to its character and ANSI style."""
    if cell is LEGAL_MOVE:
        return Glyph("+", GREEN)
    if cell == EMPTY:
        return Glyph(" ")
    if cell == PLAYER_ONE:
        return Glyph("X", RED)
    if cell == PLAYER_TWO:
        return Glyph("O", BLUE)
    return Glyph("-")


def render(board: Board, color: bool = True) -> str:
    """Draw ``board`` with its held legal moves highlighted."""
    legal = set(board.moves)
    rule = "   " + "-" * (2 * board.cols + 1)

    lines = ["   " + "".join(f"{col:2d}" for col in range(board.cols)), rule]
    for row in range(board.rows):
        parts = [f"{row:2d} |"]
        for col in range(board.cols):
            cell = LEGAL_MOVE if (row, col) in legal else board.cell(row, col)
            glyph = glyph_for(cell)
            if color and glyph.style:
                parts.append(f"{glyph.style}{glyph.char}{RESET}|")
            else:
                parts.append(f"{glyph.char}|")
        lines.append("".join(parts))
    lines.append(rule)
    return "\n".join(lines)
