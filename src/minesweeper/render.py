"""
Plain-text rendering of a board and game status.
"""
from typing import List

from .board import Board
from .cell import Cell
from .game import Game, GameState

STATE_LABELS = {
    GameState.NOT_STARTED: "Ready",
    GameState.IN_PROGRESS: "Playing",
    GameState.WON: "You won!",
    GameState.LOST: "Boom! You lost.",
}


def _cell_char(cell: Cell, reveal_mines: bool) -> str:
    if cell.is_revealed:
        if cell.is_mine:
            return "*"
        if cell.adjacent_mine_count == 0:
            return " "
        return str(cell.adjacent_mine_count)
    if reveal_mines:
        if cell.is_flagged and not cell.is_mine:
            return "X"
        if cell.is_mine and not cell.is_flagged:
            return "*"
    return "F" if cell.is_flagged else "."


def render_ansi(board: Board, reveal_mines: bool = False, axes: bool = False) -> str:
    """
    Render the board as text, one line per row.

    Symbols: ``.`` hidden, ``F`` flag, ``*`` mine, blank for zero,
    digits for counts. With ``reveal_mines`` every mine is shown and
    wrong flags become ``X``. With ``axes`` column numbers (mod 10) head
    the grid and each row starts with its y coordinate.
    """
    label_width = len(str(board.height - 1))
    lines: List[str] = []

    if axes:
        header = " ".join(str(x % 10) for x in range(board.width))
        lines.append(" " * (label_width + 1) + header)

    for y in range(board.height):
        row = " ".join(
            _cell_char(board.cell_at(x, y), reveal_mines)
            for x in range(board.width)
        )
        if axes:
            row = f"{y:>{label_width}} {row}"
        lines.append(row)

    return "\n".join(lines)


def render_status(game: Game) -> str:
    """One-line summary: state, flags left and whole seconds elapsed."""
    return (
        f"{STATE_LABELS[game.state]} | "
        f"Mines left: {game.flags_remaining} | "
        f"Time: {int(game.elapsed_time)}s"
    )
