"""
Cell value type.

A cell knows whether it holds a mine, how many of its eight neighbors do,
and whether the player has uncovered or flagged it.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """What the player currently sees on a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation codes shared with the environment and renderer
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One square of the minefield.

    Attributes:
        is_mine: True if stepping here loses the game.
        adjacent_mine_count: Mines among the 8 neighbors (0-8). Set once
            by the board after placement.
        state: HIDDEN, REVEALED or FLAGGED. A cell is never both revealed
            and flagged.
    """

    is_mine: bool = False
    adjacent_mine_count: int = 0
    state: CellState = CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def is_blank(self) -> bool:
        """Safe cell with no mine around it; the flood fill spreads from these."""
        return not self.is_mine and self.adjacent_mine_count == 0

    def reveal(self) -> bool:
        """
        Uncover the cell.

        Returns:
            False when the cell was already revealed or is flagged.
        """
        if self.state is not CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Put a flag on a hidden cell, or take it off a flagged one.

        Returns:
            False when the cell is already revealed.
        """
        if self.state is CellState.REVEALED:
            return False
        self.state = (
            CellState.FLAGGED
            if self.state is CellState.HIDDEN
            else CellState.HIDDEN
        )
        return True

    def to_observation(self) -> int:
        """
        Encode the cell as the player sees it.

        Returns:
            -1 hidden, -2 flagged, 0-8 revealed count, 9 revealed mine.
        """
        if self.state is CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state is CellState.FLAGGED:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mine_count
