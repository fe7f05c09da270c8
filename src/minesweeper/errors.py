"""
Error types for the Minesweeper engine.

Only input validation fails loudly; actions that simply do not apply
(revealing a flagged cell, acting after game over) are no-ops.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Raised for bad board dimensions, mine counts or preset names."""


class OutOfBounds(MinesweeperError, IndexError):
    """Raised when a position lies outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height
