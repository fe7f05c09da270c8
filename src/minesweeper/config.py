"""
Game configuration and difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import InvalidConfiguration


def validate_dimensions(width: int, height: int, mine_count: int) -> None:
    """
    Check that a width x height board can hold mine_count mines.

    At least one cell must stay mine-free, otherwise the game could
    never be won.

    Raises:
        InvalidConfiguration: If any value is out of range.
    """
    if width < 1 or height < 1:
        raise InvalidConfiguration(
            f"Board dimensions must be positive, got {width}x{height}"
        )
    if mine_count < 0:
        raise InvalidConfiguration("Number of mines cannot be negative")
    if mine_count >= width * height:
        raise InvalidConfiguration(
            f"Too many mines for a {width}x{height} board "
            f"(max {width * height - 1})"
        )


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass(frozen=True)
class GameConfig:
    """
    Parameters of a new game.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
        safe_first_move: Clear mines from around the first reveal.
        seed: Seed for mine placement; None for a fresh random board.
    """

    width: int = 8
    height: int = 8
    mine_count: int = 10
    safe_first_move: bool = True
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        validate_dimensions(self.width, self.height, self.mine_count)

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    @property
    def safe_cell_count(self) -> int:
        """Number of cells without a mine."""
        return self.cell_count - self.mine_count


# Preset difficulty levels
EASY = GameConfig(8, 8, 10)
MEDIUM = GameConfig(16, 16, 40)
HARD = GameConfig(30, 16, 99)

PRESETS: Dict[str, GameConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def preset(name: str) -> GameConfig:
    """Look up a difficulty preset by name (case-insensitive)."""
    try:
        return PRESETS[name.lower()]
    except KeyError:
        choices = ", ".join(PRESETS)
        raise InvalidConfiguration(
            f"Unknown difficulty {name!r} (choose from {choices})"
        ) from None
