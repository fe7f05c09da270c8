"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, Cell, Game, GameConfig


class FakeClock:
    """Manually advanced time source for timer tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine in the middle; every other cell is a 1."""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a full column of mines at x=2.

    Column x=0 is blank, column x=1 is numbered, x=3 and x=4 are
    unreachable from the left.
    """
    return Board.from_mines(5, 5, [(2, y) for y in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(5, 5, 0)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    return Cell(is_mine=True)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def center_mine_game(center_mine_board: Board, clock: FakeClock) -> Game:
    """Game on the 3x3 center-mine board, first move not protected."""
    return Game.from_board(center_mine_board, clock=clock)


@pytest.fixture
def seeded_config() -> GameConfig:
    return GameConfig(9, 9, 10, seed=1234)
