"""
Board module for Minesweeper game.

Owns the grid of cells, places mines, computes adjacency counts and
performs the reveal (flood fill), flag and chord mutations. The board
knows nothing about turns, timers or win/loss bookkeeping; that is the
job of :class:`minesweeper.game.Game`.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .config import validate_dimensions
from .errors import InvalidConfiguration, OutOfBounds

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


# ============================================================================
# Reveal Result
# ============================================================================

@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a reveal or chord.

    Attributes:
        hit_mine: True if a mine was uncovered.
        revealed: Positions (x, y) newly revealed by this action.
    """

    hit_mine: bool = False
    revealed: FrozenSet[Position] = frozenset()

    def merge(self, other: "RevealResult") -> "RevealResult":
        """Combine two results, e.g. the reveals of one chord."""
        return RevealResult(
            hit_mine=self.hit_mine or other.hit_mine,
            revealed=self.revealed | other.revealed,
        )

    def __bool__(self) -> bool:
        return bool(self.revealed)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper minefield.

    Positions are (x, y) with x the column and y the row. Mines are placed
    uniformly at random when the board is created, unless explicit
    positions are given (see :meth:`from_mines`).

    Raises:
        InvalidConfiguration: If the dimensions or mine count are invalid.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
        *,
        mines: Optional[Iterable[Position]] = None,
    ) -> None:
        validate_dimensions(width, height, mine_count)
        self.width = width
        self.height = height
        self.mine_count = mine_count
        self._rng = rng or random.Random()
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]
        self._revealed_safe = 0

        if mines is None:
            mines = self._rng.sample(list(self.positions()), mine_count)
        self._place_mines(mines)
        self._calculate_adjacent_mines()

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "Board":
        """
        Build a board with mines at exactly the given positions.

        Raises:
            InvalidConfiguration: If the mines would fill the whole board.
            OutOfBounds: If a mine position lies outside the board.
        """
        unique = set(mines)
        return cls(width, height, len(unique), mines=unique)

    def __repr__(self) -> str:
        return (
            f"Board(width={self.width}, height={self.height}, "
            f"mine_count={self.mine_count})"
        )

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _place_mines(self, mines: Iterable[Position]) -> None:
        placed = 0
        for x, y in mines:
            cell = self.cell_at(x, y)
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1
        if placed != self.mine_count:
            raise InvalidConfiguration(
                f"Expected {self.mine_count} distinct mines, got {placed}"
            )
        logger.debug(
            "Placed %d mines on %dx%d board", placed, self.width, self.height
        )

    def _calculate_adjacent_mines(self) -> None:
        for x, y in self.positions():
            self._grid[y][x].adjacent_mine_count = sum(
                1 for nx, ny in self.neighbors(x, y)
                if self._grid[ny][nx].is_mine
            )

    def clear_area(self, x: int, y: int) -> List[Position]:
        """
        Move every mine out of (x, y) and its neighbors.

        Makes the first reveal of a game open a blank area. Displaced
        mines go to random mine-free cells outside the 3x3 area. When the
        board is too crowded for that, only (x, y) itself is cleared.
        Adjacency counts are recomputed for the whole board.

        Returns:
            The new positions of the moved mines (empty if none moved).

        Raises:
            OutOfBounds: If (x, y) is not on the board.
            InvalidConfiguration: If any cell has already been revealed.
        """
        self.cell_at(x, y)
        if self._revealed_safe:
            raise InvalidConfiguration("Cannot move mines once cells are revealed")

        area = {(x, y), *self.neighbors(x, y)}
        if len(self._mines_in(area)) > len(self._free_outside(area)):
            area = {(x, y)}

        displaced = self._mines_in(area)
        if not displaced:
            return []

        targets = self._rng.sample(self._free_outside(area), len(displaced))
        for (old_x, old_y), (new_x, new_y) in zip(displaced, targets):
            self._grid[old_y][old_x].is_mine = False
            self._grid[new_y][new_x].is_mine = True
            logger.debug(
                "Moved mine from (%d, %d) to (%d, %d)", old_x, old_y, new_x, new_y
            )
        self._calculate_adjacent_mines()
        return targets

    def _mines_in(self, area: Set[Position]) -> List[Position]:
        return [pos for pos in self.positions() if pos in area and self._is_mine(pos)]

    def _free_outside(self, area: Set[Position]) -> List[Position]:
        return [
            pos for pos in self.positions()
            if pos not in area and not self._is_mine(pos)
        ]

    def _is_mine(self, pos: Position) -> bool:
        return self._grid[pos[1]][pos[0]].is_mine

    # ========================================================================
    # Geometry
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def neighbors(self, x: int, y: int) -> List[Position]:
        """Positions of the (up to 8) cells touching (x, y)."""
        return [
            (x + dx, y + dy)
            for dx, dy in NEIGHBOR_OFFSETS
            if self.in_bounds(x + dx, y + dy)
        ]

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> RevealResult:
        """
        Reveal the cell at (x, y).

        A blank cell (no adjacent mines) floods outward breadth-first
        until it reaches numbered cells. Flagged cells are never
        revealed, neither directly nor by the flood.

        Returns:
            The newly revealed positions; ``hit_mine`` is set if the
            target was a mine. Empty if the cell was already revealed
            or flagged.

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        cell = self.cell_at(x, y)
        if not cell.is_hidden:
            return RevealResult()

        if cell.is_mine:
            cell.reveal()
            return RevealResult(hit_mine=True, revealed=frozenset({(x, y)}))

        return RevealResult(revealed=frozenset(self._flood_reveal(x, y)))

    def _flood_reveal(self, x: int, y: int) -> Set[Position]:
        revealed: Set[Position] = set()
        queue: Deque[Position] = deque([(x, y)])

        while queue:
            cx, cy = queue.popleft()
            cell = self._grid[cy][cx]
            if not cell.reveal():
                continue
            revealed.add((cx, cy))
            self._revealed_safe += 1

            if cell.is_blank:
                queue.extend(
                    (nx, ny) for nx, ny in self.neighbors(cx, cy)
                    if self._grid[ny][nx].is_hidden
                )

        return revealed

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Flag or unflag the cell at (x, y).

        Returns:
            True if the flag was toggled, False if the cell is revealed.

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        return self.cell_at(x, y).toggle_flag()

    def chord(self, x: int, y: int) -> RevealResult:
        """
        Reveal every unflagged neighbor of a satisfied numbered cell.

        The cell at (x, y) must be revealed, have at least one adjacent
        mine and exactly that many adjacent flags. A wrong flag makes a
        mine reachable, in which case ``hit_mine`` is set.

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        cell = self.cell_at(x, y)
        if not cell.is_revealed or cell.is_mine or cell.adjacent_mine_count == 0:
            return RevealResult()
        if self.count_adjacent_flags(x, y) != cell.adjacent_mine_count:
            return RevealResult()

        result = RevealResult()
        for nx, ny in self.neighbors(x, y):
            if self._grid[ny][nx].is_hidden:
                result = result.merge(self.reveal(nx, ny))
        return result

    # ========================================================================
    # State Accessors
    # ========================================================================

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Get the cell at (x, y).

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self._grid[y][x]

    def count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flagged cells adjacent to (x, y)."""
        return sum(
            1 for nx, ny in self.neighbors(x, y)
            if self._grid[ny][nx].is_flagged
        )

    def mine_positions(self) -> List[Position]:
        """Positions of all mines, in row-major order."""
        return [
            (x, y) for x, y in self.positions() if self._grid[y][x].is_mine
        ]

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(1 for row in self._grid for cell in row if cell.is_flagged)

    @property
    def safe_cells_left(self) -> int:
        """Non-mine cells still to be revealed."""
        return self.width * self.height - self.mine_count - self._revealed_safe

    @property
    def all_safe_revealed(self) -> bool:
        """Check if every non-mine cell is revealed."""
        return self.safe_cells_left == 0

    def get_observation(self) -> np.ndarray:
        """
        Board as the player sees it, indexed ``[y, x]``.

        Returns:
            int8 array of shape (height, width): -1 hidden, -2 flagged,
            0-8 revealed count, 9 revealed mine.
        """
        obs = np.empty((self.height, self.width), dtype=np.int8)
        for x, y in self.positions():
            obs[y, x] = self._grid[y][x].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """Positions that can still be revealed (hidden and unflagged)."""
        return [
            (x, y) for x, y in self.positions() if self._grid[y][x].is_hidden
        ]
