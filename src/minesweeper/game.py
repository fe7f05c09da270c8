"""
Game controller.

Wraps a :class:`Board` with the session bookkeeping a player interacts
with: game state, elapsed time and the remaining-flag counter.
"""
import logging
import random
import time
from dataclasses import replace
from enum import Enum, auto
from typing import Callable, Optional

from .board import Board, RevealResult
from .cell import Cell
from .config import GameConfig
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Lifecycle of a game session."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = frozenset({GameState.WON, GameState.LOST})


class Game:
    """
    A single minesweeper session.

    The game starts in NOT_STARTED. The first reveal that uncovers
    anything moves it to IN_PROGRESS and starts the timer; uncovering a
    mine ends it as LOST, uncovering every safe cell ends it as WON.
    Once finished, reveal/flag/chord calls are ignored until
    :meth:`new_game`.

    Args:
        config: Board parameters (default: 8x8 with 10 mines).
        clock: Monotonic time source in seconds.
        board: Pre-built board matching ``config``; see :meth:`from_board`.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        *,
        board: Optional[Board] = None,
    ) -> None:
        self._clock = clock
        self._config = config or GameConfig()
        self._start(board or self._build_board())

    @classmethod
    def from_board(
        cls,
        board: Board,
        safe_first_move: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> "Game":
        """
        Start a session on an existing, untouched board.

        Raises:
            InvalidConfiguration: If some of the board is already revealed.
        """
        config = GameConfig(
            board.width,
            board.height,
            board.mine_count,
            safe_first_move=safe_first_move,
        )
        if board.safe_cells_left != config.safe_cell_count:
            raise InvalidConfiguration("Board already has revealed cells")
        return cls(config, clock=clock, board=board)

    def new_game(self, config: Optional[GameConfig] = None) -> None:
        """
        Start over on a fresh board.

        Args:
            config: New parameters, or None to keep the current ones.
        """
        if config is not None:
            self._config = config
        self._start(self._build_board())

    def _build_board(self) -> Board:
        cfg = self._config
        return Board(
            cfg.width, cfg.height, cfg.mine_count, rng=random.Random(cfg.seed)
        )

    def _start(self, board: Board) -> None:
        cfg = self._config
        self._board = board
        self._state = GameState.NOT_STARTED
        self._flags_placed = board.flag_count
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None
        logger.info(
            "New game: %dx%d, %d mines", cfg.width, cfg.height, cfg.mine_count
        )

    # ========================================================================
    # Player Actions
    # ========================================================================

    def on_reveal(self, x: int, y: int) -> RevealResult:
        """
        Reveal the cell at (x, y).

        Returns:
            What the board uncovered; empty when nothing changed.

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        if self.is_finished:
            logger.debug("Ignoring reveal at (%d, %d): game over", x, y)
            return RevealResult()

        if self._state is GameState.NOT_STARTED and self._config.safe_first_move:
            if self._board.cell_at(x, y).is_hidden:
                self._board.clear_area(x, y)

        result = self._board.reveal(x, y)
        self._apply(result)
        return result

    def on_toggle_flag(self, x: int, y: int) -> bool:
        """
        Flag or unflag the cell at (x, y).

        Returns:
            True if the flag changed.

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        if self.is_finished:
            return False
        if not self._board.toggle_flag(x, y):
            return False
        self._flags_placed += 1 if self._board.cell_at(x, y).is_flagged else -1
        return True

    def on_chord(self, x: int, y: int) -> RevealResult:
        """
        Reveal the unflagged neighbors of a satisfied number at (x, y).

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        if self.is_finished:
            return RevealResult()
        result = self._board.chord(x, y)
        self._apply(result)
        return result

    def _apply(self, result: RevealResult) -> None:
        if not result.revealed:
            return
        if self._state is GameState.NOT_STARTED:
            self._state = GameState.IN_PROGRESS
            self._started_at = self._clock()
            logger.debug("Game started")
        if result.hit_mine:
            self._finish(GameState.LOST)
        elif self._board.all_safe_revealed:
            self._finish(GameState.WON)

    def _finish(self, state: GameState) -> None:
        self._state = state
        self._finished_at = self._clock()
        logger.info("Game %s after %.1fs", state.name.lower(), self.elapsed_time)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """The live board. Presentation code should only read from it."""
        return self._board

    @property
    def config(self) -> GameConfig:
        """Parameters of the current game."""
        return self._config

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_finished(self) -> bool:
        """Check if game reached WON or LOST."""
        return self._state in TERMINAL_STATES

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state is GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state is GameState.LOST

    @property
    def flags_placed(self) -> int:
        """Flags currently on the board."""
        return self._flags_placed

    @property
    def flags_remaining(self) -> int:
        """Mines minus flags placed, never below zero."""
        return max(0, self._config.mine_count - self._flags_placed)

    @property
    def elapsed_time(self) -> float:
        """Seconds since the first reveal, frozen once the game ends."""
        if self._started_at is None:
            return 0.0
        end = self._finished_at if self._finished_at is not None else self._clock()
        return end - self._started_at

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Snapshot of the cell at (x, y).

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        return replace(self._board.cell_at(x, y))
