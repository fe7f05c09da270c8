"""
Gymnasium environment wrapper for Minesweeper.

Lets automated agents play through the same Game controller a human uses.
"""
from dataclasses import replace
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Position
from .cell import OBS_FLAGGED, OBS_MINE
from .config import GameConfig
from .game import Game
from .render import render_ansi

# Rewards
REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        int8 array of shape (height, width) where
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete(width * height); action i reveals (i % width, i // width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()

        self.config = config or GameConfig()
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.cell_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        The board is seeded from the environment's ``np_random`` so that
        ``reset(seed=...)`` is reproducible.
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**32))
        self.game.new_game(replace(self.config, seed=board_seed))
        self._steps = 0

        return self.game.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """Reveal the cell encoded by ``action``."""
        x, y = self.action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.game.board.get_observation()
        terminated = self.game.is_finished

        return observation, reward, terminated, False, self._get_info()

    def action_to_position(self, action: int) -> Position:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) position to flat action index."""
        return y * self.config.width + x

    def _calculate_reward(self, x: int, y: int) -> float:
        if self.game.is_finished or not self.game.board.cell_at(x, y).is_hidden:
            return REWARD_INVALID

        self.game.on_reveal(x, y)

        if self.game.is_won:
            return REWARD_WIN
        if self.game.is_lost:
            return REWARD_MINE
        return REWARD_SAFE

    def _get_info(self) -> Dict[str, Any]:
        board = self.game.board
        return {
            "steps": self._steps,
            "revealed": self.config.safe_cell_count - board.safe_cells_left,
            "total_safe": self.config.safe_cell_count,
            "game_state": self.game.state.name,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_ansi(self.game.board, reveal_mines=self.game.is_finished)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """Boolean mask over actions, True where the cell can be revealed."""
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.game.board.get_valid_actions():
            mask[self.position_to_action(x, y)] = True
        return mask
