"""
Minesweeper game engine.

Provides the board, cell and game-session logic plus a terminal front end
and a gymnasium environment for agents.
"""
from .cell import Cell, CellState
from .board import Board, Position, RevealResult
from .config import GameConfig, EASY, MEDIUM, HARD, PRESETS, preset
from .errors import MinesweeperError, InvalidConfiguration, OutOfBounds
from .game import Game, GameState
from .environment import MinesweeperEnv

__version__ = "1.0.0"

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "Position",
    "RevealResult",
    "GameConfig",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "preset",
    "MinesweeperError",
    "InvalidConfiguration",
    "OutOfBounds",
    "Game",
    "GameState",
    "MinesweeperEnv",
]
