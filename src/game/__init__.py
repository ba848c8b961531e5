"""
Minesweeper game module.

Provides the core game logic: cell content and state, the board model,
and the game session that drives a single game.
"""
from .cell import Cell, CellContent, CellState, MINE_VALUE
from .board import (
    Board,
    BoardConfig,
    BoardGenerator,
    DIFFICULTIES,
    EASY,
    NORMAL,
    HARD,
    fixed_generator,
    get_difficulty,
    random_generator,
)
from .session import GameSession, GameState, EXPLOSION_DURATION
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellContent",
    "CellState",
    "MINE_VALUE",
    "Board",
    "BoardConfig",
    "BoardGenerator",
    "DIFFICULTIES",
    "EASY",
    "NORMAL",
    "HARD",
    "fixed_generator",
    "get_difficulty",
    "random_generator",
    "GameSession",
    "GameState",
    "EXPLOSION_DURATION",
    "MinesweeperEnv",
]
