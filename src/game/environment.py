"""
Gymnasium environment wrapper for Minesweeper.

Exposes a game session through the standard Gymnasium interface so
scripted or learned players can drive it.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .render import render_board, render_hud
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = closed cell
        - -2 = flagged cell
        - 0-8 = opened cell with adjacent mine count
        - 9 = opened mine (after a loss)

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i % width, i // width);
        the remaining actions toggle a flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action the game ignored
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            render_mode: How to render the environment.
            seed: Seed for mine placement.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config, random.Random(seed))
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One reveal and one flag action per cell
        self._num_cells = self.config.height * self.config.width
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0
        self._total_safe_cells = self._num_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Reseeds mine placement when given.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.session.rng.seed(seed)
        self.session.reset()
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index, offset by width * height for flags.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, x, y = self._decode_action(action)
        self._steps += 1

        if is_flag:
            reward = self._apply_flag(x, y)
        else:
            reward = self._apply_reveal(x, y)

        observation = self.session.board.get_observation()
        terminated = self.session.is_terminal
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, x, y)."""
        is_flag = action >= self._num_cells
        index = action % self._num_cells
        return is_flag, index % self.config.width, index // self.config.width

    def _apply_reveal(self, x: int, y: int) -> float:
        """Reveal a cell and score the outcome."""
        if not self.session.reveal_at(x, y):
            return -0.1
        if self.session.win:
            return 10.0
        if self.session.game_over:
            return -10.0
        return 1.0

    def _apply_flag(self, x: int, y: int) -> float:
        """Toggle a flag and score the outcome."""
        if not self.session.toggle_flag_at(x, y):
            return -0.1
        if self.session.win:
            return 10.0
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        revealed = sum(
            1 for cell in board.cells() if cell.is_open and not cell.is_mine
        )

        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self._total_safe_cells,
            "remaining_mines": self.session.remaining_mines,
            "game_state": self.session.state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render HUD and board as text."""
        return (
            render_hud(self.session)
            + "\n"
            + render_board(self.session.board)
        )

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions the game would accept.

        Returns:
            Boolean array where True = valid action. Reveals are valid on
            closed cells, flags on any cell that is not open. Everything
            is invalid once the game is over.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.session.is_terminal:
            return mask
        board = self.session.board
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = board.get_cell(x, y)
                index = y * self.config.width + x
                mask[index] = cell.is_closed
                mask[self._num_cells + index] = not cell.is_open
        return mask
