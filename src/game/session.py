"""
Game session module for Minesweeper.

Orchestrates a single game: first-click generation, the game timer,
the loss sequence, win detection, and reset.
"""
import random
from enum import Enum, auto
from typing import Optional

from .board import Board, BoardConfig, BoardGenerator, random_generator
from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

EXPLOSION_DURATION = 0.2


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game of Minesweeper.

    The presentation layer forwards input here as (x, y) grid
    coordinates. Input is routed through the targeted cell's state,
    which calls back into the session to mutate the board. Once the
    game is won or lost every further input is ignored.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        generator: Optional[BoardGenerator] = None,
    ) -> None:
        """
        Create a session with a closed, ungenerated board.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            rng: Random source for mine placement.
            generator: Lays out mines on the first reveal
                (default: random placement outside the safe zone).
        """
        self.config = config or BoardConfig()
        self.rng = rng or random.Random()
        self.generator = generator or random_generator
        self.board = Board(self.config, self.rng)
        self._reset_flags()

    def _reset_flags(self) -> None:
        """Clear all session flags and timers."""
        self.game_over = False
        self.win = False
        self.first_click_pending = True
        self.explosion_active = False
        self.explosion_timer = 0.0
        self.timer_running = False
        self.elapsed_time = 0.0

    # ========================================================================
    # Input (High-level)
    # ========================================================================

    def reveal_at(self, x: int, y: int) -> bool:
        """
        Reveal the cell at (x, y).

        Returns:
            True if the board changed.
        """
        cell = self._cell_at(x, y)
        return cell.state.on_reveal(self, x, y)

    def toggle_flag_at(self, x: int, y: int) -> bool:
        """
        Toggle the flag on the cell at (x, y).

        Returns:
            True if the board changed.
        """
        cell = self._cell_at(x, y)
        return cell.state.on_toggle_flag(self, x, y)

    def _cell_at(self, x: int, y: int) -> Cell:
        cell = self.board.get_cell(x, y)
        if cell is None:
            raise IndexError(f"Cell {(x, y)} is outside the board")
        return cell

    # ========================================================================
    # Transitions requested by cell states (Mid-level)
    # ========================================================================

    def reveal_from_state(self, x: int, y: int) -> bool:
        """
        Open a closed cell on behalf of its state.

        Generates the board on the first accepted reveal, using (x, y)
        as the center of the safe zone, and starts the timer.
        """
        if self.is_terminal:
            return False
        cell = self.board.get_cell(x, y)
        if cell.is_open or cell.is_flagged:
            return False

        if self.first_click_pending:
            self.generator(self.board, x, y)
            self.first_click_pending = False
            self.start_timer()

        self.board.reveal(x, y)
        if cell.is_mine:
            self.trigger_loss()
            return True

        self.check_win()
        return True

    def toggle_flag_from_state(self, x: int, y: int) -> bool:
        """Flip a cell between closed and flagged on behalf of its state."""
        if self.is_terminal:
            return False
        if not self.board.toggle_flag(x, y):
            return False
        self.check_win()
        return True

    def check_win(self) -> bool:
        """
        Check both win conditions and end the game on success.

        All safe cells open is checked first, then all mines flagged.
        """
        if self.is_terminal:
            return self.win
        if self.board.is_win_by_open() or self.board.is_win_by_flags():
            self.win = True
            self.stop_timer()
        return self.win

    def trigger_loss(self) -> None:
        """End the game as lost and open the whole board."""
        self.game_over = True
        self.stop_timer()
        self.explosion_active = True
        self.explosion_timer = EXPLOSION_DURATION
        self.board.reveal_all()

    # ========================================================================
    # Timing
    # ========================================================================

    def start_timer(self) -> None:
        """Start the game timer from zero unless it is already running."""
        if not self.timer_running:
            self.timer_running = True
            self.elapsed_time = 0.0

    def stop_timer(self) -> None:
        """Stop the game timer, keeping the elapsed time."""
        self.timer_running = False

    def tick(self, dt: float) -> None:
        """
        Advance session time by ``dt`` seconds.

        Counts down the explosion and accumulates elapsed time while the
        game is in progress.
        """
        if dt < 0:
            raise ValueError(f"Time delta cannot be negative: {dt}")
        if self.explosion_active:
            self.explosion_timer -= dt
            if self.explosion_timer <= 0:
                self.explosion_timer = 0.0
                self.explosion_active = False
        if self.timer_running and not self.is_terminal:
            self.elapsed_time += dt

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def reset(self, config: Optional[BoardConfig] = None) -> None:
        """
        Start a new game.

        Args:
            config: New board configuration, e.g. after a difficulty
                change. Keeps the current one if omitted. A new
                configuration also drops back to random mine placement,
                since a fixed layout belongs to the old dimensions.
        """
        if config is not None:
            self.config = config
            self.generator = random_generator
        self.board = Board(self.config, self.rng)
        self._reset_flags()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_terminal(self) -> bool:
        """True once the game is won or lost."""
        return self.game_over or self.win

    @property
    def state(self) -> GameState:
        """Get current game state."""
        if self.win:
            return GameState.WON
        if self.game_over:
            return GameState.LOST
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return not self.is_terminal

    @property
    def remaining_mines(self) -> int:
        """Configured mines minus placed flags (negative if over-flagged)."""
        return self.config.num_mines - self.board.count_flags()

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height
