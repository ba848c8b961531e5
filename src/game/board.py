"""
Board module for Minesweeper game.

Implements the grid of cells with mine placement around a safe zone,
adjacency counts, flood-fill revealing, and win checks.
"""
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellContent, CellState


# ============================================================================
# Constants
# ============================================================================

SAFE_ZONE_RADIUS = 1


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 10
    height: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


# Preset difficulty levels
EASY = BoardConfig(10, 10, 10)
NORMAL = BoardConfig(14, 14, 20)
HARD = BoardConfig(20, 20, 40)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "normal": NORMAL,
    "hard": HARD,
}


def get_difficulty(name: str) -> BoardConfig:
    """
    Look up a preset difficulty by name.

    Args:
        name: Preset name (case-insensitive).

    Returns:
        A fresh copy of the preset configuration.
    """
    try:
        preset = DIFFICULTIES[name.lower()]
    except KeyError:
        choices = ", ".join(DIFFICULTIES)
        raise ValueError(
            f"Unknown difficulty {name!r} (choose from {choices})"
        ) from None
    return BoardConfig(preset.width, preset.height, preset.num_mines)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the grid of cells. Knows nothing about timers or whether the
    game is over; the session decides when board operations may run.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the board with every cell closed and empty.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            rng: Random source for mine placement (default: unseeded).
        """
        self.config = config or BoardConfig()
        self.rng = rng or random.Random()
        self._grid: List[List[Cell]] = []
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of closed, empty cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _clear_content(self) -> None:
        """Reset every cell's content to empty."""
        for cell in self.cells():
            cell.content = CellContent.empty()

    def _calculate_numbers(self) -> None:
        """Recompute the number of every non-mine cell."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self._grid[y][x]
                if not cell.is_mine:
                    cell.content = CellContent.number(
                        self.count_mines_around(x, y)
                    )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for the up-to-8 in-bounds neighbors.
        """
        result = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                nx = x + delta_x
                ny = y + delta_y
                if self.in_bounds(nx, ny):
                    result.append((nx, ny))
        return result

    def count_mines_around(self, x: int, y: int) -> int:
        """Count mines among the neighbors of a cell."""
        return sum(
            1 for nx, ny in self.neighbors(x, y)
            if self._grid[ny][nx].is_mine
        )

    @staticmethod
    def in_safe_zone(x: int, y: int, safe_x: int, safe_y: int) -> bool:
        """Check if (x, y) lies in the 3x3 block centered on the safe cell."""
        return (
            abs(x - safe_x) <= SAFE_ZONE_RADIUS
            and abs(y - safe_y) <= SAFE_ZONE_RADIUS
        )

    # ========================================================================
    # Generation (Mid-level)
    # ========================================================================

    def generate(self, safe_x: int, safe_y: int) -> None:
        """
        Place mines at random, keeping the safe zone clear.

        Candidates are drawn uniformly over the whole board and rejected
        if they already hold a mine or fall within one cell of
        (safe_x, safe_y). Numbers are recomputed afterwards.

        Raises:
            ValueError: If the mines cannot fit outside the safe zone.
        """
        width, height = self.config.width, self.config.height
        free_cells = sum(
            1 for y in range(height) for x in range(width)
            if not self.in_safe_zone(x, y, safe_x, safe_y)
        )
        if self.config.num_mines > free_cells:
            raise ValueError(
                f"Cannot place {self.config.num_mines} mines outside the "
                f"safe zone ({free_cells} cells available)"
            )

        self._clear_content()
        placed = 0
        while placed < self.config.num_mines:
            x = self.rng.randrange(width)
            y = self.rng.randrange(height)
            cell = self._grid[y][x]
            if cell.is_mine or self.in_safe_zone(x, y, safe_x, safe_y):
                continue
            cell.content = CellContent.mine()
            placed += 1

        self._calculate_numbers()

    def place_mines(self, positions: Iterable[Tuple[int, int]]) -> None:
        """
        Place mines at fixed positions and recompute numbers.

        Deterministic alternative to ``generate`` for setting up known
        layouts. The mine count of the result may differ from the
        configured one; callers are expected to pass exactly
        ``config.num_mines`` positions.
        """
        self._clear_content()
        for x, y in positions:
            if not self.in_bounds(x, y):
                raise IndexError(f"Mine position out of bounds: {(x, y)}")
            self._grid[y][x].content = CellContent.mine()
        self._calculate_numbers()

    # ========================================================================
    # Board Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> Optional[Cell]:
        """
        Open a cell, flooding outward from empty cells.

        Opened and flagged cells are left alone. When the opened cell is
        empty, every reachable closed non-mine cell is opened as well,
        continuing through further empty cells. Flagged cells and mines
        stop the flood.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            The opened cell, or None if nothing was opened.
        """
        cell = self._grid[y][x]
        if cell.state is not CellState.CLOSED:
            return None

        cell.state = CellState.OPENED
        if cell.is_empty:
            self.flood_fill(x, y)
        return cell

    def flood_fill(self, x: int, y: int) -> int:
        """
        Open the region reachable from (x, y) through empty cells.

        Uses an explicit stack so large boards cannot exhaust the
        recursion limit.

        Returns:
            Number of cells opened.
        """
        opened = 0
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            for nx, ny in self.neighbors(cx, cy):
                neighbor = self._grid[ny][nx]
                if neighbor.state is not CellState.CLOSED or neighbor.is_mine:
                    continue
                neighbor.state = CellState.OPENED
                opened += 1
                if neighbor.is_empty:
                    stack.append((nx, ny))
        return opened

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Flip a cell between closed and flagged.

        Returns:
            True if flag was toggled, False if cell is opened.
        """
        cell = self._grid[y][x]
        if cell.state is CellState.OPENED:
            return False
        if cell.state is CellState.FLAGGED:
            cell.state = CellState.CLOSED
        else:
            cell.state = CellState.FLAGGED
        return True

    def reveal_all(self) -> None:
        """Force every cell open."""
        for cell in self.cells():
            cell.state = CellState.OPENED

    # ========================================================================
    # Queries (High-level)
    # ========================================================================

    def count_flags(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self.cells() if cell.is_flagged)

    def count_mines(self) -> int:
        """Number of cells holding a mine."""
        return sum(1 for cell in self.cells() if cell.is_mine)

    def is_win_by_open(self) -> bool:
        """True if every non-mine cell is opened."""
        return all(cell.is_open for cell in self.cells() if not cell.is_mine)

    def is_win_by_flags(self) -> bool:
        """
        True if exactly ``num_mines`` cells are flagged, all on mines.

        A flag on a safe cell only makes this check fail; it is not
        treated as a mistake.
        """
        flagged = 0
        for cell in self.cells():
            if cell.is_flagged:
                if not cell.is_mine:
                    return False
                flagged += 1
        return flagged == self.config.num_mines

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(x, y):
            return None
        return self._grid[y][x]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._grid:
            yield from row

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D array of shape (height, width) where:
                -1 = closed
                -2 = flagged
                0-8 = opened with adjacent count
                9 = opened mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                obs[y, x] = self._grid[y][x].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (x, y) positions of closed cells.
        """
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._grid[y][x].is_closed
        ]

    def reset(self) -> None:
        """Reset board to all closed, empty cells."""
        self._init_grid()


# ============================================================================
# Generators
# ============================================================================

# Called as generator(board, safe_x, safe_y) on the first reveal.
BoardGenerator = Callable[[Board, int, int], None]


def random_generator(board: Board, safe_x: int, safe_y: int) -> None:
    """Default generator: random mines outside the safe zone."""
    board.generate(safe_x, safe_y)


def fixed_generator(positions: Iterable[Tuple[int, int]]) -> BoardGenerator:
    """
    Build a generator that always lays mines at the given positions.

    The first click is not checked against the layout, so a test can
    open a mine on its very first reveal.
    """
    layout = list(positions)

    def generate(board: Board, safe_x: int, safe_y: int) -> None:
        board.place_mines(layout)

    return generate
