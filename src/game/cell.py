"""
Cell module for Minesweeper game.

Represents individual cells on the game board: what occupies them
(content: mine / number / empty) and how they react to input
(state: closed / opened / flagged).
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .session import GameSession


# ============================================================================
# Constants
# ============================================================================

MINE_VALUE = -1


# ============================================================================
# Cell Content
# ============================================================================

@dataclass(frozen=True)
class CellContent:
    """
    What occupies a cell.

    One of three variants: a mine, a number of adjacent mines (1-8),
    or empty (a number of 0). Instances are immutable; the board
    replaces a cell's content wholesale during generation.

    Use the ``mine()``, ``number()`` and ``empty()`` constructors rather
    than building instances directly.
    """

    is_mine: bool = False
    value: int = 0

    @classmethod
    def mine(cls) -> "CellContent":
        """Return the mine variant."""
        return MINE

    @classmethod
    def number(cls, count: int) -> "CellContent":
        """
        Return the number variant for an adjacent mine count.

        Counts of zero or below collapse to the canonical empty variant.
        """
        if count <= 0:
            return EMPTY
        if count > 8:
            raise ValueError(f"Adjacent mine count out of range: {count}")
        return cls(is_mine=False, value=count)

    @classmethod
    def empty(cls) -> "CellContent":
        """Return the empty variant."""
        return EMPTY

    @property
    def is_empty(self) -> bool:
        """True for the empty variant (no adjacent mines)."""
        return not self.is_mine and self.value == 0

    @property
    def numeric_value(self) -> int:
        """Adjacent mine count (0-8), or MINE_VALUE for a mine."""
        if self.is_mine:
            return MINE_VALUE
        return self.value

    def __str__(self) -> str:
        if self.is_mine:
            return "*"
        return str(self.value) if self.value else " "


MINE = CellContent(is_mine=True, value=MINE_VALUE)
EMPTY = CellContent()


# ============================================================================
# Cell State
# ============================================================================

class CellState(Enum):
    """
    Behavioral state of a cell.

    Each state decides what a reveal or flag input on the cell does.
    The owning session is passed into the handlers; the state never
    holds on to it.

    Transitions:
        CLOSED  --reveal--> OPENED (loss if the cell is a mine)
        CLOSED  --flag-->   FLAGGED
        FLAGGED --flag-->   CLOSED
        FLAGGED --reveal--> no-op
        OPENED  --any-->    no-op
    """

    CLOSED = auto()
    OPENED = auto()
    FLAGGED = auto()

    @property
    def is_open(self) -> bool:
        """Check if state is opened."""
        return self is CellState.OPENED

    @property
    def is_flagged(self) -> bool:
        """Check if state is flagged."""
        return self is CellState.FLAGGED

    def on_reveal(self, session: "GameSession", x: int, y: int) -> bool:
        """
        Handle a reveal input on the cell at (x, y).

        Returns:
            True if the input changed the board.
        """
        if self is CellState.CLOSED:
            return session.reveal_from_state(x, y)
        # Opened cells are terminal; flagged cells must be unflagged first.
        return False

    def on_toggle_flag(self, session: "GameSession", x: int, y: int) -> bool:
        """
        Handle a flag input on the cell at (x, y).

        Returns:
            True if the input changed the board.
        """
        if self is CellState.OPENED:
            return False
        return session.toggle_flag_from_state(x, y)


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        content: What occupies the cell (mine, number or empty).
        state: Current state (closed, opened or flagged).
    """

    content: CellContent = field(default=EMPTY)
    state: CellState = CellState.CLOSED

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed."""
        return self.state is CellState.CLOSED

    @property
    def is_open(self) -> bool:
        """Check if cell is opened."""
        return self.state.is_open

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state.is_flagged

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.content.is_mine

    @property
    def is_empty(self) -> bool:
        """Check if cell has no mine and no adjacent mines."""
        return self.content.is_empty

    @property
    def number(self) -> int:
        """Adjacent mine count, or MINE_VALUE for a mine."""
        return self.content.numeric_value

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
            9: Opened mine (game over state)
        """
        if self.state is CellState.CLOSED:
            return -1
        if self.state is CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.content.value
