"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import (
    Board,
    BoardConfig,
    Cell,
    CellContent,
    GameSession,
    fixed_generator,
)


# A vertical wall of mines down column 2 of a 5x5 board: revealing the
# left side never reaches the right side.
MINE_WALL = [(2, y) for y in range(5)]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with a single mine in the corner."""
    board = Board(BoardConfig(3, 3, 1))
    board.place_mines([(2, 2)])
    return board


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x5 board split by a wall of mines."""
    board = Board(BoardConfig(5, 5, 5))
    board.place_mines(MINE_WALL)
    return board


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session() -> GameSession:
    """Create a seeded default session."""
    return GameSession(rng=random.Random(42))


@pytest.fixture
def corner_session() -> GameSession:
    """Create a 3x3 session whose only mine sits at (2, 2)."""
    return GameSession(BoardConfig(3, 3, 1), generator=fixed_generator([(2, 2)]))


@pytest.fixture
def wall_session() -> GameSession:
    """Create a 5x5 session split by a wall of mines down column 2."""
    return GameSession(BoardConfig(5, 5, 5), generator=fixed_generator(MINE_WALL))


@pytest.fixture
def empty_session() -> GameSession:
    """Create a session with no mines for cascade testing."""
    return GameSession(BoardConfig(5, 5, 0), rng=random.Random(0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed, empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a closed cell containing a mine."""
    return Cell(content=CellContent.mine())
