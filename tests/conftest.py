"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src and the scripts at the root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from mynesweeper import Board, BoardConfig, Cell, GameSession, RevealEngine


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible mine placement."""
    return np.random.default_rng(1234)


@pytest.fixture
def default_board(rng: np.random.Generator) -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=rng)


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with a single mine at (0, 0)."""
    return Board(BoardConfig(3, 3, 1), mine_layout=[(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood fill testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a column of mines splitting it in two.

        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . . . .
    """
    return Board(
        BoardConfig(5, 5, 4),
        mine_layout=[(0, 2), (1, 2), (2, 2), (3, 2)],
    )


@pytest.fixture
def engine() -> RevealEngine:
    """Create a reveal engine."""
    return RevealEngine()


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_session() -> GameSession:
    """3x3 session with a single mine at (0, 0)."""
    return GameSession(BoardConfig(3, 3, 1), mine_layout=[(0, 0)])


@pytest.fixture
def beginner_session(rng: np.random.Generator) -> GameSession:
    """Random 9x9 session with 10 mines."""
    return GameSession(BoardConfig(9, 9, 10), rng=rng)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
