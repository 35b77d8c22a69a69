"""
Board module for Mynesweeper.

Implements the game board: configuration, mine placement and
adjacency counts. Revealing lives in the reveal module and game
status in the session module.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

class InvalidConfiguration(ValueError):
    """Raised when a board cannot be built from the given settings."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Mynesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)

DIFFICULTY_PRESETS: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def get_preset(name: str) -> BoardConfig:
    """
    Look up a difficulty preset by name.

    Raises:
        InvalidConfiguration: If no preset has that name.
    """
    try:
        return DIFFICULTY_PRESETS[name.lower()]
    except KeyError:
        choices = ", ".join(DIFFICULTY_PRESETS)
        raise InvalidConfiguration(
            f"Unknown difficulty {name!r} (choose from {choices})"
        ) from None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Mynesweeper game board.

    Mines are placed and adjacency counts computed as soon as the board
    is created, before any player input. After that only cell states
    change.

    Attributes:
        config: Board dimensions and mine count.
        rng: Random generator used for mine placement.
        mine_layout: Explicit mine positions to use instead of random
            placement.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    mine_layout: Optional[Sequence[Position]] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the grid, place mines and compute counts."""
        if self.rng is None:
            self.rng = np.random.default_rng()
        self._init_grid()
        self.place_mines()
        self.compute_adjacency_counts()
        logger.debug(
            "Built %dx%d board with %d mines",
            self.rows, self.cols, self.num_mines,
        )

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of closed, mine-free cells."""
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    def place_mines(self) -> None:
        """
        Place the configured number of mines, replacing any already placed.

        Uses the explicit layout when one was given, otherwise draws
        random coordinates and redraws any that were already chosen.
        """
        for row, col in self.positions():
            self._grid[row][col].is_mine = False

        if self.mine_layout is not None:
            chosen = self._validated_layout(self.mine_layout)
        else:
            chosen = set()
            while len(chosen) < self.num_mines:
                row = int(self.rng.integers(self.rows))
                col = int(self.rng.integers(self.cols))
                chosen.add((row, col))

        for row, col in chosen:
            self._grid[row][col].is_mine = True

    def _validated_layout(self, layout: Sequence[Position]) -> set:
        """Check an explicit mine layout against the configuration."""
        positions = {(int(row), int(col)) for row, col in layout}
        if len(positions) != len(layout):
            raise InvalidConfiguration("Mine layout contains duplicates")
        if len(positions) != self.num_mines:
            raise InvalidConfiguration(
                f"Mine layout has {len(positions)} mines, "
                f"expected {self.num_mines}"
            )
        for row, col in positions:
            if not self.is_valid_position(row, col):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is off the board"
                )
        return positions

    def compute_adjacency_counts(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors_of(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors_of(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the in-bounds Moore
            neighbors. Off-board positions are left out.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def count_flagged_neighbors(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to position."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors_of(row, col):
            if self._grid[neighbor_row][neighbor_col].is_flagged:
                count += 1
        return count

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) on the board in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def mine_positions(self) -> List[Position]:
        """Positions of all mines."""
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_mine
        ]

    def count_closed(self) -> int:
        """Number of cells not yet opened (flagged cells included)."""
        return sum(
            1 for row, col in self.positions()
            if not self._grid[row][col].is_open
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = closed
                -2 = flagged
                0-8 = open with adjacent count
                9 = open mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs
