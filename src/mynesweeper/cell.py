"""
Cell module for Mynesweeper.

Represents individual cells on the game board with their state
(closed/open/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible states of a cell. Open and flagged never coexist."""

    CLOSED = auto()
    OPEN = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Mynesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Fixed once the board
            has placed its mines.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Meaningless for mine cells.
        state: Current state (closed, open, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.CLOSED

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell went from closed to open, False if it was
            already open or is flagged.
        """
        if self.state != CellState.CLOSED:
            return False
        self.state = CellState.OPEN
        return True

    def toggle_flag(self) -> int:
        """
        Toggle the flag marker on this cell.

        Returns:
            +1 if a flag was placed, -1 if one was removed, 0 if the
            cell is open.
        """
        if self.state == CellState.OPEN:
            return 0
        if self.state == CellState.CLOSED:
            self.state = CellState.FLAGGED
            return 1
        self.state = CellState.CLOSED
        return -1

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed and unflagged."""
        return self.state == CellState.CLOSED

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.state == CellState.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Open cell with adjacent mine count
            9: Open mine
        """
        if self.state == CellState.CLOSED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
