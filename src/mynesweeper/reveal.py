"""
Reveal module for Mynesweeper.

Opens cells on a board: single opens, flood fill from empty cells,
chorded opens around satisfied numbers, and flag toggling. Every
operation returns what it changed so callers can render the diff.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import List, Tuple

from .board import Board


# ============================================================================
# Results
# ============================================================================

@dataclass
class RevealResult:
    """
    Cells opened by a single reveal operation.

    Attributes:
        opened: (row, col, adjacent_mines) for every newly opened cell,
            in the order they were opened.
        mine_triggered: Whether a player-initiated open hit a mine.
    """

    opened: List[Tuple[int, int, int]] = field(default_factory=list)
    mine_triggered: bool = False

    def record(self, board: Board, row: int, col: int) -> None:
        self.opened.append((row, col, board.get_cell(row, col).adjacent_mines))

    def merge(self, other: "RevealResult") -> None:
        self.opened.extend(other.opened)
        self.mine_triggered = self.mine_triggered or other.mine_triggered

    def __bool__(self) -> bool:
        return bool(self.opened)


# ============================================================================
# Reveal Engine
# ============================================================================

class RevealEngine:
    """
    Stateless cell-mutation rules applied to a Board.

    Invalid or pointless requests (off-board coordinates, flagged or
    already open targets, unsatisfied chords) are no-ops that return an
    empty result.
    """

    def open(
        self,
        board: Board,
        row: int,
        col: int,
        is_player_click: bool = False,
    ) -> RevealResult:
        """
        Open a single cell.

        Args:
            board: Board to mutate.
            row: Row index.
            col: Column index.
            is_player_click: True when the player asked for this cell.
                Only player clicks can trigger a mine or start a flood
                fill.

        Returns:
            The cells opened.
        """
        result = RevealResult()
        cell = board.get_cell(row, col)
        if cell is None or not cell.open():
            return result

        result.record(board, row, col)

        if cell.is_mine:
            result.mine_triggered = is_player_click
            return result

        if is_player_click and cell.adjacent_mines == 0:
            self._flood_fill(board, row, col, result)

        return result

    def _flood_fill(
        self, board: Board, row: int, col: int, result: RevealResult
    ) -> None:
        """
        Open the connected empty region around an open zero cell.

        Breadth-first over an explicit queue. Neighbors are opened when
        they are enqueued so no cell is queued twice, and numbered
        cells are opened but not expanded. Flagged cells are left alone.
        """
        queue = deque([(row, col)])
        while queue:
            current_row, current_col = queue.popleft()
            if board.get_cell(current_row, current_col).adjacent_mines > 0:
                continue

            for neighbor_row, neighbor_col in board.neighbors_of(
                current_row, current_col
            ):
                neighbor = board.get_cell(neighbor_row, neighbor_col)
                if neighbor.open():
                    result.record(board, neighbor_row, neighbor_col)
                    queue.append((neighbor_row, neighbor_col))

    def can_open_adjacent(self, board: Board, row: int, col: int) -> bool:
        """
        Check whether a cell is satisfied and may be chorded.

        A cell is satisfied when it is open, unflagged, and has exactly
        as many flagged neighbors as adjacent mines.
        """
        cell = board.get_cell(row, col)
        if cell is None or not cell.is_open:
            return False
        return board.count_flagged_neighbors(row, col) == cell.adjacent_mines

    def open_adjacent(self, board: Board, row: int, col: int) -> RevealResult:
        """
        Chord: open every unflagged neighbor of a satisfied cell.

        Each neighbor is opened as a player click, so a mis-flagged
        neighborhood can still trigger a mine.
        """
        result = RevealResult()
        if not self.can_open_adjacent(board, row, col):
            return result

        for neighbor_row, neighbor_col in board.neighbors_of(row, col):
            result.merge(
                self.open(board, neighbor_row, neighbor_col, is_player_click=True)
            )
        return result

    def toggle_flag(self, board: Board, row: int, col: int) -> int:
        """
        Toggle a flag on a closed cell.

        Returns:
            The change in flag count: +1, -1, or 0 if nothing changed.
        """
        cell = board.get_cell(row, col)
        if cell is None:
            return 0
        return cell.toggle_flag()
