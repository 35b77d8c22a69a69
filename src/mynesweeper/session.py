"""
Session module for Mynesweeper.

A GameSession owns one Board for the lifetime of a single game and
turns player actions into board changes, flag bookkeeping and a
win/loss status.
"""
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .board import Board, BoardConfig
from .reveal import RevealEngine, RevealResult


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(str, Enum):
    """Possible states of a game session."""

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.LOST)


# ============================================================================
# Results
# ============================================================================

@dataclass
class MoveResult:
    """
    Outcome of an open or chord action.

    Attributes:
        opened: (row, col, adjacent_mines) for every cell the move opened.
        mine_triggered: Whether the move hit a mine.
        status: Session status after the move.
        exposed_mines: Mine positions to show once the game has ended.
    """

    opened: List[Tuple[int, int, int]] = field(default_factory=list)
    mine_triggered: bool = False
    status: GameStatus = GameStatus.PENDING
    exposed_mines: List[Tuple[int, int]] = field(default_factory=list)


@dataclass
class FlagResult:
    """Outcome of a flag toggle."""

    flagged: bool = False
    flag_count_delta: int = 0


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game from first click to win or loss.

    Mutating actions are accepted while the session is PENDING or
    RUNNING. Once WON or LOST every action is a no-op and the board
    stays frozen until the session is discarded.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
        mine_layout: Optional[Sequence[Tuple[int, int]]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the session and build its board.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random generator for mine placement.
            mine_layout: Fixed mine positions instead of random placement.
            clock: Monotonic clock used for elapsed time.

        Raises:
            InvalidConfiguration: If the board cannot be built.
        """
        self.config = config or BoardConfig()
        self.board = Board(self.config, rng=rng, mine_layout=mine_layout)
        self.engine = RevealEngine()
        self._clock = clock
        self._status = GameStatus.PENDING
        self._flag_count = 0
        self.started_at: Optional[float] = None
        self.finished_at: Optional[float] = None

    # ========================================================================
    # Player Actions
    # ========================================================================

    def open(self, row: int, col: int) -> MoveResult:
        """
        Open a cell as a player click.

        Opening a mine loses the game; otherwise the win condition is
        checked.
        """
        if not self.accepts_input:
            return self._result()

        reveal = self.engine.open(self.board, row, col, is_player_click=True)
        if reveal and self._status == GameStatus.PENDING:
            self._start()
        return self._settle(reveal)

    def chord(self, row: int, col: int) -> MoveResult:
        """Open the neighbors of a satisfied cell."""
        if not self.accepts_input:
            return self._result()

        reveal = self.engine.open_adjacent(self.board, row, col)
        return self._settle(reveal)

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """Place or remove a flag. Does not start the session."""
        if not self.accepts_input:
            return FlagResult()

        delta = self.engine.toggle_flag(self.board, row, col)
        self._flag_count += delta
        return FlagResult(flagged=delta > 0, flag_count_delta=delta)

    # ========================================================================
    # Status Evaluation
    # ========================================================================

    def _start(self) -> None:
        self._status = GameStatus.RUNNING
        self.started_at = self._clock()
        logger.debug("Session started")

    def _settle(self, reveal: RevealResult) -> MoveResult:
        """Update status after a revealing action and build the result."""
        exposed: List[Tuple[int, int]] = []
        if reveal.mine_triggered:
            exposed = self._expose_mines()
            self._finish(GameStatus.LOST)
        elif reveal and self._is_cleared():
            exposed = self._closed_mines()
            self._finish(GameStatus.WON)
        return self._result(reveal, exposed)

    def _is_cleared(self) -> bool:
        """All non-mine cells are open. Flags do not matter."""
        return self.board.count_closed() == self.config.num_mines

    def _closed_mines(self) -> List[Tuple[int, int]]:
        return [
            (row, col) for row, col in self.board.mine_positions()
            if not self.board.get_cell(row, col).is_open
        ]

    def _expose_mines(self) -> List[Tuple[int, int]]:
        """Open every remaining unflagged mine for display after a loss."""
        exposed = []
        for row, col in self._closed_mines():
            if self.board.get_cell(row, col).open():
                exposed.append((row, col))
        return exposed

    def _finish(self, status: GameStatus) -> None:
        self._status = status
        self.finished_at = self._clock()
        logger.debug("Session finished: %s", status.value)

    def _result(
        self,
        reveal: Optional[RevealResult] = None,
        exposed: Optional[List[Tuple[int, int]]] = None,
    ) -> MoveResult:
        reveal = reveal or RevealResult()
        return MoveResult(
            opened=list(reveal.opened),
            mine_triggered=reveal.mine_triggered,
            status=self._status,
            exposed_mines=exposed or [],
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current session status."""
        return self._status

    @property
    def accepts_input(self) -> bool:
        """Whether mutating actions are still accepted."""
        return not self._status.is_terminal

    @property
    def flag_count(self) -> int:
        """Number of flags currently placed."""
        return self._flag_count

    def remaining_mine_estimate(self) -> int:
        """Mines minus flags. Goes negative when over-flagged."""
        return self.config.num_mines - self._flag_count

    def elapsed(self) -> float:
        """Seconds since the first open, frozen once the game ends."""
        if self.started_at is None:
            return 0.0
        end = self.finished_at if self.finished_at is not None else self._clock()
        return end - self.started_at


def create_session(
    rows: int,
    cols: int,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
) -> GameSession:
    """
    Create a new game session.

    Raises:
        InvalidConfiguration: If the dimensions or mine count are out of
            range. No session is produced.
    """
    return GameSession(BoardConfig(rows, cols, mine_count), rng=rng)
