"""
Gymnasium environment wrapper for Mynesweeper.

Drives a GameSession headlessly through the standard RL interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .commands import Command, dispatch
from .session import FlagResult, GameSession, GameStatus


COMMANDS = list(Command)

_GLYPHS = {-1: ".", -2: "F", 0: " ", 9: "*"}


def render_text(board: Board) -> str:
    """Render a board as plain text, one line per row."""
    lines = []
    obs = board.get_observation()

    for row in range(board.rows):
        row_str = ""
        for col in range(board.cols):
            val = int(obs[row, col])
            row_str += _GLYPHS.get(val, str(val))
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)


# ============================================================================
# Mynesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Mynesweeper.

    Observation:
        2D array where:
        - -1 = closed cell
        - -2 = flagged cell
        - 0-8 = open cell with adjacent mine count
        - 9 = open mine

    Actions:
        Discrete action space of size 3 * rows * cols.
        Action a applies command COMMANDS[a // cells] to cell index
        a % cells, where cell index i is (i // cols, i % cols).

    Rewards:
        - +1 for a move that opens safe cells
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for a move that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Mynesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.session = GameSession(self.config)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        self._cells = self.config.total_cells
        self.action_space = spaces.Discrete(len(COMMANDS) * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game with a fresh session.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session = GameSession(self.config, rng=self.np_random)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        command, row, col = self.decode_action(action)
        self._steps += 1

        reward = self._apply(command, row, col)

        observation = self.session.board.get_observation()
        terminated = self.session.status.is_terminal

        return observation, reward, terminated, False, self._get_info()

    def decode_action(self, action: int) -> Tuple[Command, int, int]:
        """Convert a flat action index to (command, row, col)."""
        command_index, cell_index = divmod(int(action), self._cells)
        row, col = divmod(cell_index, self.config.cols)
        return COMMANDS[command_index], row, col

    def encode_action(self, command: Command, row: int, col: int) -> int:
        """Convert (command, row, col) to a flat action index."""
        cell_index = row * self.config.cols + col
        return COMMANDS.index(command) * self._cells + cell_index

    def _apply(self, command: Command, row: int, col: int) -> float:
        """Apply a command to the session and score the outcome."""
        result = dispatch(self.session, command, row, col)

        if isinstance(result, FlagResult):
            return 0.0 if result.flag_count_delta else -0.1
        if result.status == GameStatus.WON:
            return 10.0
        if result.mine_triggered:
            return -10.0
        if result.opened:
            return 1.0
        return -0.1

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "closed": board.count_closed(),
            "total_safe": self._cells - self.config.num_mines,
            "game_state": self.session.status.value,
            "flags": self.session.flag_count,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.session.board)
        if self.render_mode == "human":
            print(render_text(self.session.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the board.

        Returns:
            Boolean array where True = open or flag a closed cell, or
            chord a satisfied cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.session.accepts_input:
            return mask

        board = self.session.board
        engine = self.session.engine
        for row, col in board.positions():
            cell = board.get_cell(row, col)
            if cell.is_closed:
                mask[self.encode_action(Command.OPEN, row, col)] = True
            if not cell.is_open:
                mask[self.encode_action(Command.TOGGLE_FLAG, row, col)] = True
            if engine.can_open_adjacent(board, row, col) and any(
                board.get_cell(r, c).is_closed for r, c in board.neighbors_of(row, col)
            ):
                mask[self.encode_action(Command.CHORD, row, col)] = True
        return mask
