"""
Mynesweeper game module.

Provides the game-state engine (board, reveal rules, sessions) and
headless front-end helpers.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    InvalidConfiguration,
    DIFFICULTY_PRESETS,
    EASY,
    MEDIUM,
    HARD,
    get_preset,
)
from .reveal import RevealEngine, RevealResult
from .session import GameSession, GameStatus, MoveResult, FlagResult, create_session
from .commands import Command, MouseButton, decode_mouse_button, parse_command, dispatch
from .environment import MinesweeperEnv, render_text

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "InvalidConfiguration",
    "DIFFICULTY_PRESETS",
    "EASY",
    "MEDIUM",
    "HARD",
    "get_preset",
    "RevealEngine",
    "RevealResult",
    "GameSession",
    "GameStatus",
    "MoveResult",
    "FlagResult",
    "create_session",
    "Command",
    "MouseButton",
    "decode_mouse_button",
    "parse_command",
    "dispatch",
    "MinesweeperEnv",
    "render_text",
]
