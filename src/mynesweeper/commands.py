"""
Player commands for Mynesweeper.

Front ends decode raw input (pointer buttons, typed text) into a
Command once, here, so the engine never sees device details.
"""
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from .session import FlagResult, GameSession, MoveResult


class Command(Enum):
    """Actions a player can take on a cell."""

    OPEN = "open"
    CHORD = "chord"
    TOGGLE_FLAG = "flag"


class MouseButton(IntEnum):
    """Pointer button codes as reported by mouse-up events."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


_BUTTON_COMMANDS = {
    MouseButton.LEFT: Command.OPEN,
    MouseButton.MIDDLE: Command.CHORD,
    MouseButton.RIGHT: Command.TOGGLE_FLAG,
}

_TEXT_COMMANDS = {
    "o": Command.OPEN,
    "open": Command.OPEN,
    "c": Command.CHORD,
    "chord": Command.CHORD,
    "f": Command.TOGGLE_FLAG,
    "flag": Command.TOGGLE_FLAG,
}


def decode_mouse_button(button: int) -> Optional[Command]:
    """Map a mouse button code to a command, or None for other buttons."""
    try:
        return _BUTTON_COMMANDS[MouseButton(button)]
    except ValueError:
        return None


def parse_command(text: str) -> Tuple[Command, int, int]:
    """
    Parse a typed command such as ``"o 3 4"`` or ``"flag 0 2"``.

    Args:
        text: Command word followed by row and column.

    Returns:
        Tuple of (command, row, col).

    Raises:
        ValueError: If the text is not a valid command.
    """
    parts = text.split()
    if len(parts) != 3:
        raise ValueError("Expected: <command> <row> <col>")

    word, row_text, col_text = parts
    command = _TEXT_COMMANDS.get(word.lower())
    if command is None:
        raise ValueError(f"Unknown command {word!r}")

    try:
        row, col = int(row_text), int(col_text)
    except ValueError:
        raise ValueError("Row and column must be integers") from None
    return command, row, col


def dispatch(
    session: GameSession, command: Command, row: int, col: int
) -> Union[MoveResult, FlagResult]:
    """Apply a command to a session."""
    if command == Command.OPEN:
        return session.open(row, col)
    if command == Command.CHORD:
        return session.chord(row, col)
    return session.toggle_flag(row, col)
