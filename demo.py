#!/usr/bin/env python3
"""Watch a scripted game of Mynesweeper on a fixed board."""
import time

from mynesweeper import BoardConfig, Command, GameSession, dispatch, render_text


# 5x5 board, mines in the top-left corner and along the right edge
MINES = [(0, 0), (1, 4), (3, 4)]

MOVES = [
    (Command.OPEN, 4, 0),
    (Command.TOGGLE_FLAG, 0, 0),
    (Command.CHORD, 1, 1),
    (Command.TOGGLE_FLAG, 1, 4),
    (Command.TOGGLE_FLAG, 3, 4),
    (Command.OPEN, 0, 4),
    (Command.OPEN, 2, 4),
    (Command.OPEN, 4, 4),
]


def demo(delay: float = 0.5) -> None:
    """Play the scripted moves and print the board after each one."""
    config = BoardConfig(rows=5, cols=5, num_mines=len(MINES))
    session = GameSession(config, mine_layout=MINES)

    print(render_text(session.board))
    for command, row, col in MOVES:
        if not session.accepts_input:
            break
        time.sleep(delay)
        dispatch(session, command, row, col)
        print(f"\n{command.value} ({row}, {col}) -> {session.status.value}, "
              f"mines left: {session.remaining_mine_estimate()}")
        print(render_text(session.board))

    print(f"\n=== Final: {session.status.value} ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.5, help="Delay between moves")
    args = parser.parse_args()

    demo(delay=args.delay)
