#!/usr/bin/env python3
"""
Mynesweeper - Terminal front end.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N]
    python main.py play --rows R --cols C --mines M
    python main.py simulate [--games N] [--seed N]
"""
import argparse
import logging
import sys

import numpy as np

from mynesweeper import (
    BoardConfig,
    Command,
    GameSession,
    GameStatus,
    InvalidConfiguration,
    MinesweeperEnv,
    MoveResult,
    dispatch,
    get_preset,
    parse_command,
    render_text,
)


logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: o <row> <col> (open), c <row> <col> (chord), f <row> <col> (flag), q (quit)"


def positive_int(text: str) -> int:
    """Argparse type for counts that must be at least 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Build the board configuration from a preset or explicit sizes."""
    if args.rows is not None or args.cols is not None or args.mines is not None:
        preset = get_preset(args.difficulty)
        return BoardConfig(
            rows=args.rows if args.rows is not None else preset.rows,
            cols=args.cols if args.cols is not None else preset.cols,
            num_mines=args.mines if args.mines is not None else preset.num_mines,
        )
    return get_preset(args.difficulty)


def print_board(session: GameSession) -> None:
    """Print the board with the mine counter and timer."""
    print(
        f"\nMines: {session.remaining_mine_estimate():>3} | "
        f"Time: {int(session.elapsed()):>3}s | {session.status.value}"
    )
    print(render_text(session.board))


def play(args: argparse.Namespace) -> None:
    """Play one game interactively."""
    config = build_config(args)
    session = GameSession(config, rng=np.random.default_rng(args.seed))
    logger.info(
        "New %dx%d game with %d mines", config.rows, config.cols, config.num_mines
    )

    print(HELP_TEXT)
    while session.accepts_input:
        print_board(session)
        try:
            line = input("> ").strip()
        except EOFError:
            return
        if line.lower() in ("q", "quit"):
            return
        try:
            command, row, col = parse_command(line)
        except ValueError as error:
            print(f"{error}. {HELP_TEXT}")
            continue

        result = dispatch(session, command, row, col)
        if isinstance(result, MoveResult) and not result.opened:
            logger.debug("%s %d %d changed nothing", command.value, row, col)

    print_board(session)
    if session.status == GameStatus.WON:
        print("\nYou win!")
    else:
        print("\nGame over!")


def simulate(args: argparse.Namespace) -> None:
    """Play random games through the environment and report the win rate."""
    config = build_config(args)
    env = MinesweeperEnv(config=config)
    rng = np.random.default_rng(args.seed)

    wins = 0
    for game in range(args.games):
        env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        while not done:
            mask = env.get_action_mask()
            # Random player: only opens, never flags or chords
            opens = [
                action for action in np.flatnonzero(mask)
                if env.decode_action(action)[0] == Command.OPEN
            ]
            action = rng.choice(opens)
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info["game_state"] == GameStatus.WON.value:
            wins += 1
        logger.debug("Game %d finished: %s", game + 1, info["game_state"])

    print(f"Random opener won {wins}/{args.games} games ({wins / args.games:.1%})")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Mynesweeper - Clear the grid without touching a mine"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_board_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--difficulty",
            choices=["easy", "medium", "hard"],
            default="easy",
            help="Preset board size",
        )
        sub.add_argument("--rows", type=int, default=None, help="Override rows")
        sub.add_argument("--cols", type=int, default=None, help="Override columns")
        sub.add_argument("--mines", type=int, default=None, help="Override mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games headlessly"
    )
    add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=positive_int, default=100, help="Number of games to play"
    )
    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except InvalidConfiguration as error:
        print(f"Cannot start game with this configuration: {error}")
        sys.exit(2)


if __name__ == "__main__":
    main()
