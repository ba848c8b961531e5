#!/usr/bin/env python3
"""
Minesweeper - terminal front end.

Usage:
    python main.py play [--difficulty {easy,normal,hard}] [--seed N]
    python main.py difficulties
"""
import argparse
import random
import time
from typing import Optional

from src.game.board import DIFFICULTIES, get_difficulty
from src.game.render import render_session
from src.game.session import GameSession


HELP_TEXT = """Commands:
  r X Y          reveal the cell in column X, row Y
  f X Y          toggle a flag on the cell in column X, row Y
  restart        start over with the same difficulty
  menu NAME      start over with another difficulty
  help           show this help
  quit           leave the game"""


def parse_cell(session: GameSession, parts: list) -> Optional[tuple]:
    """Parse 'X Y' arguments into an in-bounds cell, or None."""
    if len(parts) != 2:
        print("Expected two coordinates: X Y")
        return None
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        print(f"Not a coordinate: {' '.join(parts)}")
        return None
    if not session.board.in_bounds(x, y):
        print(f"({x}, {y}) is off the board "
              f"({session.width}x{session.height})")
        return None
    return x, y


def play(args: argparse.Namespace) -> None:
    """Run an interactive game on stdin/stdout."""
    config = get_difficulty(args.difficulty)
    session = GameSession(config, random.Random(args.seed))

    print(f"Minesweeper {config.width}x{config.height} "
          f"with {config.num_mines} mines")
    print(HELP_TEXT)

    last_input = time.monotonic()
    while True:
        print()
        print(render_session(session))
        try:
            line = input("> ").strip()
        except EOFError:
            break

        # Time spent thinking counts towards the game clock
        now = time.monotonic()
        session.tick(now - last_input)
        last_input = now

        if not line:
            continue
        command, *rest = line.split()
        command = command.lower()

        if command in ("q", "quit", "exit"):
            break
        if command in ("h", "help"):
            print(HELP_TEXT)
        elif command in ("r", "reveal", "f", "flag"):
            cell = parse_cell(session, rest)
            if cell is None:
                continue
            if command.startswith("r"):
                session.reveal_at(*cell)
            else:
                session.toggle_flag_at(*cell)
        elif command == "restart":
            session.reset()
        elif command == "menu":
            if len(rest) != 1:
                print(f"Choose a difficulty: {', '.join(DIFFICULTIES)}")
                continue
            try:
                session.reset(get_difficulty(rest[0]))
            except ValueError as exc:
                print(exc)
        else:
            print(f"Unknown command: {command}")


def list_difficulties(args: argparse.Namespace) -> None:
    """Print the available presets."""
    print(f"{'Difficulty':<12} {'Size':<8} {'Mines':<6}")
    print("-" * 28)
    for name, config in DIFFICULTIES.items():
        size = f"{config.width}x{config.height}"
        print(f"{name:<12} {size:<8} {config.num_mines:<6}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default="easy",
        help="Board size and mine count",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    subparsers.add_parser("difficulties", help="List difficulty presets")

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "difficulties":
        list_difficulties(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
