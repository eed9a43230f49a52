"""Command line entry: read a starting square and print a knight's tour from it."""

from __future__ import annotations

import argparse
import sys

from knighttour.board import Position
from knighttour.display import display
from knighttour.search import find_knight_path_covering_all_board
from knighttour.tree import find_all_possible_knight_paths


def parse_starting_position(line: str) -> Position:
    """Parse one input line such as ``A1`` or ``C 3``; raise ValueError if it is invalid."""
    return Position.from_text(line.removesuffix("\n"))


def main(argv: list[str] | None = None) -> int:
    """Run the program; the square comes from ``argv`` or else from one line of stdin."""
    parser = argparse.ArgumentParser(
        prog="knighttour",
        description="Find a knight's tour of a 5x5 board from a starting square.",
    )
    parser.add_argument(
        "position",
        nargs="?",
        help="starting square such as A1; read from standard input if omitted",
    )
    args = parser.parse_args(argv)
    line = args.position if args.position is not None else sys.stdin.readline()

    try:
        start = parse_starting_position(line)
    except ValueError:
        print("Invalid input")
        return 1

    tree = find_all_possible_knight_paths(start)
    path = find_knight_path_covering_all_board(tree)
    if path is None:
        print("No knight's tour")
    else:
        display(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())