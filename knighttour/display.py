"""Print a tour as a board numbered by the order the squares are visited."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from knighttour.board import COLS, ROWS, Position


def delete_double_positions(positions: Iterable[Position]) -> list[Position]:
    """Return the positions with every repeat of an earlier square removed."""
    return list(dict.fromkeys(positions))


def render_board(positions: Iterable[Position]) -> str:
    """Return the board with each square numbered by its place in ``positions``.

    Squares that do not appear are shown as 0; a square that appears more than
    once carries the number of its last appearance.
    """
    numbers = {position: count for count, position in enumerate(positions, start=1)}
    header = " " + "".join(f"  {col}" for col in COLS) + " "
    lines = [header]
    for row in ROWS:
        cells = "".join(f"{numbers.get(Position(row, col), 0):2d}|" for col in COLS)
        lines.append(f"{row}|{cells}")
    return "\n".join(lines) + "\n"


def display(positions: Iterable[Position], out: TextIO | None = None) -> list[Position]:
    """Drop repeated squares, write the numbered board and return the squares kept."""
    kept = delete_double_positions(positions)
    (out if out is not None else sys.stdout).write(render_board(kept))
    return kept