"""The 5x5 board, its squares and the moves a knight can make on it."""

from __future__ import annotations

from dataclasses import dataclass

ROWS = "ABCDE"
COLS = "12345"
SIZE_ROW = len(ROWS)
SIZE_COL = len(COLS)
BOARD_SQUARES = SIZE_ROW * SIZE_COL

# Knight jumps as (row delta, column delta), in the order the moves are tried:
# NE, EN, ES, SE, SW, WS, WN, NW.
_JUMPS = (
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
)


def is_legal(row: str, col: str) -> bool:
    """Return True if the row letter and column digit name a square on the board."""
    return (
        isinstance(row, str)
        and isinstance(col, str)
        and len(row) == 1
        and len(col) == 1
        and row in ROWS
        and col in COLS
    )


@dataclass(frozen=True, slots=True)
class Position:
    """A square on the board, named by a row letter and a column digit."""

    row: str
    col: str

    def __post_init__(self) -> None:
        if not is_legal(self.row, self.col):
            raise ValueError(f"not a square on the board: {self.row!r} {self.col!r}")

    @classmethod
    def from_text(cls, text: str) -> Position:
        """Parse a square written as a row letter, optional whitespace and a column digit."""
        if not text:
            raise ValueError("empty position")
        row, rest = text[0], text[1:].lstrip()
        if not rest:
            raise ValueError(f"missing column in {text!r}")
        col, extra = rest[0], rest[1:]
        if extra:
            raise ValueError(f"unexpected characters after position: {extra!r}")
        return cls(row, col)

    def __str__(self) -> str:
        return f"{self.row}{self.col}"


def knight_moves(position: Position) -> tuple[Position, ...]:
    """Return the squares a knight can jump to from ``position``, in a fixed order."""
    row_index = ROWS.index(position.row)
    col_index = COLS.index(position.col)
    moves = []
    for d_row, d_col in _JUMPS:
        r, c = row_index + d_row, col_index + d_col
        if 0 <= r < SIZE_ROW and 0 <= c < SIZE_COL:
            moves.append(Position(ROWS[r], COLS[c]))
    return tuple(moves)


def valid_knight_moves() -> dict[Position, tuple[Position, ...]]:
    """Return the knight moves from every square on the board."""
    return {
        square: knight_moves(square)
        for square in (Position(row, col) for row in ROWS for col in COLS)
    }