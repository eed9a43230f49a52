# knighttour

Finds a knight's tour on a 5x5 chess board: a sequence of knight moves
that visits every square exactly once, starting from a square you choose.

Rows are labelled `A` to `E` and columns `1` to `5`.

## Installation

```
pip install .
```

## Command line

Give the starting square as an argument, or leave it out and type it on
standard input. A square is a row letter followed by a column digit, with
optional whitespace between them:

```
$ knighttour A1
$ echo "A 1" | knighttour
```

If a tour exists, the board is printed with every square numbered by the
move on which the knight reaches it; the starting square is `1`. The
first line holds the column numbers, and each following line starts with
its row letter and shows each square's number two characters wide,
followed by `|`.

If no tour exists from that square, it prints `No knight's tour`.
A malformed or off-board square prints `Invalid input` and exits with
status 1.

## Library

```python
import sys

from knighttour.board import Position
from knighttour.tree import find_all_possible_knight_paths
from knighttour.search import find_knight_path_covering_all_board
from knighttour.display import display

start = Position.from_text("A 1")
tree = find_all_possible_knight_paths(start)
path = find_knight_path_covering_all_board(tree)
if path is not None:
    display(path, sys.stdout)
```

- `knighttour.board` describes the board: `Position` (a frozen square,
  raising `ValueError` for squares off the board, with `from_text` to
  parse one), `is_legal`, `knight_moves` and `valid_knight_moves`.
- `knighttour.tree` builds the `PathTree` of every knight path from a
  starting square that never revisits a square; its nodes are
  `TreeNode` objects with `add_child` and `is_leaf`.
- `knighttour.search` returns, as a list of `Position`, the first branch
  of that tree that covers the whole board, or `None`.
- `knighttour.display` removes repeated squares from a path
  (`delete_double_positions`), renders the numbered board as a string
  (`render_board`), and writes it to a stream, standard output by
  default (`display`, which returns the squares it kept).
- `knighttour.cli` holds `parse_starting_position` and `main`, the
  entry point of the `knighttour` command.

The board size is fixed at 5x5; other sizes are not supported.

## Running the tests

```
pip install .[test]
pytest
```