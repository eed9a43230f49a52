import io

from knighttour.board import COLS, ROWS, Position
from knighttour.display import delete_double_positions, display, render_board

ALL_SQUARES = [Position(row, col) for row in ROWS for col in COLS]


def _numbers(board):
    rows = board.splitlines()[1:]
    return [int(cell) for line in rows for cell in line[2:].split("|") if cell]


def test_delete_double_positions_keeps_first_occurrences():
    a1, b3, c5 = Position("A", "1"), Position("B", "3"), Position("C", "5")
    assert delete_double_positions([a1, b3, a1, c5, b3]) == [a1, b3, c5]


def test_delete_double_positions_leaves_unique_list_alone():
    assert delete_double_positions(ALL_SQUARES) == ALL_SQUARES


def test_delete_double_positions_is_idempotent():
    data = ALL_SQUARES[:3] + ALL_SQUARES[:5]
    once = delete_double_positions(data)
    assert delete_double_positions(once) == once
    assert len(once) == 5


def test_render_empty_board():
    lines = render_board([]).splitlines()
    assert lines[0] == "   1  2  3  4  5 "
    assert lines[1] == "A| 0| 0| 0| 0| 0|"
    assert len(lines) == 1 + len(ROWS)
    assert [line[0] for line in lines[1:]] == list(ROWS)


def test_render_first_row_numbering():
    lines = render_board(ALL_SQUARES[:5]).splitlines()
    assert lines[1] == "A| 1| 2| 3| 4| 5|"
    assert lines[2] == lines[3].replace("C", "B")


def test_render_full_board_numbers_every_square():
    board = render_board(ALL_SQUARES)
    assert _numbers(board) == list(range(1, len(ALL_SQUARES) + 1))
    assert board.endswith("\n")


def test_render_places_number_on_its_square():
    e5 = Position("E", "5")
    numbers = _numbers(render_board([e5]))
    assert numbers[-1] == 1
    assert sum(numbers) == 1


def test_display_writes_deduplicated_board():
    data = ALL_SQUARES[:4] + [ALL_SQUARES[0], ALL_SQUARES[2]]
    out = io.StringIO()
    kept = display(data, out)
    assert kept == ALL_SQUARES[:4]
    assert out.getvalue() == render_board(ALL_SQUARES[:4])


def test_display_defaults_to_stdout(capsys):
    display(ALL_SQUARES[:2])
    assert capsys.readouterr().out == render_board(ALL_SQUARES[:2])